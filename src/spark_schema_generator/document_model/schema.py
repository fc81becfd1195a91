"""Document model definitions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .schema_types import OBJECT_ID_TYPE_NAME, Number

DEFAULT_VERSION_KEY = "__v"
DEFAULT_ID_VIRTUAL = "id"


class VirtualType:
    """Computed field without stored data."""

    def __init__(self, path: str) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"VirtualType({self.path!r})"


class Schema:
    """Ordered field tree of a document model.

    Mirrors the tree a Mongoose schema exposes: the declared fields in
    declaration order, followed by an implicit ``_id`` field and the ``id``
    virtual unless they are disabled. The version key is only added once the
    schema is bound to a model, so embedded schemas never carry one.
    """

    def __init__(
        self,
        definition: Mapping[str, Any] | None = None,
        *,
        _id: bool = True,
        version_key: str | bool = DEFAULT_VERSION_KEY,
        id_virtual: bool = True,
    ) -> None:
        if definition is not None and not isinstance(definition, Mapping):
            raise TypeError("Schema definition must be a mapping of field names.")
        self._tree: dict[str, Any] = dict(definition or {})
        self.version_key = _resolve_version_key(version_key)

        if _id and "_id" not in self._tree:
            self._tree["_id"] = {"auto": True, "type": OBJECT_ID_TYPE_NAME}
        if id_virtual and _id and DEFAULT_ID_VIRTUAL not in self._tree:
            self.virtual(DEFAULT_ID_VIRTUAL)

    @property
    def tree(self) -> dict[str, Any]:
        return self._tree

    def virtual(self, name: str) -> VirtualType:
        """Register a virtual field and return it."""
        virtual = VirtualType(name)
        self._tree[name] = virtual
        return virtual

    def apply_version_key(self) -> None:
        """Add the version key path unless disabled or already declared."""
        if self.version_key and self.version_key not in self._tree:
            self._tree[self.version_key] = Number

    def __repr__(self) -> str:
        return f"Schema({list(self._tree)!r})"


@dataclass(frozen=True)
class Model:
    """Named document model bound to a schema."""

    model_name: str
    schema: Schema


def _resolve_version_key(version_key: str | bool) -> str | None:
    if version_key is True:
        return DEFAULT_VERSION_KEY
    if version_key is False or not version_key:
        return None
    return str(version_key)


def model(name: str, schema: Schema) -> Model:
    """Declare a document model, adding the schema's version key."""
    if not isinstance(name, str) or not name.strip():
        raise ValueError("Model name must be a non-empty string.")
    if not isinstance(schema, Schema):
        raise TypeError("Model schema must be a Schema instance.")
    schema.apply_version_key()
    return Model(model_name=name.strip(), schema=schema)
