"""Classified source schema nodes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from spark_schema_generator.document_model import DEFAULT_VERSION_KEY


@dataclass(frozen=True)
class Primitive:
    """Bare type marker such as ``String`` or the ``"ObjectId"`` literal."""

    type_name: str


@dataclass(frozen=True)
class OptionsObject:
    """Ordered field map; an options object when it carries a ``type`` marker."""

    fields: Mapping[str, SourceNode] = field(default_factory=dict)


@dataclass(frozen=True)
class EmbeddedSchema:
    """Sub-schema reference."""

    tree: OptionsObject


@dataclass(frozen=True)
class ArrayOf:
    """Array marker; ``element`` is ``None`` for an empty array."""

    element: SourceNode | None


@dataclass(frozen=True)
class Ignored:
    """Virtual or disabled field."""


@dataclass(frozen=True)
class Unrecognized:
    """Raw value matching no known shape."""

    value: Any


SourceNode = Primitive | OptionsObject | EmbeddedSchema | ArrayOf | Ignored | Unrecognized


@dataclass(frozen=True)
class LoadedModel:
    """Root type-tree and collection name supplied by a model source."""

    collection_name: str
    root_tree: OptionsObject
    version_key: str = DEFAULT_VERSION_KEY
