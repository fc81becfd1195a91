"""Recursive document model to Spark schema translation."""

from __future__ import annotations

import json
import logging
from typing import Any

from spark_schema_generator.document_model import DEFAULT_VERSION_KEY
from spark_schema_generator.schema_source.source_nodes import (
    ArrayOf,
    EmbeddedSchema,
    Ignored,
    OptionsObject,
    Primitive,
    SourceNode,
    Unrecognized,
)

from .target_models import ArrayType, PrimitiveType, StructType, TargetField
from .type_resolver import TranslationError, TypeResolver

_LOGGER = logging.getLogger(__name__)

OPTIONS_TYPE_KEY = "type"


class UnparseableFieldError(TranslationError):
    """Raised when a field matches none of the known declaration shapes."""

    def __init__(self, key: str, value: Any, path: str) -> None:
        super().__init__(
            f"Could not parse model due to {_describe_field(key, value)} (at model path {path})."
        )
        self.key = key
        self.value = value
        self.path = path


class SchemaTranslator:
    """Translate classified source trees into ordered Spark struct fields.

    A field resolves, in order of precedence, as: ignored (version key,
    virtuals, disabled fields), embedded schema (unwrapped to its field map),
    bare type marker, options object with a ``type`` marker, nested field map
    (struct), or array. Arrays of field maps become ``array<struct>``; arrays
    of anything else collapse to the element's own field.
    """

    def __init__(
        self,
        resolver: TypeResolver | None = None,
        *,
        version_key: str = DEFAULT_VERSION_KEY,
    ) -> None:
        self._resolver = resolver or TypeResolver()
        self._version_key = version_key

    def translate(
        self, node: SourceNode, key: str | None = None
    ) -> TargetField | list[TargetField] | None:
        """Translate a whole field map (no key) or a single named field."""
        if key is None:
            if not isinstance(node, OptionsObject):
                raise TypeError("Translating without a key requires a field map.")
            return self.translate_fields(node)
        return self.translate_field(key, node)

    def translate_fields(self, node: OptionsObject) -> list[TargetField]:
        """Translate every entry of a field map, preserving declaration order."""
        return self._translate_map(node, prefix="")

    def translate_field(self, key: str, node: SourceNode) -> TargetField | None:
        """Translate one named field; ``None`` when the field is ignored."""
        return self._translate_field(key, node, path=key)

    def _translate_map(self, node: OptionsObject, prefix: str) -> list[TargetField]:
        fields = []
        for key, value in node.fields.items():
            path = f"{prefix}.{key}" if prefix else key
            translated = self._translate_field(key, value, path)
            if translated is not None:
                fields.append(translated)
        return fields

    def _translate_field(self, key: str, node: SourceNode, path: str) -> TargetField | None:
        if key == self._version_key or isinstance(node, Ignored):
            _LOGGER.debug("skipping ignored path %s", path)
            return None

        if isinstance(node, EmbeddedSchema):
            node = node.tree

        if isinstance(node, Primitive):
            spark_type = self._resolver.resolve(node.type_name, path)
            return TargetField(name=key, type=PrimitiveType(name=spark_type))

        if isinstance(node, OptionsObject):
            type_marker = _options_type_marker(node)
            if type_marker is not None:
                # remaining options (default, enum, ...) have no Spark equivalent
                return self._translate_field(key, type_marker, path)
            return TargetField(name=key, type=self._struct(node, path))

        if isinstance(node, ArrayOf):
            return self._translate_array(key, node, path)

        value = node.value if isinstance(node, Unrecognized) else node
        raise UnparseableFieldError(key, value, path)

    def _translate_array(self, key: str, node: ArrayOf, path: str) -> TargetField | None:
        element = node.element
        if element is None:
            raise UnparseableFieldError(key, [], path)
        if isinstance(element, EmbeddedSchema):
            element = element.tree
        if isinstance(element, OptionsObject) and _options_type_marker(element) is None:
            return TargetField(
                name=key,
                type=ArrayType(element_type=self._struct(element, path), contains_null=True),
            )
        return self._translate_field(key, element, path)

    def _struct(self, node: OptionsObject, path: str) -> StructType:
        fields = self._translate_map(node, prefix=path)
        _LOGGER.debug("translated %s as struct with %d fields", path, len(fields))
        return StructType(fields=tuple(fields))


def _options_type_marker(node: OptionsObject) -> SourceNode | None:
    """Return the ``type`` entry when it marks ``node`` as an options object.

    A ``type`` entry holding a field map or array is an ordinary field named
    ``type``.
    """
    marker = node.fields.get(OPTIONS_TYPE_KEY)
    if isinstance(marker, Primitive):
        return marker
    if isinstance(marker, Unrecognized) and isinstance(marker.value, str):
        return marker
    return None


def _describe_field(key: str, value: Any) -> str:
    return json.dumps({key: value}, default=repr, ensure_ascii=False)
