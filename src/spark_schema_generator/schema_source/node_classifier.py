"""Classification of raw model values into source nodes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from spark_schema_generator.document_model import (
    OBJECT_ID_TYPE_NAME,
    Schema,
    VirtualType,
    type_marker_name,
)

from .source_nodes import (
    ArrayOf,
    EmbeddedSchema,
    Ignored,
    OptionsObject,
    Primitive,
    SourceNode,
    Unrecognized,
)


def classify_schema(schema: Schema) -> OptionsObject:
    """Classify the field tree of a schema.

    The schema's own version key is classified as ignored so that custom
    version keys never reach the output.
    """
    tree = classify_tree(schema.tree)
    if schema.version_key and schema.version_key in tree.fields:
        fields = dict(tree.fields)
        fields[schema.version_key] = Ignored()
        return OptionsObject(fields=fields)
    return tree


def classify_tree(tree: Mapping[str, Any]) -> OptionsObject:
    """Classify every entry of a field map, keeping insertion order."""
    return OptionsObject(fields={str(key): classify_value(value) for key, value in tree.items()})


def classify_value(value: Any) -> SourceNode:
    """Return the source node shape of one raw model value."""
    if value is None or value is False or isinstance(value, VirtualType):
        return Ignored()
    if isinstance(value, Schema):
        return EmbeddedSchema(tree=classify_schema(value))
    if isinstance(value, str):
        if value == OBJECT_ID_TYPE_NAME:
            return Primitive(type_name=value)
        return Unrecognized(value=value)
    if isinstance(value, type):
        return Primitive(type_name=type_marker_name(value))
    if isinstance(value, Mapping):
        return classify_tree(value)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        element = classify_value(value[0]) if len(value) else None
        return ArrayOf(element=element)
    return Unrecognized(value=value)
