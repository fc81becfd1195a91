"""Spark schema document assembly."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from spark_schema_generator.schema_translation.target_models import (
    ArrayType,
    PrimitiveType,
    StructType,
    TargetField,
    TargetType,
)

JSON_INDENT = 4


def build_document(collection_name: str, fields: Sequence[TargetField]) -> dict[str, Any]:
    """Wrap translated root fields in the collection schema envelope."""
    return {
        "collection_name": collection_name,
        "schema": _serialize_type(StructType(fields=tuple(fields))),
    }


def render_document(document: dict[str, Any]) -> str:
    """Render a schema document as pretty-printed JSON text."""
    return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False)


def _serialize_field(target_field: TargetField) -> dict[str, Any]:
    return {
        "metadata": dict(target_field.metadata),
        "nullable": target_field.nullable,
        "name": target_field.name,
        "type": _serialize_type(target_field.type),
    }


def _serialize_type(target_type: TargetType) -> str | dict[str, Any]:
    if isinstance(target_type, PrimitiveType):
        return target_type.name
    if isinstance(target_type, StructType):
        return {
            "type": "struct",
            "fields": [_serialize_field(child) for child in target_type.fields],
        }
    if isinstance(target_type, ArrayType):
        return {
            "type": "array",
            "elementType": _serialize_type(target_type.element_type),
            "containsNull": target_type.contains_null,
        }
    raise TypeError(f"Unsupported Spark type: {target_type!r}")
