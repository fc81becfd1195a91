"""Document model exports."""

from .schema import DEFAULT_VERSION_KEY, Model, Schema, VirtualType, model
from .schema_types import (
    OBJECT_ID_TYPE_NAME,
    SCHEMA_TYPES,
    Boolean,
    Buffer,
    Date,
    Decimal128,
    Map,
    Mixed,
    Number,
    ObjectId,
    SchemaType,
    String,
    type_marker_name,
)

__all__ = [
    "DEFAULT_VERSION_KEY",
    "OBJECT_ID_TYPE_NAME",
    "SCHEMA_TYPES",
    "Boolean",
    "Buffer",
    "Date",
    "Decimal128",
    "Map",
    "Mixed",
    "Model",
    "Number",
    "ObjectId",
    "Schema",
    "SchemaType",
    "String",
    "VirtualType",
    "model",
    "type_marker_name",
]
