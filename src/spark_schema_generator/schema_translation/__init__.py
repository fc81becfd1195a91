"""Schema translation exports."""

from .schema_translator import SchemaTranslator, UnparseableFieldError
from .target_models import ArrayType, PrimitiveType, StructType, TargetField, TargetType
from .type_resolver import TYPE_MAPPINGS, TranslationError, TypeResolver, UnsupportedTypeError

__all__ = [
    "TYPE_MAPPINGS",
    "ArrayType",
    "PrimitiveType",
    "SchemaTranslator",
    "StructType",
    "TargetField",
    "TargetType",
    "TranslationError",
    "TypeResolver",
    "UnparseableFieldError",
    "UnsupportedTypeError",
]
