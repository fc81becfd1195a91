"""Document model to Spark primitive type resolution."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

TYPE_MAPPINGS: Mapping[str, str] = MappingProxyType(
    {
        "String": "string",
        "Date": "timestamp",
        "ObjectId": "string",
        "Boolean": "boolean",
        "Number": "float",
    }
)


class TranslationError(Exception):
    """Base class for failures while translating a document model."""


class UnsupportedTypeError(TranslationError):
    """Raised when a schema type has no Spark equivalent."""

    def __init__(self, type_name: str, path: str) -> None:
        super().__init__(f"Mongoose type {type_name} (at model path {path}) is not supported yet.")
        self.type_name = type_name
        self.path = path


class TypeResolver:
    """Look up Spark primitive names for schema type names."""

    def __init__(self, mappings: Mapping[str, str] = TYPE_MAPPINGS) -> None:
        self._mappings = mappings

    def resolve(self, type_name: str, path: str) -> str:
        """Return the Spark type for ``type_name`` declared at ``path``.

        Raises:
          UnsupportedTypeError: If the type has no entry in the mapping table.
        """
        spark_type = self._mappings.get(type_name)
        if spark_type is None:
            raise UnsupportedTypeError(type_name, path)
        return spark_type
