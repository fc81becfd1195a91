"""Type resolver tests."""

from __future__ import annotations

from types import MappingProxyType

import pytest
from spark_schema_generator.schema_translation import (
    TYPE_MAPPINGS,
    TranslationError,
    TypeResolver,
    UnsupportedTypeError,
)


@pytest.mark.parametrize(
    ("type_name", "spark_type"),
    [
        ("String", "string"),
        ("Date", "timestamp"),
        ("ObjectId", "string"),
        ("Boolean", "boolean"),
        ("Number", "float"),
    ],
)
def test_resolves_supported_types(type_name: str, spark_type: str) -> None:
    assert TypeResolver().resolve(type_name, "field") == spark_type


def test_mapping_table_is_fixed_and_read_only() -> None:
    assert len(TYPE_MAPPINGS) == 5
    assert isinstance(TYPE_MAPPINGS, MappingProxyType)
    with pytest.raises(TypeError):
        TYPE_MAPPINGS["Mixed"] = "string"  # type: ignore[index]


@pytest.mark.parametrize("type_name", ["Mixed", "Decimal128", "Buffer", "string", ""])
def test_unknown_type_raises_with_type_and_path(type_name: str) -> None:
    with pytest.raises(UnsupportedTypeError) as exc_info:
        TypeResolver().resolve(type_name, "profile.balance")

    assert exc_info.value.type_name == type_name
    assert exc_info.value.path == "profile.balance"
    assert "(at model path profile.balance) is not supported yet" in str(exc_info.value)
    assert isinstance(exc_info.value, TranslationError)


def test_resolver_accepts_alternative_table() -> None:
    resolver = TypeResolver({"Decimal128": "decimal(38,18)"})

    assert resolver.resolve("Decimal128", "amount") == "decimal(38,18)"
    with pytest.raises(UnsupportedTypeError):
        resolver.resolve("String", "name")
