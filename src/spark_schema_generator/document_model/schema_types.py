"""Schema type markers used when declaring document models."""

from __future__ import annotations

import datetime
from types import MappingProxyType


class SchemaType:
    """Base class of schema type markers.

    Markers are referenced as classes (``name: String``), never instantiated.
    """


class String(SchemaType):
    """Text value."""


class Number(SchemaType):
    """Numeric value."""


class Date(SchemaType):
    """Point in time."""


class Boolean(SchemaType):
    """True/false value."""


class ObjectId(SchemaType):
    """Document identifier."""


class Mixed(SchemaType):
    """Arbitrary value."""


class Buffer(SchemaType):
    """Binary value."""


class Decimal128(SchemaType):
    """High-precision decimal value."""


class Map(SchemaType):
    """String-keyed map of values."""


OBJECT_ID_TYPE_NAME = "ObjectId"

SCHEMA_TYPES = MappingProxyType(
    {
        marker.__name__: marker
        for marker in (String, Number, Date, Boolean, ObjectId, Mixed, Buffer, Decimal128, Map)
    }
)

_BUILTIN_ALIASES = MappingProxyType(
    {
        str: "String",
        int: "Number",
        float: "Number",
        bool: "Boolean",
        datetime.datetime: "Date",
        datetime.date: "Date",
    }
)


def type_marker_name(constructor: type) -> str:
    """Return the schema type name a constructor stands for."""
    return _BUILTIN_ALIASES.get(constructor, constructor.__name__)
