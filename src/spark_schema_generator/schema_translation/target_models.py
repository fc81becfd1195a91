"""Spark schema entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PrimitiveType:
    """Spark primitive type such as ``string`` or ``timestamp``."""

    name: str


@dataclass(frozen=True)
class StructType:
    """Ordered collection of named fields."""

    fields: tuple[TargetField, ...]


@dataclass(frozen=True)
class ArrayType:
    """Repeated element type."""

    element_type: TargetType
    contains_null: bool = True


TargetType = PrimitiveType | StructType | ArrayType


@dataclass(frozen=True)
class TargetField:
    """Named Spark struct field."""

    name: str
    type: TargetType
    nullable: bool = True
    metadata: Mapping[str, Any] = field(default_factory=dict)
