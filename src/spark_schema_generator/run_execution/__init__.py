"""Run execution domain exports."""

from .generation_use_case import (
    RunExecutionError,
    execute_schema_generation,
    generate_schema_document,
)
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_schema_generation",
    "generate_schema_document",
]
