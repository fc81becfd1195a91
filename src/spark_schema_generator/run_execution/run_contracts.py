"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunRequest:
    """Input contract for one schema generation run."""

    model_path: str | None
    output_path: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    collection_name: str
    document_text: str
    output_path: Path | None
