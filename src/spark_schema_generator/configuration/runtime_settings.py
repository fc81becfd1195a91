"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationSettings:
    """Validated settings for one schema generation run."""

    model_path: Path
    output_path: Path | None
