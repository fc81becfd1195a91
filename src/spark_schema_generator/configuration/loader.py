"""Generation settings loader service."""

from __future__ import annotations

from pathlib import Path

from .runtime_settings import GenerationSettings

MISSING_MODEL_MESSAGE = "One or more required arguments is either missing or invalid (--model)"


class ConfigurationError(Exception):
    """Raised when the generation arguments are invalid."""


def load_generation_settings(
    model_path: Path | str | None, output_path: Path | str | None = None
) -> GenerationSettings:
    """Validate generation arguments before any model is loaded."""
    if model_path is None or not str(model_path).strip():
        raise ConfigurationError(MISSING_MODEL_MESSAGE)
    model = Path(model_path)
    if not model.is_file():
        raise ConfigurationError(MISSING_MODEL_MESSAGE)

    output = None
    if output_path is not None:
        if not str(output_path).strip():
            raise ConfigurationError("--output must not be empty.")
        output = Path(output_path)
        if output.is_dir():
            raise ConfigurationError(f"--output must be a file path, not a directory: {output}")

    return GenerationSettings(model_path=model, output_path=output)
