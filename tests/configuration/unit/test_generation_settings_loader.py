"""Generation settings loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from spark_schema_generator.configuration import (
    MISSING_MODEL_MESSAGE,
    ConfigurationError,
    GenerationSettings,
    load_generation_settings,
)


def test_loads_settings_for_existing_model(tmp_path: Path) -> None:
    model_path = tmp_path / "user.py"
    model_path.write_text("", encoding="utf-8")

    settings = load_generation_settings(str(model_path), str(tmp_path / "out.json"))

    assert settings == GenerationSettings(
        model_path=model_path, output_path=tmp_path / "out.json"
    )


def test_output_path_is_optional(tmp_path: Path) -> None:
    model_path = tmp_path / "user.yaml"
    model_path.write_text("", encoding="utf-8")

    assert load_generation_settings(model_path).output_path is None


@pytest.mark.parametrize("model_path", [None, "", "  "])
def test_errors_when_model_missing(model_path) -> None:
    with pytest.raises(ConfigurationError, match=r"missing or invalid \(--model\)"):
        load_generation_settings(model_path)


def test_errors_when_model_does_not_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        load_generation_settings(tmp_path / "missing.py")

    assert str(exc_info.value) == MISSING_MODEL_MESSAGE


def test_errors_when_model_is_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_generation_settings(tmp_path)


def test_errors_when_output_is_directory(tmp_path: Path) -> None:
    model_path = tmp_path / "user.py"
    model_path.write_text("", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="must be a file path"):
        load_generation_settings(model_path, tmp_path)
