"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from spark_schema_generator.cli import main


def test_missing_model_returns_exit_code_one(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.err.strip() == (
        "ERROR: One or more required arguments is either missing or invalid (--model)"
    )
    assert captured.out == ""


def test_nonexistent_model_returns_exit_code_one(tmp_path: Path, capsys) -> None:
    exit_code = main([f"--model={tmp_path / 'missing.py'}"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "(--model)" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_unsupported_type_aborts_without_output(tmp_path: Path, capsys) -> None:
    model_path = tmp_path / "model.yaml"
    model_path.write_text("name: User\nschema:\n  blob: Buffer\n", encoding="utf-8")

    exit_code = main([f"--model={model_path}"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert captured.err.startswith("ERROR: Mongoose type Buffer (at model path blob)")
