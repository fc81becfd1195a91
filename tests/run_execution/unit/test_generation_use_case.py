"""Schema generation use-case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from spark_schema_generator.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_schema_generation,
    generate_schema_document,
)
from spark_schema_generator.schema_source import OptionsObject, Primitive
from spark_schema_generator.schema_source.source_nodes import LoadedModel

_MODEL_SOURCE = """
from spark_schema_generator.document_model import Number, Schema, String, model

user = model("User", Schema({"name": String, "age": Number}, _id=False))
"""


def _write_model(tmp_path: Path, source: str = _MODEL_SOURCE) -> Path:
    path = tmp_path / "user_model.py"
    path.write_text(source, encoding="utf-8")
    return path


def test_generate_schema_document_renders_loaded_model() -> None:
    source = LoadedModel(
        collection_name="User", root_tree=OptionsObject({"name": Primitive("String")})
    )

    document = json.loads(generate_schema_document(source))

    assert document == {
        "collection_name": "User",
        "schema": {
            "type": "struct",
            "fields": [{"metadata": {}, "nullable": True, "name": "name", "type": "string"}],
        },
    }


def test_execute_emits_document_through_emitter(tmp_path: Path) -> None:
    emitted: list[str] = []

    outcome = execute_schema_generation(
        RunRequest(model_path=str(_write_model(tmp_path))), emit=emitted.append
    )

    assert outcome.collection_name == "User"
    assert outcome.output_path is None
    assert emitted == [outcome.document_text]
    fields = json.loads(outcome.document_text)["schema"]["fields"]
    assert [field["name"] for field in fields] == ["name", "age"]


def test_execute_writes_output_file(tmp_path: Path) -> None:
    output_path = tmp_path / "schema.json"

    outcome = execute_schema_generation(
        RunRequest(model_path=str(_write_model(tmp_path)), output_path=str(output_path))
    )

    assert outcome.output_path == output_path.resolve()
    assert output_path.read_text(encoding="utf-8") == outcome.document_text


def test_execute_wraps_configuration_errors() -> None:
    with pytest.raises(RunExecutionError, match=r"\(--model\)"):
        execute_schema_generation(RunRequest(model_path=None))


def test_translation_failure_emits_nothing(tmp_path: Path) -> None:
    model_path = _write_model(
        tmp_path,
        """
from spark_schema_generator.document_model import Mixed, Schema, String, model

user = model("User", Schema({"name": String, "extra": Mixed}))
""",
    )
    output_path = tmp_path / "schema.json"
    emitted: list[str] = []

    with pytest.raises(RunExecutionError) as exc_info:
        execute_schema_generation(
            RunRequest(model_path=str(model_path), output_path=str(output_path)),
            emit=emitted.append,
        )

    message = str(exc_info.value)
    assert "Mongoose type Mixed (at model path extra) is not supported yet." in message
    assert f"Manually fix such fields in {model_path} and re-run." in message
    assert emitted == []
    assert not output_path.exists()


def test_source_load_failure_is_wrapped(tmp_path: Path) -> None:
    model_path = _write_model(tmp_path, "VALUE = 1\n")

    with pytest.raises(RunExecutionError, match="No document model"):
        execute_schema_generation(RunRequest(model_path=str(model_path)))


def test_custom_version_key_is_dropped_at_every_depth(tmp_path: Path) -> None:
    model_path = _write_model(
        tmp_path,
        """
from spark_schema_generator.document_model import Number, Schema, String, model

user = model(
    "User",
    Schema(
        {"name": String, "history": [{"revision": Number, "note": String}]},
        _id=False,
        version_key="revision",
    ),
)
""",
    )
    emitted: list[str] = []

    outcome = execute_schema_generation(RunRequest(model_path=str(model_path)), emit=emitted.append)

    fields = json.loads(outcome.document_text)["schema"]["fields"]
    assert [field["name"] for field in fields] == ["name", "history"]
    element_fields = fields[1]["type"]["elementType"]["fields"]
    assert [field["name"] for field in element_fields] == ["note"]
