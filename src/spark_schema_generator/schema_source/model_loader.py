"""Document model loading service."""

from __future__ import annotations

import importlib.util
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import ModuleType
from typing import Any

import yaml

from spark_schema_generator.document_model import (
    DEFAULT_VERSION_KEY,
    SCHEMA_TYPES,
    Model,
    Schema,
    VirtualType,
    model,
)

from .node_classifier import classify_schema
from .source_nodes import LoadedModel

_LOGGER = logging.getLogger(__name__)

PYTHON_MODEL_SUFFIXES = (".py",)
DECLARATIVE_MODEL_SUFFIXES = (".yaml", ".yml", ".json")

_EMBEDDED_SCHEMA_KEY = "$schema"
_EMBEDDED_OPTIONS_KEY = "$options"
_VIRTUAL_KEY = "$virtual"


class SourceLoadError(Exception):
    """Raised when a document model cannot be obtained from its source file."""


def load_model_source(model_path: Path | str) -> LoadedModel:
    """Load a document model file and classify its root type-tree."""
    path = Path(model_path)
    if not path.is_file():
        raise SourceLoadError(f"Document model file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in PYTHON_MODEL_SUFFIXES:
        document_model = _load_python_model(path)
    elif suffix in DECLARATIVE_MODEL_SUFFIXES:
        document_model = _load_declarative_model(path)
    else:
        supported = ", ".join(PYTHON_MODEL_SUFFIXES + DECLARATIVE_MODEL_SUFFIXES)
        raise SourceLoadError(
            f"Unsupported document model file type '{path.suffix}' (expected one of {supported})."
        )

    _LOGGER.debug(
        "loaded model %s with %d top-level paths from %s",
        document_model.model_name,
        len(document_model.schema.tree),
        path,
    )
    return to_loaded_model(document_model)


def to_loaded_model(document_model: Model) -> LoadedModel:
    """Expose a declared model as a classified schema source."""
    return LoadedModel(
        collection_name=document_model.model_name,
        root_tree=classify_schema(document_model.schema),
        version_key=document_model.schema.version_key or DEFAULT_VERSION_KEY,
    )


def _load_python_model(path: Path) -> Model:
    module = _import_module_from_path(path)
    candidate = getattr(module, "model", None)
    if isinstance(candidate, Model):
        return candidate

    models = [value for value in vars(module).values() if isinstance(value, Model)]
    if len(models) == 1:
        return models[0]
    if not models:
        raise SourceLoadError(f"No document model is defined in {path}.")
    raise SourceLoadError(
        f"Multiple document models are defined in {path}; expose the one to convert as 'model'."
    )


def _import_module_from_path(path: Path) -> ModuleType:
    module_name = f"_spark_schema_model_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise SourceLoadError(f"Could not import document model file {path}.")
    module = importlib.util.module_from_spec(spec)
    # model directory is importable only while the model executes
    model_dir = str(path.resolve().parent)
    sys.path.insert(0, model_dir)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        sys.modules.pop(module_name, None)
        raise SourceLoadError(
            f"Could not import document model file {path}: {exc}. "
            "Remove dependencies other than the document model definitions and re-run."
        ) from exc
    finally:
        if model_dir in sys.path:
            sys.path.remove(model_dir)
    return module


def _load_declarative_model(path: Path) -> Model:
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceLoadError(f"Could not read document model file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SourceLoadError(f"Failed to parse document model file {path}: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise SourceLoadError("Document model root must be a mapping.")

    name = parsed.get("name")
    if not isinstance(name, str) or not name.strip():
        raise SourceLoadError("Document model 'name' must be a non-empty string.")
    definition = parsed.get("schema")
    if not isinstance(definition, Mapping):
        raise SourceLoadError("Document model 'schema' must be a mapping of field names.")

    schema = Schema(
        _declared_tree(definition, location="schema"),
        **_schema_options(parsed.get("options"), location="options"),
    )
    for virtual_name in _virtual_names(parsed.get("virtuals")):
        schema.virtual(virtual_name)
    return model(name, schema)


def _declared_tree(definition: Mapping[str, Any], *, location: str) -> dict[str, Any]:
    return {
        str(key): _declared_value(key, value, location=f"{location}.{key}")
        for key, value in definition.items()
    }


def _declared_value(key: str, value: Any, *, location: str) -> Any:
    if isinstance(value, str):
        marker = SCHEMA_TYPES.get(value)
        return marker if marker is not None else value
    if isinstance(value, Mapping):
        if _VIRTUAL_KEY in value:
            return VirtualType(str(key)) if value[_VIRTUAL_KEY] else False
        if _EMBEDDED_SCHEMA_KEY in value:
            return _declared_schema(value, location=location)
        return _declared_tree(value, location=location)
    if isinstance(value, list):
        return [_declared_value(key, item, location=location) for item in value]
    return value


def _declared_schema(value: Mapping[str, Any], *, location: str) -> Schema:
    definition = value[_EMBEDDED_SCHEMA_KEY]
    if not isinstance(definition, Mapping):
        raise SourceLoadError(f"{location}.{_EMBEDDED_SCHEMA_KEY} must be a mapping.")
    options = _schema_options(
        value.get(_EMBEDDED_OPTIONS_KEY), location=f"{location}.{_EMBEDDED_OPTIONS_KEY}"
    )
    return Schema(_declared_tree(definition, location=location), **options)


def _schema_options(value: Any, *, location: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SourceLoadError(f"{location} must be a mapping.")
    options: dict[str, Any] = {}
    if "_id" in value:
        options["_id"] = _require_bool(value["_id"], f"{location}._id")
    if "id" in value:
        options["id_virtual"] = _require_bool(value["id"], f"{location}.id")
    if "versionKey" in value:
        version_key = value["versionKey"]
        if not isinstance(version_key, (str, bool)):
            raise SourceLoadError(f"{location}.versionKey must be a string or boolean.")
        options["version_key"] = version_key
    return options


def _virtual_names(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SourceLoadError("Document model 'virtuals' must be a list of names.")
    names = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise SourceLoadError("Document model 'virtuals' entries must be non-empty strings.")
        names.append(item.strip())
    return tuple(names)


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise SourceLoadError(f"{field_name} must be a boolean.")
    return value
