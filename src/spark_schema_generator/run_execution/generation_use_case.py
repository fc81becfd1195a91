"""Schema generation use-case service."""

from __future__ import annotations

import logging

from spark_schema_generator.configuration import ConfigurationError, load_generation_settings
from spark_schema_generator.document_building import (
    build_document,
    emit_document,
    render_document,
)
from spark_schema_generator.document_building.output_sink import TextEmitter
from spark_schema_generator.schema_source import LoadedModel, SourceLoadError, load_model_source
from spark_schema_generator.schema_translation import SchemaTranslator, TranslationError

from .run_contracts import RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a schema generation run cannot be completed."""


def execute_schema_generation(
    request: RunRequest,
    *,
    emit: TextEmitter | None = None,
    translator: SchemaTranslator | None = None,
) -> RunOutcome:
    """Load the model, translate it and emit the Spark schema document.

    Nothing is emitted unless every earlier step succeeded.
    """
    try:
        settings = load_generation_settings(request.model_path, request.output_path)
        source = load_model_source(settings.model_path)
    except (ConfigurationError, SourceLoadError) as exc:
        raise RunExecutionError(str(exc)) from exc

    try:
        document_text = generate_schema_document(source, translator=translator)
    except TranslationError as exc:
        raise RunExecutionError(
            f"{exc} Manually fix such fields in {settings.model_path} and re-run."
        ) from exc

    try:
        destination = emit_document(document_text, settings.output_path, emit=emit)
    except OSError as exc:
        raise RunExecutionError(
            f"Could not write Spark schema to {settings.output_path}: {exc}"
        ) from exc

    return RunOutcome(
        collection_name=source.collection_name,
        document_text=document_text,
        output_path=destination,
    )


def generate_schema_document(
    source: LoadedModel, *, translator: SchemaTranslator | None = None
) -> str:
    """Translate a loaded model into rendered Spark schema JSON."""
    resolved_translator = translator or SchemaTranslator(version_key=source.version_key)
    fields = resolved_translator.translate_fields(source.root_tree)
    _LOGGER.debug("translated %d root fields of %s", len(fields), source.collection_name)
    return render_document(build_document(source.collection_name, fields))
