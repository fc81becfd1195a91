"""Schema source exports."""

from .model_loader import SourceLoadError, load_model_source, to_loaded_model
from .node_classifier import classify_schema, classify_tree, classify_value
from .source_nodes import (
    ArrayOf,
    EmbeddedSchema,
    Ignored,
    LoadedModel,
    OptionsObject,
    Primitive,
    SourceNode,
    Unrecognized,
)

__all__ = [
    "ArrayOf",
    "EmbeddedSchema",
    "Ignored",
    "LoadedModel",
    "OptionsObject",
    "Primitive",
    "SourceLoadError",
    "SourceNode",
    "Unrecognized",
    "classify_schema",
    "classify_tree",
    "classify_value",
    "load_model_source",
    "to_loaded_model",
]
