"""Document building exports."""

from .document_builder import JSON_INDENT, build_document, render_document
from .output_sink import emit_document

__all__ = [
    "JSON_INDENT",
    "build_document",
    "emit_document",
    "render_document",
]
