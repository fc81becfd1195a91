"""Schema document output service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import click

_LOGGER = logging.getLogger(__name__)

TextEmitter = Callable[[str], None]


def emit_document(
    text: str, output_path: Path | str | None = None, *, emit: TextEmitter | None = None
) -> Path | None:
    """Print the rendered document, or write it to ``output_path`` when given.

    Returns:
      The resolved destination path, or ``None`` when the document was printed.

    Raises:
      OSError: If writing the destination file fails.
    """
    if output_path is None:
        (emit or click.echo)(text)
        return None

    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
    _LOGGER.debug("wrote %d characters to %s", len(text), destination)
    return destination.resolve()
