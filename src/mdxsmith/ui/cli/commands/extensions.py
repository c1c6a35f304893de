"""Implementation of the `mdxsmith extensions` command."""

from __future__ import annotations

import typer

from mdxsmith.core.dispatch import create_format_aware_processors

from .._options import FormatOption


def list_extensions(document_format: FormatOption = None) -> None:
    """List the file extensions recognised for a format (both by default)."""
    processors = create_format_aware_processors(
        {"format": document_format.value if document_format is not None else None}
    )
    for extension in processors.extensions:
        typer.echo(extension)
