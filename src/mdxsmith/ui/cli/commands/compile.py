"""Implementation of the `mdxsmith compile` command."""

from __future__ import annotations

from pathlib import Path

import typer

from mdxsmith.core.dispatch import create_format_aware_processors
from mdxsmith.core.exceptions import MdxCompileError
from mdxsmith.core.files import SourceFile

from .._options import (
    DevelopmentOption,
    FormatOption,
    InputPathArgument,
    MarkdownExtensionsOption,
    OutputPathOption,
)
from ..diagnostics import CliEmitter
from ..state import debug_enabled, emit_error, get_cli_state


def _write_output(target: Path, content: str) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")


def compile_document(
    input_path: InputPathArgument,
    output: OutputPathOption = None,
    document_format: FormatOption = None,
    markdown_extensions: MarkdownExtensionsOption = None,
    development: DevelopmentOption = False,
) -> None:
    """Compile a Markdown or MDX document."""
    state = get_cli_state()
    emitter = CliEmitter(state=state)

    try:
        processors = create_format_aware_processors(
            {
                "format": document_format.value if document_format is not None else None,
                "markdown_extensions": markdown_extensions or [],
                "development": development,
            },
            emitter=emitter,
        )
        result = processors.process_sync(SourceFile.from_path(input_path))
    except MdxCompileError as exc:
        if debug_enabled():
            raise
        emitter.error(str(exc), exc)
        raise typer.Exit(code=1) from exc

    for note in result.messages:
        emitter.warning(f"{input_path.name}: {note}")

    if output is None:
        typer.echo(result.text)
        return

    try:
        _write_output(output, result.text)
    except OSError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    if state.verbosity >= 1:
        state.err_console.log(f"Wrote {output}")
