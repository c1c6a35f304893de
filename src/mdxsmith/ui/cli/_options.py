"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from mdxsmith.core.extnames import DocumentFormat


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
COMPILE_PANEL = "Compilation"

InputPathArgument = Annotated[
    Path,
    typer.Argument(
        metavar="INPUT",
        help="Markdown (.md) or MDX (.mdx) source document.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

FormatOption = Annotated[
    DocumentFormat | None,
    typer.Option(
        "--format",
        "-f",
        case_sensitive=False,
        help="Force the document format instead of detecting it from the extension.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the compiled output to this file instead of stdout.",
        dir_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

MarkdownExtensionsOption = Annotated[
    list[str] | None,
    typer.Option(
        "--markdown-extension",
        "-x",
        help="Additional Python-Markdown extension to enable (repeatable, comma separated).",
        rich_help_panel=COMPILE_PANEL,
    ),
]

DevelopmentOption = Annotated[
    bool,
    typer.Option(
        "--development/--production",
        help="Compile for development or production run times.",
        rich_help_panel=COMPILE_PANEL,
    ),
]
