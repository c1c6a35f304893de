"""Resolve a document input and its options into a file plus a pinned format."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import CompileOptions, coerce_compile_options
from .exceptions import ConfigurationError
from .extnames import DocumentFormat
from .files import Compatible, SourceFile, to_source_file


__all__ = ["detect_format", "extensions_for", "resolve_file_and_options"]


def extensions_for(options: CompileOptions) -> tuple[str, ...]:
    """Return the extensions advertised for the options' format selection."""
    pinned = options.pinned_format
    if pinned is DocumentFormat.MD:
        return options.active_md_extensions
    if pinned is DocumentFormat.MDX:
        return options.active_mdx_extensions
    return (*options.active_md_extensions, *options.active_mdx_extensions)


def detect_format(file: SourceFile, options: CompileOptions) -> DocumentFormat:
    """Classify one document as Markdown or MDX, rejecting unknown extensions."""
    pinned = options.pinned_format
    if pinned is not None:
        return pinned

    extname = file.extname
    if extname is not None:
        if extname in options.active_md_extensions:
            return DocumentFormat.MD
        if extname in options.active_mdx_extensions:
            return DocumentFormat.MDX

    if file.path is None:
        raise ConfigurationError(
            "Cannot determine the format of a document without a path; "
            "pass `format='md'` or `format='mdx'`."
        )
    known = ", ".join(extensions_for(options))
    raise ConfigurationError(
        f"Unsupported document extension '{extname or '<none>'}' for '{file.path}'. "
        f"Expected one of: {known}."
    )


def resolve_file_and_options(
    compatible: Compatible | None,
    options: CompileOptions | Mapping[str, Any] | None = None,
) -> tuple[SourceFile, CompileOptions]:
    """Return the concrete file and options with the format always set."""
    resolved = coerce_compile_options(options)
    file = to_source_file(compatible)
    return file, resolved.with_format(detect_format(file, resolved))
