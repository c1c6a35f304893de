"""One-shot compile helpers.

Each call resolves the document, builds a fresh processor, and runs it. Use
`create_format_aware_processors` instead when compiling many documents so
processors are reused.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.config import CompileOptions
from ..core.files import Compatible, SourceFile
from ..core.formats import resolve_file_and_options
from ..core.processor import create_processor


__all__ = ["compile", "compile_sync"]


async def compile(  # noqa: A001
    compatible: Compatible,
    options: CompileOptions | Mapping[str, Any] | None = None,
) -> SourceFile:
    """Compile a Markdown or MDX document asynchronously."""
    file, resolved = resolve_file_and_options(compatible, options)
    return await create_processor(resolved).process(file)


def compile_sync(
    compatible: Compatible,
    options: CompileOptions | Mapping[str, Any] | None = None,
) -> SourceFile:
    """Compile a Markdown or MDX document synchronously."""
    file, resolved = resolve_file_and_options(compatible, options)
    return create_processor(resolved).process_sync(file)
