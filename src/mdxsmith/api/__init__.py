"""Public API surface for mdxsmith."""

from __future__ import annotations

from ..core.config import CompileOptions
from ..core.dispatch import FormatAwareProcessors, create_format_aware_processors
from ..core.evaluate import EvaluateOptions, RunOptions, resolve_evaluate_options
from ..core.files import SourceFile
from .compile import compile, compile_sync  # noqa: A004


__all__ = [
    "CompileOptions",
    "EvaluateOptions",
    "FormatAwareProcessors",
    "RunOptions",
    "SourceFile",
    "compile",
    "compile_sync",
    "create_format_aware_processors",
    "resolve_evaluate_options",
]
