"""Primary public API for mdxsmith."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from mdxsmith.api import (
    CompileOptions,
    EvaluateOptions,
    FormatAwareProcessors,
    RunOptions,
    SourceFile,
    compile,
    compile_sync,
    create_format_aware_processors,
    resolve_evaluate_options,
)
from mdxsmith.core.exceptions import (
    ConfigurationError,
    MdxCompileError,
    PipelineConstructionError,
    ProcessingError,
)
from mdxsmith.core.extnames import MD_EXTENSIONS, MDX_EXTENSIONS, DocumentFormat


try:
    __version__ = _pkg_version("mdxsmith")
except PackageNotFoundError:
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the installed package version."""
    return __version__


__all__ = [
    "MDX_EXTENSIONS",
    "MD_EXTENSIONS",
    "CompileOptions",
    "ConfigurationError",
    "DocumentFormat",
    "EvaluateOptions",
    "FormatAwareProcessors",
    "MdxCompileError",
    "PipelineConstructionError",
    "ProcessingError",
    "RunOptions",
    "SourceFile",
    "__version__",
    "compile",
    "compile_sync",
    "create_format_aware_processors",
    "get_version",
    "resolve_evaluate_options",
]
