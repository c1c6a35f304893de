"""Core compile dispatch primitives."""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    MdxCompileError,
    PipelineConstructionError,
    ProcessingError,
)
from .config import CompileOptions, coerce_compile_options
from .dispatch import FormatAwareProcessors, create_format_aware_processors
from .evaluate import EvaluateOptions, RunOptions, resolve_evaluate_options
from .extnames import MD_EXTENSIONS, MDX_EXTENSIONS, DocumentFormat
from .files import SourceFile, to_source_file
from .formats import detect_format, resolve_file_and_options
from .processor import Processor, create_processor


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
    "Processor",
    "RunOptions",
    "SourceFile",
    "coerce_compile_options",
    "create_format_aware_processors",
    "create_processor",
    "detect_format",
    "resolve_evaluate_options",
    "resolve_file_and_options",
    "to_source_file",
]
