"""Format-aware dispatcher reusing one processor per document format.

Architecture
: `FormatAwareProcessors` resolves each document into a `SourceFile` and
  options with a pinned format, then routes it to the processor cached for
  that format. There are exactly two slots, one for Markdown and one for MDX,
  so they are plain attributes rather than a mapping.
: Processors are built lazily on first use and never rebuilt. A failed build
  leaves the slot empty so the next call retries. Slot population takes a
  lock and re-checks the slot, so concurrent first calls build one processor.

Usage Example
:
    >>> from mdxsmith.core.dispatch import create_format_aware_processors
    >>> processors = create_format_aware_processors({"format": "mdx"})
    >>> processors.extensions
    ('.mdx',)
    >>> processors.process_sync("# Hello").value
    '<h1>Hello</h1>'
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from threading import Lock
from typing import Any

from .config import CompileOptions, coerce_compile_options
from .diagnostics import DiagnosticEmitter, LoggingEmitter
from .extnames import DocumentFormat
from .files import Compatible, SourceFile
from .formats import extensions_for, resolve_file_and_options
from .processor import Processor, create_processor


logger = logging.getLogger(__name__)

__all__ = ["FormatAwareProcessors", "ProcessorFactory", "create_format_aware_processors"]


ProcessorFactory = Callable[[CompileOptions], Processor]


class FormatAwareProcessors:
    """Compile documents with a processor chosen by document format."""

    def __init__(
        self,
        options: CompileOptions | Mapping[str, Any] | None = None,
        *,
        factory: ProcessorFactory = create_processor,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.options = coerce_compile_options(options)
        self._extensions = extensions_for(self.options)
        self._factory = factory
        self._emitter = emitter if emitter is not None else LoggingEmitter()
        self._md_processor: Processor | None = None
        self._mdx_processor: Processor | None = None
        self._guard = Lock()

    @property
    def extensions(self) -> tuple[str, ...]:
        """Extensions this dispatcher recognises."""
        return self._extensions

    async def process(self, compatible: Compatible) -> SourceFile:
        """Compile a Markdown or MDX document asynchronously."""
        file, processor = self._split(compatible)
        return await processor.process(file)

    def process_sync(self, compatible: Compatible) -> SourceFile:
        """Compile a Markdown or MDX document synchronously."""
        file, processor = self._split(compatible)
        return processor.process_sync(file)

    def _split(self, compatible: Compatible) -> tuple[SourceFile, Processor]:
        file, resolved = resolve_file_and_options(compatible, self.options)
        fmt = DocumentFormat(resolved.format)
        processor = self._cached(fmt)
        reused = processor is not None
        if processor is None:
            processor, built = self._build(fmt, resolved)
            reused = not built
        self._emitter.event(
            "document_dispatched",
            {
                "format": fmt.value,
                "path": str(file.path) if file.path is not None else None,
                "reused": reused,
            },
        )
        return file, processor

    def _cached(self, fmt: DocumentFormat) -> Processor | None:
        return self._md_processor if fmt is DocumentFormat.MD else self._mdx_processor

    def _build(self, fmt: DocumentFormat, resolved: CompileOptions) -> tuple[Processor, bool]:
        """Return the slot's processor and whether this call constructed it."""
        with self._guard:
            processor = self._cached(fmt)
            if processor is not None:
                return processor, False
            processor = self._factory(resolved)
            if fmt is DocumentFormat.MD:
                self._md_processor = processor
            else:
                self._mdx_processor = processor
        logger.debug("built %s processor", fmt.value)
        self._emitter.event(
            "processor_created",
            {
                "format": fmt.value,
                "markdown_extensions": list(resolved.markdown_extensions),
            },
        )
        return processor, True


def create_format_aware_processors(
    options: CompileOptions | Mapping[str, Any] | None = None,
    *,
    factory: ProcessorFactory = create_processor,
    emitter: DiagnosticEmitter | None = None,
) -> FormatAwareProcessors:
    """Create a dispatcher that handles both Markdown and MDX documents."""
    return FormatAwareProcessors(options, factory=factory, emitter=emitter)
