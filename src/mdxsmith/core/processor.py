"""Compile processor bound to one document format.

Architecture
: `create_processor` is the factory the dispatcher calls at most once per
  format. Building a processor instantiates Python-Markdown with the format's
  extension list, which is the expensive part; the instance is then reused
  for every document of that format.
: `Processor.process_sync` and `Processor.process` run the same stages:
  front matter extraction, Markdown rendering, then the configured plugins.
  Only the asynchronous variant can await coroutine plugins.
"""

from __future__ import annotations

from collections.abc import Mapping
import inspect
import logging
from typing import Any

from ..adapters.markdown import (
    DEFAULT_MD_EXTENSIONS,
    DEFAULT_MDX_EXTENSIONS,
    MarkdownRenderer,
)
from .config import CompileOptions, coerce_compile_options
from .exceptions import PipelineConstructionError, ProcessingError
from .extnames import DocumentFormat
from .files import SourceFile


logger = logging.getLogger(__name__)

__all__ = ["Processor", "create_processor"]


class Processor:
    """Stateful compiler for documents of a single format."""

    def __init__(self, options: CompileOptions) -> None:
        fmt = options.pinned_format
        if fmt is None:
            raise PipelineConstructionError(
                f"Unexpected `format: {options.format!r}`, which is not supported by "
                "`create_processor`. Expected 'md' or 'mdx'."
            )
        self.options = options
        self.format = fmt
        defaults = DEFAULT_MD_EXTENSIONS if fmt is DocumentFormat.MD else DEFAULT_MDX_EXTENSIONS
        self.renderer = MarkdownRenderer([*defaults, *options.markdown_extensions])
        self.plugins = options.plugins
        self.has_async_steps = any(inspect.iscoroutinefunction(plugin) for plugin in self.plugins)

    def __repr__(self) -> str:
        return f"Processor(format={self.format.value!r}, plugins={len(self.plugins)})"

    def process_sync(self, file: SourceFile) -> SourceFile:
        """Compile a document, failing if any step is asynchronous."""
        if self.has_async_steps:
            raise ProcessingError(
                "`process_sync` cannot run asynchronous plugins; use `process` instead."
            )
        html, front_matter = self._render(file)
        for plugin in self.plugins:
            result = plugin(html, file)
            if inspect.isawaitable(result):
                close = getattr(result, "close", None)
                if callable(close):
                    close()
                raise ProcessingError(
                    f"Plugin {_plugin_name(plugin)} returned an awaitable; "
                    "use `process` for asynchronous plugins."
                )
            if result is not None:
                html = result
        return self._finish(file, html, front_matter)

    async def process(self, file: SourceFile) -> SourceFile:
        """Compile a document, awaiting asynchronous plugins."""
        html, front_matter = self._render(file)
        for plugin in self.plugins:
            result = plugin(html, file)
            if inspect.isawaitable(result):
                result = await result
            if result is not None:
                html = result
        return self._finish(file, html, front_matter)

    def _render(self, file: SourceFile) -> tuple[str, dict[str, Any]]:
        try:
            source = file.text
        except UnicodeDecodeError as exc:
            raise ProcessingError(f"Document {file.path or '<memory>'} is not valid UTF-8") from exc
        document = self.renderer.render(source)
        for note in document.notes:
            file.message(note)
        return document.html, document.front_matter

    def _finish(self, file: SourceFile, html: str, front_matter: dict[str, Any]) -> SourceFile:
        file.value = html
        file.data.update(
            {
                "front_matter": front_matter,
                "format": self.format.value,
                "development": self.options.development,
                "output_format": self.options.output_format,
                "provider_import_source": self.options.provider_import_source,
            }
        )
        logger.debug("compiled %s as %s", file.path or "<memory>", self.format.value)
        return file


def create_processor(options: CompileOptions | Mapping[str, Any] | None) -> Processor:
    """Build a processor for resolved options whose format is pinned."""
    return Processor(coerce_compile_options(options))


def _plugin_name(plugin: Any) -> str:
    return getattr(plugin, "__qualname__", None) or type(plugin).__name__
