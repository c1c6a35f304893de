"""Custom exception hierarchy for the compile dispatch layer."""

from __future__ import annotations


__all__ = [
    "ConfigurationError",
    "MdxCompileError",
    "PipelineConstructionError",
    "ProcessingError",
    "exception_hint",
    "exception_messages",
]


class MdxCompileError(RuntimeError):
    """Base exception for compile failures."""


class ConfigurationError(MdxCompileError, ValueError):
    """Raised when options are missing, invalid, or cannot determine a format."""


class PipelineConstructionError(MdxCompileError):
    """Raised when a processor cannot be built from the resolved options."""


class ProcessingError(MdxCompileError):
    """Raised when a processor fails while transforming a document."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None
