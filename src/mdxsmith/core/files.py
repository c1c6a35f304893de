"""Document value passed through the compile pipeline.

`SourceFile` carries the document content alongside an optional path and a
free-form `data` mapping that processors fill with metadata such as front
matter. Callers may hand the dispatcher raw text, raw bytes, a mapping of
`SourceFile` fields, or an existing instance; `to_source_file` normalises all
of them.

Usage Example
:
    >>> from mdxsmith.core.files import to_source_file
    >>> file = to_source_file({"value": "# Hi", "path": "notes/intro.MDX"})
    >>> file.extname, file.stem
    ('.mdx', 'intro')
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError


__all__ = ["Compatible", "SourceFile", "to_source_file"]


@dataclass(slots=True)
class SourceFile:
    """Document content plus optional path and metadata."""

    value: str | bytes = ""
    path: Path | None = None
    data: dict[str, Any] = field(default_factory=dict)
    messages: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.path is not None and not isinstance(self.path, Path):
            self.path = Path(self.path)

    @classmethod
    def from_path(cls, path: str | Path, *, encoding: str = "utf-8") -> SourceFile:
        """Read a document from disk."""
        source = Path(path)
        try:
            text = source.read_text(encoding=encoding)
        except OSError as exc:
            raise ConfigurationError(f"Unable to read '{source}': {exc}") from exc
        return cls(value=text, path=source)

    @property
    def extname(self) -> str | None:
        """Return the lower-cased suffix (with its dot), if the file has one."""
        if self.path is None or not self.path.suffix:
            return None
        return self.path.suffix.lower()

    @property
    def stem(self) -> str | None:
        if self.path is None:
            return None
        return self.path.stem

    @property
    def text(self) -> str:
        """Return the content decoded as UTF-8."""
        if isinstance(self.value, bytes):
            return self.value.decode("utf-8")
        return self.value

    def message(self, text: str) -> None:
        """Attach a non-fatal note to the file."""
        self.messages.append(text)


Compatible = str | bytes | SourceFile | Mapping[str, Any]


def to_source_file(compatible: Compatible | None) -> SourceFile:
    """Return a `SourceFile` for any supported document input."""
    if isinstance(compatible, SourceFile):
        return compatible
    if compatible is None:
        return SourceFile()
    if isinstance(compatible, (str, bytes)):
        return SourceFile(value=compatible)
    if isinstance(compatible, Mapping):
        known = {"value", "path", "data", "messages"}
        unknown = sorted(str(key) for key in compatible if key not in known)
        if unknown:
            raise ConfigurationError(
                f"Unexpected document fields: {', '.join(unknown)}. "
                "Expected any of value, path, data, messages."
            )
        payload = dict(compatible)
        payload["data"] = dict(payload.get("data") or {})
        payload["messages"] = list(payload.get("messages") or [])
        return SourceFile(**payload)
    raise ConfigurationError(
        f"Unsupported document input of type '{type(compatible).__name__}'. "
        "Provide text, bytes, a mapping, or a SourceFile."
    )
