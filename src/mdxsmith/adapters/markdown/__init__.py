"""Markdown rendering utilities backing the compile processors."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
import re
from threading import Lock
from typing import Any

import markdown
import yaml

from ...core.exceptions import PipelineConstructionError, ProcessingError


__all__ = [
    "DEFAULT_MDX_EXTENSIONS",
    "DEFAULT_MD_EXTENSIONS",
    "MarkdownConversionError",
    "MarkdownDocument",
    "MarkdownRenderer",
    "deduplicate_markdown_extensions",
    "normalize_markdown_extensions",
    "split_front_matter",
]


DEFAULT_MD_EXTENSIONS = [
    "abbr",
    "attr_list",
    "def_list",
    "footnotes",
    "tables",
    "pymdownx.superfences",
    "pymdownx.tilde",
]

# Component blocks in MDX documents may wrap Markdown content.
DEFAULT_MDX_EXTENSIONS = [*DEFAULT_MD_EXTENSIONS, "md_in_html"]


DEFAULT_EXTENSION_CONFIGS: dict[str, dict[str, object]] = {
    "footnotes": {
        "UNIQUE_IDS": True,
    },
}


class MarkdownConversionError(ProcessingError):
    """Raised when Markdown cannot be converted into HTML."""


@dataclass(slots=True)
class MarkdownDocument:
    """Result of converting Markdown into HTML."""

    html: str
    front_matter: dict[str, Any]
    notes: list[str] = field(default_factory=list)


class MarkdownRenderer:
    """Python-Markdown instance guarded for reuse across documents."""

    __slots__ = ("_lock", "_processor", "extensions")

    def __init__(self, extensions: Sequence[str]) -> None:
        self.extensions = tuple(deduplicate_markdown_extensions(extensions))
        extension_configs = {
            name: dict(DEFAULT_EXTENSION_CONFIGS[name])
            for name in self.extensions
            if name in DEFAULT_EXTENSION_CONFIGS
        }
        try:
            self._processor = markdown.Markdown(
                extensions=list(self.extensions), extension_configs=extension_configs
            )
        except Exception as exc:  # library-controlled
            raise PipelineConstructionError(
                f"Failed to initialize Markdown processor: {exc}"
            ) from exc
        self._lock = Lock()

    def render(self, source: str) -> MarkdownDocument:
        """Convert Markdown source into HTML while collecting front matter."""
        metadata, body = split_front_matter(source)
        notes: list[str] = []
        if body == source and source.lstrip("\ufeff").startswith("---"):
            notes.append("Leading '---' block is not YAML front matter; rendered as Markdown.")
        try:
            with self._lock:
                self._processor.reset()
                html = self._processor.convert(body)
        except Exception as exc:  # library-controlled
            raise MarkdownConversionError(f"Failed to convert Markdown source: {exc}") from exc
        return MarkdownDocument(html=html, front_matter=metadata, notes=notes)


def deduplicate_markdown_extensions(values: Iterable[str]) -> list[str]:
    """Remove duplicate extensions while preserving order and case."""
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if not isinstance(value, str):
            continue
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(value)
    return result


def normalize_markdown_extensions(
    values: Iterable[str] | str | None,
) -> list[str]:
    """Normalise extension names from CLI-friendly strings into a flat list."""
    if values is None:
        return []

    if isinstance(values, str):
        candidates: Iterable[str] = [values]
    else:
        candidates = values

    normalized: list[str] = []
    for value in candidates:
        if not isinstance(value, str):
            continue
        chunks = re.split(r"[,\s\x00]+", value)
        normalized.extend(chunk for chunk in chunks if chunk)
    return normalized


def split_front_matter(source: str) -> tuple[dict[str, Any], str]:
    """Split YAML front matter from Markdown content, returning metadata and body."""
    candidate = source.lstrip("\ufeff")
    prefix_len = len(source) - len(candidate)
    lines = candidate.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, source

    front_matter_lines: list[str] = []
    closing_index: int | None = None
    for idx, line in enumerate(lines[1:], start=1):
        stripped = line.strip()
        if stripped in {"---", "..."}:
            closing_index = idx
            break
        front_matter_lines.append(line)

    if closing_index is None:
        return {}, source

    raw_block = "\n".join(front_matter_lines)
    try:
        metadata = yaml.safe_load(raw_block) or {}
    except yaml.YAMLError:
        return {}, source

    # A leading thematic break followed by prose is Markdown, not metadata.
    if not isinstance(metadata, dict):
        return {}, source

    body = "\n".join(lines[closing_index + 1 :])
    if source.endswith("\n"):
        body += "\n"

    return metadata, source[:prefix_len] + body
