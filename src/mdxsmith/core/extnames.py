"""Document formats and the file extensions recognised for each."""

from __future__ import annotations

from enum import Enum


__all__ = ["MDX_EXTENSIONS", "MD_EXTENSIONS", "DocumentFormat"]


class DocumentFormat(str, Enum):
    """Dialects handled by the compiler."""

    MD = "md"
    MDX = "mdx"


MD_EXTENSIONS: tuple[str, ...] = (
    ".md",
    ".markdown",
    ".mdown",
    ".mkdn",
    ".mkd",
    ".mdwn",
    ".mkdown",
    ".ron",
)

MDX_EXTENSIONS: tuple[str, ...] = (".mdx",)
