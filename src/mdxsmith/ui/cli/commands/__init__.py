"""CLI command implementations."""

from __future__ import annotations

from .compile import compile_document
from .extensions import list_extensions


__all__ = ["compile_document", "list_extensions"]
