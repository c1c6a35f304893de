"""Configuration model shared by the dispatcher and the processor factory.

CompileOptions

`format` (`"detect" | "md" | "mdx" | None`)
: Document format. `md` and `mdx` pin the format for every document; `None`
  or `"detect"` classify each document by its file extension.

`md_extensions` (`tuple[str, ...] | None`)
: File extensions treated as plain Markdown. Defaults to `MD_EXTENSIONS`.

`mdx_extensions` (`tuple[str, ...] | None`)
: File extensions treated as MDX. Defaults to `MDX_EXTENSIONS`.

`markdown_extensions` (`tuple[str, ...]`)
: Extra Python-Markdown extensions appended to the per-format defaults.
  Comma or whitespace separated strings are split, as CLI flags supply them.

`development` (`bool`)
: Compile for development; the output is meant for `jsx_dev` at run time.

`output_format` (`"program" | "function-body"`)
: Shape of the compiled output. `function-body` is used when evaluating.

`provider_import_source` (`str | None`)
: Marker telling the compiled output to read components from a provider.

`plugins` (`tuple[Callable, ...]`)
: Post-render steps called as `plugin(html, file)`. Coroutine functions are
  only supported by the asynchronous entry points.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..adapters.markdown import deduplicate_markdown_extensions, normalize_markdown_extensions
from .exceptions import ConfigurationError
from .extnames import MD_EXTENSIONS, MDX_EXTENSIONS, DocumentFormat


__all__ = ["CompileOptions", "coerce_compile_options"]


class CompileOptions(BaseModel):
    """Options consumed at compile time."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    format: Literal["detect", "md", "mdx"] | None = None
    md_extensions: tuple[str, ...] | None = None
    mdx_extensions: tuple[str, ...] | None = None
    markdown_extensions: tuple[str, ...] = Field(default_factory=tuple)
    development: bool = False
    output_format: Literal["program", "function-body"] = "program"
    provider_import_source: str | None = None
    plugins: tuple[Callable[..., Any], ...] = Field(default_factory=tuple)

    @field_validator("md_extensions", "mdx_extensions")
    @classmethod
    def check_extensions(cls, value: tuple[str, ...] | None) -> tuple[str, ...] | None:
        """Require non-empty lists of dotted suffixes, stored lower-cased."""
        if value is None:
            return None
        if not value:
            raise ValueError("extension list must not be empty")
        normalized: list[str] = []
        for extension in value:
            candidate = extension.strip()
            # Documents are classified by their last suffix only.
            if len(candidate) < 2 or not candidate.startswith(".") or candidate.count(".") != 1:
                raise ValueError(f"invalid extension {extension!r}, expected a suffix like '.md'")
            normalized.append(candidate.lower())
        return tuple(normalized)

    @field_validator("markdown_extensions", mode="before")
    @classmethod
    def split_markdown_extensions(cls, value: Any) -> tuple[str, ...]:
        if value is not None and not isinstance(value, str):
            if not isinstance(value, Iterable):
                raise ValueError("expected an extension name or a list of names")
            value = list(value)
            for entry in value:
                if not isinstance(entry, str):
                    raise ValueError(f"extension names must be strings, got {entry!r}")
        return tuple(deduplicate_markdown_extensions(normalize_markdown_extensions(value)))

    @property
    def pinned_format(self) -> DocumentFormat | None:
        """Return the explicit format, or `None` when documents are classified."""
        if self.format in {"md", "mdx"}:
            return DocumentFormat(self.format)
        return None

    @property
    def active_md_extensions(self) -> tuple[str, ...]:
        return self.md_extensions if self.md_extensions is not None else MD_EXTENSIONS

    @property
    def active_mdx_extensions(self) -> tuple[str, ...]:
        return self.mdx_extensions if self.mdx_extensions is not None else MDX_EXTENSIONS

    def with_format(self, fmt: DocumentFormat) -> CompileOptions:
        """Return a copy with the format pinned."""
        return self.model_copy(update={"format": fmt.value})


def coerce_compile_options(
    value: CompileOptions | Mapping[str, Any] | None,
) -> CompileOptions:
    """Build validated options from a model, a mapping, or nothing."""
    if value is None:
        return CompileOptions()
    if isinstance(value, CompileOptions):
        return value
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"Expected compile options as a mapping, got '{type(value).__name__}'."
        )
    try:
        return CompileOptions.model_validate(dict(value))
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'options'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid compile options: {details}") from exc
