"""Split evaluate options into compile-time and run-time configuration.

`fragment`, `jsx`, and `jsxs` are needed to run code compiled in production
mode (`development=False`). `fragment` and `jsx_dev` are needed for code
compiled in development mode (`development=True`). `use_mdx_components` is
needed when the code reads components from a provider, which is requested at
compile time through `provider_import_source`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import ConfigurationError


__all__ = [
    "PROVIDER_IMPORT_SENTINEL",
    "RUNTIME_FIELDS",
    "EvaluateOptions",
    "RunOptions",
    "resolve_evaluate_options",
]


RUNTIME_FIELDS = ("fragment", "jsx", "jsx_dev", "jsxs", "use_mdx_components")
PROVIDER_IMPORT_SENTINEL = "#"


@dataclass(slots=True, frozen=True)
class RunOptions:
    """Functions needed to run compiled code."""

    fragment: Any
    jsx: Callable[..., Any] | None = None
    jsx_dev: Callable[..., Any] | None = None
    jsxs: Callable[..., Any] | None = None
    use_mdx_components: Callable[[], Mapping[str, Any]] | None = None


@dataclass(slots=True, frozen=True)
class EvaluateOptions:
    """Result of splitting evaluate options."""

    compiletime: dict[str, Any]
    runtime: RunOptions


def resolve_evaluate_options(options: Mapping[str, Any] | None) -> EvaluateOptions:
    """Split compile-time options from run-time options, validating the latter."""
    rest = dict(options or {})
    fragment = rest.pop("fragment", None)
    jsx = rest.pop("jsx", None)
    jsx_dev = rest.pop("jsx_dev", None)
    jsxs = rest.pop("jsxs", None)
    use_mdx_components = rest.pop("use_mdx_components", None)
    development = bool(rest.pop("development", False))

    if fragment is None:
        raise ConfigurationError("Expected `fragment` given to `evaluate`")
    if development:
        if jsx_dev is None:
            raise ConfigurationError("Expected `jsx_dev` given to `evaluate`")
    else:
        if jsx is None:
            raise ConfigurationError("Expected `jsx` given to `evaluate`")
        if jsxs is None:
            raise ConfigurationError("Expected `jsxs` given to `evaluate`")

    compiletime = {
        **rest,
        "development": development,
        "output_format": "function-body",
        "provider_import_source": (
            PROVIDER_IMPORT_SENTINEL if use_mdx_components is not None else None
        ),
    }
    runtime = RunOptions(
        fragment=fragment,
        jsx=jsx,
        jsx_dev=jsx_dev,
        jsxs=jsxs,
        use_mdx_components=use_mdx_components,
    )
    return EvaluateOptions(compiletime=compiletime, runtime=runtime)
