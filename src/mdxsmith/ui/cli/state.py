"""Verbosity and console state shared by the CLI commands."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import sys
from typing import TYPE_CHECKING

import click

from mdxsmith.core.exceptions import exception_hint, exception_messages


if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "CLIState",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]


@dataclass(slots=True)
class CLIState:
    """Options set by the global CLI flags."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def err_console(self) -> Console:
        """Console bound to the current stderr stream; stdout carries compiled output."""
        from rich.console import Console

        if self._err_console is None or self._err_console.file is not sys.stderr:
            self._err_console = Console(file=sys.stderr, highlight=False)
        return self._err_console


_STATE_VAR: ContextVar[CLIState | None] = ContextVar("mdxsmith_cli_state", default=None)


def get_cli_state(ctx: click.Context | None = None, *, create: bool = True) -> CLIState:
    """Return the state attached to the active click context, or the last one seen."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None:
        state = ctx.find_object(CLIState)
        if state is None and create:
            state = ctx.ensure_object(CLIState)
        if state is not None:
            _STATE_VAR.set(state)
            return state

    state = _STATE_VAR.get()
    if state is None:
        if not create:
            raise RuntimeError("CLI state is not initialised for this context.")
        state = CLIState()
        _STATE_VAR.set(state)
    return state


def set_cli_state(
    *,
    ctx: click.Context | None = None,
    verbosity: int | None = None,
    debug: bool | None = None,
) -> CLIState:
    """Apply the global flags, returning the current state."""
    state = get_cli_state(ctx)
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
    if debug is not None:
        state.show_tracebacks = debug
    return state


def _exception_details(exception: BaseException, message: str, verbosity: int) -> list[str]:
    details = [f"type: {type(exception).__name__}"]
    hint = exception_hint(exception)
    if hint and hint not in message:
        details.append(f"cause: {hint}")
    if verbosity >= 2:
        causes = exception_messages(exception)[1:]
        if causes:
            details.append("caused by:")
            details.extend(f"  {cause}" for cause in causes)
    return details


def render_message(
    level: str,
    message: str,
    *,
    exception: BaseException | None = None,
) -> None:
    """Print a diagnostic to stderr; exception details follow the verbosity."""
    state = get_cli_state()

    if level == "info":
        state.err_console.log(message)
        return

    from rich.text import Text

    style = "red" if level == "error" else "yellow"
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))
    if exception is not None and state.verbosity >= 1:
        text.append("\n")
        text.append("\n".join(_exception_details(exception, message, state.verbosity)), style=style)
    state.err_console.print(text)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    render_message("warning", message, exception=exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    render_message("error", message, exception=exception)


def debug_enabled() -> bool:
    """Return whether full tracebacks should be displayed."""
    try:
        return get_cli_state(create=False).show_tracebacks
    except RuntimeError:
        return False
