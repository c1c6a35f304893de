from __future__ import annotations

import logging

import pytest

from mdxsmith.core.diagnostics import LoggingEmitter, format_event_message
from mdxsmith.core.dispatch import create_format_aware_processors
from mdxsmith.core.exceptions import (
    ConfigurationError,
    ProcessingError,
    exception_hint,
    exception_messages,
)
from mdxsmith.ui.cli.diagnostics import CliEmitter
from mdxsmith.ui.cli.state import render_message, set_cli_state


def _raise_nested_error() -> None:
    try:
        raise ConfigurationError("Unsupported document extension '.txt'")
    except ConfigurationError as exc:
        raise ProcessingError("compile failed") from exc


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.ERROR):
        emitter.error("boom")
    assert any(record.message == "boom" for record in caplog.records)
    assert emitter.debug_enabled is True


def test_logging_emitter_reports_dispatch(caplog: pytest.LogCaptureFixture) -> None:
    processors = create_format_aware_processors(emitter=LoggingEmitter())

    with caplog.at_level(logging.INFO):
        processors.process_sync({"value": "# Hi", "path": "intro.md"})
        processors.process_sync({"value": "# Hi", "path": "outro.md"})

    messages = [record.message for record in caplog.records]
    assert "Built md processor" in messages
    assert "Compiling intro.md as md" in messages
    assert "Compiling outro.md as md (cached)" in messages


def test_format_event_message_ignores_unknown_events() -> None:
    assert format_event_message("custom", {"flag": True}) is None
    assert (
        format_event_message("processor_created", {"format": "mdx", "markdown_extensions": ["toc"]})
        == "Built mdx processor (1 markdown extensions)"
    )
    assert format_event_message("document_dispatched", {"format": "md"}) == (
        "Compiling <memory> as md"
    )


def test_cli_emitter_bridges_state(capsys: pytest.CaptureFixture[str]) -> None:
    state = set_cli_state(verbosity=1, debug=False)
    emitter = CliEmitter(state=state)

    emitter.warning("Heads up", exc=None)
    emitter.error("Boom", exc=None)
    emitter.event("processor_created", {"format": "md", "markdown_extensions": []})
    emitter.event("custom", {"flag": True})

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "warning: Heads up" in captured.err
    assert "error: Boom" in captured.err
    assert "Built md processor" in captured.err
    assert "flag" not in captured.err


def test_cli_emitter_hides_events_when_quiet(capsys: pytest.CaptureFixture[str]) -> None:
    emitter = CliEmitter(state=set_cli_state(verbosity=0, debug=True))

    emitter.event("processor_created", {"format": "mdx", "markdown_extensions": []})

    assert capsys.readouterr().err == ""
    assert emitter.debug_enabled is True


def test_render_message_lists_the_cause_chain(capsys: pytest.CaptureFixture[str]) -> None:
    set_cli_state(verbosity=2, debug=False)

    with pytest.raises(ProcessingError) as info:
        _raise_nested_error()
    render_message("error", str(info.value), exception=info.value)

    err = capsys.readouterr().err
    assert "error: compile failed" in err
    assert "type: ProcessingError" in err
    assert "cause: Unsupported document extension '.txt'" in err
    assert "caused by:" in err


def test_render_message_skips_details_without_verbosity(
    capsys: pytest.CaptureFixture[str],
) -> None:
    set_cli_state(verbosity=0, debug=False)

    with pytest.raises(ProcessingError) as info:
        _raise_nested_error()
    render_message("error", str(info.value), exception=info.value)

    err = capsys.readouterr().err
    assert "error: compile failed" in err
    assert "type:" not in err
    assert "caused by:" not in err


def test_dispatcher_logs_through_default_emitter(caplog: pytest.LogCaptureFixture) -> None:
    processors = create_format_aware_processors()

    with caplog.at_level(logging.INFO):
        processors.process_sync({"value": "# Hi", "path": "plain.md"})

    messages = [record.message for record in caplog.records]
    assert "Built md processor" in messages
    assert "Compiling plain.md as md" in messages


def test_exception_messages_walk_the_cause_chain() -> None:
    with pytest.raises(ProcessingError) as info:
        _raise_nested_error()

    assert exception_messages(info.value) == [
        "compile failed",
        "Unsupported document extension '.txt'",
    ]
    assert exception_hint(info.value) == "Unsupported document extension '.txt'"


def test_configuration_error_is_a_value_error() -> None:
    assert issubclass(ConfigurationError, ValueError)
