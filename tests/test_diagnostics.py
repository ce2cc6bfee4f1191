from __future__ import annotations

import logging

import pytest

from smufl.core.diagnostics import (
    DiagnosticEmitter,
    LoggingEmitter,
    NullEmitter,
    format_event_message,
)
from smufl.core.exceptions import MetadataDecodeError
from smufl.ui.cli.diagnostics import CliEmitter
from smufl.ui.cli.state import CLIState


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    emitter = NullEmitter()
    with caplog.at_level(logging.WARNING):
        emitter.warning("nothing to see")
        emitter.error("still quiet")
    assert not caplog.records
    emitter.event("ignored", {"value": 1})
    assert emitter.debug_enabled is False


def test_emitters_satisfy_protocol() -> None:
    assert isinstance(NullEmitter(), DiagnosticEmitter)
    assert isinstance(LoggingEmitter(), DiagnosticEmitter)


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.ERROR):
        emitter.error("boom")
    assert any(record.message == "boom" for record in caplog.records)
    assert emitter.debug_enabled is True


def test_logging_emitter_event_levels(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("smufl.tests")
    emitter = LoggingEmitter(logger_obj=logger)

    with caplog.at_level(logging.DEBUG, logger="smufl.tests"):
        emitter.event("unknown_glyphs", {"font_name": "Bravura", "glyphs": ["a", "b"]})
        emitter.event("no_unknown_glyphs", {"font_name": "Bravura", "glyphs": []})
        emitter.event("custom", {"flag": True})

    levels = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert levels == [
        (logging.WARNING, "Unknown glyphs found in Bravura: a, b"),
        (logging.INFO, "No unknown glyphs found in Bravura"),
        (logging.DEBUG, "diagnostic event custom: {'flag': True}"),
    ]


def test_format_event_message_ignores_other_events() -> None:
    assert format_event_message("custom", {}) is None
    assert format_event_message("unknown_glyphs", {"glyphs": ["x"]}) == (
        "Unknown glyphs found in <unnamed font>: x"
    )


def test_cli_emitter_bridges_state(capsys: pytest.CaptureFixture[str]) -> None:
    state = CLIState(verbosity=1)
    emitter = CliEmitter(state=state)

    emitter.warning("Heads up", exc=None)
    emitter.error("Boom", exc=None)
    emitter.event("custom", {"flag": True})
    emitter.event("unknown_glyphs", {"font_name": "Bravura", "glyphs": ["myGlyph"]})

    captured = capsys.readouterr()
    combined_output = f"{captured.out}\n{captured.err}"
    assert "Heads up" in combined_output
    assert "Boom" in combined_output
    assert "Unknown glyphs found in Bravura: myGlyph" in captured.err
    assert state.consume_events("custom") == [{"flag": True}]
    assert state.consume_events("unknown_glyphs") == [
        {"font_name": "Bravura", "glyphs": ["myGlyph"]}
    ]


def test_cli_emitter_hides_info_events_when_quiet(capsys: pytest.CaptureFixture[str]) -> None:
    state = CLIState()
    emitter = CliEmitter(state=state)

    emitter.event("no_unknown_glyphs", {"font_name": "Bravura", "glyphs": []})

    captured = capsys.readouterr()
    assert "No unknown glyphs" not in captured.out
    assert state.consume_events("no_unknown_glyphs") == [{"font_name": "Bravura", "glyphs": []}]


def test_decode_error_message_lists_locations() -> None:
    error = MetadataDecodeError(
        "Invalid SMuFL metadata",
        [("fontName", "Field required"), ("", "Invalid JSON")],
    )

    assert str(error) == "Invalid SMuFL metadata: fontName: Field required; Invalid JSON"
    assert error.errors == (("fontName", "Field required"), ("", "Invalid JSON"))


def test_decode_error_from_pydantic_details() -> None:
    error = MetadataDecodeError.from_error_details(
        "Invalid SMuFL metadata",
        [{"loc": ("glyphBBoxes", "noteheadBlack", "bBoxNE"), "msg": "Value error"}],
    )

    assert error.errors == (("glyphBBoxes.noteheadBlack.bBoxNE", "Value error"),)
