"""Rich-backed diagnostic emitter for CLI commands."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from smufl.core.diagnostics import WARNING_EVENTS, DiagnosticEmitter, format_event_message

from .state import CLIState, emit_error, emit_warning, get_cli_state, render_message


class CliEmitter(DiagnosticEmitter):
    """Record events on the CLI state and print their summaries.

    Warning events (unknown glyph names) are always shown on stderr; other
    summaries only with ``-v``.
    """

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()
        self.debug_enabled = self._state.show_tracebacks

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        emit_error(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self._state.record_event(name, payload)
        message = format_event_message(name, payload)
        if message is None:
            return
        if name in WARNING_EVENTS:
            emit_warning(message)
        elif self._state.verbosity >= 1:
            render_message("info", message)


__all__ = ["CliEmitter"]
