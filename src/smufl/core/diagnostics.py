"""Diagnostic sinks used while loading metadata.

Loading code never logs directly; it reports to a :class:`DiagnosticEmitter`
passed by the caller. :class:`LoggingEmitter` is used when none is supplied,
:class:`NullEmitter` silences everything, and the CLI installs its own Rich
emitter.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)

UNKNOWN_GLYPHS_EVENT = "unknown_glyphs"
NO_UNKNOWN_GLYPHS_EVENT = "no_unknown_glyphs"

# Events that signal a problem with the input rather than progress.
WARNING_EVENTS = frozenset({UNKNOWN_GLYPHS_EVENT})


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Receiver of warnings, errors, and structured events."""

    debug_enabled: bool

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that discards every diagnostic."""

    debug_enabled: bool = False

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter writing to a :mod:`logging` logger.

    Events with a readable summary are logged at WARNING when listed in
    :data:`WARNING_EVENTS` and at INFO otherwise; the rest go to DEBUG as raw
    payloads.
    """

    def __init__(
        self, *, logger_obj: logging.Logger | None = None, debug_enabled: bool = False
    ) -> None:
        self._logger = logger_obj or logger
        self.debug_enabled = debug_enabled

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self._logger.warning(message, exc_info=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self._logger.error(message, exc_info=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message is None:
            self._logger.debug("diagnostic event %s: %s", name, dict(payload))
        elif name in WARNING_EVENTS:
            self._logger.warning(message)
        else:
            self._logger.info(message)


def _font(payload: Mapping[str, Any]) -> str:
    return payload.get("font_name") or "<unnamed font>"


_EVENT_FORMATTERS: dict[str, Callable[[Mapping[str, Any]], str]] = {
    UNKNOWN_GLYPHS_EVENT: lambda payload: (
        f"Unknown glyphs found in {_font(payload)}: {', '.join(payload.get('glyphs') or [])}"
    ),
    NO_UNKNOWN_GLYPHS_EVENT: lambda payload: f"No unknown glyphs found in {_font(payload)}",
}


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a one-line summary of a known event, or ``None``."""
    formatter = _EVENT_FORMATTERS.get(name)
    return formatter(payload) if formatter else None


__all__ = [
    "NO_UNKNOWN_GLYPHS_EVENT",
    "UNKNOWN_GLYPHS_EVENT",
    "WARNING_EVENTS",
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "format_event_message",
]
