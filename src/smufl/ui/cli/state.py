"""Per-invocation CLI state and stderr rendering helpers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextvars import ContextVar
from dataclasses import dataclass, field
import sys
from typing import Any, TextIO

import click
from rich.console import Console
from rich.text import Text


__all__ = [
    "CLIState",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]

_LEVEL_STYLES = {"warning": "yellow", "error": "red"}


def _console_for(cached: Console | None, stream: TextIO, **options: Any) -> Console:
    # CliRunner and capsys swap the standard streams between invocations.
    if cached is not None and cached.file is stream:
        return cached
    return Console(file=stream, **options)


@dataclass(slots=True)
class CLIState:
    """Verbosity, traceback policy, and diagnostic events of one invocation."""

    verbosity: int = 0
    show_tracebacks: bool = False
    events: dict[str, list[dict[str, Any]]] = field(default_factory=dict, init=False)
    _console: Console | None = field(default=None, init=False, repr=False)
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def console(self) -> Console:
        self._console = _console_for(self._console, sys.stdout)
        return self._console

    @property
    def err_console(self) -> Console:
        self._err_console = _console_for(self._err_console, sys.stderr, highlight=False)
        return self._err_console

    def record_event(self, name: str, payload: Mapping[str, Any] | None = None) -> None:
        self.events.setdefault(name, []).append(dict(payload or {}))

    def consume_events(self, name: str) -> list[dict[str, Any]]:
        """Return the events recorded under ``name`` and forget them."""
        return self.events.pop(name, [])


_STATE_VAR: ContextVar[CLIState | None] = ContextVar("smufl_cli_state", default=None)


def _state_from_context(ctx: click.Context) -> CLIState | None:
    current: click.Context | None = ctx
    while current is not None:
        if isinstance(current.obj, CLIState):
            return current.obj
        current = current.parent
    return None


def get_cli_state(ctx: click.Context | None = None, *, create: bool = True) -> CLIState:
    """Return the state of the running command.

    The state lives on the outermost Click context that carries one; outside
    of a command (library use, tests) the last state seen in this context
    variable is reused.
    """
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None:
        state = _state_from_context(ctx)
        if state is None and create:
            state = ctx.obj = CLIState()
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
    state = get_cli_state(ctx)
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
    if debug is not None:
        state.show_tracebacks = debug
    return state


def _causes(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current = exc.__cause__ or exc.__context__
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _exception_details(exception: BaseException, message: str, verbosity: int) -> list[str]:
    lines: list[str] = []
    detail = str(exception).strip()
    if detail and detail not in message:
        lines.append(detail)
    lines.append(f"type: {type(exception).__name__}")
    if verbosity >= 2:
        causes = [f"  {type(cause).__name__}: {cause}" for cause in _causes(exception)]
        if causes:
            lines.append("caused by:")
            lines.extend(causes)
    return lines


def render_message(level: str, message: str, *, exception: BaseException | None = None) -> None:
    """Print ``message``; warnings and errors go to stderr with optional detail."""
    state = get_cli_state()
    if level == "info":
        state.console.log(message)
        return

    style = _LEVEL_STYLES.get(level, "red")
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
    """Whether ``--debug`` asked for full tracebacks."""
    try:
        return get_cli_state(create=False).show_tracebacks
    except RuntimeError:
        return False
