"""Typer application wiring for the smufl CLI."""

from __future__ import annotations

from typing import Annotated

import typer

from smufl.version import get_version

from .commands import show, unknowns
from .state import debug_enabled, emit_error, get_cli_state, set_cli_state


DIAGNOSTICS_PANEL = "Diagnostics"

app = typer.Typer(
    help="Inspect SMuFL font metadata files.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


@app.callback()
def configure(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Show full tracebacks when an unexpected error occurs.",
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Print the installed version and exit.",
        ),
    ] = False,
) -> None:
    """Inspect SMuFL font metadata files."""
    set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)


app.command()(show)
app.command()(unknowns)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - last-resort reporting
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
