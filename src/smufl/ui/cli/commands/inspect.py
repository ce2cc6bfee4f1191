"""Commands printing the content of SMuFL metadata files."""

from __future__ import annotations

from pathlib import Path

import typer

from smufl.core.config import MetadataSource, load_metadata
from smufl.core.diagnostics import NO_UNKNOWN_GLYPHS_EVENT, UNKNOWN_GLYPHS_EVENT
from smufl.core.exceptions import SmuflError
from smufl.metadata import Metadata

from .._options import ConfigOption, FallbackOption, GlyphOption, MetadataPathArgument
from ..diagnostics import CliEmitter
from ..presenter import present_metadata_summary, present_unknown_glyphs
from ..state import CLIState, debug_enabled, emit_error, get_cli_state


def _resolve_source(
    metadata_path: Path | None, fallbacks: list[Path] | None, config: Path | None
) -> MetadataSource:
    if config is not None:
        if metadata_path is not None or fallbacks:
            raise typer.BadParameter("--config cannot be combined with METADATA or --fallback.")
        return MetadataSource.from_file(config)
    if metadata_path is None:
        raise typer.BadParameter("Provide a METADATA file or --config.")
    return MetadataSource(path=metadata_path, fallbacks=list(fallbacks or []))


def _load(source: MetadataSource) -> Metadata:
    emitter = CliEmitter(get_cli_state())
    try:
        return load_metadata(source, emitter=emitter)
    except SmuflError as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


def _reported_unknowns(state: CLIState) -> list[str]:
    # Parsing reports once, through the emitter; reuse that report.
    state.consume_events(NO_UNKNOWN_GLYPHS_EVENT)
    reports = state.consume_events(UNKNOWN_GLYPHS_EVENT)
    return sorted({name for report in reports for name in report.get("glyphs", [])})


def show(
    metadata_path: MetadataPathArgument = None,
    fallbacks: FallbackOption = None,
    config: ConfigOption = None,
    glyphs: GlyphOption = None,
) -> None:
    """Summarise a metadata file, optionally backed by fallback files."""
    try:
        source = _resolve_source(metadata_path, fallbacks, config)
    except SmuflError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    metadata = _load(source)
    present_metadata_summary(get_cli_state(), metadata, glyphs or [])


def unknowns(metadata_path: MetadataPathArgument = None) -> None:
    """List glyph names that are not part of the SMuFL glyph table."""
    if metadata_path is None:
        raise typer.BadParameter("Provide a METADATA file.")
    state = get_cli_state()
    try:
        metadata = Metadata.from_path(metadata_path, emitter=CliEmitter(state))
    except SmuflError as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    present_unknown_glyphs(state, metadata.font_name, _reported_unknowns(state))


__all__ = ["show", "unknowns"]
