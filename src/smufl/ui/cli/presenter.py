"""Rich presenters for metadata summaries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich import box
from rich.table import Table

from smufl.anchors import Anchors
from smufl.bounding_box import BoundingBox
from smufl.coord import Coord
from smufl.glyph_key import glyph_name, resolve_glyph
from smufl.metadata import Metadata
from smufl.staff_spaces import StaffSpaces

from .state import CLIState


def _build_table(*, title: str | None, columns: Sequence[str]) -> Table:
    """Create a Rich table with the house style."""
    table = Table(title=title or None, box=box.SQUARE, show_edge=True, header_style="bold cyan")
    for col in columns:
        table.add_column(col)
    return table


def _format_value(value: Any) -> str:
    if isinstance(value, StaffSpaces):
        return f"{value.value:g}"
    if isinstance(value, Coord):
        return f"({value.x.value:g}, {value.y.value:g})"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value) or "-"
    return str(value)


def _glyph_rows(metadata: Metadata, name: str) -> list[tuple[str, str]]:
    key = resolve_glyph(name)
    rows: list[tuple[str, str]] = []

    width = metadata.advance_widths.get(key)
    if width is not None:
        rows.append(("advance width", _format_value(width)))

    bbox: BoundingBox | None = metadata.bounding_boxes.get(key)
    if bbox is not None:
        rows.append(("bBoxNE", _format_value(bbox.ne)))
        rows.append(("bBoxSW", _format_value(bbox.sw)))

    anchors: Anchors | None = metadata.anchors.get(key)
    if anchors is not None:
        for anchor, coord in anchors.model_dump(by_alias=True, exclude_none=True).items():
            rows.append((anchor, f"({coord[0]:g}, {coord[1]:g})"))

    return rows


def present_metadata_summary(
    state: CLIState, metadata: Metadata, glyphs: Sequence[str] = ()
) -> None:
    """Print engraving defaults, section sizes, and requested glyph metrics."""
    console = state.console
    console.print(f"[bold]{metadata.font_name}[/bold]")

    defaults = _build_table(title="Engraving Defaults", columns=("Setting", "Value"))
    specified = metadata.engraving_defaults.specified()
    if not specified:
        defaults.add_row("-", "No engraving defaults")
    for setting, value in specified.items():
        defaults.add_row(setting, _format_value(value))
    console.print(defaults)

    sections = _build_table(title="Glyph Sections", columns=("Section", "Glyphs", "Unknown"))
    for label, section in (
        ("glyphAdvanceWidths", metadata.advance_widths),
        ("glyphsWithAnchors", metadata.anchors),
        ("glyphBBoxes", metadata.bounding_boxes),
    ):
        unknown = sum(1 for _ in section.unknown_glyphs())
        sections.add_row(label, str(len(section)), str(unknown))
    console.print(sections)

    for name in glyphs:
        table = _build_table(title=glyph_name(resolve_glyph(name)), columns=("Metric", "Value"))
        rows = _glyph_rows(metadata, name)
        if not rows:
            table.add_row("-", "No metrics for this glyph")
        for metric, value in rows:
            table.add_row(metric, value)
        console.print(table)


def present_unknown_glyphs(state: CLIState, font_name: str, unknowns: Sequence[str]) -> None:
    """Print the glyph names that are not part of the SMuFL glyph table."""
    if not unknowns:
        state.console.print(f"No unknown glyphs in {font_name}.")
        return
    for name in unknowns:
        state.console.print(name, highlight=False)


__all__ = ["present_metadata_summary", "present_unknown_glyphs"]
