"""Typer argument and option types shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"

# Every path the CLI reads must be an existing, readable file.
_EXISTING_FILE: dict[str, Any] = {
    "exists": True,
    "file_okay": True,
    "dir_okay": False,
    "readable": True,
    "resolve_path": True,
    "rich_help_panel": INPUTS_PANEL,
}

MetadataPathArgument = Annotated[
    Path | None,
    typer.Argument(
        metavar="METADATA",
        help="SMuFL metadata JSON file, such as bravura_metadata.json.",
        **_EXISTING_FILE,
    ),
]

FallbackOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--fallback",
        "-f",
        help="Metadata file filling values missing from METADATA. Repeat to chain, nearest first.",
        **_EXISTING_FILE,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="TOML file with a [metadata] table naming the metadata file and its fallbacks.",
        **_EXISTING_FILE,
    ),
]

GlyphOption = Annotated[
    list[str] | None,
    typer.Option(
        "--glyph",
        "-g",
        help="SMuFL glyph name whose metrics should be printed. Repeatable.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]
