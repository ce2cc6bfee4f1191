"""Representation of the metadata file distributed with a SMuFL font.

SMuFL-compliant fonts ship a JSON metadata file describing what cannot be
retrieved from the font itself: recommended line thicknesses for notation
drawn by the engraver (staff lines, barlines, hairpins, ...) and glyph
metrics such as the exact point where a stem meets a notehead.

Decoding is strict about shape but tolerant of vocabulary: a glyph name that
is not in the SMuFL glyph table is kept under an ``UnknownGlyph`` key and
reported through a diagnostic event instead of failing the parse.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import IO, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from smufl.core.diagnostics import (
    NO_UNKNOWN_GLYPHS_EVENT,
    UNKNOWN_GLYPHS_EVENT,
    DiagnosticEmitter,
    LoggingEmitter,
)
from smufl.core.exceptions import MetadataDecodeError
from smufl.engraving_defaults import EngravingDefaults
from smufl.glyph_data import GlyphAdvanceWidths, GlyphAnchors, GlyphBoundingBoxes


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UnknownGlyphReport:
    """Unrecognised glyph names found in one metadata document."""

    font_name: str
    glyphs: tuple[str, ...] = ()

    @classmethod
    def collect(cls, font_name: str, *names: Iterable[str]) -> UnknownGlyphReport:
        """Deduplicate and sort the names gathered from several sections."""
        unique: set[str] = set()
        for group in names:
            unique.update(group)
        return cls(font_name=font_name, glyphs=tuple(sorted(unique)))

    @property
    def event_name(self) -> str:
        return UNKNOWN_GLYPHS_EVENT if self.glyphs else NO_UNKNOWN_GLYPHS_EVENT

    def payload(self) -> dict[str, Any]:
        return {"font_name": self.font_name, "glyphs": list(self.glyphs)}

    def emit(self, emitter: DiagnosticEmitter) -> None:
        """Send the report to ``emitter`` as a single event."""
        emitter.event(self.event_name, self.payload())


class Metadata(BaseModel):
    """The metadata provided with a SMuFL font.

    `font_name` (`fontName`)
    : Name of the font the metadata applies to. Required.

    `engraving_defaults` (`engravingDefaults`)
    : Recommended defaults for line widths and spacing.

    `advance_widths` (`glyphAdvanceWidths`)
    : Advance width of each glyph.

    `anchors` (`glyphsWithAnchors`)
    : Anchor points of each glyph.

    `bounding_boxes` (`glyphBBoxes`)
    : Bounding box of each glyph.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    font_name: str = Field(alias="fontName")
    engraving_defaults: EngravingDefaults = Field(
        default_factory=EngravingDefaults, alias="engravingDefaults"
    )
    advance_widths: GlyphAdvanceWidths = Field(
        default_factory=GlyphAdvanceWidths, alias="glyphAdvanceWidths"
    )
    anchors: GlyphAnchors = Field(default_factory=GlyphAnchors, alias="glyphsWithAnchors")
    bounding_boxes: GlyphBoundingBoxes = Field(
        default_factory=GlyphBoundingBoxes, alias="glyphBBoxes"
    )

    @classmethod
    def from_json(
        cls, data: str | bytes | bytearray, *, emitter: DiagnosticEmitter | None = None
    ) -> Metadata:
        """Decode metadata from a JSON document.

        Unknown glyph names are reported to ``emitter`` (logging by default).
        Raises :class:`~smufl.core.exceptions.MetadataDecodeError` when the
        document is malformed or lacks ``fontName``.
        """
        try:
            metadata = cls.model_validate_json(data)
        except ValidationError as exc:
            logger.debug("Failed to decode SMuFL metadata", exc_info=exc)
            raise MetadataDecodeError.from_error_details(
                "Invalid SMuFL metadata", exc.errors(include_url=False)
            ) from exc

        metadata.unknown_glyph_report().emit(emitter or LoggingEmitter(logger_obj=logger))
        return metadata

    @classmethod
    def from_reader(
        cls, reader: IO[bytes] | IO[str], *, emitter: DiagnosticEmitter | None = None
    ) -> Metadata:
        """Decode metadata from an open stream, read to completion."""
        return cls.from_json(reader.read(), emitter=emitter)

    @classmethod
    def from_path(cls, path: str | Path, *, emitter: DiagnosticEmitter | None = None) -> Metadata:
        """Decode the metadata file at ``path``."""
        with Path(path).open("rb") as handle:
            return cls.from_reader(handle, emitter=emitter)

    def with_defaults(self, defaults: Metadata) -> Metadata:
        """Combine ``self`` with ``defaults``, which only fills missing data.

        The font name is always kept from ``self``.
        """
        return self.model_copy(
            update={
                "engraving_defaults": self.engraving_defaults.with_defaults(
                    defaults.engraving_defaults
                ),
                "advance_widths": self.advance_widths.with_defaults(defaults.advance_widths),
                "anchors": self.anchors.with_defaults(defaults.anchors),
                "bounding_boxes": self.bounding_boxes.with_defaults(defaults.bounding_boxes),
            }
        )

    def unknown_glyph_report(self) -> UnknownGlyphReport:
        return UnknownGlyphReport.collect(
            self.font_name,
            self.advance_widths.unknown_glyphs(),
            self.anchors.unknown_glyphs(),
            self.bounding_boxes.unknown_glyphs(),
        )

    def unknown_glyphs(self) -> list[str]:
        """Sorted, deduplicated names of glyphs whose name was not recognised."""
        return list(self.unknown_glyph_report().glyphs)

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise back to the metadata document layout."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


__all__ = ["Metadata", "UnknownGlyphReport"]
