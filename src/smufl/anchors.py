"""Anchor points attached to individual glyphs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from smufl.coord import Coord


class Anchors(BaseModel):
    """Anchor data for one glyph.

    Every anchor is optional; a missing anchor means the font does not specify
    it, not that it sits at the origin. Coordinates are relative to the glyph
    origin and expressed in staff spaces.

    splitStemUpSE / splitStemUpSW
    : Bottom corner (south-east / south-west) at which an angled upward stem
      connecting a notehead to a vertical stem on its left / right should start.

    splitStemDownNE / splitStemDownNW
    : Top corner (north-east / north-west) at which an angled downward stem
      connecting a notehead to a vertical stem on its left / right should start.

    stemUpSE / stemDownNW
    : Where the bottom right corner of an up-stem, or the top left corner of a
      down-stem, meets the notehead.

    stemUpNW / stemDownSW
    : Where the top left corner of an up-stem, or the bottom left corner of a
      down-stem, meets a flag.

    nominalWidth
    : Width in staff spaces of the glyph used for spacing, when it differs
      from the advance width (noteheads in particular).

    numeralTop / numeralBottom
    : Where to centre a numeral above or below a glyph (tuplets, fingerings).

    cutOutNE / cutOutSE / cutOutSW / cutOutNW
    : Corners of the rectangular cut-outs used for kerning accidentals and
      other glyphs against each other.

    graceNoteSlashSW / graceNoteSlashNE / graceNoteSlashNW / graceNoteSlashSE
    : End points of the slash drawn through a grace note stem, for stem-up
      (SW to NE) and stem-down (NW to SE) grace notes.

    repeatOffset
    : Horizontal offset between repeated glyphs in a series (wiggle lines).

    noteheadOrigin
    : Left-hand edge of the notehead in a precomposed note with a stem.

    opticalCenter
    : Optical centre of the glyph, for centring dynamics and similar marks.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    split_stem_up_se: Coord | None = Field(default=None, alias="splitStemUpSE")
    split_stem_up_sw: Coord | None = Field(default=None, alias="splitStemUpSW")
    split_stem_down_ne: Coord | None = Field(default=None, alias="splitStemDownNE")
    split_stem_down_nw: Coord | None = Field(default=None, alias="splitStemDownNW")
    stem_up_se: Coord | None = Field(default=None, alias="stemUpSE")
    stem_down_nw: Coord | None = Field(default=None, alias="stemDownNW")
    stem_up_nw: Coord | None = Field(default=None, alias="stemUpNW")
    stem_down_sw: Coord | None = Field(default=None, alias="stemDownSW")
    nominal_width: Coord | None = None
    numeral_top: Coord | None = None
    numeral_bottom: Coord | None = None
    cut_out_ne: Coord | None = Field(default=None, alias="cutOutNE")
    cut_out_se: Coord | None = Field(default=None, alias="cutOutSE")
    cut_out_sw: Coord | None = Field(default=None, alias="cutOutSW")
    cut_out_nw: Coord | None = Field(default=None, alias="cutOutNW")
    grace_note_slash_sw: Coord | None = Field(default=None, alias="graceNoteSlashSW")
    grace_note_slash_ne: Coord | None = Field(default=None, alias="graceNoteSlashNE")
    grace_note_slash_nw: Coord | None = Field(default=None, alias="graceNoteSlashNW")
    grace_note_slash_se: Coord | None = Field(default=None, alias="graceNoteSlashSE")
    repeat_offset: Coord | None = None
    notehead_origin: Coord | None = None
    optical_center: Coord | None = None


__all__ = ["Anchors"]
