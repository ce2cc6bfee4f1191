"""Font-wide engraving defaults.

EngravingDefaults

`text_font_family` (`textFontFamily`)
: Preferred text font families, most preferred first. Generic CSS families
  (``serif``, ``sans-serif``, ...) may appear as the last entry.

`staff_line_thickness`, `stem_thickness`, `beam_thickness`
: Thickness of staff lines, stems, and beams.

`beam_spacing`
: Distance between the inner edge of the primary and outer edge of
  subsequent secondary beams.

`leger_line_thickness`, `leger_line_extension`
: Thickness of a leger line, and how far it extends on either side of a
  notehead, scaled proportionally with the notehead's size.

`slur_endpoint_thickness`, `slur_midpoint_thickness`,
`tie_endpoint_thickness`, `tie_midpoint_thickness`
: Thickness of the ends and the middle of slurs and ties.

`thin_barline_thickness`, `thick_barline_thickness`, `dashed_barline_thickness`
: Thickness of barlines of each kind.

`dashed_barline_dash_length`, `dashed_barline_gap_length`
: Dash and gap lengths of dashed barlines.

`barline_separation`, `thin_thick_barline_separation`, `repeat_barline_dot_separation`
: Distances between the inner edges of adjacent barlines, and between repeat
  dots and the barline they belong to.

`bracket_thickness`, `sub_bracket_thickness`
: Thickness of the vertical line of brackets grouping staves.

`hairpin_thickness`, `octave_line_thickness`, `pedal_line_thickness`,
`repeat_ending_line_thickness`, `arrow_shaft_thickness`, `lyric_line_thickness`,
`text_enclosure_thickness`, `tuplet_bracket_thickness`, `h_bar_thickness`
: Thickness of the lines drawn for the corresponding notation elements. The
  H-bar thickness is the vertical thickness of a multi-bar rest.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from smufl.staff_spaces import StaffSpaces


def _is_unset(value: Any) -> bool:
    # Sequences are atomic: an empty list counts as missing as a whole.
    if value is None:
        return True
    return isinstance(value, (list, tuple)) and not value


def _coalesce(value: Any, fallback: Any) -> Any:
    return fallback if _is_unset(value) else value


class EngravingDefaults(BaseModel):
    """Recommended defaults for line widths and spacing, in staff spaces."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    text_font_family: tuple[str, ...] = Field(default_factory=tuple)
    staff_line_thickness: StaffSpaces | None = None
    stem_thickness: StaffSpaces | None = None
    beam_thickness: StaffSpaces | None = None
    beam_spacing: StaffSpaces | None = None
    leger_line_thickness: StaffSpaces | None = None
    leger_line_extension: StaffSpaces | None = None
    slur_endpoint_thickness: StaffSpaces | None = None
    slur_midpoint_thickness: StaffSpaces | None = None
    tie_endpoint_thickness: StaffSpaces | None = None
    tie_midpoint_thickness: StaffSpaces | None = None
    thin_barline_thickness: StaffSpaces | None = None
    thick_barline_thickness: StaffSpaces | None = None
    dashed_barline_thickness: StaffSpaces | None = None
    dashed_barline_dash_length: StaffSpaces | None = None
    dashed_barline_gap_length: StaffSpaces | None = None
    barline_separation: StaffSpaces | None = None
    thin_thick_barline_separation: StaffSpaces | None = None
    repeat_barline_dot_separation: StaffSpaces | None = None
    bracket_thickness: StaffSpaces | None = None
    sub_bracket_thickness: StaffSpaces | None = None
    hairpin_thickness: StaffSpaces | None = None
    octave_line_thickness: StaffSpaces | None = None
    pedal_line_thickness: StaffSpaces | None = None
    repeat_ending_line_thickness: StaffSpaces | None = None
    arrow_shaft_thickness: StaffSpaces | None = None
    lyric_line_thickness: StaffSpaces | None = None
    text_enclosure_thickness: StaffSpaces | None = None
    tuplet_bracket_thickness: StaffSpaces | None = None
    h_bar_thickness: StaffSpaces | None = None

    def with_defaults(self, defaults: EngravingDefaults) -> EngravingDefaults:
        """Return a copy where every unset field is taken from ``defaults``.

        ``text_font_family`` is replaced as a whole when empty; lists are never
        merged element by element.
        """
        merged = {
            name: _coalesce(getattr(self, name), getattr(defaults, name))
            for name in type(self).model_fields
        }
        return self.model_copy(update=merged)

    def specified(self) -> dict[str, Any]:
        """Return the fields set to a value, keyed by their document name."""
        return {
            field.alias or name: getattr(self, name)
            for name, field in type(self).model_fields.items()
            if not _is_unset(getattr(self, name))
        }


__all__ = ["EngravingDefaults"]
