from __future__ import annotations

from pydantic import ValidationError
import pytest

from smufl.engraving_defaults import EngravingDefaults
from smufl.staff_spaces import StaffSpaces


BRAVURA_DEFAULTS = {
    "arrowShaftThickness": 0.16,
    "barlineSeparation": 0.4,
    "beamSpacing": 0.25,
    "beamThickness": 0.5,
    "bracketThickness": 0.5,
    "dashedBarlineDashLength": 0.5,
    "dashedBarlineGapLength": 0.25,
    "dashedBarlineThickness": 0.16,
    "hBarThickness": 1.0,
    "hairpinThickness": 0.16,
    "legerLineExtension": 0.4,
    "legerLineThickness": 0.16,
    "lyricLineThickness": 0.16,
    "octaveLineThickness": 0.16,
    "pedalLineThickness": 0.16,
    "repeatBarlineDotSeparation": 0.16,
    "repeatEndingLineThickness": 0.16,
    "slurEndpointThickness": 0.1,
    "slurMidpointThickness": 0.22,
    "staffLineThickness": 0.13,
    "stemThickness": 0.12,
    "subBracketThickness": 0.16,
    "textEnclosureThickness": 0.16,
    "textFontFamily": ["Academico", "Century Schoolbook", "Edwin", "serif"],
    "thickBarlineThickness": 0.5,
    "thinBarlineThickness": 0.16,
    "thinThickBarlineSeparation": 0.4,
    "tieEndpointThickness": 0.1,
    "tieMidpointThickness": 0.22,
    "tupletBracketThickness": 0.16,
}


@pytest.fixture
def bravura() -> EngravingDefaults:
    return EngravingDefaults.model_validate(BRAVURA_DEFAULTS)


def test_decodes_every_documented_name(bravura: EngravingDefaults) -> None:
    assert bravura.staff_line_thickness == StaffSpaces(0.13)
    assert bravura.h_bar_thickness == StaffSpaces(1.0)
    assert bravura.thin_thick_barline_separation == StaffSpaces(0.4)
    assert bravura.text_font_family == ("Academico", "Century Schoolbook", "Edwin", "serif")
    assert bravura.specified().keys() == BRAVURA_DEFAULTS.keys()


def test_default_has_nothing_specified() -> None:
    defaults = EngravingDefaults()

    assert defaults.text_font_family == ()
    assert defaults.stem_thickness is None
    assert defaults.specified() == {}


def test_unrecognised_names_are_ignored() -> None:
    defaults = EngravingDefaults.model_validate({"stemThickness": 0.12, "futureSetting": 1})

    assert defaults.specified() == {"stemThickness": StaffSpaces(0.12)}


def test_wrong_value_type_is_rejected() -> None:
    with pytest.raises(ValidationError):
        EngravingDefaults.model_validate({"stemThickness": "thick"})


def test_default_is_identity_for_merge(bravura: EngravingDefaults) -> None:
    assert EngravingDefaults().with_defaults(bravura) == bravura
    assert bravura.with_defaults(EngravingDefaults()) == bravura


def test_receiver_fields_win() -> None:
    primary = EngravingDefaults(stem_thickness=StaffSpaces(0.1))
    fallback = EngravingDefaults(
        stem_thickness=StaffSpaces(0.2), beam_thickness=StaffSpaces(0.5)
    )

    merged = primary.with_defaults(fallback)

    assert merged.stem_thickness == StaffSpaces(0.1)
    assert merged.beam_thickness == StaffSpaces(0.5)
    assert merged.staff_line_thickness is None
    assert primary.beam_thickness is None


def test_font_family_is_replaced_as_a_whole() -> None:
    fallback = EngravingDefaults(text_font_family=("Edwin", "serif"))

    own = EngravingDefaults(text_font_family=("Academico",)).with_defaults(fallback)
    empty = EngravingDefaults().with_defaults(fallback)

    assert own.text_font_family == ("Academico",)
    assert empty.text_font_family == ("Edwin", "serif")


def test_serialises_with_document_names() -> None:
    defaults = EngravingDefaults(
        staff_line_thickness=StaffSpaces(0.13), h_bar_thickness=StaffSpaces(1)
    )

    assert defaults.model_dump(by_alias=True, exclude_none=True) == {
        "textFontFamily": (),
        "staffLineThickness": 0.13,
        "hBarThickness": 1.0,
    }
