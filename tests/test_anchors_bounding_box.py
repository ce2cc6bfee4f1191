from __future__ import annotations

from pydantic import ValidationError
import pytest

from smufl.anchors import Anchors
from smufl.bounding_box import BoundingBox
from smufl.coord import Coord
from smufl.staff_spaces import StaffSpaces


ANCHOR_NAMES = [
    "splitStemUpSE",
    "splitStemUpSW",
    "splitStemDownNE",
    "splitStemDownNW",
    "stemUpSE",
    "stemDownNW",
    "stemUpNW",
    "stemDownSW",
    "nominalWidth",
    "numeralTop",
    "numeralBottom",
    "cutOutNE",
    "cutOutSE",
    "cutOutSW",
    "cutOutNW",
    "graceNoteSlashSW",
    "graceNoteSlashNE",
    "graceNoteSlashNW",
    "graceNoteSlashSE",
    "repeatOffset",
    "noteheadOrigin",
    "opticalCenter",
]


def test_anchor_names_match_the_document_table() -> None:
    aliases = [field.alias for field in Anchors.model_fields.values()]

    assert aliases == ANCHOR_NAMES


@pytest.mark.parametrize("name", ANCHOR_NAMES)
def test_each_anchor_decodes_independently(name: str) -> None:
    anchors = Anchors.model_validate({name: [1.0, -0.5]})

    assert anchors.model_dump(by_alias=True, exclude_none=True) == {name: [1.0, -0.5]}


def test_notehead_anchors() -> None:
    anchors = Anchors.model_validate_json(
        '{"stemDownNW": [0.0, -0.168], "stemUpSE": [1.18, 0.168], "cutOutNW": [0.2, 0.3]}'
    )

    assert anchors.stem_up_se == Coord(1.18, 0.168)
    assert anchors.stem_down_nw == Coord(0.0, -0.168)
    assert anchors.cut_out_nw == Coord(0.2, 0.3)
    assert anchors.optical_center is None


def test_bounding_box_requires_both_corners() -> None:
    with pytest.raises(ValidationError):
        BoundingBox.model_validate({"bBoxNE": [1.0, 1.0]})


def test_bounding_box_dimensions() -> None:
    bbox = BoundingBox.model_validate({"bBoxNE": [1.18, 0.5], "bBoxSW": [0.0, -0.5]})

    assert bbox.ne == Coord(1.18, 0.5)
    assert bbox.sw == Coord(0.0, -0.5)
    assert bbox.width == StaffSpaces(1.18)
    assert bbox.height == StaffSpaces(1.0)
