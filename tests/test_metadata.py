from __future__ import annotations

import io
import json
import logging

import pytest

from smufl.core.diagnostics import LoggingEmitter, NullEmitter
from smufl.core.exceptions import MetadataDecodeError, SmuflError
from smufl.glyph import Glyph
from smufl.metadata import Metadata, UnknownGlyphReport
from smufl.staff_spaces import StaffSpaces


SCENARIO_DOCUMENT = (
    '{"fontName":"Test","engravingDefaults":{"staffLineThickness":0.13},'
    '"glyphAdvanceWidths":{"noteheadWhole":1.688}}'
)


def _document(**sections: object) -> str:
    return json.dumps({"fontName": "Test", **sections})


def test_parses_minimal_document(emitter) -> None:
    metadata = Metadata.from_json(SCENARIO_DOCUMENT, emitter=emitter)

    assert metadata.font_name == "Test"
    assert metadata.engraving_defaults.staff_line_thickness == StaffSpaces(0.13)
    assert metadata.advance_widths.get(Glyph.NOTEHEAD_WHOLE) == StaffSpaces(1.688)
    assert len(metadata.anchors) == 0
    assert len(metadata.bounding_boxes) == 0


def test_ignores_sections_outside_the_model(emitter) -> None:
    document = _document(
        fontVersion=1.39,
        glyphsWithAlternates={"gClef": {"alternates": []}},
        engravingDefaults={"stemThickness": 0.12, "unknownSetting": 3},
    )

    metadata = Metadata.from_json(document, emitter=emitter)

    assert metadata.engraving_defaults.stem_thickness == StaffSpaces(0.12)


def test_empty_bounding_boxes_decode_to_empty_section(emitter) -> None:
    metadata = Metadata.from_json(_document(glyphBBoxes={}), emitter=emitter)

    assert metadata.bounding_boxes.get(Glyph.NOTEHEAD_BLACK) is None
    assert metadata.bounding_boxes.get("anything") is None


def test_full_glyph_sections(emitter) -> None:
    document = _document(
        glyphsWithAnchors={"noteheadBlack": {"stemUpSE": [1.18, 0.168]}},
        glyphBBoxes={"noteheadBlack": {"bBoxNE": [1.18, 0.5], "bBoxSW": [0, -0.5]}},
    )

    metadata = Metadata.from_json(document, emitter=emitter)

    anchors = metadata.anchors.get(Glyph.NOTEHEAD_BLACK)
    bbox = metadata.bounding_boxes.get(Glyph.NOTEHEAD_BLACK)
    assert anchors is not None and anchors.stem_up_se is not None
    assert anchors.stem_up_se.x == StaffSpaces(1.18)
    assert bbox is not None and bbox.height == StaffSpaces(1.0)


def test_unknown_name_is_reported_once(emitter) -> None:
    document = _document(
        glyphAdvanceWidths={"myGlyph": 1.0, "noteheadBlack": 1.18},
        glyphsWithAnchors={"myGlyph": {"opticalCenter": [0.5, 0.0]}},
        glyphBBoxes={"myGlyph": {"bBoxNE": [1, 1], "bBoxSW": [0, 0]}},
    )

    metadata = Metadata.from_json(document, emitter=emitter)

    assert metadata.unknown_glyphs() == ["myGlyph"]
    assert emitter.events == [("unknown_glyphs", {"font_name": "Test", "glyphs": ["myGlyph"]})]
    assert metadata.advance_widths.get("myGlyph") == StaffSpaces(1.0)


def test_unknown_names_are_sorted_across_sections(emitter) -> None:
    document = _document(
        glyphAdvanceWidths={"zeta": 1.0},
        glyphBBoxes={"alpha": {"bBoxNE": [1, 1], "bBoxSW": [0, 0]}},
    )

    metadata = Metadata.from_json(document, emitter=emitter)

    assert metadata.unknown_glyphs() == ["alpha", "zeta"]


def test_emits_no_unknowns_event(emitter) -> None:
    Metadata.from_json(SCENARIO_DOCUMENT, emitter=emitter)

    assert emitter.events == [("no_unknown_glyphs", {"font_name": "Test", "glyphs": []})]
    assert emitter.warnings == []


def test_logs_unknown_glyphs_by_default(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="smufl")

    Metadata.from_json(_document(glyphAdvanceWidths={"myGlyph": 1.0}))

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert [record.getMessage() for record in warnings] == [
        "Unknown glyphs found in Test: myGlyph"
    ]


def test_logs_absence_of_unknown_glyphs(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="smufl")

    Metadata.from_json(SCENARIO_DOCUMENT, emitter=LoggingEmitter())

    assert "No unknown glyphs found in Test" in caplog.text
    assert not [record for record in caplog.records if record.levelno >= logging.WARNING]


@pytest.mark.parametrize(
    ("document", "location"),
    [
        ('{"engravingDefaults": {}}', "fontName"),
        ('{"fontName": 12}', "fontName"),
        ('{"fontName": "Test", "glyphAdvanceWidths": {"noteheadBlack": "wide"}}',
         "glyphAdvanceWidths.noteheadBlack"),
        ('{"fontName": "Test", "glyphBBoxes": {"noteheadBlack": {"bBoxNE": [1], "bBoxSW": [0, 0]}}}',
         "glyphBBoxes.noteheadBlack.bBoxNE"),
    ],
)
def test_decode_errors_carry_locations(document: str, location: str) -> None:
    with pytest.raises(MetadataDecodeError) as excinfo:
        Metadata.from_json(document, emitter=NullEmitter())

    assert location in [loc for loc, _ in excinfo.value.errors]
    assert location in str(excinfo.value)


@pytest.mark.parametrize("document", ["", "{", "[]", "not json"])
def test_malformed_documents_fail(document: str) -> None:
    with pytest.raises(MetadataDecodeError) as excinfo:
        Metadata.from_json(document, emitter=NullEmitter())

    assert isinstance(excinfo.value, SmuflError)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.__cause__ is not None


def test_decode_error_emits_nothing(emitter) -> None:
    with pytest.raises(MetadataDecodeError):
        Metadata.from_json("{}", emitter=emitter)

    assert emitter.events == []


def test_from_reader_accepts_bytes_and_text(emitter) -> None:
    from_bytes = Metadata.from_reader(io.BytesIO(SCENARIO_DOCUMENT.encode()), emitter=emitter)
    from_text = Metadata.from_reader(io.StringIO(SCENARIO_DOCUMENT), emitter=emitter)

    assert from_bytes == from_text
    assert len(emitter.events) == 2


def test_from_path(write_metadata, emitter) -> None:
    path = write_metadata("test_metadata.json", json.loads(SCENARIO_DOCUMENT))

    metadata = Metadata.from_path(path, emitter=emitter)

    assert metadata.font_name == "Test"


def test_from_path_propagates_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        Metadata.from_path(tmp_path / "missing.json", emitter=NullEmitter())


def test_merge_scenario(emitter) -> None:
    font_a = Metadata.from_json(
        _document(glyphAdvanceWidths={"noteheadBlack": 1.0}), emitter=emitter
    )
    font_b = Metadata.from_json(
        json.dumps(
            {
                "fontName": "Fallback",
                "engravingDefaults": {"staffLineThickness": 2.0},
                "glyphAdvanceWidths": {"noteheadBlack": 2.0, "noteheadWhole": 3.0},
            }
        ),
        emitter=emitter,
    )

    merged = font_a.with_defaults(font_b)

    assert merged.font_name == "Test"
    assert merged.engraving_defaults.staff_line_thickness == StaffSpaces(2.0)
    assert merged.advance_widths.get(Glyph.NOTEHEAD_BLACK) == StaffSpaces(1.0)
    assert merged.advance_widths.get(Glyph.NOTEHEAD_WHOLE) == StaffSpaces(3.0)
    assert font_a.engraving_defaults.staff_line_thickness is None


def test_merge_draws_each_section_from_its_counterpart(emitter) -> None:
    primary = Metadata.from_json(_document(), emitter=emitter)
    fallback = Metadata.from_json(
        _document(
            glyphsWithAnchors={"noteheadBlack": {"stemUpSE": [1.18, 0.168]}},
            glyphBBoxes={"noteheadBlack": {"bBoxNE": [1.18, 0.5], "bBoxSW": [0, -0.5]}},
        ),
        emitter=emitter,
    )

    merged = primary.with_defaults(fallback)

    assert merged.anchors.get(Glyph.NOTEHEAD_BLACK) == fallback.anchors.get(Glyph.NOTEHEAD_BLACK)
    assert merged.bounding_boxes.get(Glyph.NOTEHEAD_BLACK) is not None
    assert merged.advance_widths.get(Glyph.NOTEHEAD_BLACK) is None


def test_to_json_uses_document_names(emitter) -> None:
    metadata = Metadata.from_json(
        _document(
            engravingDefaults={"staffLineThickness": 0.13},
            glyphAdvanceWidths={"noteheadWhole": 1.688, "myGlyph": 1.0},
            glyphsWithAnchors={"noteheadBlack": {"stemUpSE": [1.18, 0.168]}},
        ),
        emitter=emitter,
    )

    payload = json.loads(metadata.to_json())

    assert payload["fontName"] == "Test"
    assert payload["engravingDefaults"] == {"textFontFamily": [], "staffLineThickness": 0.13}
    assert payload["glyphAdvanceWidths"] == {"noteheadWhole": 1.688, "myGlyph": 1.0}
    assert payload["glyphsWithAnchors"] == {"noteheadBlack": {"stemUpSE": [1.18, 0.168]}}
    assert payload["glyphBBoxes"] == {}
    assert Metadata.from_json(metadata.to_json(), emitter=NullEmitter()) == metadata


def test_report_collect_deduplicates() -> None:
    report = UnknownGlyphReport.collect("Font", ["b", "a"], iter(["a"]), [])

    assert report.glyphs == ("a", "b")
    assert report.event_name == "unknown_glyphs"
    assert UnknownGlyphReport.collect("Font").event_name == "no_unknown_glyphs"
