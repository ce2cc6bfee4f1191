from __future__ import annotations

import pytest

from smufl.glyph import Glyph
from smufl.glyph_data import GlyphAdvanceWidths, GlyphBoundingBoxes, GlyphMap
from smufl.glyph_key import UnknownGlyph
from smufl.staff_spaces import StaffSpaces


def _widths(**entries: float) -> GlyphAdvanceWidths:
    return GlyphAdvanceWidths.model_validate(entries)


@pytest.fixture
def widths() -> GlyphAdvanceWidths:
    return _widths(noteheadBlack=1.18, noteheadWhole=1.688, customGlyph=0.5)


def test_decoding_resolves_known_and_unknown_keys(widths: GlyphAdvanceWidths) -> None:
    assert widths.get(Glyph.NOTEHEAD_BLACK) == StaffSpaces(1.18)
    assert widths.get(UnknownGlyph("customGlyph")) == StaffSpaces(0.5)
    assert len(widths) == 3
    assert Glyph.NOTEHEAD_WHOLE in widths
    assert "noteheadWhole" in widths


def test_get_accepts_names_and_defaults(widths: GlyphAdvanceWidths) -> None:
    assert widths.get("noteheadWhole") == StaffSpaces(1.688)
    assert widths.get(Glyph.G_CLEF) is None
    assert widths.get("missing", StaffSpaces(0)) == StaffSpaces(0)


def test_empty_section_behaves_as_empty_mapping() -> None:
    empty = GlyphBoundingBoxes()

    assert not empty
    assert len(empty) == 0
    assert empty.get(Glyph.NOTEHEAD_BLACK) is None
    assert list(empty.unknown_glyphs()) == []


@pytest.mark.parametrize("name", ["noteheadBlack", "noteheadWhole", "customGlyph", "gClef"])
def test_empty_fallback_is_right_identity(widths: GlyphAdvanceWidths, name: str) -> None:
    merged = widths.with_defaults(GlyphAdvanceWidths())

    assert merged.get(name) == widths.get(name)
    assert merged == widths


@pytest.mark.parametrize("name", ["noteheadBlack", "noteheadWhole", "customGlyph"])
def test_empty_receiver_absorbs_fallback(widths: GlyphAdvanceWidths, name: str) -> None:
    assert GlyphAdvanceWidths().with_defaults(widths).get(name) == widths.get(name)


def test_receiver_always_wins() -> None:
    first = _widths(noteheadBlack=1.0)
    second = _widths(noteheadBlack=2.0, noteheadHalf=3.0)

    merged = first.with_defaults(second)

    assert merged.get(Glyph.NOTEHEAD_BLACK) == StaffSpaces(1.0)
    assert merged.get(Glyph.NOTEHEAD_HALF) == StaffSpaces(3.0)
    assert first.get(Glyph.NOTEHEAD_HALF) is None
    assert second.get(Glyph.NOTEHEAD_BLACK) == StaffSpaces(2.0)


def test_merge_priority_follows_argument_position() -> None:
    a = _widths(noteheadBlack=1.0)
    b = _widths(noteheadWhole=2.0)
    c = _widths(noteheadWhole=3.0)

    chained = a.with_defaults(b).with_defaults(c)
    nested = a.with_defaults(b.with_defaults(c))
    swapped = a.with_defaults(c.with_defaults(b))

    assert chained == nested
    assert chained.get(Glyph.NOTEHEAD_WHOLE) == StaffSpaces(2.0)
    assert swapped.get(Glyph.NOTEHEAD_WHOLE) == StaffSpaces(3.0)


def test_merge_keeps_unknown_keys_from_both_sides() -> None:
    merged = _widths(alphaGlyph=1.0).with_defaults(_widths(betaGlyph=2.0, alphaGlyph=5.0))

    assert sorted(merged.unknown_glyphs()) == ["alphaGlyph", "betaGlyph"]
    assert merged.get("alphaGlyph") == StaffSpaces(1.0)
    assert isinstance(merged, GlyphAdvanceWidths)


def test_unknown_glyphs_is_lazy_and_repeatable(widths: GlyphAdvanceWidths) -> None:
    first = widths.unknown_glyphs()

    assert iter(first) is first
    assert list(first) == ["customGlyph"]
    assert list(widths.unknown_glyphs()) == ["customGlyph"]


def test_to_names_and_serialisation(widths: GlyphAdvanceWidths) -> None:
    assert widths.to_names() == {
        "noteheadBlack": StaffSpaces(1.18),
        "noteheadWhole": StaffSpaces(1.688),
        "customGlyph": StaffSpaces(0.5),
    }
    assert widths.model_dump() == {
        "noteheadBlack": 1.18,
        "noteheadWhole": 1.688,
        "customGlyph": 0.5,
    }


@pytest.mark.parametrize(
    "mutate",
    [
        lambda root: root.clear(),
        lambda root: root.__setitem__(Glyph.G_CLEF, StaffSpaces(2.0)),
        lambda root: root.pop(Glyph.NOTEHEAD_BLACK),
        lambda root: root.update({Glyph.G_CLEF: StaffSpaces(2.0)}),
        lambda root: root.setdefault(Glyph.G_CLEF, StaffSpaces(2.0)),
    ],
)
def test_sections_cannot_be_mutated_in_place(widths: GlyphAdvanceWidths, mutate) -> None:
    merged = widths.with_defaults(_widths(gClef=3.0))

    for section in (widths, merged, GlyphAdvanceWidths()):
        with pytest.raises(TypeError, match="read-only"):
            mutate(section.root)

    assert len(widths) == 3
    assert widths.get(Glyph.G_CLEF) is None
    assert len(merged) == 4


def test_read_only_sections_still_copy_and_serialise(widths: GlyphAdvanceWidths) -> None:
    copied = widths.model_copy(deep=True)

    assert isinstance(widths.root, GlyphMap)
    assert isinstance(copied.root, GlyphMap)
    assert copied == widths
    assert GlyphAdvanceWidths.model_validate_json(widths.model_dump_json()) == widths
