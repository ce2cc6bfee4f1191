from __future__ import annotations

import pytest

from smufl.glyph import Glyph
from smufl.glyph_key import UnknownGlyph, glyph_name, glyph_sort_key, resolve_glyph


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("noteheadBlack", Glyph.NOTEHEAD_BLACK),
        ("noteheadWhole", Glyph.NOTEHEAD_WHOLE),
        ("gClef", Glyph.G_CLEF),
        ("4stringTabClef", Glyph._4STRING_TAB_CLEF),
    ],
)
def test_resolve_known_names(name: str, expected: Glyph) -> None:
    assert resolve_glyph(name) is expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("pictGlsp", Glyph.PICT_GLSP),
        ("accidentalFlatSmall", Glyph.ACCIDENTAL_FLAT_SMALL),
        ("harpPedalRaised", Glyph.HARP_PEDAL_RAISED),
        ("elecMIDIIn", Glyph.ELEC_MIDIIN),
        ("wiggleVIbratoLargestSlower", Glyph.WIGGLE_VIBRATO_LARGEST_SLOWER),
    ],
)
def test_resolve_names_across_the_whole_table(name: str, expected: Glyph) -> None:
    assert resolve_glyph(name) is expected


def test_glyph_table_covers_the_registered_vocabulary() -> None:
    assert len(Glyph) > 2000
    assert len({glyph.value for glyph in Glyph}) == len(Glyph)


@pytest.mark.parametrize("name", ["NoteheadBlack", "noteheadblack", " noteheadBlack", "uniE0A4", ""])
def test_resolve_is_exact_and_case_sensitive(name: str) -> None:
    assert resolve_glyph(name) == UnknownGlyph(name)


def test_unknown_names_compare_by_text() -> None:
    first = resolve_glyph("myCustomGlyph")
    second = resolve_glyph("myCustomGlyph")
    other = resolve_glyph("myOtherGlyph")

    assert first == second
    assert hash(first) == hash(second)
    assert first != other
    assert all(first != glyph for glyph in Glyph)


def test_glyph_name_round_trips_both_variants() -> None:
    assert glyph_name(Glyph.NOTEHEAD_BLACK) == "noteheadBlack"
    assert glyph_name(UnknownGlyph("custom")) == "custom"
    assert Glyph.NOTEHEAD_BLACK.smufl_name == "noteheadBlack"


def test_glyph_sort_key_orders_mixed_keys_by_name() -> None:
    keys = [UnknownGlyph("zzz"), Glyph.NOTEHEAD_BLACK, UnknownGlyph("aaa"), Glyph.G_CLEF]

    ordered = sorted(keys, key=glyph_sort_key)

    assert [glyph_name(key) for key in ordered] == ["aaa", "gClef", "noteheadBlack", "zzz"]
    assert sorted([Glyph.NOTEHEAD_BLACK, Glyph.G_CLEF]) == [Glyph.G_CLEF, Glyph.NOTEHEAD_BLACK]
