from __future__ import annotations

from pathlib import Path

import pytest

from smufl.core.config import MetadataSource, load_metadata
from smufl.core.exceptions import ConfigError, MetadataDecodeError
from smufl.glyph import Glyph
from smufl.staff_spaces import StaffSpaces


@pytest.fixture
def font_chain(write_metadata) -> tuple[Path, Path, Path]:
    primary = write_metadata(
        "petaluma_metadata.json",
        {"fontName": "Petaluma", "glyphAdvanceWidths": {"noteheadBlack": 1.0}},
    )
    near = write_metadata(
        "near_metadata.json",
        {
            "fontName": "Near",
            "engravingDefaults": {"stemThickness": 0.1},
            "glyphAdvanceWidths": {"noteheadWhole": 2.0},
        },
    )
    far = write_metadata(
        "bravura_metadata.json",
        {
            "fontName": "Bravura",
            "engravingDefaults": {"stemThickness": 0.12, "staffLineThickness": 0.13},
            "glyphAdvanceWidths": {"noteheadWhole": 1.688, "noteheadHalf": 1.18},
        },
    )
    return primary, near, far


def test_load_metadata_folds_fallbacks_nearest_first(font_chain, emitter) -> None:
    primary, near, far = font_chain

    metadata = load_metadata(MetadataSource(path=primary, fallbacks=[near, far]), emitter=emitter)

    assert metadata.font_name == "Petaluma"
    assert metadata.engraving_defaults.stem_thickness == StaffSpaces(0.1)
    assert metadata.engraving_defaults.staff_line_thickness == StaffSpaces(0.13)
    assert metadata.advance_widths.get(Glyph.NOTEHEAD_BLACK) == StaffSpaces(1.0)
    assert metadata.advance_widths.get(Glyph.NOTEHEAD_WHOLE) == StaffSpaces(2.0)
    assert metadata.advance_widths.get(Glyph.NOTEHEAD_HALF) == StaffSpaces(1.18)
    assert [name for name, _ in emitter.events] == ["no_unknown_glyphs"] * 3


def test_load_metadata_without_fallbacks(font_chain, emitter) -> None:
    primary, _, _ = font_chain

    metadata = load_metadata(MetadataSource(path=primary), emitter=emitter)

    assert metadata.engraving_defaults.specified() == {}


def test_from_file_resolves_relative_paths(font_chain, tmp_path: Path) -> None:
    config = tmp_path / "smufl.toml"
    config.write_text(
        '[metadata]\npath = "petaluma_metadata.json"\n'
        'fallbacks = ["near_metadata.json", "bravura_metadata.json"]\n',
        encoding="utf-8",
    )

    source = MetadataSource.from_file(config)

    assert source.path == tmp_path / "petaluma_metadata.json"
    assert source.fallbacks == [
        tmp_path / "near_metadata.json",
        tmp_path / "bravura_metadata.json",
    ]


def test_from_file_keeps_absolute_paths(font_chain, tmp_path: Path) -> None:
    primary, _, _ = font_chain
    config = tmp_path / "nested" / "smufl.toml"
    config.parent.mkdir()
    config.write_text(f"[metadata]\npath = '{primary}'\n", encoding="utf-8")

    source = MetadataSource.from_file(config)

    assert source.path == primary
    assert source.fallbacks == []


@pytest.mark.parametrize(
    "content",
    [
        "[metadata\n",
        "[fonts]\npath = 'a.json'\n",
        "[metadata]\nfallbacks = []\n",
        "[metadata]\npath = 'a.json'\nunexpected = 1\n",
    ],
)
def test_from_file_rejects_invalid_configuration(tmp_path: Path, content: str) -> None:
    config = tmp_path / "smufl.toml"
    config.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        MetadataSource.from_file(config)


def test_from_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unable to read configuration"):
        MetadataSource.from_file(tmp_path / "absent.toml")


def test_load_metadata_propagates_decode_errors(write_metadata, font_chain, emitter) -> None:
    primary, _, _ = font_chain
    broken = write_metadata("broken_metadata.json", {"glyphAdvanceWidths": {}})

    with pytest.raises(MetadataDecodeError):
        load_metadata(MetadataSource(path=primary, fallbacks=[broken]), emitter=emitter)
