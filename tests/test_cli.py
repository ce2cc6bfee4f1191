from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from smufl.ui.cli import app
from smufl.ui.cli.state import CLIState


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def primary(write_metadata) -> Path:
    return write_metadata(
        "petaluma_metadata.json",
        {
            "fontName": "Petaluma",
            "engravingDefaults": {"staffLineThickness": 0.13},
            "glyphAdvanceWidths": {"noteheadWhole": 1.688, "myGlyph": 0.5},
            "glyphBBoxes": {"noteheadWhole": {"bBoxNE": [1.688, 0.5], "bBoxSW": [0, -0.5]}},
        },
    )


@pytest.fixture
def fallback(write_metadata) -> Path:
    return write_metadata(
        "bravura_metadata.json",
        {
            "fontName": "Bravura",
            "engravingDefaults": {"stemThickness": 0.12},
            "glyphAdvanceWidths": {"noteheadBlack": 1.18},
            "glyphsWithAnchors": {"noteheadBlack": {"stemUpSE": [1.18, 0.168]}},
        },
    )


def test_no_arguments_prints_help(runner: CliRunner) -> None:
    result = runner.invoke(app, [])

    assert "show" in result.output
    assert "unknowns" in result.output


def test_show_summarises_metadata(runner: CliRunner, primary: Path) -> None:
    result = runner.invoke(app, ["show", str(primary)])

    assert result.exit_code == 0, result.output
    assert "Petaluma" in result.output
    assert "staffLineThickness" in result.output
    assert "0.13" in result.output
    assert "glyphAdvanceWidths" in result.output
    assert "Unknown glyphs found in Petaluma: myGlyph" in result.output


def test_show_prints_requested_glyph(runner: CliRunner, primary: Path) -> None:
    result = runner.invoke(app, ["show", str(primary), "--glyph", "noteheadWhole", "-g", "gClef"])

    assert result.exit_code == 0, result.output
    assert "advance width" in result.output
    assert "1.688" in result.output
    assert "bBoxNE" in result.output
    assert "No metrics for this glyph" in result.output


def test_show_with_fallback(runner: CliRunner, primary: Path, fallback: Path) -> None:
    result = runner.invoke(
        app, ["show", str(primary), "--fallback", str(fallback), "--glyph", "noteheadBlack"]
    )

    assert result.exit_code == 0, result.output
    assert "Petaluma" in result.output
    assert "stemThickness" in result.output
    assert "1.18" in result.output
    assert "stemUpSE" in result.output


def test_show_with_config(
    runner: CliRunner, primary: Path, fallback: Path, tmp_path: Path
) -> None:
    config = tmp_path / "smufl.toml"
    config.write_text(
        f'[metadata]\npath = "{primary.name}"\nfallbacks = ["{fallback.name}"]\n',
        encoding="utf-8",
    )

    result = runner.invoke(app, ["show", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "Petaluma" in result.output
    assert "stemThickness" in result.output


def test_show_rejects_config_with_path(runner: CliRunner, primary: Path, tmp_path: Path) -> None:
    config = tmp_path / "smufl.toml"
    config.write_text(f'[metadata]\npath = "{primary.name}"\n', encoding="utf-8")

    result = runner.invoke(app, ["show", str(primary), "--config", str(config)])

    assert result.exit_code == 2


def test_show_requires_a_source(runner: CliRunner) -> None:
    result = runner.invoke(app, ["show"])

    assert result.exit_code == 2


def test_show_reports_invalid_config(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "smufl.toml"
    config.write_text("[fonts]\n", encoding="utf-8")

    result = runner.invoke(app, ["show", "--config", str(config)])

    assert result.exit_code == 1
    assert "[metadata]" in result.output


def test_show_reports_decode_errors(runner: CliRunner, tmp_path: Path) -> None:
    broken = tmp_path / "broken_metadata.json"
    broken.write_text('{"glyphAdvanceWidths": {}}', encoding="utf-8")

    result = runner.invoke(app, ["show", str(broken)])

    assert result.exit_code == 1
    assert "Invalid SMuFL metadata" in result.output
    assert "fontName" in result.output


def test_debug_reraises_decode_errors(runner: CliRunner, tmp_path: Path) -> None:
    broken = tmp_path / "broken_metadata.json"
    broken.write_text("{", encoding="utf-8")

    result = runner.invoke(app, ["--debug", "show", str(broken)])

    assert result.exit_code == 1
    assert result.exception is not None
    assert type(result.exception).__name__ == "MetadataDecodeError"


def test_unknowns_lists_names(runner: CliRunner, primary: Path) -> None:
    result = runner.invoke(app, ["unknowns", str(primary)])

    assert result.exit_code == 0, result.output
    assert "myGlyph" in result.output


def test_unknowns_prints_the_report_recorded_while_parsing(runner: CliRunner, primary: Path) -> None:
    state = CLIState()

    result = runner.invoke(app, ["unknowns", str(primary)], obj=state)

    assert result.exit_code == 0, result.output
    assert "Unknown glyphs found in Petaluma: myGlyph" in result.output
    assert result.stdout.strip().splitlines()[-1] == "myGlyph"
    assert state.events == {}


def test_unknowns_without_unknown_names(runner: CliRunner, fallback: Path) -> None:
    result = runner.invoke(app, ["-v", "unknowns", str(fallback)])

    assert result.exit_code == 0, result.output
    assert "No unknown glyphs in Bravura." in result.output


def test_missing_file_is_a_usage_error(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, ["unknowns", str(tmp_path / "absent.json")])

    assert result.exit_code == 2
