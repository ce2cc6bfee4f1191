from typer.testing import CliRunner

import smufl
from smufl.ui.cli import app


def test_get_version_matches_public_api() -> None:
    assert smufl.get_version() == smufl.__version__
    assert isinstance(smufl.__version__, str)


def test_cli_version_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0, result.stdout
    assert result.stdout.strip() == smufl.get_version()
