from typer.testing import CliRunner

import mdxsmith
from mdxsmith.ui.cli import app


def test_get_version_matches_public_api() -> None:
    assert mdxsmith.get_version() == mdxsmith.__version__
    assert isinstance(mdxsmith.__version__, str)


def test_cli_version_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0, result.stdout
    assert result.stdout.strip() == mdxsmith.get_version()
