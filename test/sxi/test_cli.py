"""
Integration tests for the sxi command line.

Tests the typer application end to end on small site trees.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from sxi.cli import typer_app

END = "<!--#sxi-endinclude-->"

runner = CliRunner()


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A small website with a shared header."""
    (tmp_path / "_includes").mkdir()
    (tmp_path / "_includes" / "header.sxi").write_bytes(b"<header>Site</header>")
    (tmp_path / "index.htm").write_bytes(
        f'<!--#sxi-this src="/index.htm" --><!--#sxi-include src="/_includes/header.sxi" -->{END}'.encode()
    )
    (tmp_path / "about").mkdir()
    (tmp_path / "about" / "index.htm").write_bytes(
        f'<!--#sxi-include src="/_includes/header.sxi" -->{END}<p>About</p>'.encode()
    )
    return tmp_path


@pytest.mark.sxi
class TestCli:
    """Test the sxi command."""

    def test_no_arguments_shows_syntax(self) -> None:
        """Test running without patterns prints the tag syntax."""
        result = runner.invoke(typer_app, [])

        assert result.exit_code == 0
        assert "Syntax: sxi" in result.output
        assert "<!--#sxi-include" in result.output

    def test_rewrites_matching_files(self, site: Path) -> None:
        """Test files matching a pattern are rewritten and reported."""
        result = runner.invoke(typer_app, [str(site / "*.htm")])

        assert result.exit_code == 0
        assert f"Processing: {site / 'index.htm'}" in result.output
        assert "1 rewritten, 0 unchanged, 0 failed" in result.output
        assert "<header>Site</header>" in (site / "index.htm").read_text(encoding="utf-8")
        assert "<header>" not in (site / "about" / "index.htm").read_text(encoding="utf-8")

    def test_recursive_flag(self, site: Path) -> None:
        """Test -s also rewrites files in subdirectories."""
        result = runner.invoke(typer_app, ["-s", str(site / "*.htm")])

        assert result.exit_code == 0
        assert "2 rewritten" in result.output
        about = (site / "about" / "index.htm").read_text(encoding="utf-8")
        assert about == f'<!--#sxi-include src="/_includes/header.sxi" -->\n<header>Site</header>{END}<p>About</p>'

    def test_failure_sets_exit_code(self, site: Path) -> None:
        """Test a failing document is reported and gives exit code 1."""
        broken = site / "broken.htm"
        broken.write_bytes(b'<!--#sxi-include src="/_includes/header.sxi" -->no end')

        result = runner.invoke(typer_app, [str(site / "*.htm")])

        assert result.exit_code == 1
        assert "1 rewritten, 0 unchanged, 1 failed" in result.output
        assert broken.read_bytes() == b'<!--#sxi-include src="/_includes/header.sxi" -->no end'
        assert "<header>Site</header>" in (site / "index.htm").read_text(encoding="utf-8")

    def test_short_help_option(self) -> None:
        """Test -h shows the command help."""
        result = runner.invoke(typer_app, ["-h"])

        assert result.exit_code == 0
        assert "--recursive" in result.output

    def test_failure_is_reported_once(self, site: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test each failing document is reported by a single error record."""
        (site / "broken.htm").write_bytes(b'<!--#sxi-include src="/_includes/header.sxi" -->no end')

        result = runner.invoke(typer_app, [str(site / "*.htm")])

        assert result.exit_code == 1
        assert "Error: " not in result.output
        errors = [r for r in caplog.records if "broken.htm" in r.getMessage()]
        assert len(errors) == 1
