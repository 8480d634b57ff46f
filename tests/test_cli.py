"""CLI tests using the bundled sample catalog."""

import json

import pytest
from typer.testing import CliRunner

from blockjump.config import JumpConfig
from blockjump.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Ignore any config.yaml on the machine running the tests."""
    monkeypatch.setattr("blockjump.main.load_config", lambda: JumpConfig())


class TestCLIBasics:
    def test_help(self) -> None:
        """--help lists the commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "search" in result.stdout

    def test_version(self) -> None:
        """version prints the package version."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "blockjump version" in result.stdout


class TestSearchCommand:
    def test_search_json(self) -> None:
        """--json prints ranked rows as JSON."""
        result = runner.invoke(app, ["search", "hero", "--json"])
        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert rows[0]["title"] == "Hero banner"
        assert rows[0]["category"] == "Pattern"

    def test_search_table(self) -> None:
        """The table output lists the matching title."""
        result = runner.invoke(app, ["search", "paragraph"])
        assert result.exit_code == 0
        assert "Paragraph" in result.stdout

    def test_search_no_results(self) -> None:
        """No matches prints a message and exits 0."""
        result = runner.invoke(app, ["search", "zzqxzzqx"])
        assert result.exit_code == 0
        assert "No results found" in result.stdout

    def test_bad_catalog_exits_1(self, tmp_path) -> None:
        """A broken catalog file exits with code 1."""
        bad = tmp_path / "blocks.json"
        bad.write_text("{not json")
        result = runner.invoke(app, ["search", "hero", "--blocks", str(bad)])
        assert result.exit_code == 1


class TestShowCommand:
    def test_show_pattern(self, tmp_path) -> None:
        """show prints a pattern's body and a block's empty body."""
        blocks = tmp_path / "b.json"
        patterns = tmp_path / "p.json"
        blocks.write_text(json.dumps([{"id": "a", "title": "Hero Banner"}]))
        patterns.write_text(
            json.dumps([{"id": "b", "title": "Hero Pattern", "content": "<p>x</p>"}])
        )
        args = ["--blocks", str(blocks), "--patterns", str(patterns), "--json"]

        result = runner.invoke(app, ["show", "b", *args])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["category"] == "Pattern"
        assert data["content"] == "<p>x</p>"

        result = runner.invoke(app, ["show", "a", *args])
        data = json.loads(result.stdout)
        assert data["category"] == "Block"
        assert data["content"] is None

    def test_show_unknown(self) -> None:
        """An unknown id exits with code 1."""
        result = runner.invoke(app, ["show", "missing-id"])
        assert result.exit_code == 1
