"""Tests for the CLI entry point."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from diaryx.cli import main
from diaryx.config import Config


@pytest.fixture
def entries_dir(tmp_path):
    return tmp_path / "entries"


@pytest.fixture
def invoke(entries_dir):
    runner = CliRunner()

    def _invoke(*args, input=None):
        with patch("diaryx.cli.load_config", return_value=Config(entries_dir=str(entries_dir))):
            return runner.invoke(main, list(args), input=input)

    return _invoke


class TestCliGroup:
    def test_help(self, invoke):
        result = invoke("--help")
        assert result.exit_code == 0
        for command in ("list", "show", "new", "save", "rename", "delete", "path"):
            assert command in result.output

    def test_path(self, invoke, entries_dir):
        result = invoke("path")
        assert result.exit_code == 0
        assert result.output.strip() == str(entries_dir)


class TestListCommand:
    def test_empty(self, invoke):
        result = invoke("list")
        assert result.exit_code == 0
        assert "No entries." in result.output

    def test_shows_title_and_preview(self, invoke, entries_dir):
        entries_dir.mkdir()
        (entries_dir / "e1.md").write_text("# Morning\n\nCoffee first.")

        result = invoke("list")

        assert result.exit_code == 0
        assert "e1" in result.output
        assert "Morning" in result.output
        assert "Coffee first." in result.output

    def test_json(self, invoke, entries_dir):
        entries_dir.mkdir()
        (entries_dir / "e1.md").write_text("# Morning\n\nCoffee first.")

        result = invoke("list", "--json")

        assert result.exit_code == 0
        [item] = json.loads(result.output)
        assert item["id"] == "e1"
        assert item["title"] == "Morning"
        assert item["preview"] == "Coffee first."
        assert item["created_at"] == item["modified_at"]


class TestEntryCommands:
    def test_new_then_show(self, invoke):
        created = invoke("new", "My Day")
        assert created.exit_code == 0
        entry_id = created.output.strip()

        shown = invoke("show", entry_id)

        assert shown.exit_code == 0
        assert shown.output.startswith("# My Day")

    def test_show_json(self, invoke, entries_dir):
        entries_dir.mkdir()
        (entries_dir / "e1.md").write_text("# Title\n\nBody")

        result = invoke("show", "e1", "--json")

        data = json.loads(result.output)
        assert data["content"] == "# Title\n\nBody"
        assert data["title"] == "Title"

    def test_show_missing_fails(self, invoke):
        result = invoke("show", "nope")
        assert result.exit_code == 1
        assert "Entry not found: nope" in result.output

    def test_save_from_stdin(self, invoke, entries_dir):
        result = invoke("save", "e1", input="# My Day\n\nWent well.")

        assert result.exit_code == 0
        assert (entries_dir / "e1.md").read_text() == "# My Day\n\nWent well."

    def test_save_from_file(self, invoke, entries_dir, tmp_path):
        source = tmp_path / "draft.md"
        source.write_text("# Draft\n")

        result = invoke("save", "e1", "--file", str(source))

        assert result.exit_code == 0
        assert (entries_dir / "e1.md").read_text() == "# Draft\n"

    def test_save_invalid_id_fails(self, invoke):
        result = invoke("save", "../outside", input="x")
        assert result.exit_code == 1
        assert "Invalid entry id" in result.output

    def test_new_rejects_multiline_title(self, invoke, entries_dir):
        result = invoke("new", "Line one\nLine two")
        assert result.exit_code == 1
        assert "line breaks" in result.output

    def test_rename(self, invoke, entries_dir):
        invoke("save", "e1", input="# Old\n\nBody")

        result = invoke("rename", "e1", "New title")

        assert result.exit_code == 0
        assert (entries_dir / "e1.md").read_text() == "# New title\n\nBody"

    def test_rename_missing_fails(self, invoke):
        result = invoke("rename", "nope", "Title")
        assert result.exit_code == 1
        assert "Entry not found: nope" in result.output

    def test_delete_is_idempotent(self, invoke, entries_dir):
        invoke("save", "e1", input="x")

        first = invoke("delete", "e1")
        second = invoke("delete", "e1")

        assert first.exit_code == 0
        assert second.exit_code == 0
        assert not (entries_dir / "e1.md").exists()

    def test_store_error_exits_nonzero(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        runner = CliRunner()

        with patch("diaryx.cli.load_config", return_value=Config(entries_dir=str(blocker / "entries"))):
            result = runner.invoke(main, ["list"])

        assert result.exit_code == 1
        assert "Error:" in result.output
