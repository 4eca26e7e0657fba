"""Tests for the lessondeck command line interface."""

import os

import pytest

from lessondeck.cli import (
    EXIT_BUILD_FAILED,
    EXIT_NOT_FOUND,
    EXIT_OK,
    EXIT_UNSUPPORTED_FORMAT,
    EXIT_WRITE_FAILED,
    _log_level,
    main,
)
from lessondeck.config import DeckSettings


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run every CLI test away from any real .env or LESSONDECK_* settings."""
    # load_dotenv writes to os.environ; a per-test copy keeps it from leaking
    monkeypatch.setattr(os, "environ", os.environ.copy())
    for name in ("LESSONDECK_SOURCE", "LESSONDECK_FORMAT", "LESSONDECK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def run(playground, capsys):
    """Run the CLI against the playground fixture and capture its output."""
    def _run(*argv):
        code = main(["--source", str(playground), *argv])
        out, err = capsys.readouterr()
        return code, out, err
    return _run


class TestList:

    def test_list_prints_ids_and_titles(self, run):
        code, out, _ = run("list")
        assert code == EXIT_OK
        lines = out.splitlines()
        assert [line.split()[0] for line in lines] == [
            "1-basic", "2-operator", "03-collection", "04-control-flow", "what-is-new",
        ]
        assert lines[2].endswith("Collection")

    def test_list_spec_ordering(self, tmp_path, capsys):
        source = tmp_path / "deck"
        source.mkdir()
        for name in ("03. Collection", "04. Control Flow", "1.Basic"):
            (source / f"{name}.swift").write_text("// body\n", encoding="utf-8")
        assert main(["--source", str(source), "list"]) == EXIT_OK
        out = capsys.readouterr().out
        assert [line.split()[0] for line in out.splitlines()] == [
            "1-basic", "03-collection", "04-control-flow",
        ]

    def test_duplicate_ids_fail_build(self, tmp_path, capsys):
        source = tmp_path / "dupes"
        source.mkdir()
        (source / "03. Collection.swift").write_text("a", encoding="utf-8")
        (source / "03 collection.md").write_text("b", encoding="utf-8")
        assert main(["--source", str(source), "list"]) == EXIT_BUILD_FAILED
        err = capsys.readouterr().err
        assert "03-collection" in err
        assert len(err.strip().splitlines()) == 1

    def test_missing_source_fails_build(self, tmp_path, capsys):
        assert main(["--source", str(tmp_path / "nowhere"), "list"]) == EXIT_BUILD_FAILED
        assert "not found" in capsys.readouterr().err


class TestShow:

    def test_show_plain_by_default(self, run):
        code, out, _ = run("show", "03-collection")
        assert code == EXIT_OK
        assert out.startswith("Collection\n")
        assert "Lesson 3 of 5" in out
        assert 'var shoppingList = ["Eggs", "Milk"]' in out

    def test_show_by_source_name(self, run):
        code, out, _ = run("show", "03. Collection", "--format", "markdown")
        assert code == EXIT_OK
        assert out.startswith("# Collection\n")
        assert "```swift" in out

    def test_show_html(self, run):
        code, out, _ = run("show", "1-basic", "--format", "html")
        assert code == EXIT_OK
        assert "&quot;Swift&quot;" in out

    def test_show_unknown_id(self, run):
        code, out, err = run("show", "nonexistent-id")
        assert code == EXIT_NOT_FOUND
        assert out == ""
        assert "nonexistent-id" in err

    def test_show_unsupported_format(self, run):
        code, _, err = run("show", "03. Collection", "--format", "pdf")
        assert code == EXIT_UNSUPPORTED_FORMAT
        assert "pdf" in err

    def test_default_format_from_env(self, run, monkeypatch):
        monkeypatch.setenv("LESSONDECK_FORMAT", "markdown")
        code, out, _ = run("show", "1-basic")
        assert code == EXIT_OK
        assert out.startswith("# Basic")


class TestNavigation:

    def test_next(self, run):
        assert run("next", "1-basic")[:2] == (EXIT_OK, "2-operator\n")

    def test_prev(self, run):
        assert run("prev", "04-control-flow")[:2] == (EXIT_OK, "03-collection\n")

    def test_next_at_end(self, run):
        assert run("next", "what-is-new")[:2] == (EXIT_OK, "<end>\n")

    def test_prev_at_start(self, run):
        assert run("prev", "1-basic")[:2] == (EXIT_OK, "<start>\n")

    def test_next_unknown_id(self, run):
        code, _, err = run("next", "missing")
        assert code == EXIT_NOT_FOUND
        assert "missing" in err


class TestInfo:

    def test_info(self, run):
        code, out, _ = run("info", "03. Collection")
        assert code == EXIT_OK
        assert "id:       03-collection" in out
        assert "position: 3/5" in out
        assert "order:    3" in out

    def test_info_unnumbered(self, run):
        _, out, _ = run("info", "what-is-new")
        assert "order:    -" in out


class TestExport:

    def test_export_markdown(self, run, tmp_path):
        target = tmp_path / "out"
        code, out, _ = run("export", str(target), "--format", "markdown")
        assert code == EXIT_OK
        assert "Exported 5 units" in out
        files = sorted(path.name for path in target.iterdir())
        assert files[0] == "01-1-basic.md"
        assert files[-1] == "05-what-is-new.md"
        assert (target / "03-03-collection.md").read_text(encoding="utf-8").startswith("# Collection")

    def test_export_unsupported_format_writes_nothing(self, run, tmp_path):
        target = tmp_path / "out"
        code, _, _ = run("export", str(target), "--format", "pdf")
        assert code == EXIT_UNSUPPORTED_FORMAT
        assert not target.exists()

    def test_export_onto_existing_file(self, run, tmp_path):
        target = tmp_path / "taken"
        target.write_text("already here", encoding="utf-8")
        code, out, err = run("export", str(target))
        assert code == EXIT_WRITE_FAILED
        assert out == ""
        assert str(target) in err
        assert len(err.strip().splitlines()) == 1
        assert target.read_text(encoding="utf-8") == "already here"


class TestSourceFromEnv:

    def test_source_from_env(self, playground, monkeypatch, capsys):
        monkeypatch.setenv("LESSONDECK_SOURCE", str(playground))
        assert main(["list"]) == EXIT_OK
        assert "1-basic" in capsys.readouterr().out

    def test_source_from_dotenv(self, playground, tmp_path, capsys):
        (tmp_path / ".env").write_text(f"LESSONDECK_SOURCE=\"{playground}\"\n", encoding="utf-8")
        assert main(["next", "2-operator"]) == EXIT_OK
        assert capsys.readouterr().out == "03-collection\n"

    def test_invalid_log_level(self, monkeypatch, capsys):
        monkeypatch.setenv("LESSONDECK_LOG_LEVEL", "LOUD")
        assert main(["list"]) == EXIT_BUILD_FAILED
        assert "log level" in capsys.readouterr().err


class TestLogLevel:

    def test_configured_level_without_flags(self):
        assert _log_level(0, DeckSettings(log_level="error")) == "ERROR"

    def test_verbose_raises_quiet_level(self):
        assert _log_level(1, DeckSettings(log_level="WARNING")) == "INFO"
        assert _log_level(2, DeckSettings(log_level="WARNING")) == "DEBUG"

    def test_verbose_never_lowers_configured_level(self):
        assert _log_level(1, DeckSettings(log_level="DEBUG")) == "DEBUG"
