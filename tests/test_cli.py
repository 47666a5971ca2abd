"""Tests for the md2json command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from md2json.cli import collect_markdown_files, convert_file, log_level, main
from md2json.exceptions import InputError, OutputError


@pytest.fixture
def docs(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    (root / "guide").mkdir(parents=True)
    (root / "intro.md").write_text("---\ntitle: Intro\n---\n# Intro\n", encoding="utf-8")
    (root / "guide" / "setup.md").write_text("# Setup\n## Install\n", encoding="utf-8")
    (root / "notes.txt").write_text("not markdown", encoding="utf-8")
    return root


class TestCollectMarkdownFiles:
    """Tests for collect_markdown_files."""

    def test_expands_directories_recursively(self, docs: Path) -> None:
        files = collect_markdown_files([docs])

        assert files == [docs / "guide" / "setup.md", docs / "intro.md"]

    def test_keeps_explicit_files(self, docs: Path) -> None:
        assert collect_markdown_files([docs / "notes.txt"]) == [docs / "notes.txt"]

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            collect_markdown_files([tmp_path / "missing"])


class TestConvertFile:
    """Tests for convert_file."""

    def test_writes_json_named_after_stem(self, docs: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"

        target = convert_file(docs / "intro.md", out)

        assert target == out / "intro.json"
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["MetaData"]["Title"] == "Intro"
        assert data["HeaderData"][0]["Id"] == "intro"

    def test_empty_document_removes_existing_artifact(self, tmp_path: Path) -> None:
        source = tmp_path / "gone.md"
        source.write_text("", encoding="utf-8")
        out = tmp_path / "out"
        out.mkdir()
        stale = out / "gone.json"
        stale.write_text("{}", encoding="utf-8")

        assert convert_file(source, out) is None
        assert not stale.exists()

    def test_empty_document_without_artifact(self, tmp_path: Path) -> None:
        source = tmp_path / "empty.md"
        source.write_text("", encoding="utf-8")

        assert convert_file(source, tmp_path / "out") is None
        assert not (tmp_path / "out").exists()

    def test_unwritable_output_raises(self, docs: Path, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")

        with pytest.raises(OutputError):
            convert_file(docs / "intro.md", blocker)

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        source = tmp_path / "latin1.md"
        source.write_bytes(b"# Caf\xe9\n")

        with pytest.raises(InputError, match="not valid UTF-8"):
            convert_file(source, tmp_path / "out")

    def test_byte_order_mark_is_dropped(self, tmp_path: Path) -> None:
        source = tmp_path / "bom.md"
        source.write_bytes(b"\xef\xbb\xbf# Title\n")

        target = convert_file(source, tmp_path / "out")

        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["HeaderData"][0]["Id"] == "title"


class TestMain:
    """Tests for the main entry point."""

    def test_converts_directory(self, docs: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"

        assert main([str(docs), "-o", str(out)]) == 0

        assert sorted(p.name for p in out.iterdir()) == ["intro.json", "setup.json"]
        setup = json.loads((out / "setup.json").read_text(encoding="utf-8"))
        assert setup["HeaderData"][0]["Children"][0]["Text"] == "Install"

    def test_stdout(self, docs: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(docs / "intro.md"), "--stdout"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["HeaderData"][0]["Text"] == "Intro"

    def test_missing_path_fails(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.md")]) == 1

    def test_write_failure_fails(self, docs: Path, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        assert main([str(docs / "intro.md"), "-o", str(blocker)]) == 1

    def test_invalid_utf8_file_fails_and_run_continues(self, tmp_path: Path) -> None:
        docs = tmp_path / "docs"
        docs.mkdir()
        (docs / "a_bad.md").write_bytes(b"# Caf\xe9")
        (docs / "b_good.md").write_text("# Good\n", encoding="utf-8")
        out = tmp_path / "out"

        assert main([str(docs), "-o", str(out)]) == 1

        assert (out / "b_good.json").exists()
        assert not (out / "a_bad.json").exists()

    def test_invalid_utf8_with_stdout(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        bad = tmp_path / "bad.md"
        bad.write_bytes(b"# Caf\xe9")
        good = tmp_path / "good.md"
        good.write_text("# Good\n", encoding="utf-8")

        assert main([str(bad), str(good), "--stdout"]) == 1

        assert json.loads(capsys.readouterr().out)["HeaderData"][0]["Text"] == "Good"

    def test_usage_error(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([])

        assert excinfo.value.code == 2


class TestLogLevel:
    """Tests for combining the configured level with -v flags."""

    @pytest.mark.parametrize(
        ("verbose", "configured", "expected"),
        [
            (0, "WARNING", logging.WARNING),
            (1, "WARNING", logging.INFO),
            (2, "WARNING", logging.DEBUG),
            (5, "WARNING", logging.DEBUG),
            (0, "DEBUG", logging.DEBUG),
            (1, "DEBUG", logging.DEBUG),
            (1, "ERROR", logging.INFO),
            (0, "ERROR", logging.WARNING),
            (0, "bogus", logging.WARNING),
        ],
    )
    def test_more_verbose_level_wins(self, verbose: int, configured: str, expected: int) -> None:
        assert log_level(verbose, configured) == expected
