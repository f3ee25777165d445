"""Tests for the command-line interface."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from classy import __version__
from classy.cli import main, parse_options
from classy.exceptions import ParseError

pytestmark = pytest.mark.cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLASSY_NAMES", raising=False)
    monkeypatch.delenv("CLASSY_THRESHOLD", raising=False)


@pytest.fixture
def corpus(tmp_path: Path, write_html) -> Path:
    write_html("index.html", '<div class="row g-2"></div>' * 3 + '<a class="btn"></a>' * 4)
    write_html("blog/post.html", '<div class="card shadow"></div>' * 2)
    return tmp_path


class TestParseOptions:
    """Tests for parse_options function."""

    def test_defaults(self, corpus: Path) -> None:
        source_dir, options, verbose = parse_options([str(corpus)])

        assert source_dir == corpus
        assert (options.min_words, options.min_count) == (1, 3)
        assert verbose is False

    def test_environment_overrides_defaults(
        self, corpus: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLASSY_NAMES", "0")
        monkeypatch.setenv("CLASSY_THRESHOLD", "2")

        _, options, _ = parse_options([str(corpus)])

        assert (options.min_words, options.min_count) == (0, 2)

    def test_flags_override_environment(
        self, corpus: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLASSY_THRESHOLD", "2")

        _, options, _ = parse_options(["--threshold", "5", "-names", "2", str(corpus)])

        assert (options.min_words, options.min_count) == (2, 5)

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["one", "two"],
            ["--threshold", "many", "dir"],
        ],
    )
    def test_invocation_errors_exit_with_status_2(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_options(argv)

        assert exc_info.value.code == 2

    def test_malformed_environment_exits_with_status_2(
        self, corpus: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("CLASSY_NAMES", "lots")

        with pytest.raises(SystemExit) as exc_info:
            parse_options([str(corpus)])

        assert exc_info.value.code == 2
        assert "CLASSY_NAMES" in capsys.readouterr().err

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"classy {__version__}"


class TestMain:
    """Tests for main function."""

    def test_prints_report(self, corpus: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(corpus)]) == 0

        assert capsys.readouterr().out == ' 3\t"g-2 row"\n'

    def test_thresholds_from_flags(self, corpus: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--names", "0", "--threshold", "2", str(corpus)]) == 0

        assert capsys.readouterr().out == (
            ' 2\t"card shadow"\n'
            ' 3\t"g-2 row"\n'
            ' 4\t"btn"\n'
        )

    def test_missing_directory_reports_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(tmp_path / "missing")]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: source directory not found")

    def test_parse_failure_prints_no_partial_report(
        self, corpus: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch(
            "classy.pipeline.scan_file",
            side_effect=[["g-2 row"] * 3, ParseError("cannot parse index.html")],
        ):
            assert main(["--threshold", "1", str(corpus)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip().splitlines() == ["Error: cannot parse index.html"]

    def test_writes_utf8_when_stdout_encoding_is_ascii(
        self, tmp_path: Path, write_html, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_html("index.html", '<p class="élève a"></p>')
        raw = io.BytesIO()
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(raw, encoding="ascii"))

        assert main(["--threshold", "1", str(tmp_path)]) == 0

        assert raw.getvalue().decode("utf-8") == ' 1\t"a élève"\n'
