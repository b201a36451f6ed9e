# tests/test_cli.py
"""End-to-end runs of the command line entry point and the PGM writer."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from hillclimb.app import cli
from hillclimb.app.pgm import write_pgm
from hillclimb.core.grid import HeightGrid
from hillclimb.core.types import Reached, Unreachable


def test_prints_both_answers(example_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([f"--input={example_file}"]) == 0
    out = capsys.readouterr().out
    assert "Part 1: 31" in out
    assert "Part 2: 29" in out


def test_input_from_environment(
    example_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("HILLCLIMB_INPUT", str(example_file))
    assert cli.main([]) == 0
    assert "Part 1: 31" in capsys.readouterr().out


def test_show_path_lists_end_first(example_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([f"--input={example_file}", "--show-path"]) == 0
    lines = capsys.readouterr().out.splitlines()
    start = lines.index("[")
    end = lines.index("]")
    entries = lines[start + 1:end]
    assert len(entries) == 32
    assert entries[0] == "  (5, 2, 25),"
    assert entries[-1] == "  (0, 0, 0),"


def test_unreachable_is_reported_as_text(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "walled.txt"
    p.write_text("SaaE\n", encoding="utf-8")
    assert cli.main([f"--input={p}", "--show-path"]) == 0
    out = capsys.readouterr().out
    assert "Part 1: unreachable" in out
    assert "Part 2: unreachable" in out
    assert "[" not in out.splitlines()


def test_missing_file_fails(tmp_path: Path) -> None:
    assert cli.main([f"--input={tmp_path / 'nope.txt'}"]) == 1


def test_malformed_file_fails(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    p = tmp_path / "ragged.txt"
    p.write_text("Sab\nab\nabE\n", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert cli.main([f"--input={p}"]) == 1
    assert "ragged" in caplog.text


def test_pgm_option_writes_raster(example_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "height.pgm"
    assert cli.main([f"--input={example_file}", f"--pgm={out}"]) == 0
    lines = out.read_text(encoding="ascii").splitlines()
    assert lines[:3] == ["P2", "8 5", "25"]
    assert lines[3] == "0 0 1 16 15 14 13 12"
    assert len(lines) == 3 + 5


def test_write_pgm_to_stream() -> None:
    buf = io.StringIO()
    write_pgm(HeightGrid.from_text("Sz\naE\n"), buf)
    assert buf.getvalue() == "P2\n2 2\n25\n0 25\n0 25\n"


def test_format_outcome() -> None:
    assert cli.format_outcome(Reached(steps=4)) == "4"
    assert cli.format_outcome(Unreachable()) == "unreachable"


def test_resolve_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HILLCLIMB_LOG_LEVEL", raising=False)
    assert cli.resolve_log_level([]) == logging.INFO
    assert cli.resolve_log_level(["--log-level=debug"]) == logging.DEBUG
    assert cli.resolve_log_level(["--log-level=bogus"]) == logging.INFO
    monkeypatch.setenv("HILLCLIMB_LOG_LEVEL", "warning")
    assert cli.resolve_log_level([]) == logging.WARNING


def test_invalid_utf8_file_fails(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    p = tmp_path / "binary.txt"
    p.write_bytes(b"Sab\xff\nabE\n")
    with caplog.at_level(logging.ERROR):
        assert cli.main([f"--input={p}"]) == 1
    assert "not valid UTF-8" in caplog.text


def test_unwritable_pgm_path_fails(
    example_file: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    out = tmp_path / "missing-dir" / "height.pgm"
    with caplog.at_level(logging.ERROR):
        assert cli.main([f"--input={example_file}", f"--pgm={out}"]) == 1
    assert "Failed to write" in caplog.text
    assert not out.exists()
