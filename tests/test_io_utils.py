"""Tests for paramextract.io_utils module."""
from __future__ import annotations

from pathlib import Path

import orjson

from paramextract.io_utils import (
    load_documents,
    load_lines,
    split_lines,
    write_lines,
    write_report,
)


class TestSplitLines:
    def test_mixed_line_endings(self) -> None:
        assert split_lines("a\nb\r\nc\rd") == ["a", "b", "c", "d"]

    def test_single_trailing_newline_dropped(self) -> None:
        assert split_lines("a\n") == ["a"]
        assert split_lines("a\n\n") == ["a", ""]
        assert split_lines("") == []

    def test_other_separators_stay_in_line(self) -> None:
        text = "HOST = a\x0cb\nx\u2028 END\ny\x0bz\x85w\u2029v\x1c\n"
        assert split_lines(text) == [
            "HOST = a\x0cb",
            "x\u2028 END",
            "y\x0bz\x85w\u2029v\x1c",
        ]


def test_load_lines_handles_crlf_and_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"alpha\r\nbeta\r\n")
    assert load_lines(path) == ["alpha", "beta"]


def test_load_lines_keeps_inner_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("a\n\nb", encoding="utf-8")
    assert load_lines(path) == ["a", "", "b"]


def test_load_lines_keeps_form_feed(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"HOST = a\x0cb\n")
    assert load_lines(path) == ["HOST = a\x0cb"]


def test_load_lines_replaces_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"NOTE = caf\xe9\nPORT = 1\n")
    assert load_lines(path) == ["NOTE = caf\ufffd", "PORT = 1"]


def test_load_documents_returns_both(tmp_path: Path) -> None:
    txt = tmp_path / "source.txt"
    csv = tmp_path / "params.csv"
    txt.write_text("A = 1\n", encoding="utf-8")
    csv.write_text("# c\nA\n", encoding="utf-8")
    source, params = load_documents(txt, csv)
    assert source == ["A = 1"]
    assert params == ["# c", "A"]


def test_write_lines_utf8_newline_terminated(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "out.txt"
    write_lines(["größe = 1", "b"], path)
    assert path.read_bytes() == "größe = 1\nb\n".encode("utf-8")


def test_write_lines_empty(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    write_lines([], path)
    assert path.read_bytes() == b""


def test_write_report_sorted_and_indented(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "report.json"
    write_report({"b": 1, "a": [1, 2]}, path)
    raw = path.read_bytes()
    assert orjson.loads(raw) == {"a": [1, 2], "b": 1}
    assert raw.index(b'"a"') < raw.index(b'"b"')
    assert b"\n  " in raw
