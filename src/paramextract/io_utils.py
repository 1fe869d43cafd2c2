"""I/O utilities for line-oriented text files and the JSON run report.

Text documents are read in bulk as UTF-8 and split on line endings only
(``\\n``, ``\\r\\n``, lone ``\\r``); form feeds, vertical tabs and Unicode
separators stay inside the line. Undecodable bytes become U+FFFD so one bad
line does not abort the run.
"""
from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

import orjson

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text on line endings. One trailing line ending adds no line."""
    if not text:
        return []
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def load_lines(path: Path) -> list[str]:
    """Load a text file as a list of lines without line terminators."""
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return split_lines(f.read())


def load_documents(txt_path: Path, csv_path: Path) -> tuple[list[str], list[str]]:
    """Read the source document and the parameter list concurrently.

    Returns:
        (source_lines, parameter_lines). Both reads complete before this
        returns; the first read error propagates.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        txt_future = pool.submit(load_lines, txt_path)
        csv_future = pool.submit(load_lines, csv_path)
        return txt_future.result(), csv_future.result()


def write_lines(lines: list[str], path: Path) -> None:
    """Write lines as UTF-8, each terminated by a newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line)
            f.write("\n")


def write_report(report: dict[str, Any], path: Path) -> None:
    """Write a run report as indented JSON with sorted keys."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(
        orjson.dumps(report, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)
    )
