"""Substring-matching primitives over line sequences.

Pure text operations with zero domain dependencies.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineHit:
    """A needle found on a specific line."""

    needle: str
    line_index: int
    line: str


def find_first_line(
    lines: Sequence[str], needle: str, *, start: int = 0,
) -> LineHit | None:
    """Return the lowest-index line at or after ``start`` containing ``needle``.

    Matching is plain substring containment, case-sensitive.

    Args:
        lines: Lines to search.
        needle: Substring to look for. An empty needle matches any line.
        start: First index to consider.

    Returns:
        LineHit for the first match, or None if no line contains the needle.
    """
    for idx in range(max(start, 0), len(lines)):
        if needle in lines[idx]:
            return LineHit(needle, idx, lines[idx])
    return None


def occurs_after(lines: Sequence[str], needle: str, index: int) -> bool:
    """True if any line strictly after ``index`` contains ``needle``."""
    return find_first_line(lines, needle, start=index + 1) is not None
