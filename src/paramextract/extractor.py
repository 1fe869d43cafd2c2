"""Parameter extraction: matching spec entries against a source document.

Every parameter is matched at the first source line that contains its name
as a substring. The search restarts at line 0 for each entry, so a name
that occurs several times is always matched at its first occurrence,
regardless of where earlier parameters were found. This is a known
limitation of the format, kept on purpose.

Terminator handling differs between block kinds:
    - standalone multi-line blocks stop *before* the first line containing
      ``END`` (the terminator line is not copied);
    - consecutive families stop *after* the line that fires their rule
      (that line is copied).
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from paramextract.config import ExtractionConfig
from paramextract.io_utils import load_documents, write_lines, write_report
from paramextract.parameter_spec import (
    TERMINATOR_MARKER,
    BoundedRule,
    Comment,
    ConsecutiveFamily,
    MultilineParameter,
    SpecEntry,
    parse_spec,
)
from paramextract.report import build_report
from paramextract.textmatch import find_first_line, occurs_after

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FamilyOutcome:
    """How a consecutive family extraction ended."""

    name: str
    family_key: str
    mode: str  # "bounded" or "open"
    terminated: bool  # False when the document ran out first
    lines_copied: int


@dataclass(slots=True)
class ExtractionResult:
    lines: list[str] = field(default_factory=list)
    matched: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    comments: int = 0
    families: list[FamilyOutcome] = field(default_factory=list)


def extract_block(source: Sequence[str], start: int, output: list[str]) -> int:
    """Copy lines after ``start`` until one contains the terminator marker.

    The terminator line is excluded. If no terminator follows, everything
    to the end of the document is copied.

    Returns:
        Number of lines appended to ``output``.
    """
    copied = 0
    for idx in range(start + 1, len(source)):
        line = source[idx]
        if TERMINATOR_MARKER in line:
            break
        output.append(line)
        copied += 1
    return copied


def extract_family(
    source: Sequence[str],
    start: int,
    family: ConsecutiveFamily,
    output: list[str],
) -> FamilyOutcome:
    """Copy the numbered blocks of a consecutive family.

    Bounded rule: stop at the first line containing the stop value.
    Open rule: at each line containing the terminator marker, stop if the
    family stem does not occur anywhere further down the document.

    Every visited line is copied, including the one that fires the rule.
    """
    rule = family.rule
    copied = 0
    terminated = False
    for idx in range(start + 1, len(source)):
        line = source[idx]
        if isinstance(rule, BoundedRule):
            terminated = rule.stop_value in line
        elif TERMINATOR_MARKER in line:
            terminated = not occurs_after(source, rule.stem, idx)
        output.append(line)
        copied += 1
        if terminated:
            break

    if not terminated:
        log.warning(
            "Consecutive parameter %s (%s) reached end of document "
            "without its termination rule firing",
            family.name.strip(), family.mode,
        )
    return FamilyOutcome(
        name=family.name.strip(),
        family_key=family.family_key,
        mode=family.mode,
        terminated=terminated,
        lines_copied=copied,
    )


def extract_parameters(
    entries: Sequence[SpecEntry], source: Sequence[str],
) -> ExtractionResult:
    """Extract every spec entry from ``source``, preserving entry order.

    Comments pass through verbatim. Parameters with no matching line are
    skipped silently.
    """
    result = ExtractionResult()
    for entry in entries:
        if isinstance(entry, Comment):
            result.lines.append(entry.text)
            result.comments += 1
            continue

        hit = find_first_line(source, entry.name)
        if hit is None:
            log.debug("Parameter not found, skipping: %s", entry.name)
            result.skipped.append(entry.name)
            continue

        result.lines.append(hit.line)
        result.matched.append(entry.name)
        if isinstance(entry, MultilineParameter):
            copied = extract_block(source, hit.line_index, result.lines)
            log.debug(
                "Block %s: %d lines, declared terminator %r",
                entry.name, copied, entry.terminator,
            )
        elif isinstance(entry, ConsecutiveFamily):
            outcome = extract_family(source, hit.line_index, entry, result.lines)
            result.families.append(outcome)
    return result


def run_extraction(config: ExtractionConfig) -> ExtractionResult:
    """Load both inputs, extract, and write the output (and optional report).

    Nothing is written if the parameter list fails to parse.

    Raises:
        MalformedSpecError: the parameter list has a truncated family.
        OSError: an input cannot be read or the output cannot be written.
    """
    source, spec_lines = load_documents(config.txt_path, config.csv_path)
    log.info(
        "Loaded %d source lines from %s and %d parameter lines from %s",
        len(source), config.txt_path, len(spec_lines), config.csv_path,
    )

    entries = parse_spec(spec_lines)
    log.info("Parsed %d parameter-list entries", len(entries))

    result = extract_parameters(entries, source)
    write_lines(result.lines, config.output_path)
    log.info(
        "Wrote %d lines to %s (%d matched, %d skipped)",
        len(result.lines), config.output_path,
        len(result.matched), len(result.skipped),
    )

    if config.report_path is not None:
        write_report(build_report(config, len(entries), result), config.report_path)
        log.info("Wrote run report to %s", config.report_path)
    return result
