#!/usr/bin/env python3
"""Extract a configured subset of parameters from a text document.

Reads the parameter list (``csv=``, one entry per line despite the name),
matches each entry against the source document (``txt=``) and writes the
matched lines, in parameter-list order, to ``output=``.

Usage::

    python3 scripts/extract_params.py txt=./config.txt csv=./params.csv \
        output=./extracted.txt [report=./report.json] [--verbose]

Exit codes: 0 on success, 1 on a malformed parameter list or I/O failure,
2 on missing or invalid arguments.
"""
from __future__ import annotations

import argparse
import logging
import sys

from paramextract.config import (
    MISSING_KEY_MESSAGES,
    OPTIONAL_KEYS,
    REQUIRED_KEYS,
    ConfigurationError,
    ExtractionConfig,
)
from paramextract.extractor import run_extraction
from paramextract.parameter_spec import MalformedSpecError

_KNOWN_KEYS = frozenset(REQUIRED_KEYS + OPTIONAL_KEYS)


def _parse_assignment(token: str) -> tuple[str, str]:
    key, sep, value = token.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(
            f"expected KEY=VALUE, got {token!r}"
        )
    if key not in _KNOWN_KEYS:
        raise argparse.ArgumentTypeError(
            f"unknown key {key!r} (expected one of: {', '.join(sorted(_KNOWN_KEYS))})"
        )
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract configured parameters from a text document."
    )
    parser.add_argument(
        "assignments",
        nargs="*",
        type=_parse_assignment,
        metavar="KEY=VALUE",
        help="txt=<source>, csv=<parameter list>, output=<destination>, "
        "optional report=<json report>",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    print("Starting parameter extraction...")
    try:
        config = ExtractionConfig.from_assignments(dict(args.assignments))
    except ConfigurationError as exc:
        for key in exc.missing:
            print(MISSING_KEY_MESSAGES[key])
        return 2

    try:
        run_extraction(config)
    except MalformedSpecError as exc:
        print(f"Invalid parameter list {config.csv_path}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Extraction failed: {exc}", file=sys.stderr)
        return 1

    print(
        f"Successfully extracted all parameters in {config.csv_path} "
        f"from {config.txt_path} to {config.output_path}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
