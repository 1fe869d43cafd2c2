"""Run configuration built once from the command line."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Required keys, in the order their diagnostics are printed
REQUIRED_KEYS: tuple[str, ...] = ("output", "csv", "txt")
OPTIONAL_KEYS: tuple[str, ...] = ("report",)

MISSING_KEY_MESSAGES: dict[str, str] = {
    "output": (
        "Path for output file is missing! "
        "Example: extract_params.py output=./path/to/file.txt"
    ),
    "csv": (
        "Path for CSV file is missing! "
        "Example: extract_params.py csv=./path/to/file.csv"
    ),
    "txt": (
        "Path for source file is missing! "
        "Example: extract_params.py txt=./path/to/file.txt"
    ),
}


class ConfigurationError(ValueError):
    """Raised when one or more required paths are missing."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__("; ".join(MISSING_KEY_MESSAGES[k] for k in missing))


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    txt_path: Path
    csv_path: Path
    output_path: Path
    report_path: Path | None = None

    @classmethod
    def from_assignments(cls, values: Mapping[str, str]) -> ExtractionConfig:
        """Build a config from ``key -> value`` pairs.

        Empty values count as missing.

        Raises:
            ConfigurationError: listing every missing required key.
        """
        missing = [k for k in REQUIRED_KEYS if not values.get(k)]
        if missing:
            raise ConfigurationError(missing)
        report = values.get("report")
        return cls(
            txt_path=Path(values["txt"]),
            csv_path=Path(values["csv"]),
            output_path=Path(values["output"]),
            report_path=Path(report) if report else None,
        )
