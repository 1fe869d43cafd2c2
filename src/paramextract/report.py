"""Run-report payload describing one extraction."""
from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from uuid import uuid4

if TYPE_CHECKING:
    from paramextract.config import ExtractionConfig
    from paramextract.extractor import ExtractionResult

REPORT_VERSION = "1.0"


def build_report(
    config: ExtractionConfig,
    entry_count: int,
    result: ExtractionResult,
    *,
    run_id: str | None = None,
) -> dict[str, Any]:
    """Build the JSON-ready report payload for a finished extraction.

    Without an explicit ``run_id`` one is derived from the creation time
    plus a random suffix, e.g. ``extract_20261016T120000Z_1a2b3c4d``.
    """
    created = datetime.now(UTC)
    return {
        "report_version": REPORT_VERSION,
        "created_at": created.isoformat(),
        "run_id": run_id or f"extract_{created:%Y%m%dT%H%M%SZ}_{uuid4().hex[:8]}",
        "inputs": {
            "txt": str(config.txt_path),
            "csv": str(config.csv_path),
        },
        "output": str(config.output_path),
        "counts": {
            "entries": entry_count,
            "comments": result.comments,
            "matched": len(result.matched),
            "skipped": len(result.skipped),
            "output_lines": len(result.lines),
        },
        "skipped": list(result.skipped),
        "families": [
            {
                "name": f.name,
                "family": f.family_key,
                "mode": f.mode,
                "terminated": f.terminated,
                "lines": f.lines_copied,
            }
            for f in result.families
        ],
    }
