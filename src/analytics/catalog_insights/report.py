"""Render query results as text and as a JSON report."""

import json
from datetime import date

import polars as pl

from src.pipelines.catalog.models import RECORD_FIELDS

# Record columns worth showing in text output; the rest are long free text
SUMMARY_COLUMNS = ["id", "type", "title", "release_year", "rating", "duration"]


def format_result(name: str, frame: pl.DataFrame, limit: int = 10) -> str:
    """Format one query result as a titled text block.

    Record-shaped results are narrowed to SUMMARY_COLUMNS plus any derived
    columns the query added.
    """
    columns = frame.columns
    if "description" in columns:
        derived = [c for c in columns if c not in RECORD_FIELDS]
        columns = SUMMARY_COLUMNS + derived

    lines = [f"=== {name} ({len(frame)} rows) ==="]
    if frame.is_empty():
        lines.append("  (no rows)")
        return "\n".join(lines)

    for row in frame.select(columns).head(limit).iter_rows(named=True):
        lines.append("  " + " | ".join(f"{k}={v}" for k, v in row.items()))
    if len(frame) > limit:
        lines.append(f"  ... {len(frame) - limit} more")
    return "\n".join(lines)


def build_report(
    results: dict[str, pl.DataFrame],
    today: date,
    total_records: int,
    output_path: str | None = None,
) -> dict:
    """Turn query results into a JSON-serializable report (optionally saved)."""
    report = {
        "as_of": today.isoformat(),
        "total_records": total_records,
        "queries": {name: frame.to_dicts() for name, frame in results.items()},
    }

    if output_path:
        with open(output_path, "w") as f:
            json.dump(report, f, indent=2, default=str)
        print(f"[report] Report saved to {output_path}")

    return report


def print_results(results: dict[str, pl.DataFrame], limit: int = 10) -> None:
    """Print every query result."""
    for name, frame in results.items():
        print()
        print(format_result(name, frame, limit=limit))
