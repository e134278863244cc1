"""Catalog insights - descriptive analytics over the streaming catalog export.

Loads netflix_titles.csv, runs every catalog query and prints the results,
then writes them all to a JSON report.

Approach:
---------
1. Load the export into uniquely keyed records (src.pipelines.catalog)
2. Run the fifteen queries against the in-memory records
3. Print a text summary and save the JSON report

Environment variables:
    CATALOG_PATH: Path to netflix_titles.csv (required)
    OUTPUT_PATH: JSON report path (default: data/catalog_report.json)
    AS_OF_DATE: Reference date for date-relative queries, YYYY-MM-DD (default: today)
    PRINT_LIMIT: Rows printed per query (default: 10)

Usage:
    CATALOG_PATH=data/netflix_titles.csv python -m src.analytics.catalog_insights.main

    # Reproducible run pinned to a date
    CATALOG_PATH=data/netflix_titles.csv AS_OF_DATE=2024-06-30 \
        python -m src.analytics.catalog_insights.main
"""

import os
import sys
import time
from datetime import date

from src.pipelines.catalog.load import load_catalog

from .queries import run_all
from .report import build_report, print_results


def log(msg: str) -> None:
    """Print and flush immediately."""
    print(msg)
    sys.stdout.flush()


def run(
    catalog_path: str | None = None,
    output_path: str | None = None,
    as_of: date | None = None,
    print_limit: int = 10,
) -> dict:
    """
    Run every catalog query and save the report.

    Args:
        catalog_path: Path to the export (or set CATALOG_PATH env var)
        output_path: JSON report path (or set OUTPUT_PATH env var)
        as_of: Reference date. If None, uses AS_OF_DATE or today.
        print_limit: Rows printed per query

    Returns:
        The report dict
    """
    catalog_path = catalog_path or os.environ.get("CATALOG_PATH")
    if not catalog_path:
        raise ValueError("CATALOG_PATH required")

    output_path = output_path or os.environ.get("OUTPUT_PATH", "data/catalog_report.json")

    if as_of is None:
        as_of_env = os.environ.get("AS_OF_DATE")
        as_of = date.fromisoformat(as_of_env) if as_of_env else date.today()

    start_time = time.time()
    log("[main] Catalog insights starting")
    log(f"[main] Catalog: {catalog_path}")
    log(f"[main] As of: {as_of.isoformat()}")

    records = list(load_catalog(catalog_path).values())
    if not records:
        log("[main] Warning: catalog is empty, every query will return no rows")

    log(f"[main] Running queries over {len(records):,} records...")
    results = run_all(records, as_of)
    print_results(results, limit=print_limit)

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    report = build_report(results, as_of, len(records), output_path)

    elapsed = time.time() - start_time
    log("\n[main] === COMPLETE ===")
    log(f"[main] Time: {elapsed:.1f}s")
    log(f"[main] Queries: {len(results)}")
    return report


if __name__ == "__main__":
    print_limit = int(os.environ.get("PRINT_LIMIT", 10))
    run(print_limit=print_limit)
