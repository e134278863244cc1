"""
Load catalog rows into uniquely keyed ContentRecords.

The record id is the primary key. The export occasionally repeats a
show_id; the last occurrence wins.
"""

from typing import Iterable

import polars as pl
import pyarrow as pa

from .extract import extract_catalog_rows
from .models import RECORD_FIELDS, ContentRecord

# Arrow schema for the record frame. Column order follows ContentRecord.
CATALOG_ARROW_SCHEMA = pa.schema(
    [
        pa.field("id", pa.string(), nullable=False),
        pa.field("type", pa.string(), nullable=False),
        pa.field("title", pa.string(), nullable=False),
        pa.field("director", pa.string(), nullable=True),
        pa.field("cast", pa.string(), nullable=True),
        pa.field("country", pa.string(), nullable=True),
        pa.field("date_added", pa.string(), nullable=True),
        pa.field("release_year", pa.int64(), nullable=False),
        pa.field("rating", pa.string(), nullable=True),
        pa.field("duration", pa.string(), nullable=True),
        pa.field("genres", pa.string(), nullable=False),
        pa.field("description", pa.string(), nullable=True),
    ]
)


def records_from_rows(rows: Iterable[dict]) -> dict[str, ContentRecord]:
    """
    Build ContentRecords keyed by id.

    Rows missing an id are skipped. Duplicate ids are deduplicated
    (last occurrence wins).
    """
    records: dict[str, ContentRecord] = {}
    duplicates = 0
    for row in rows:
        record_id = row.get("id")
        if not record_id:
            continue
        if record_id in records:
            duplicates += 1
        records[record_id] = ContentRecord(**{name: row.get(name) for name in RECORD_FIELDS})

    if duplicates:
        print(f"[load] Warning: {duplicates} duplicate ids, kept last occurrence")
    return records


def records_to_arrow(records: Iterable[ContentRecord]) -> pa.Table:
    """Convert records to a PyArrow table with CATALOG_ARROW_SCHEMA."""
    return pa.Table.from_pylist([r.to_dict() for r in records], schema=CATALOG_ARROW_SCHEMA)


def records_to_frame(records: Iterable[ContentRecord]) -> pl.DataFrame:
    """Convert records to a Polars DataFrame (one row per record).

    An empty input gives an empty frame that still carries every column.
    """
    return pl.from_arrow(records_to_arrow(records))


def load_catalog(path: str) -> dict[str, ContentRecord]:
    """Read the export at path into a mapping of id -> ContentRecord.

    Args:
        path: Path to netflix_titles.csv (or Parquet with the same columns)

    Returns:
        Dict of unique records, in file order of first appearance
    """
    records = records_from_rows(extract_catalog_rows(path))
    print(f"[load] Loaded {len(records):,} unique records")
    return records
