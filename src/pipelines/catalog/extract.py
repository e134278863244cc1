"""
Catalog extraction from the netflix_titles export.

Reads the CSV (or a Parquet copy of it) with every column as text and
yields one flattened dict per row, keyed by ContentRecord field names.
Type conversion of release_year happens here; everything else stays text.
"""

from typing import Iterator

import polars as pl

# Export column -> record field
COLUMN_MAP = {
    "show_id": "id",
    "type": "type",
    "title": "title",
    "director": "director",
    "cast": "cast",
    "country": "country",
    "date_added": "date_added",
    "release_year": "release_year",
    "rating": "rating",
    "duration": "duration",
    "listed_in": "genres",
    "description": "description",
}

REQUIRED_COLUMNS = set(COLUMN_MAP)

# release_year is stored as Arrow int64
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _normalize_text(value: str | None) -> str | None:
    """Empty or whitespace-only strings become None."""
    if value is None:
        return None
    if not value.strip():
        return None
    return value


def read_catalog_frame(path: str) -> pl.DataFrame:
    """Read the raw export into a DataFrame of string columns.

    Args:
        path: Path to netflix_titles.csv or a Parquet file with the same columns

    Returns:
        DataFrame with the export columns, all Utf8

    Raises:
        ValueError: If the format is unsupported or required columns are missing
    """
    if path.endswith(".csv"):
        # infer_schema_length=0 reads everything as text; we cast explicitly below
        df = pl.read_csv(path, infer_schema_length=0)
    elif path.endswith(".parquet"):
        df = pl.read_parquet(path)
    else:
        raise ValueError(f"Unsupported file format: {path}")

    if not REQUIRED_COLUMNS.issubset(df.columns):
        missing = sorted(REQUIRED_COLUMNS - set(df.columns))
        raise ValueError(f"Missing required columns: {missing}. Got: {df.columns}")

    return df.select([pl.col(c).cast(pl.Utf8) for c in COLUMN_MAP])


def extract_catalog_rows(path: str) -> Iterator[dict]:
    """
    Yield one dict per export row, keyed by record field names.

    Rows without an id or with a non-numeric release_year are skipped
    with a warning.
    """
    df = read_catalog_frame(path)
    print(f"[extract] Read {len(df):,} rows from {path}")

    skipped = 0
    for row in df.iter_rows(named=True):
        record = {COLUMN_MAP[col]: _normalize_text(value) for col, value in row.items()}

        if not record["id"]:
            skipped += 1
            continue

        try:
            record["release_year"] = int(record["release_year"].strip())
        except (AttributeError, ValueError):
            skipped += 1
            continue

        if not INT64_MIN <= record["release_year"] <= INT64_MAX:
            skipped += 1
            continue

        record["id"] = record["id"].strip()
        record["genres"] = record["genres"] or ""
        record["type"] = (record["type"] or "").strip()
        record["title"] = record["title"] or ""
        yield record

    if skipped:
        print(f"[extract] Warning: skipped {skipped} rows without id or a valid release_year")
