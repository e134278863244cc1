"""Multi-valued field expansion.

director, cast, country and genres hold comma-separated lists. These helpers
turn one record into one logical row per element, trimmed, in source order.
Duplicates are kept; only a following aggregation collapses them.
"""

from typing import Iterable, Iterator

import polars as pl

from src.pipelines.catalog.models import ContentRecord

EXPLODABLE_FIELDS = ("director", "cast", "country", "genres")


def split_values(value: str | None) -> list[str]:
    """Split a comma-separated field into trimmed, non-empty elements."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def explode_field(record: ContentRecord, field: str) -> Iterator[tuple[str, ContentRecord]]:
    """Yield (element, record) for each element of a comma-separated field.

    Args:
        record: Source record
        field: One of EXPLODABLE_FIELDS

    Raises:
        ValueError: If field is not a multi-valued field
    """
    if field not in EXPLODABLE_FIELDS:
        raise ValueError(f"Not a multi-valued field: {field}. Must be one of: {EXPLODABLE_FIELDS}")

    for element in split_values(getattr(record, field)):
        yield element, record


def rejoin_exploded(pairs: Iterable[tuple[str, ContentRecord]]) -> dict[str, list[str]]:
    """Group exploded elements back under the id of the record they came from."""
    grouped: dict[str, list[str]] = {}
    for element, record in pairs:
        if record.id not in grouped:
            grouped[record.id] = []
        grouped[record.id].append(element)
    return grouped


def explode_column(frame: pl.DataFrame, column: str, alias: str | None = None) -> pl.DataFrame:
    """Frame version of explode_field.

    Splits `column` on commas into one row per element, written to `alias`
    (defaults to replacing `column`). Every other column of the parent row is
    kept. Null and empty elements are dropped.
    """
    alias = alias or column
    return (
        frame.with_columns(pl.col(column).str.split(",").alias(alias))
        .explode(alias)
        .with_columns(pl.col(alias).str.strip_chars())
        .filter(pl.col(alias).is_not_null() & (pl.col(alias) != ""))
    )
