"""Aggregation and ranking primitives shared by the catalog queries."""

from typing import Callable, Hashable, Iterable, TypeVar

import polars as pl

from .config import COUNT_COLUMN

T = TypeVar("T")


def group_count(items: Iterable[T], key: Callable[[T], Hashable]) -> dict:
    """Count items per key.

    The result depends only on the multiset of keys, not on input order.
    """
    counts: dict = {}
    for item in items:
        k = key(item)
        counts[k] = counts.get(k, 0) + 1
    return counts


def count_by(frame: pl.DataFrame, by: str | list[str], name: str = COUNT_COLUMN) -> pl.DataFrame:
    """Group-count a frame. Groups keep first-seen order."""
    return frame.group_by(by, maintain_order=True).agg(pl.len().cast(pl.Int64).alias(name))


def rank_within_partition(
    frame: pl.DataFrame,
    partition_by: str,
    order_by: str,
    name: str = "rank",
) -> pl.DataFrame:
    """Rank rows by `order_by` descending inside each partition.

    Two phases: split the frame into partitions, then rank each one on its
    own. Equal values share the lowest rank (1, 1, 3, ...).
    """
    if frame.is_empty():
        return frame.with_columns(pl.lit(None, dtype=pl.Int64).alias(name))

    ranked = [
        part.with_columns(
            pl.col(order_by).rank(method="min", descending=True).cast(pl.Int64).alias(name)
        )
        for part in frame.partition_by(partition_by, maintain_order=True)
    ]
    return pl.concat(ranked)


def top_n(frame: pl.DataFrame, by: str, n: int) -> pl.DataFrame:
    """Stable descending sort on `by`, truncated to n rows.

    Rows tied at the cut-off keep input order and are not specially tie-broken.
    """
    return frame.sort(by, descending=True, maintain_order=True).head(n)


def percentage_share(count: int, denominator: int) -> float:
    """count / denominator as a percentage, rounded to 2 decimals."""
    if denominator == 0:
        return 0.0
    return round(count / denominator * 100, 2)
