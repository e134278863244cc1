"""Fallible parsers for text fields with numeric or date meaning.

duration: leading token is minutes for movies and seasons for TV shows.
date_added: "September 25, 2021", sometimes with stray whitespace.

Parse failures never raise. Values that don't parse become None (or null in
a frame) and the frame helpers print a warning with the number of rows that
were skipped.
"""

from datetime import date, datetime

import polars as pl

from .config import DATE_ADDED_FORMAT

# Parsed durations must fit the Int64 frame column
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_duration(value: str | None) -> int | None:
    """Leading whitespace-delimited token of duration as an int.

    >>> parse_duration("90 min")
    90
    >>> parse_duration("3 Seasons")
    3
    """
    if not value or not value.strip():
        return None
    token = value.split()[0]
    try:
        parsed = int(token)
    except ValueError:
        return None
    if not INT64_MIN <= parsed <= INT64_MAX:
        return None
    return parsed


def parse_date_added(value: str | None) -> date | None:
    """Parse date_added, tolerating surrounding whitespace."""
    if not value or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), DATE_ADDED_FORMAT).date()
    except ValueError:
        return None


def years_before(day: date, years: int) -> date:
    """Same calendar day `years` earlier. Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def _warn_unparsed(frame: pl.DataFrame, source: str, parsed: str, context: str) -> None:
    unparsed = frame.filter(pl.col(source).is_not_null() & pl.col(parsed).is_null())
    if len(unparsed) > 0:
        sample = unparsed[source].head(3).to_list()
        print(
            f"[parsing] Warning: skipped {len(unparsed)} rows with unparseable {source} "
            f"in {context} (e.g. {sample})"
        )


def with_duration(frame: pl.DataFrame, alias: str, context: str) -> pl.DataFrame:
    """Add the parsed duration as `alias` and drop rows where it is null."""
    values = [parse_duration(v) for v in frame["duration"].to_list()]
    parsed = frame.with_columns(pl.Series(alias, values, dtype=pl.Int64))
    _warn_unparsed(parsed, "duration", alias, context)
    return parsed.filter(pl.col(alias).is_not_null())


def with_date_added(frame: pl.DataFrame, alias: str, context: str) -> pl.DataFrame:
    """Add the parsed date_added as `alias` and drop rows where it is null."""
    values = [parse_date_added(v) for v in frame["date_added"].to_list()]
    parsed = frame.with_columns(pl.Series(alias, values, dtype=pl.Date))
    _warn_unparsed(parsed, "date_added", alias, context)
    return parsed.filter(pl.col(alias).is_not_null())
