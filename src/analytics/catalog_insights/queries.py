"""Catalog insight queries.

Fifteen independent questions asked of the catalog. Each query takes the
full record collection and returns a Polars DataFrame; nothing is mutated
and nothing reads the system clock ("today" is always passed in).

Queries and their result columns:
---------------------------------
1.  type_distribution             type, total_content
2.  most_common_rating_by_type    type, rating, rating_count, rank
3.  released_in_year              record columns
4.  top_countries                 country, total_content
5.  longest_movies                record columns + duration_minutes
6.  recently_added                record columns + added_on
7.  titles_by_director            record columns
8.  tv_shows_with_many_seasons    record columns + seasons
9.  genre_counts                  genre, total_content
10. yearly_release_share          country, release_year, total_release, release_share
11. documentaries                 record columns
12. missing_director              record columns
13. actor_appearances             record columns
14. top_actors_in_country         actor, total_content
15. categorize_by_keywords        category, type, content_count

Empty input always gives an empty frame with the columns above.
"""

import re
from datetime import date
from typing import Iterable

import polars as pl

from src.pipelines.catalog.load import records_to_frame
from src.pipelines.catalog.models import TYPE_MOVIE, TYPE_TV_SHOW, ContentRecord

from .aggregation import count_by, rank_within_partition, top_n
from .config import (
    ACTOR_WINDOW_YEARS,
    CATEGORY_CLEAN,
    CATEGORY_FLAGGED,
    COUNT_COLUMN,
    DEFAULT_ACTOR,
    DEFAULT_COUNTRY,
    DEFAULT_DIRECTOR,
    DEFAULT_MIN_SEASONS,
    DEFAULT_RELEASE_YEAR,
    DOCUMENTARY_GENRE,
    FLAGGED_KEYWORDS,
    RECENT_YEARS,
    TOP_ACTORS,
    TOP_COUNTRIES,
    TOP_YEARS,
)
from .expansion import explode_column, explode_field
from .parsing import with_date_added, with_duration, years_before


def type_distribution(records: Iterable[ContentRecord]) -> pl.DataFrame:
    """1. Number of titles per content type."""
    return count_by(records_to_frame(records), "type")


def most_common_rating_by_type(records: Iterable[ContentRecord]) -> pl.DataFrame:
    """2. Most frequent rating for each content type.

    Ratings are counted per (type, rating) and ranked inside each type.
    Every rating tied for the top count is returned.
    """
    counts = count_by(
        records_to_frame(records).filter(pl.col("rating").is_not_null()),
        ["type", "rating"],
        name="rating_count",
    )
    ranked = rank_within_partition(counts, partition_by="type", order_by="rating_count")
    return ranked.filter(pl.col("rank") == 1).sort(["type", "rating"])


def released_in_year(
    records: Iterable[ContentRecord],
    year: int = DEFAULT_RELEASE_YEAR,
    content_type: str | None = None,
) -> pl.DataFrame:
    """3. Titles released in `year`, optionally limited to one content type."""
    frame = records_to_frame(records).filter(pl.col("release_year") == year)
    if content_type is not None:
        frame = frame.filter(pl.col("type") == content_type)
    return frame


def top_countries(records: Iterable[ContentRecord], n: int = TOP_COUNTRIES) -> pl.DataFrame:
    """4. Countries with the most titles, counting each listed country once per title."""
    exploded = explode_column(records_to_frame(records), "country")
    return top_n(count_by(exploded, "country"), COUNT_COLUMN, n)


def longest_movies(records: Iterable[ContentRecord]) -> pl.DataFrame:
    """5. Movies sorted by runtime, longest first.

    The head of the result is the longest movie; tied runtimes stay in input
    order. Movies without a parseable duration are skipped.
    """
    movies = records_to_frame(records).filter(pl.col("type") == TYPE_MOVIE)
    movies = with_duration(movies, "duration_minutes", context="longest_movies")
    return movies.sort("duration_minutes", descending=True, maintain_order=True)


def recently_added(
    records: Iterable[ContentRecord],
    today: date,
    years: int = RECENT_YEARS,
) -> pl.DataFrame:
    """6. Titles added on or after the same day `years` years before today.

    Titles whose date_added does not parse are left out.
    """
    cutoff = years_before(today, years)
    frame = with_date_added(records_to_frame(records), "added_on", context="recently_added")
    return frame.filter(pl.col("added_on") >= cutoff)


def titles_by_director(
    records: Iterable[ContentRecord],
    director: str = DEFAULT_DIRECTOR,
) -> pl.DataFrame:
    """7. Titles where `director` is one of the listed directors.

    Each title appears once even if the name is listed more than once.
    """
    matches = []
    for record in records:
        if any(name == director for name, _ in explode_field(record, "director")):
            matches.append(record)
    return records_to_frame(matches)


def tv_shows_with_many_seasons(
    records: Iterable[ContentRecord],
    min_seasons: int = DEFAULT_MIN_SEASONS,
) -> pl.DataFrame:
    """8. TV shows with strictly more than `min_seasons` seasons."""
    shows = records_to_frame(records).filter(pl.col("type") == TYPE_TV_SHOW)
    shows = with_duration(shows, "seasons", context="tv_shows_with_many_seasons")
    return shows.filter(pl.col("seasons") > min_seasons)


def genre_counts(records: Iterable[ContentRecord]) -> pl.DataFrame:
    """9. Number of titles per genre tag."""
    exploded = explode_column(records_to_frame(records), "genres", alias="genre")
    return count_by(exploded, "genre")


def yearly_release_share(
    records: Iterable[ContentRecord],
    country: str = DEFAULT_COUNTRY,
    n: int = TOP_YEARS,
) -> pl.DataFrame:
    """10. Top release years for one country by share of that country's titles.

    Only titles whose country field is exactly `country` count. The
    denominator is every such title over all years, so shares of the
    returned years sum to at most 100.
    """
    in_country = records_to_frame(records).filter(pl.col("country") == country)
    denominator = len(in_country)

    counts = count_by(in_country, ["country", "release_year"], name="total_release")
    if denominator == 0:
        share = pl.lit(0.0, dtype=pl.Float64)
    else:
        share = (pl.col("total_release") / denominator * 100).round(2)
    counts = counts.with_columns(share.alias("release_share"))
    return top_n(counts, "release_share", n)


def documentaries(records: Iterable[ContentRecord]) -> pl.DataFrame:
    """11. Titles tagged with the documentaries genre (case-sensitive)."""
    return records_to_frame(records).filter(
        pl.col("genres").str.contains(DOCUMENTARY_GENRE, literal=True)
    )


def missing_director(records: Iterable[ContentRecord]) -> pl.DataFrame:
    """12. Titles with no director listed."""
    frame = records_to_frame(records)
    return frame.filter(
        pl.col("director").is_null() | (pl.col("director").str.strip_chars() == "")
    )


def actor_appearances(
    records: Iterable[ContentRecord],
    today: date,
    actor: str = DEFAULT_ACTOR,
    years: int = ACTOR_WINDOW_YEARS,
) -> pl.DataFrame:
    """13. Titles featuring `actor` released in the trailing `years` years.

    Matches the name as a substring of the cast list; the window keeps
    release years strictly greater than today.year - years.
    """
    frame = records_to_frame(records)
    return frame.filter(
        pl.col("cast").str.contains(actor, literal=True).fill_null(False)
        & (pl.col("release_year") > today.year - years)
    )


def top_actors_in_country(
    records: Iterable[ContentRecord],
    country: str = DEFAULT_COUNTRY,
    n: int = TOP_ACTORS,
) -> pl.DataFrame:
    """14. Actors appearing in the most titles produced in `country`."""
    in_country = records_to_frame(records).filter(pl.col("country") == country)
    exploded = explode_column(in_country, "cast", alias="actor")
    return top_n(count_by(exploded, "actor"), COUNT_COLUMN, n)


def categorize_by_keywords(
    records: Iterable[ContentRecord],
    keywords: tuple[str, ...] = FLAGGED_KEYWORDS,
) -> pl.DataFrame:
    """15. Count titles per (category, type).

    A title is "Bad" when its description contains any keyword
    (case-insensitive), otherwise "Good". Ordered by type, then category.
    """
    pattern = "|".join(re.escape(k.lower()) for k in keywords)
    flagged = pl.col("description").str.to_lowercase().str.contains(pattern).fill_null(False)

    categorized = records_to_frame(records).with_columns(
        pl.when(flagged)
        .then(pl.lit(CATEGORY_FLAGGED))
        .otherwise(pl.lit(CATEGORY_CLEAN))
        .alias("category")
    )
    counts = count_by(categorized, ["category", "type"], name="content_count")
    return counts.sort(["type", "category"])


def run_all(records: Iterable[ContentRecord], today: date) -> dict[str, pl.DataFrame]:
    """Run every query with its default parameters.

    Returns:
        Query name -> result frame, in query order
    """
    records = list(records)
    return {
        "type_distribution": type_distribution(records),
        "most_common_rating_by_type": most_common_rating_by_type(records),
        "released_in_year": released_in_year(records),
        "top_countries": top_countries(records),
        "longest_movies": longest_movies(records),
        "recently_added": recently_added(records, today),
        "titles_by_director": titles_by_director(records),
        "tv_shows_with_many_seasons": tv_shows_with_many_seasons(records),
        "genre_counts": genre_counts(records),
        "yearly_release_share": yearly_release_share(records),
        "documentaries": documentaries(records),
        "missing_director": missing_director(records),
        "actor_appearances": actor_appearances(records, today),
        "top_actors_in_country": top_actors_in_country(records),
        "categorize_by_keywords": categorize_by_keywords(records),
    }


QUERY_NAMES = (
    "type_distribution",
    "most_common_rating_by_type",
    "released_in_year",
    "top_countries",
    "longest_movies",
    "recently_added",
    "titles_by_director",
    "tv_shows_with_many_seasons",
    "genre_counts",
    "yearly_release_share",
    "documentaries",
    "missing_director",
    "actor_appearances",
    "top_actors_in_country",
    "categorize_by_keywords",
)
