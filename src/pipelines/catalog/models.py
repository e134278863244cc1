"""Record model for the streaming catalog export.

One ContentRecord per title. Multi-valued columns (director, cast, country,
genres) are kept as the raw comma-separated strings from the export; use
the analytics expansion helpers to split them.
"""

from dataclasses import dataclass, fields

# Content type values as they appear in the export
TYPE_MOVIE = "Movie"
TYPE_TV_SHOW = "TV Show"


@dataclass(frozen=True)
class ContentRecord:
    """A single catalog title.

    Attributes:
        id: Unique title identifier (show_id in the export)
        type: "Movie" or "TV Show"
        title: Display title
        director: Comma-separated director names (may be None)
        cast: Comma-separated actor names (may be None)
        country: Comma-separated production countries (may be None)
        date_added: Date the title was added, e.g. "September 25, 2021" (may be None)
        release_year: Original release year
        rating: Content rating code, e.g. "TV-MA" (may be None)
        duration: "90 min" for movies, "3 Seasons" for shows (may be None)
        genres: Comma-separated category tags (listed_in in the export)
        description: Free-text synopsis (may be None)
    """

    id: str
    type: str
    title: str
    director: str | None
    cast: str | None
    country: str | None
    date_added: str | None
    release_year: int
    rating: str | None
    duration: str | None
    genres: str
    description: str | None

    def to_dict(self) -> dict:
        """Field name -> value, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


RECORD_FIELDS = tuple(f.name for f in fields(ContentRecord))
