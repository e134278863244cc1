"""
Pytest fixtures for catalog tests.

Provides a record factory and a small hand-built catalog that exercises
every query (ties, missing fields, malformed durations and dates).

Usage:
    pytest tests/                 # runs all tests
    pytest tests/ -k queries      # runs only query tests
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so tests can import from src
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.pipelines.catalog.models import ContentRecord  # noqa: E402


def make_record(id: str, **overrides) -> ContentRecord:
    """Build a ContentRecord with sensible defaults for every field."""
    values = {
        "id": id,
        "type": "Movie",
        "title": f"Title {id}",
        "director": None,
        "cast": None,
        "country": None,
        "date_added": None,
        "release_year": 2020,
        "rating": None,
        "duration": None,
        "genres": "",
        "description": None,
    }
    values.update(overrides)
    return ContentRecord(**values)


@pytest.fixture
def record_factory():
    """The make_record helper, as a fixture."""
    return make_record


@pytest.fixture
def sample_catalog() -> list[ContentRecord]:
    """Seven titles covering the interesting cases."""
    return [
        make_record(
            "s1",
            type="Movie",
            director="Rajiv Chilaka",
            cast="Vatsal Dubey, Julie Tejwani",
            country="India",
            date_added="September 25, 2021",
            release_year=2020,
            rating="TV-Y7",
            duration="90 min",
            genres="Children & Family Movies",
            description="A boy and his friends save the village.",
        ),
        make_record(
            "s2",
            type="Movie",
            director="Rajiv Chilaka, Rajiv Chilaka",
            cast="Salman Khan, Kajol",
            country="India",
            date_added=" September 24, 2021",
            release_year=2019,
            rating="TV-14",
            duration="150 min",
            genres="Dramas, International Movies",
            description="A killer plot unfolds.",
        ),
        make_record(
            "s3",
            type="TV Show",
            director=None,
            cast="Salman Khan, Ama Qamata",
            country="South Africa",
            date_added="August 1, 2015",
            release_year=2010,
            rating="TV-MA",
            duration="7 Seasons",
            genres="International TV Shows, TV Dramas",
            description="Scenes of VIOLENCE and betrayal.",
        ),
        make_record(
            "s4",
            type="TV Show",
            director=None,
            cast=None,
            country="United States, India",
            date_added="not a date",
            release_year=2021,
            rating="TV-MA",
            duration="2 Seasons",
            genres="Docuseries, Documentaries",
            description=None,
        ),
        make_record(
            "s5",
            type="TV Show",
            director="Mike Flanagan",
            cast="Kate Siegel",
            country="United States",
            date_added="October 1, 2022",
            release_year=2021,
            rating="TV-14",
            duration="9 Seasons",
            genres="TV Horror",
            description="A haunted house.",
        ),
        make_record(
            "s6",
            type="Movie",
            director="Kirsten Johnson",
            cast=None,
            country="United States",
            date_added="December 5, 2019",
            release_year=2020,
            rating="PG-13",
            duration="unknown",
            genres="Documentaries",
            description="A documentary about a father.",
        ),
        make_record(
            "s7",
            type="Movie",
            director=None,
            cast="Salman Khan",
            country="India",
            date_added=None,
            release_year=2005,
            rating="TV-14",
            duration="150 min",
            genres="Action & Adventure",
            description="Old action.",
        ),
    ]
