"""Configuration for catalog insights.

Default parameters for the parameterized queries, plus the parsing formats
shared across them.
"""

# Query defaults
DEFAULT_RELEASE_YEAR = 2020
DEFAULT_DIRECTOR = "Rajiv Chilaka"
DEFAULT_COUNTRY = "India"
DEFAULT_ACTOR = "Salman Khan"
DEFAULT_MIN_SEASONS = 5
RECENT_YEARS = 5  # "added in the last N years"
ACTOR_WINDOW_YEARS = 10  # "appeared in the last N years"

# Ranking limits
TOP_COUNTRIES = 5
TOP_YEARS = 5
TOP_ACTORS = 10

# Genre tag matched by the documentaries query (case-sensitive)
DOCUMENTARY_GENRE = "Documentaries"

# Keyword categorization (case-insensitive match on description)
FLAGGED_KEYWORDS = ("kill", "violence")
CATEGORY_FLAGGED = "Bad"
CATEGORY_CLEAN = "Good"

# date_added format in the export, e.g. "September 25, 2021"
DATE_ADDED_FORMAT = "%B %d, %Y"

# Default count column for group-counts
COUNT_COLUMN = "total_content"
