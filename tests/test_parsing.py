"""
Unit tests for duration and date_added parsing.
"""

from datetime import date

from src.analytics.catalog_insights.parsing import (
    parse_date_added,
    parse_duration,
    with_date_added,
    with_duration,
    years_before,
)
from src.pipelines.catalog.load import records_to_frame


class TestParseDuration:
    """Tests for parse_duration."""

    def test_minutes_and_seasons(self):
        assert parse_duration("90 min") == 90
        assert parse_duration("3 Seasons") == 3
        assert parse_duration("1 Season") == 1

    def test_surrounding_whitespace(self):
        assert parse_duration("  45 min ") == 45

    def test_malformed(self):
        assert parse_duration("unknown") is None
        assert parse_duration("1.5 h") is None
        assert parse_duration("") is None
        assert parse_duration(None) is None

    def test_out_of_int64_range(self):
        """Values too large for an Int64 column are treated as unparseable."""
        assert parse_duration("99999999999999999999 min") is None
        assert parse_duration("-99999999999999999999 min") is None
        assert parse_duration(f"{2**63 - 1} min") == 2**63 - 1


class TestParseDateAdded:
    """Tests for parse_date_added."""

    def test_month_name_format(self):
        assert parse_date_added("September 25, 2021") == date(2021, 9, 25)

    def test_leading_whitespace(self):
        assert parse_date_added(" August 4, 2017") == date(2017, 8, 4)

    def test_unparseable(self):
        assert parse_date_added("2021-09-25") is None
        assert parse_date_added("soon") is None
        assert parse_date_added(None) is None


class TestYearsBefore:
    """Tests for years_before."""

    def test_same_day(self):
        assert years_before(date(2024, 6, 30), 5) == date(2019, 6, 30)

    def test_leap_day(self):
        assert years_before(date(2024, 2, 29), 1) == date(2023, 2, 28)
        assert years_before(date(2024, 2, 29), 4) == date(2020, 2, 29)


class TestFrameParsing:
    """Tests for the frame helpers that skip unparseable rows."""

    def test_with_duration_skips_and_warns(self, record_factory, capsys):
        frame = records_to_frame(
            [
                record_factory("a", duration="90 min"),
                record_factory("b", duration="n/a"),
                record_factory("c", duration=None),
            ]
        )
        result = with_duration(frame, "minutes", context="test")

        assert result["id"].to_list() == ["a"]
        assert result["minutes"].to_list() == [90]
        out = capsys.readouterr().out
        assert "[parsing] Warning: skipped 1 rows" in out

    def test_with_duration_skips_oversized_value(self, record_factory, capsys):
        frame = records_to_frame(
            [
                record_factory("a", duration="90 min"),
                record_factory("b", duration="99999999999999999999 min"),
            ]
        )
        result = with_duration(frame, "minutes", context="test")

        assert result["id"].to_list() == ["a"]
        assert "[parsing] Warning: skipped 1 rows" in capsys.readouterr().out

    def test_with_date_added(self, record_factory, capsys):
        frame = records_to_frame(
            [
                record_factory("a", date_added="January 1, 2020"),
                record_factory("b", date_added="yesterday"),
            ]
        )
        result = with_date_added(frame, "added_on", context="test")

        assert result["added_on"].to_list() == [date(2020, 1, 1)]
        assert "unparseable date_added" in capsys.readouterr().out

    def test_no_warning_when_clean(self, record_factory, capsys):
        frame = records_to_frame([record_factory("a", duration="2 Seasons")])
        with_duration(frame, "seasons", context="test")
        assert capsys.readouterr().out == ""
