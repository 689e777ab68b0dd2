"""Tests for spendbook.dates functions."""

import re

import pytest

from spendbook.dates import month_range, normalize_date, today


class TestToday:
    """Tests for today."""

    def test_iso_format(self) -> None:
        """Should return YYYY-MM-DD."""
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", today())


class TestNormalizeDate:
    """Tests for normalize_date."""

    def test_iso_passes_through(self) -> None:
        """Should keep an ISO date."""
        assert normalize_date("2025-01-15") == "2025-01-15"

    def test_iso_is_not_read_day_first(self) -> None:
        """Should not swap month and day on ISO input."""
        assert normalize_date("2025-03-04") == "2025-03-04"

    def test_day_first_slashes(self) -> None:
        """Should read DD/MM/YYYY."""
        assert normalize_date("15/01/2025") == "2025-01-15"

    def test_day_first_dashes(self) -> None:
        """Should read DD-MM-YYYY."""
        assert normalize_date("31-12-2024") == "2024-12-31"

    def test_strips_whitespace(self) -> None:
        """Should ignore surrounding whitespace."""
        assert normalize_date("  2025-01-15 ") == "2025-01-15"

    def test_empty_raises(self) -> None:
        """Should raise ValueError for empty input."""
        with pytest.raises(ValueError):
            normalize_date("   ")

    def test_garbage_raises(self) -> None:
        """Should raise ValueError for text that isn't a date."""
        with pytest.raises(ValueError):
            normalize_date("not a date")


class TestMonthRange:
    """Tests for month_range."""

    def test_january_range(self) -> None:
        """Should calculate range for January."""
        since, until, label = month_range("2025-01")

        assert since == "2025-01-01"
        assert until == "2025-02-01"
        assert label == "January 2025"

    def test_december_range_crosses_year(self) -> None:
        """Should handle December (crosses year boundary)."""
        since, until, label = month_range("2025-12")

        assert since == "2025-12-01"
        assert until == "2026-01-01"
        assert label == "December 2025"

    def test_february_leap_year(self) -> None:
        """Should handle February in leap year."""
        since, until, _ = month_range("2024-02")

        assert since == "2024-02-01"
        assert until == "2024-03-01"

    def test_invalid_month_number_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month number."""
        with pytest.raises(ValueError):
            month_range("2025-13")
