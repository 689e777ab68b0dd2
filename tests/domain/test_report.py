"""Tests for spendbook.domain.report pure functions."""

from spendbook.domain.records import DailyExpense, RecurringExpense
from spendbook.domain.report import (
    calculate_histogram_bar_length,
    calculate_share,
    create_spending_report,
    filter_by_period,
    summarize_recurring,
    total_by_category,
)

DAILY = [
    DailyExpense(date="2025-02-03", category="FOOD", cost=60),
    DailyExpense(date="2025-02-01", category="COFFEE", cost=20),
    DailyExpense(date="2025-01-31", category="FOOD", cost=40),
    DailyExpense(date="2025-01-15", category="RENT", cost=1000),
]


class TestFilterByPeriod:
    """Tests for filter_by_period."""

    def test_since_inclusive_until_exclusive(self) -> None:
        """Should keep dates in [since, until)."""
        result = filter_by_period(DAILY, "2025-02-01", "2025-03-01")

        assert [r.date for r in result] == ["2025-02-03", "2025-02-01"]

    def test_open_bounds(self) -> None:
        """Should keep everything without bounds."""
        assert filter_by_period(DAILY) == DAILY

    def test_until_only(self) -> None:
        """Should exclude the until date itself."""
        result = filter_by_period(DAILY, until="2025-01-31")

        assert [r.date for r in result] == ["2025-01-15"]


class TestTotalByCategory:
    """Tests for total_by_category."""

    def test_sums_and_counts(self) -> None:
        """Should sum costs and count expenses per category."""
        totals = total_by_category(DAILY)

        assert totals["FOOD"] == (100, 2)
        assert totals["COFFEE"] == (20, 1)
        assert totals["RENT"] == (1000, 1)


class TestCalculateShare:
    """Tests for calculate_share."""

    def test_share(self) -> None:
        """Should compute percentage of total."""
        assert calculate_share(25, 100) == 25.0

    def test_zero_total(self) -> None:
        """Should return 0 for an empty total."""
        assert calculate_share(0, 0) == 0.0


class TestCreateSpendingReport:
    """Tests for create_spending_report."""

    def test_sorted_by_value(self) -> None:
        """Should list the largest category first."""
        report = create_spending_report(DAILY)

        assert [c.category for c in report.categories] == ["RENT", "FOOD", "COFFEE"]
        assert report.total == 1120
        assert report.count == 4

    def test_sorted_alpha(self) -> None:
        """Should list categories alphabetically."""
        report = create_spending_report(DAILY, sort_by="alpha")

        assert [c.category for c in report.categories] == ["COFFEE", "FOOD", "RENT"]

    def test_percentages(self) -> None:
        """Should attach each category's share of the total."""
        report = create_spending_report(DAILY[:3])

        food = report.categories[0]
        assert food.category == "FOOD"
        assert food.amount == 100
        assert food.count == 2
        assert round(food.percentage, 1) == 83.3

    def test_empty(self) -> None:
        """Should report nothing without expenses."""
        report = create_spending_report([])

        assert report.categories == []
        assert report.total == 0


class TestSummarizeRecurring:
    """Tests for summarize_recurring."""

    def test_counts_paid_and_unpaid(self) -> None:
        """Should count paid and unpaid separately."""
        recurring = [
            RecurringExpense(category="HOME", item="INSURANCE", due="2025-06-01", amount="500 lei", paid="2025-02-01"),
            RecurringExpense(category="CAR", item="TAX", due="2025-03-15", amount="200 lei"),
            RecurringExpense(category="CAR", item="ITP", due="2025-09-01", amount="150 lei"),
        ]

        summary = summarize_recurring(recurring)

        assert summary.paid == 1
        assert summary.unpaid == 2
        assert summary.total == 3


class TestCalculateHistogramBarLength:
    """Tests for calculate_histogram_bar_length."""

    def test_full_bar_for_max(self) -> None:
        """Should fill the bar for the largest amount."""
        assert calculate_histogram_bar_length(1000, 1000, 30) == 30

    def test_scales_down(self) -> None:
        """Should scale smaller amounts."""
        assert calculate_histogram_bar_length(100, 1000, 30) == 3

    def test_zero_max(self) -> None:
        """Should return 0 when max is zero."""
        assert calculate_histogram_bar_length(10, 0, 30) == 0
