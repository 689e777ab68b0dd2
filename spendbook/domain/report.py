"""Pure functions for spending report calculations and aggregations.

This module contains the functional core for reporting operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

All costs are whole currency units (Cost type).
"""

from dataclasses import dataclass

from spendbook.domain.models import CategoryName, Cost
from spendbook.domain.records import DailyExpense, RecurringExpense


@dataclass(frozen=True)
class CategoryTotal:
    """Immutable total spent in one category."""

    category: CategoryName
    amount: Cost
    count: int
    percentage: float


@dataclass(frozen=True)
class SpendingReport:
    """Immutable spending report across categories."""

    categories: list[CategoryTotal]
    total: Cost
    count: int


@dataclass(frozen=True)
class RecurringSummary:
    """Immutable paid/unpaid count of recurring expenses."""

    paid: int
    unpaid: int

    @property
    def total(self) -> int:
        return self.paid + self.unpaid


def filter_by_period(
    daily: list[DailyExpense],
    since: str | None = None,
    until: str | None = None,
) -> list[DailyExpense]:
    """Keep daily expenses within a date range.

    Args:
        daily: Daily expenses.
        since: Inclusive start date (YYYY-MM-DD), or None for no lower bound.
        until: Exclusive end date (YYYY-MM-DD), or None for no upper bound.

    Returns:
        Matching expenses in their original order.
    """
    return [
        record
        for record in daily
        if (since is None or record.date >= since) and (until is None or record.date < until)
    ]


def total_by_category(daily: list[DailyExpense]) -> dict[CategoryName, tuple[Cost, int]]:
    """Sum costs per category.

    Returns:
        Dictionary of category to (total cost, number of expenses).
    """
    totals: dict[CategoryName, tuple[Cost, int]] = {}
    for record in daily:
        amount, count = totals.get(record.category, (Cost(0), 0))
        totals[record.category] = (Cost(amount + record.cost), count + 1)
    return totals


def calculate_share(amount: Cost, total: Cost) -> float:
    """Calculate a category's share of total spending (0-100)."""
    if total <= 0:
        return 0.0
    return (amount / total) * 100


def create_spending_report(daily: list[DailyExpense], sort_by: str = "value") -> SpendingReport:
    """Create spending report with per-category totals.

    Args:
        daily: Daily expenses to report on.
        sort_by: Sort method - "value" (largest first) or "alpha".

    Returns:
        SpendingReport with sorted categories and totals.
    """
    totals = total_by_category(daily)
    total = Cost(sum(amount for amount, _ in totals.values()))

    if sort_by == "alpha":
        ordered = sorted(totals.items(), key=lambda x: x[0])
    else:
        ordered = sorted(totals.items(), key=lambda x: x[1][0], reverse=True)

    categories = [
        CategoryTotal(
            category=category,
            amount=amount,
            count=count,
            percentage=calculate_share(amount, total),
        )
        for category, (amount, count) in ordered
    ]

    return SpendingReport(categories=categories, total=total, count=len(daily))


def summarize_recurring(recurring: list[RecurringExpense]) -> RecurringSummary:
    """Count paid and unpaid recurring expenses."""
    paid = sum(1 for record in recurring if record.is_paid)
    return RecurringSummary(paid=paid, unpaid=len(recurring) - paid)


def calculate_histogram_bar_length(
    amount: Cost,
    max_amount: Cost,
    bar_width: int,
) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)
