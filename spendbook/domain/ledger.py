"""Pure functions for changing the in-memory ledger.

This module contains the functional core for ledger edits:
- No I/O operations (no files, no console)
- Sequences are never mutated; a new list is returned
- Invalid input leaves the ledger unchanged and reports why

Every edit returns (new_sequence, error). On error the returned sequence is
the one passed in.
"""

import re
from dataclasses import replace

from spendbook.domain.models import CategoryName, Cost, IsoDate
from spendbook.domain.records import DailyExpense, RecurringExpense

LEADING_DIGITS = re.compile(r"^\s*([0-9]+)")
ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Text that would split or end a table row
CELL_BREAKERS = ("|", "\n", "\r")


def check_cells(**fields: str) -> str | None:
    """Check that field values fit in a single table cell.

    Returns:
        Error message naming the offending fields, or None.
    """
    bad = [name for name, value in fields.items() if any(c in value for c in CELL_BREAKERS)]
    if bad:
        return f"Fields may not contain '|' or line breaks: {', '.join(bad)}"
    return None


def parse_cost(raw: str) -> Cost | None:
    """Parse a cost typed by the user.

    Only the leading digits count, so "150 lei" reads as 150.

    Args:
        raw: Raw cost text.

    Returns:
        Cost or None if the text doesn't start with digits.
    """
    match = LEADING_DIGITS.match(raw)
    if not match:
        return None
    return Cost(int(match.group(1)))


def format_cost(cost: Cost) -> str:
    """Format a cost for display with thousands grouping (e.g. 1,500)."""
    return f"{cost:,}"


def add_daily_expense(
    daily: list[DailyExpense],
    date: str,
    category: str,
    cost: int | None,
) -> tuple[list[DailyExpense], str | None]:
    """Add a daily expense at the top of the ledger.

    Args:
        daily: Current daily expenses, most recent first.
        date: Expense date (YYYY-MM-DD).
        category: Category label; stored upper-cased.
        cost: Whole-unit cost; must be positive.

    Returns:
        Tuple of (new_daily, error_message).
    """
    category_name = category.strip().upper()

    if not date:
        return daily, "Date is required"
    if not ISO_DATE.fullmatch(date):
        return daily, "Date must be YYYY-MM-DD"
    if not category_name:
        return daily, "Category is required"
    if not cost or cost < 0:
        return daily, "Cost must be a positive whole number"

    error = check_cells(category=category_name)
    if error:
        return daily, error

    record = DailyExpense(date=IsoDate(date), category=CategoryName(category_name), cost=Cost(cost))
    return [record, *daily], None


def add_recurring_expense(
    recurring: list[RecurringExpense],
    category: str,
    item: str,
    due: str,
    amount: str,
) -> tuple[list[RecurringExpense], str | None]:
    """Add an unpaid recurring expense at the end of the ledger.

    Args:
        recurring: Current recurring expenses.
        category: Category label; stored upper-cased.
        item: Item label; stored upper-cased.
        due: Due date or schedule, kept as typed.
        amount: Amount text, kept as typed (e.g. "500 lei").

    Returns:
        Tuple of (new_recurring, error_message).
    """
    category_name = category.strip().upper()
    item_name = item.strip().upper()
    due = due.strip()
    amount = amount.strip()

    missing = [
        label
        for label, value in (("category", category_name), ("item", item_name), ("due", due), ("amount", amount))
        if not value
    ]
    if missing:
        return recurring, f"Missing {', '.join(missing)}"

    error = check_cells(category=category_name, item=item_name, due=due, amount=amount)
    if error:
        return recurring, error

    # Would be read back as a table alignment row
    if category_name.startswith("--"):
        return recurring, "Category may not start with '--'"

    record = RecurringExpense(
        category=CategoryName(category_name),
        item=item_name,
        due=due,
        amount=amount,
    )
    return [*recurring, record], None


def check_index(size: int, index: int) -> str | None:
    if 0 <= index < size:
        return None
    if size == 0:
        return "No entries"
    return f"No entry #{index + 1} (choose 1-{size})"


def delete_daily_expense(daily: list[DailyExpense], index: int) -> tuple[list[DailyExpense], str | None]:
    """Remove the daily expense at a zero-based index."""
    error = check_index(len(daily), index)
    if error:
        return daily, error
    return daily[:index] + daily[index + 1 :], None


def delete_recurring_expense(
    recurring: list[RecurringExpense],
    index: int,
) -> tuple[list[RecurringExpense], str | None]:
    """Remove the recurring expense at a zero-based index."""
    error = check_index(len(recurring), index)
    if error:
        return recurring, error
    return recurring[:index] + recurring[index + 1 :], None


def set_paid(
    recurring: list[RecurringExpense],
    index: int,
    paid: str,
) -> tuple[list[RecurringExpense], str | None]:
    """Replace one recurring expense with a copy carrying a new paid value."""
    error = check_index(len(recurring), index)
    if error:
        return recurring, error

    updated = list(recurring)
    updated[index] = replace(recurring[index], paid=paid)
    return updated, None


def mark_paid(
    recurring: list[RecurringExpense],
    index: int,
    paid_on: IsoDate,
) -> tuple[list[RecurringExpense], str | None]:
    """Mark a recurring expense as paid on a date.

    Args:
        recurring: Current recurring expenses.
        index: Zero-based position.
        paid_on: Date it was paid (YYYY-MM-DD).

    Returns:
        Tuple of (new_recurring, error_message).
    """
    if not paid_on:
        return recurring, "Paid date is required"
    error = check_cells(paid=paid_on)
    if error:
        return recurring, error
    return set_paid(recurring, index, paid_on)


def mark_unpaid(recurring: list[RecurringExpense], index: int) -> tuple[list[RecurringExpense], str | None]:
    """Clear the paid date of a recurring expense."""
    return set_paid(recurring, index, "")


def list_categories(daily: list[DailyExpense]) -> list[CategoryName]:
    """List the distinct daily expense categories, sorted."""
    return sorted({record.category for record in daily})
