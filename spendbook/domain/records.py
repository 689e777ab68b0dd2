"""Ledger record shapes and the Markdown document layout they live in.

Both record kinds are immutable. Callers own the sequences that hold them
and replace entries (dataclasses.replace) instead of mutating in place.
"""

from dataclasses import dataclass

from spendbook.domain.models import CategoryName, Cost, IsoDate

DOCUMENT_TITLE = "# Spending"
DAILY_HEADING = "## Daily Expenses"
RECURRING_HEADING = "## Yearly Recurring Expenses"

# Horizontal rule on its own line separates the two tables
SECTION_DELIMITER = "---"

# Paid cell rendered for an unpaid recurring expense
UNPAID_MARKER = "-"

DAILY_HEADERS = ("Date", "Category", "Cost (lei)")
RECURRING_HEADERS = ("Category", "Item", "Due", "Amount", "Paid")

# Minimum column widths; each equals its header label length
DATE_WIDTH = 10
DAILY_WIDTH_FLOORS = (DATE_WIDTH, 8, 10)
RECURRING_WIDTH_FLOORS = (8, 4, 3, 6, 4)


@dataclass(frozen=True)
class DailyExpense:
    """Immutable single expense on an exact date."""

    date: IsoDate
    category: CategoryName
    cost: Cost


@dataclass(frozen=True)
class RecurringExpense:
    """Immutable yearly obligation with its paid status.

    due and amount are free text and never interpreted. An empty paid
    means not yet paid; otherwise it holds the date it was marked paid.
    """

    category: CategoryName
    item: str
    due: str
    amount: str
    paid: str = ""

    @property
    def is_paid(self) -> bool:
        return bool(self.paid)


SAMPLE_DOCUMENT = """# Spending

## Daily Expenses

| Date       | Category  | Cost (lei) |
| ---------- | --------- | ---------- |
| 2025-01-02 | GROCERIES | 150        |
| 2025-01-01 | COFFEE    | 25         |

---

## Yearly Recurring Expenses

| Category | Item      | Due        | Amount   | Paid |
| -------- | --------- | ---------- | -------- | ---- |
| HOME     | INSURANCE | 2025-06-01 | 500 lei  | -    |
| CAR      | TAX       | 2025-03-15 | 200 lei  | -    |
"""
