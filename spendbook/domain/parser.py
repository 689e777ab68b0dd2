"""Pure functions for reading the spending document.

This module contains the parsing half of the Markdown codec:
- No I/O operations
- Never raises on user text
- Rows that don't fit a table's shape are skipped silently

The document is hand-editable, so header rows, alignment rules, blank lines
and stray text are all expected between data rows.
"""

import re

from spendbook.domain.models import CategoryName, Cost, IsoDate
from spendbook.domain.records import (
    SECTION_DELIMITER,
    UNPAID_MARKER,
    DailyExpense,
    RecurringExpense,
)

DAILY_ROW = re.compile(r"^\|\s*([0-9]{4}-[0-9]{2}-[0-9]{2})\s*\|\s*(.+?)\s*\|\s*([0-9]+)\s*\|")
# A CRLF line ending leaves "\r" before the "\n"
DELIMITER_LINE = re.compile(rf"^{re.escape(SECTION_DELIMITER)}(?=\r?$)", re.MULTILINE)

RECURRING_MIN_CELLS = 5


def split_sections(text: str) -> tuple[list[str], list[str]]:
    """Split document text into daily and recurring section lines.

    Args:
        text: Raw document text.

    Returns:
        Tuple of (daily_lines, recurring_lines). Everything before the first
        delimiter line is daily; everything after it is recurring. Without a
        delimiter the whole text is daily and recurring is empty.
    """
    sections = DELIMITER_LINE.split(text)

    if len(sections) < 2:
        return text.split("\n"), []

    daily_lines = sections[0].split("\n")
    recurring_lines = SECTION_DELIMITER.join(sections[1:]).split("\n")
    return daily_lines, recurring_lines


def parse_daily_lines(lines: list[str]) -> list[DailyExpense]:
    """Parse daily expense rows, keeping line order.

    Args:
        lines: Lines of the daily section.

    Returns:
        One DailyExpense per matching row.
    """
    rows = []
    for line in lines:
        match = DAILY_ROW.match(line)
        if match:
            rows.append(
                DailyExpense(
                    date=IsoDate(match.group(1)),
                    category=CategoryName(match.group(2).strip()),
                    cost=Cost(int(match.group(3))),
                )
            )
    return rows


def split_cells(line: str) -> list[str]:
    """Split a table line on pipes, trimming cells and dropping empty ones."""
    return [cell for cell in (part.strip() for part in line.split("|")) if cell]


def is_recurring_row(cells: list[str]) -> bool:
    """Check whether cells look like a recurring data row.

    Header and alignment rows are recognised by their first cell.
    """
    if len(cells) < RECURRING_MIN_CELLS:
        return False
    first = cells[0]
    return not first.startswith("--") and not first.startswith("Category")


def parse_recurring_lines(lines: list[str]) -> list[RecurringExpense]:
    """Parse recurring expense rows, keeping line order.

    Args:
        lines: Lines of the recurring section.

    Returns:
        One RecurringExpense per qualifying row. Cells past the fifth are
        ignored; a paid cell of "-" becomes the empty unpaid sentinel.
    """
    rows = []
    for line in lines:
        cells = split_cells(line)
        if not is_recurring_row(cells):
            continue

        category, item, due, amount, paid = cells[:RECURRING_MIN_CELLS]
        rows.append(
            RecurringExpense(
                category=CategoryName(category),
                item=item,
                due=due,
                amount=amount,
                paid="" if paid == UNPAID_MARKER else paid,
            )
        )
    return rows


def parse_document(text: str | None) -> tuple[list[DailyExpense], list[RecurringExpense]]:
    """Parse a spending document into its two record sequences.

    Args:
        text: Raw document text. None or empty yields empty sequences.

    Returns:
        Tuple of (daily, recurring) in document order.
    """
    if not text:
        return [], []

    daily_lines, recurring_lines = split_sections(text)
    return parse_daily_lines(daily_lines), parse_recurring_lines(recurring_lines)
