"""Pure functions for rendering the spending document.

This module contains the serializing half of the Markdown codec:
- No I/O operations
- Deterministic output for a given pair of sequences
- Column widths computed fresh from the records on every call

Rendering output that was just parsed gives back the same text, so one
parse/serialize pass normalizes a hand-edited document for good.
"""

from collections.abc import Sequence

from spendbook.domain.records import (
    DAILY_HEADERS,
    DAILY_HEADING,
    DAILY_WIDTH_FLOORS,
    DOCUMENT_TITLE,
    RECURRING_HEADERS,
    RECURRING_HEADING,
    RECURRING_WIDTH_FLOORS,
    SECTION_DELIMITER,
    UNPAID_MARKER,
    DailyExpense,
    RecurringExpense,
)


def pad(value: object, width: int) -> str:
    """Right-pad a value's text with spaces up to width.

    Longer values are returned unchanged, never truncated.
    """
    text = str(value)
    return text + " " * max(0, width - len(text))


def render_row(cells: Sequence[object], widths: Sequence[int]) -> str:
    """Render one table row with each cell padded to its column width."""
    return "| " + " | ".join(pad(cell, width) for cell, width in zip(cells, widths)) + " |"


def render_rule(widths: Sequence[int]) -> str:
    """Render the alignment row under a table header."""
    return render_row(["-" * width for width in widths], widths)


def render_table(headers: Sequence[str], rows: list[Sequence[object]], widths: Sequence[int]) -> list[str]:
    """Render header, alignment rule and data rows of a table."""
    lines = [render_row(headers, widths), render_rule(widths)]
    lines.extend(render_row(row, widths) for row in rows)
    return lines


def column_widths(rows: list[Sequence[object]], floors: Sequence[int]) -> list[int]:
    """Compute column widths as the longest cell text, never below the floor.

    Args:
        rows: Data rows as rendered cell values.
        floors: Minimum width per column.

    Returns:
        Width per column.
    """
    widths = list(floors)
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))
    return widths


def daily_cells(record: DailyExpense) -> tuple[str, str, str]:
    return record.date, record.category, str(record.cost)


def recurring_cells(record: RecurringExpense) -> tuple[str, str, str, str, str]:
    return record.category, record.item, record.due, record.amount, record.paid or UNPAID_MARKER


def serialize_daily(daily: Sequence[DailyExpense]) -> list[str]:
    """Render the daily expenses table lines."""
    rows: list[Sequence[object]] = [daily_cells(record) for record in daily]
    widths = column_widths(rows, DAILY_WIDTH_FLOORS)
    # Date column stays fixed at the YYYY-MM-DD width
    widths[0] = DAILY_WIDTH_FLOORS[0]
    return render_table(DAILY_HEADERS, rows, widths)


def serialize_recurring(recurring: Sequence[RecurringExpense]) -> list[str]:
    """Render the recurring expenses table lines."""
    rows: list[Sequence[object]] = [recurring_cells(record) for record in recurring]
    widths = column_widths(rows, RECURRING_WIDTH_FLOORS)
    return render_table(RECURRING_HEADERS, rows, widths)


def serialize_document(
    daily: Sequence[DailyExpense],
    recurring: Sequence[RecurringExpense],
) -> str:
    """Render both record sequences as the full spending document.

    Args:
        daily: Daily expenses in the order they should appear.
        recurring: Recurring expenses in the order they should appear.

    Returns:
        Document text ending with a newline. Empty sequences still get a
        header and rule row sized to the floor widths.
    """
    lines = [
        DOCUMENT_TITLE,
        "",
        DAILY_HEADING,
        "",
        *serialize_daily(daily),
        "",
        SECTION_DELIMITER,
        "",
        RECURRING_HEADING,
        "",
        *serialize_recurring(recurring),
    ]
    return "\n".join(lines) + "\n"
