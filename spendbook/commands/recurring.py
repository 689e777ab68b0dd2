"""Yearly recurring expense commands (add, delete, paid, unpaid)."""

import sys
from collections.abc import Callable

from rich.console import Console

from spendbook.commands.admin import resolve_document_path
from spendbook.dates import normalize_date, today
from spendbook.domain.ledger import (
    add_recurring_expense,
    delete_recurring_expense,
    mark_paid,
    mark_unpaid,
)
from spendbook.domain.records import RecurringExpense
from spendbook.store.document import load_ledger, save_ledger

console = Console()

RecurringEdit = Callable[[list[RecurringExpense]], tuple[list[RecurringExpense], str | None]]


def apply_recurring_edit(edit: RecurringEdit) -> tuple[list[RecurringExpense], list[RecurringExpense]]:
    """Load the ledger, apply one recurring edit and save it.

    Exits with an error message if the edit is rejected or the ledger
    can't be read or written.

    Returns:
        Tuple of (recurring_before, recurring_after).
    """
    document_path = resolve_document_path()

    try:
        daily, recurring = load_ledger(document_path)

        updated, error = edit(recurring)
        if error:
            console.print(f"[red]{error}[/red]")
            sys.exit(1)

        save_ledger(document_path, daily, updated)

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    return recurring, updated


def describe(record: RecurringExpense) -> str:
    return f"{record.category} / {record.item} ({record.amount}, due {record.due})"


def add_recurring_command(category: str, item: str, due: str, amount: str) -> None:
    """Add a yearly recurring expense, unpaid, at the end of the ledger."""
    _, recurring = apply_recurring_edit(lambda current: add_recurring_expense(current, category, item, due, amount))

    console.print("[green]✓[/green] Recurring expense added:")
    console.print(f"  {describe(recurring[-1])}")


def delete_recurring_command(index: int) -> None:
    """Delete a recurring expense by its number in 'spendbook list'."""
    before, _ = apply_recurring_edit(lambda current: delete_recurring_expense(current, index - 1))

    console.print(f"[green]✓[/green] Deleted recurring expense #{index}: {describe(before[index - 1])}")


def paid_command(index: int, date: str | None = None) -> None:
    """Mark a recurring expense as paid (today unless a date is given)."""
    if date:
        try:
            paid_on = normalize_date(date)
        except ValueError as e:
            console.print(f"[red]Invalid date format: {e}[/red]")
            sys.exit(1)
    else:
        paid_on = today()

    before, _ = apply_recurring_edit(lambda current: mark_paid(current, index - 1, paid_on))

    record = before[index - 1]
    if record.is_paid:
        console.print(f"[dim]Was already paid on {record.paid}[/dim]")
    console.print(f"[green]✓[/green] Marked paid on {paid_on}: {describe(record)}")


def unpaid_command(index: int) -> None:
    """Clear the paid date of a recurring expense."""
    before, _ = apply_recurring_edit(lambda current: mark_unpaid(current, index - 1))

    record = before[index - 1]
    if not record.is_paid:
        console.print(f"[yellow]Was not marked paid: {describe(record)}[/yellow]")
        return
    console.print(f"[green]✓[/green] Marked unpaid: {describe(record)}")
