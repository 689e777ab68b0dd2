"""Daily expense commands (add, delete)."""

import sys

import typer
from rich.console import Console

from spendbook.commands.admin import resolve_document_path
from spendbook.dates import normalize_date, today
from spendbook.domain.ledger import (
    add_daily_expense,
    delete_daily_expense,
    format_cost,
    list_categories,
    parse_cost,
)
from spendbook.domain.records import DailyExpense
from spendbook.store.document import load_ledger, save_ledger

console = Console()


def prompt_category(daily: list[DailyExpense]) -> str:
    """Prompt for a category, offering the ones already in use.

    Args:
        daily: Current daily expenses.

    Returns:
        Chosen or newly typed category.
    """
    categories = list_categories(daily)
    if categories:
        console.print("[bold]Categories:[/bold]")
        for idx, category in enumerate(categories, 1):
            console.print(f"  {idx:>2}. {category}")

    choice = typer.prompt("Category (number or new name)", type=str).strip()
    if choice.isdigit() and 1 <= int(choice) <= len(categories):
        return categories[int(choice) - 1]
    return choice


def add_command(
    cost: str,
    category: str | None = None,
    date: str | None = None,
) -> None:
    """Add a daily expense at the top of the ledger.

    Args:
        cost: Cost in whole lei (leading digits are used, e.g. "150").
        category: Category name. Prompted for if not given.
        date: Expense date (YYYY-MM-DD, DD/MM/YYYY, ...). Defaults to today.
    """
    if date:
        try:
            expense_date = normalize_date(date)
        except ValueError as e:
            console.print(f"[red]Invalid date format: {e}[/red]")
            console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
            sys.exit(1)
    else:
        expense_date = today()

    document_path = resolve_document_path()

    try:
        daily, recurring = load_ledger(document_path)

        if category is None:
            category = prompt_category(daily)

        daily, error = add_daily_expense(daily, expense_date, category, parse_cost(cost))
        if error:
            console.print(f"[red]{error}[/red]")
            sys.exit(1)

        save_ledger(document_path, daily, recurring)

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    added = daily[0]
    console.print("[green]✓[/green] Expense added:")
    console.print(f"  Date: {added.date}")
    console.print(f"  Category: {added.category}")
    console.print(f"  Cost: {format_cost(added.cost)} lei")


def delete_command(index: int, yes: bool = False) -> None:
    """Delete a daily expense by its number in 'spendbook list'.

    Args:
        index: 1-based position.
        yes: Skip confirmation.
    """
    document_path = resolve_document_path()

    try:
        daily, recurring = load_ledger(document_path)

        new_daily, error = delete_daily_expense(daily, index - 1)
        if error:
            console.print(f"[red]{error}[/red]")
            sys.exit(1)

        record = daily[index - 1]
        if not yes and not typer.confirm(
            f"Delete {record.date} {record.category} {format_cost(record.cost)} lei?", default=True
        ):
            console.print("[dim]Nothing deleted[/dim]")
            return

        save_ledger(document_path, new_daily, recurring)

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Deleted expense #{index}")
