"""CLI entry point for spendbook."""

import typer

from spendbook.commands.admin import (
    backup_command,
    categories_command,
    format_command,
    init_command,
    list_command,
)
from spendbook.commands.expenses import add_command, delete_command
from spendbook.commands.recurring import (
    add_recurring_command,
    delete_recurring_command,
    paid_command,
    unpaid_command,
)
from spendbook.commands.report import report_command

app = typer.Typer(
    name="spendbook",
    help="Spendbook - a personal expense ledger kept as a Markdown document",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Spendbook - a personal expense ledger kept as a Markdown document."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing ledger and config"),
    demo: bool = typer.Option(False, "--demo", help="Start from a small sample ledger"),
) -> None:
    """Initialize spendbook configuration and ledger document."""
    init_command(force, demo)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: next to the ledger)"),
) -> None:
    """Backup your ledger and configuration files."""
    backup_command(output_dir)


@app.command(name="list")
def list_expenses(
    limit: int = typer.Option(50, help="Maximum daily expenses to show"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all your daily expenses"),
) -> None:
    """List your daily and recurring expenses."""
    list_command(limit, all)


@app.command()
def categories() -> None:
    """List the categories used by your daily expenses."""
    categories_command()


@app.command()
def add(
    cost: str,
    category: str = typer.Option(None, "--category", "-c", help="Category (prompted if omitted)"),
    date: str = typer.Option(None, "--date", "-d", help="Expense date (default: today)"),
) -> None:
    """Add a daily expense."""
    add_command(cost, category, date)


@app.command()
def delete(
    index: int,
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Delete a daily expense by its number in 'spendbook list'."""
    delete_command(index, yes)


@app.command(name="add-recurring")
def add_recurring(
    category: str,
    item: str,
    due: str,
    amount: str,
) -> None:
    """Add a yearly recurring expense."""
    add_recurring_command(category, item, due, amount)


@app.command(name="delete-recurring")
def delete_recurring(index: int) -> None:
    """Delete a recurring expense by its number in 'spendbook list'."""
    delete_recurring_command(index)


@app.command()
def paid(
    index: int,
    date: str = typer.Option(None, "--date", "-d", help="Date paid (default: today)"),
) -> None:
    """Mark a recurring expense as paid."""
    paid_command(index, date)


@app.command()
def unpaid(index: int) -> None:
    """Mark a recurring expense as not paid."""
    unpaid_command(index)


@app.command(name="report")
def report(
    sort_by: str = typer.Option("value", help="Sort by 'value' or 'alpha'"),
    histogram: bool = typer.Option(True, help="Show histogram of your spending"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all time"),
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM)"),
) -> None:
    """Show your spending breakdown by category."""
    report_command(sort_by, histogram, all, month)


@app.command(name="format")
def format_ledger(
    check: bool = typer.Option(False, "--check", help="Only report whether formatting is needed"),
) -> None:
    """Rewrite your ledger with aligned columns."""
    format_command(check)


if __name__ == "__main__":
    app()
