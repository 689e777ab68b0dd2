"""Report command for viewing spending by category."""

import sys
from datetime import datetime

from rich.console import Console

from spendbook.commands.admin import resolve_document_path
from spendbook.dates import month_range
from spendbook.domain.ledger import format_cost
from spendbook.domain.models import Cost
from spendbook.domain.report import (
    CategoryTotal,
    calculate_histogram_bar_length,
    create_spending_report,
    filter_by_period,
    summarize_recurring,
)
from spendbook.store.document import load_ledger

console = Console()


def compute_report_period(all: bool, month: str | None) -> tuple[str | None, str | None, str]:
    """Compute date range and period display for report.

    Args:
        all: Whether to report all time.
        month: Optional specific month (YYYY-MM format).

    Returns:
        Tuple of (since_date, until_date, period_display).
    """
    if all:
        return None, None, "All Time"

    if not month:
        month = datetime.now().strftime("%Y-%m")

    return month_range(month)


def render_category_line(cat_total: CategoryTotal, histogram: bool, max_amount: Cost | None, bar_width: int) -> None:
    """Render single category line.

    Args:
        cat_total: CategoryTotal with spending data.
        histogram: Whether to show histogram bars.
        max_amount: Maximum amount for histogram scaling.
        bar_width: Width of histogram bar in characters.
    """
    amount_display = f"{format_cost(cat_total.amount)} lei"
    share_display = f"({cat_total.percentage:.0f}%)"

    if histogram and max_amount:
        bar_length = calculate_histogram_bar_length(cat_total.amount, max_amount, bar_width)
        bar = "█" * bar_length
        console.print(f"  {cat_total.category:20} {amount_display:>14} {share_display:>6} {bar}")
    else:
        console.print(f"  {cat_total.category}: {amount_display} {share_display}")


def report_command(
    sort_by: str = "value",
    histogram: bool = True,
    all: bool = False,
    month: str | None = None,
) -> None:
    """Show spending breakdown by category."""
    try:
        since_date, until_date, period = compute_report_period(all, month)
    except ValueError:
        console.print(f"[red]Invalid month '{month}' (expected YYYY-MM)[/red]")
        sys.exit(1)

    document_path = resolve_document_path()

    try:
        daily, recurring = load_ledger(document_path)
    except OSError as e:
        console.print(f"[red]Cannot read ledger: {e}[/red]", style="bold")
        sys.exit(1)

    # Functional core builds the report
    report = create_spending_report(filter_by_period(daily, since_date, until_date), sort_by)
    summary = summarize_recurring(recurring)

    # Imperative shell: Display results
    console.print(f"[bold cyan]{period}[/bold cyan]\n")

    if report.categories:
        console.print("[bold red]Spending by category:[/bold red]\n")
        max_amount = Cost(max(cat.amount for cat in report.categories)) if histogram else None

        for cat_total in report.categories:
            render_category_line(cat_total, histogram, max_amount, 30)

        console.print(
            f"\n  [bold]Total spent:[/bold] {format_cost(report.total)} lei across {report.count} expenses\n"
        )
    else:
        console.print("[dim]No daily expenses in this period[/dim]\n")

    if summary.total:
        console.print(
            f"[bold]Recurring:[/bold] [green]{summary.paid} paid[/green], [yellow]{summary.unpaid} unpaid[/yellow]"
        )
