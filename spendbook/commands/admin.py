"""Admin commands for init, backup, listing and formatting the ledger."""

import sys
import tomllib
from pathlib import Path

from rich.console import Console
from rich.table import Table

from spendbook.config import create_default_config, get_config_path, get_document_path
from spendbook.domain.ledger import format_cost, list_categories
from spendbook.domain.parser import parse_document
from spendbook.domain.records import SAMPLE_DOCUMENT
from spendbook.domain.serializer import serialize_document
from spendbook.store.document import (
    backup_document,
    get_default_document_path,
    load_ledger,
    read_document,
    save_ledger,
    write_document,
)

console = Console()


def resolve_document_path() -> Path:
    """Resolve the ledger document path, exiting on a broken config."""
    try:
        return get_document_path()
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file {get_config_path()}: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Cannot read config: {e}[/red]", style="bold")
        sys.exit(1)


def backup_command(
    output_dir: str | None = None,
) -> None:
    """Backup the ledger document."""
    document_path = resolve_document_path()

    if not document_path.exists():
        console.print(f"[red]Ledger not found at {document_path}. Run 'spendbook init' first.[/red]", style="bold")
        sys.exit(1)

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = document_path.parent / "backups"

    try:
        backup_path = backup_document(document_path, backup_dir)
        console.print(f"[green]✓[/green] Ledger backed up to: {backup_path}")

        config_path = get_config_path()
        if config_path.exists():
            config_backup = backup_document(config_path, backup_dir)
            console.print(f"[green]✓[/green] Config backed up to: {config_backup}")

        console.print("\n[green]Backup complete![/green]", style="bold")
        console.print(f"[dim]Backup directory: {backup_dir}[/dim]")

    except OSError as e:
        console.print(f"[red]Backup failed: {e}[/red]", style="bold")
        sys.exit(1)


def init_command(force: bool = False, demo: bool = False) -> None:
    """Initialize spendbook configuration and ledger document."""
    config_path = get_config_path()
    document_path = get_default_document_path()

    config_exists = config_path.exists()
    document_exists = document_path.exists()

    # Guard: refuse to overwrite without force flag
    if not force and (config_exists or document_exists):
        console.print("[red]Initialization failed:[/red]", style="bold")
        if config_exists:
            console.print(f"  Config already exists: {config_path}")
        if document_exists:
            console.print(f"  Ledger already exists: {document_path}")
        console.print("\n[yellow]Use 'spendbook init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating ledger at {document_path}...[/cyan]")
        daily, recurring = parse_document(SAMPLE_DOCUMENT if demo else "")
        save_ledger(document_path, daily, recurring)
        if demo:
            console.print(f"[green]✓[/green] Ledger created with {len(daily)} daily and {len(recurring)} recurring")
        else:
            console.print("[green]✓[/green] Empty ledger created")

        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path, document_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

        console.print("\n[green]Initialization complete![/green]", style="bold")
        console.print(f"[dim]Ledger: {document_path}[/dim]")
        console.print(f"[dim]Config: {config_path}[/dim]")

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def list_command(
    limit: int = 50,
    all: bool = False,
) -> None:
    """List daily and recurring expenses."""
    document_path = resolve_document_path()

    try:
        daily, recurring = load_ledger(document_path)
    except OSError as e:
        console.print(f"[red]Cannot read ledger: {e}[/red]", style="bold")
        sys.exit(1)

    if not daily and not recurring:
        console.print("[yellow]No expenses found[/yellow]")
        return

    shown = daily if all else daily[:limit]
    title = f"Daily expenses (showing all {len(shown)})" if all else f"Daily expenses (showing {len(shown)})"
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Cost (lei)", justify="right")

    for idx, record in enumerate(shown, 1):
        table.add_row(str(idx), record.date, record.category, format_cost(record.cost))

    console.print(table)

    table = Table(title=f"Yearly recurring expenses ({len(recurring)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Category", style="magenta")
    table.add_column("Item", style="white")
    table.add_column("Due", style="cyan")
    table.add_column("Amount", justify="right")
    table.add_column("Paid", justify="center")

    for idx, item in enumerate(recurring, 1):
        paid = f"[green]{item.paid}[/green]" if item.is_paid else "[red]-[/red]"
        table.add_row(str(idx), item.category, item.item, item.due, item.amount, paid)

    console.print(table)


def categories_command() -> None:
    """List the categories used by daily expenses."""
    document_path = resolve_document_path()

    try:
        daily, _ = load_ledger(document_path)
    except OSError as e:
        console.print(f"[red]Cannot read ledger: {e}[/red]", style="bold")
        sys.exit(1)

    categories = list_categories(daily)
    if not categories:
        console.print("[yellow]No categories yet[/yellow]")
        return

    for idx, category in enumerate(categories, 1):
        console.print(f"  {idx:>2}. {category}")


def format_command(check: bool = False) -> None:
    """Rewrite the ledger with canonical column widths."""
    document_path = resolve_document_path()

    if not document_path.exists():
        console.print(f"[red]Ledger not found at {document_path}. Run 'spendbook init' first.[/red]", style="bold")
        sys.exit(1)

    try:
        text = read_document(document_path)
        daily, recurring = parse_document(text)
        formatted = serialize_document(daily, recurring)

        if formatted == text:
            console.print("[green]✓[/green] Ledger already formatted")
            return

        if check:
            console.print(f"[yellow]Ledger needs formatting: {document_path}[/yellow]")
            sys.exit(1)

        write_document(document_path, formatted)
        console.print(f"[green]✓[/green] Formatted {len(daily)} daily and {len(recurring)} recurring expenses")

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
