"""Ledger document storage on the local filesystem."""

import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path

from spendbook.domain.parser import parse_document
from spendbook.domain.records import DailyExpense, RecurringExpense
from spendbook.domain.serializer import serialize_document


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_default_document_path() -> Path:
    """Get the default ledger document path (XDG compliant)."""
    return get_xdg_data_home() / "spendbook" / "spending.md"


def document_exists(path: Path | None = None) -> bool:
    """Check if the ledger document exists.

    Args:
        path: Path to check. If None, uses default location.

    Returns:
        True if the document exists, False otherwise.
    """
    if path is None:
        path = get_default_document_path()
    return path.exists()


def read_document(path: Path) -> str:
    """Read raw document text.

    Args:
        path: Ledger document path.

    Returns:
        Document text, or "" if the file doesn't exist yet.

    Raises:
        OSError: If the file exists but can't be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def write_document(path: Path, text: str) -> None:
    """Write document text, replacing the file in one step.

    The text goes to a temporary file in the same directory first, so an
    interrupted write never leaves a truncated ledger behind.

    Args:
        path: Ledger document path.
        text: Full document text.

    Raises:
        OSError: If the file can't be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def load_ledger(path: Path) -> tuple[list[DailyExpense], list[RecurringExpense]]:
    """Load and parse the ledger document.

    Args:
        path: Ledger document path.

    Returns:
        Tuple of (daily, recurring) expenses in document order.
    """
    return parse_document(read_document(path))


def save_ledger(path: Path, daily: list[DailyExpense], recurring: list[RecurringExpense]) -> str:
    """Serialize and write the ledger document.

    Args:
        path: Ledger document path.
        daily: Daily expenses.
        recurring: Recurring expenses.

    Returns:
        The text that was written.
    """
    text = serialize_document(daily, recurring)
    write_document(path, text)
    return text


def backup_document(path: Path, backup_dir: Path) -> Path:
    """Copy the ledger document into a backup directory with a timestamp.

    Args:
        path: Ledger document path.
        backup_dir: Directory to copy into (created if missing).

    Returns:
        Path of the backup copy.

    Raises:
        OSError: If the copy fails.
    """
    backup_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = backup_dir / f"{path.stem}_{timestamp}{path.suffix}"

    shutil.copy2(path, backup_path)
    return backup_path
