"""Tests for spendbook.store document persistence."""

from pathlib import Path

from spendbook.domain.records import SAMPLE_DOCUMENT, DailyExpense, RecurringExpense
from spendbook.domain.serializer import serialize_document
from spendbook.store import (
    backup_document,
    document_exists,
    load_ledger,
    read_document,
    save_ledger,
    write_document,
)


class TestReadWriteDocument:
    """Tests for read_document and write_document."""

    def test_missing_document_reads_empty(self, tmp_path: Path) -> None:
        """Should read a missing document as empty text."""
        assert read_document(tmp_path / "missing.md") == ""

    def test_write_creates_parents(self, tmp_path: Path) -> None:
        """Should create the parent directory and write the text."""
        path = tmp_path / "nested" / "spending.md"

        write_document(path, "hello\n")

        assert document_exists(path)
        assert read_document(path) == "hello\n"

    def test_write_replaces_and_leaves_no_temp_files(self, tmp_path: Path) -> None:
        """Should replace existing content without leftovers."""
        path = tmp_path / "spending.md"
        write_document(path, "old")

        write_document(path, "new")

        assert read_document(path) == "new"
        assert [p.name for p in tmp_path.iterdir()] == ["spending.md"]


class TestLedger:
    """Tests for load_ledger and save_ledger."""

    def test_load_missing_is_empty(self, tmp_path: Path) -> None:
        """Should load empty sequences when no document exists."""
        assert load_ledger(tmp_path / "spending.md") == ([], [])

    def test_load_sample(self, tmp_path: Path) -> None:
        """Should parse the document on disk."""
        path = tmp_path / "spending.md"
        path.write_text(SAMPLE_DOCUMENT)

        daily, recurring = load_ledger(path)

        assert len(daily) == 2
        assert len(recurring) == 2

    def test_save_writes_serialized_text(self, tmp_path: Path) -> None:
        """Should write and return the serialized document."""
        path = tmp_path / "spending.md"
        daily = [DailyExpense(date="2025-01-02", category="GROCERIES", cost=150)]
        recurring = [RecurringExpense(category="HOME", item="INSURANCE", due="2025-06-01", amount="500 lei")]

        text = save_ledger(path, daily, recurring)

        assert text == serialize_document(daily, recurring)
        assert path.read_text() == text
        assert load_ledger(path) == (daily, recurring)


class TestBackupDocument:
    """Tests for backup_document."""

    def test_copies_with_timestamp(self, tmp_path: Path) -> None:
        """Should copy the document into the backup directory."""
        path = tmp_path / "spending.md"
        path.write_text(SAMPLE_DOCUMENT)

        backup_path = backup_document(path, tmp_path / "backups")

        assert backup_path.parent == tmp_path / "backups"
        assert backup_path.name.startswith("spending_")
        assert backup_path.suffix == ".md"
        assert backup_path.read_text() == SAMPLE_DOCUMENT
