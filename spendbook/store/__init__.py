"""Document store layer - provides persistence for the application.

This module re-exports all public document functions for easy importing.
"""

from spendbook.store.document import (
    backup_document,
    document_exists,
    get_default_document_path,
    get_xdg_data_home,
    load_ledger,
    read_document,
    save_ledger,
    write_document,
)

__all__ = [
    "backup_document",
    "document_exists",
    "get_default_document_path",
    "get_xdg_data_home",
    "load_ledger",
    "read_document",
    "save_ledger",
    "write_document",
]
