"""Domain models and types for spendbook.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Markdown codec separated from infrastructure
"""

from spendbook.domain.models import CategoryName, Cost, IsoDate
from spendbook.domain.parser import parse_document
from spendbook.domain.records import DailyExpense, RecurringExpense
from spendbook.domain.serializer import serialize_document

__all__ = [
    "CategoryName",
    "Cost",
    "IsoDate",
    "DailyExpense",
    "RecurringExpense",
    "parse_document",
    "serialize_document",
]
