"""Domain type definitions for spendbook.

These NewTypes provide semantic clarity and help with type checking:
- IsoDate: Calendar date in YYYY-MM-DD format
- CategoryName: Name of an expense category
- Cost: Whole currency units (no minor units, no separators)
"""

from typing import NewType

# Dates are always in YYYY-MM-DD format (e.g., "2025-01-02")
IsoDate = NewType("IsoDate", str)

# Category label, upper-cased by the ledger layer before storage
CategoryName = NewType("CategoryName", str)

# Daily costs are whole units (lei), never fractional
Cost = NewType("Cost", int)
