#!/usr/bin/env python3
"""Generate ledger document format reference from the actual codec."""

import sys
from pathlib import Path

# Add parent directory to path to import spendbook
sys.path.insert(0, str(Path(__file__).parent.parent))

from spendbook.domain.parser import parse_document
from spendbook.domain.records import (
    DAILY_HEADERS,
    DAILY_HEADING,
    DAILY_WIDTH_FLOORS,
    RECURRING_HEADERS,
    RECURRING_HEADING,
    RECURRING_WIDTH_FLOORS,
    SAMPLE_DOCUMENT,
    SECTION_DELIMITER,
    UNPAID_MARKER,
)
from spendbook.domain.serializer import serialize_document

COLUMN_NOTES = {
    "Date": "YYYY-MM-DD, fixed width",
    "Cost (lei)": "whole number, digits only",
    "Due": "free text, kept as written",
    "Amount": "free text, kept as written (e.g. `500 lei`)",
    "Paid": f"date paid, or `{UNPAID_MARKER}` when unpaid",
}


def column_table(headers: tuple[str, ...], floors: tuple[int, ...]) -> list[str]:
    """Build a Markdown table describing a ledger table's columns."""
    lines = [
        "| Column | Minimum width | Notes |",
        "|--------|---------------|-------|",
    ]
    for header, floor in zip(headers, floors):
        lines.append(f"| `{header}` | {floor} | {COLUMN_NOTES.get(header, 'free text')} |")
    return lines


def generate_format_reference() -> str:
    """Generate complete document format reference."""
    daily, recurring = parse_document(SAMPLE_DOCUMENT)
    canonical = serialize_document(daily, recurring)

    lines = [
        "# Ledger Document Format",
        "",
        "The ledger is one Markdown file with two tables.",
        f"A line containing only `{SECTION_DELIMITER}` separates them.",
        "",
        f"## {DAILY_HEADING.lstrip('# ')}",
        "",
        *column_table(DAILY_HEADERS, DAILY_WIDTH_FLOORS),
        "",
        f"## {RECURRING_HEADING.lstrip('# ')}",
        "",
        *column_table(RECURRING_HEADERS, RECURRING_WIDTH_FLOORS),
        "",
        "Columns are padded to the longest value, never below the minimum width.",
        "Rows that don't fit a table's shape are ignored when reading.",
        "",
        "## Example",
        "",
        "```markdown",
        canonical.rstrip("\n"),
        "```",
        "",
    ]
    return "\n".join(lines)


def main() -> None:
    """Generate and write document format reference."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "document-format.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_format_reference())
    print(f"Generated format reference at {output_path}")


if __name__ == "__main__":
    main()
