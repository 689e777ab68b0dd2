"""Tests for spendbook.domain.serializer pure functions."""

from dataclasses import replace

from spendbook.domain.parser import parse_document
from spendbook.domain.records import SAMPLE_DOCUMENT, DailyExpense, RecurringExpense
from spendbook.domain.serializer import column_widths, pad, render_row, serialize_document

EMPTY_DOCUMENT = (
    "# Spending\n"
    "\n"
    "## Daily Expenses\n"
    "\n"
    "| Date       | Category | Cost (lei) |\n"
    "| ---------- | -------- | ---------- |\n"
    "\n"
    "---\n"
    "\n"
    "## Yearly Recurring Expenses\n"
    "\n"
    "| Category | Item | Due | Amount | Paid |\n"
    "| -------- | ---- | --- | ------ | ---- |\n"
)

GROCERIES = DailyExpense(date="2025-01-02", category="GROCERIES", cost=150)
INSURANCE = RecurringExpense(category="HOME", item="INSURANCE", due="2025-06-01", amount="500 lei")


class TestPad:
    """Tests for pad."""

    def test_pads_to_width(self) -> None:
        """Should right-pad with spaces."""
        assert pad("ab", 5) == "ab   "

    def test_never_truncates(self) -> None:
        """Should leave longer values unchanged."""
        assert pad("abcdef", 3) == "abcdef"

    def test_converts_numbers(self) -> None:
        """Should pad the text form of non-strings."""
        assert pad(150, 4) == "150 "


class TestRenderRow:
    """Tests for render_row."""

    def test_wraps_and_joins_cells(self) -> None:
        """Should join padded cells with ' | ' inside edge pipes."""
        assert render_row(["a", "bb"], [2, 3]) == "| a  | bb  |"


class TestColumnWidths:
    """Tests for column_widths."""

    def test_floors_apply_without_rows(self) -> None:
        """Should return floors when there are no rows."""
        assert column_widths([], (8, 4)) == [8, 4]

    def test_widens_to_longest_value(self) -> None:
        """Should widen a column to its longest cell."""
        assert column_widths([("short", "x"), ("much longer", "y")], (8, 4)) == [11, 4]


class TestSerializeDocument:
    """Tests for serialize_document."""

    def test_empty_sequences_use_floor_widths(self) -> None:
        """Should emit headers and rules sized to the floors with no rows."""
        assert serialize_document([], []) == EMPTY_DOCUMENT

    def test_daily_and_recurring_scenario(self) -> None:
        """Should render both tables with '-' for unpaid and amount untouched."""
        text = serialize_document([GROCERIES], [INSURANCE])

        assert text == (
            "# Spending\n"
            "\n"
            "## Daily Expenses\n"
            "\n"
            "| Date       | Category  | Cost (lei) |\n"
            "| ---------- | --------- | ---------- |\n"
            "| 2025-01-02 | GROCERIES | 150        |\n"
            "\n"
            "---\n"
            "\n"
            "## Yearly Recurring Expenses\n"
            "\n"
            "| Category | Item      | Due        | Amount  | Paid |\n"
            "| -------- | --------- | ---------- | ------- | ---- |\n"
            "| HOME     | INSURANCE | 2025-06-01 | 500 lei | -    |\n"
        )

    def test_long_cost_widens_cost_column(self) -> None:
        """Should widen the cost column for costs longer than the header."""
        text = serialize_document([replace(GROCERIES, cost=12345678901)], [])

        assert "| 2025-01-02 | GROCERIES | 12345678901 |" in text
        assert "| Date       | Category  | Cost (lei)  |" in text

    def test_paid_date_widens_paid_column(self) -> None:
        """Should size the paid column to a real paid date."""
        text = serialize_document([], [replace(INSURANCE, paid="2025-05-30")])

        assert "| HOME     | INSURANCE | 2025-06-01 | 500 lei | 2025-05-30 |" in text
        assert "| Category | Item      | Due        | Amount  | Paid       |" in text

    def test_emits_sequence_order(self) -> None:
        """Should not re-sort records."""
        older = DailyExpense(date="2024-12-31", category="COFFEE", cost=25)

        text = serialize_document([older, GROCERIES], [])

        assert text.index("2024-12-31") < text.index("2025-01-02")

    def test_deterministic(self) -> None:
        """Should produce identical output for identical input."""
        assert serialize_document([GROCERIES], [INSURANCE]) == serialize_document([GROCERIES], [INSURANCE])


class TestRoundTrip:
    """Tests for parse/serialize stability."""

    def test_reserializing_parsed_output_is_stable(self) -> None:
        """Should reach a fixed point after one normalization pass."""
        first = serialize_document(*parse_document(SAMPLE_DOCUMENT))
        second = serialize_document(*parse_document(first))

        assert first == second

    def test_hand_edited_text_keeps_values(self) -> None:
        """Should normalize spacing while keeping every field value."""
        text = (
            "|2025-01-02|groceries|150|\n"
            "---\n"
            "|   HOME |INSURANCE|   2025-06-01|500 lei|-|extra|\n"
        )

        daily, recurring = parse_document(text)
        normalized = serialize_document(daily, recurring)

        assert parse_document(normalized) == (daily, recurring)
        assert "| 2025-01-02 | groceries | 150        |" in normalized
        assert "| HOME     | INSURANCE | 2025-06-01 | 500 lei | -    |" in normalized

    def test_mark_paid_and_unpaid_round_trip(self) -> None:
        """Should reflect paid toggles verbatim without touching other records."""
        other = RecurringExpense(category="CAR", item="TAX", due="2025-03-15", amount="200 lei")
        original = serialize_document([], [INSURANCE, other])

        paid_text = serialize_document([], [replace(INSURANCE, paid="2025-02-01"), other])
        _, recurring = parse_document(paid_text)

        assert recurring[0].paid == "2025-02-01"
        assert recurring[1] == other

        unpaid_text = serialize_document([], [replace(recurring[0], paid=""), recurring[1]])
        assert unpaid_text == original
