"""Comma-delimited export of projection schedules and parsed ledgers.

Values are written in their stored form: no currency symbols, no thousands
separators, no quoting. Callers decide where the text goes.
"""

from collections.abc import Sequence
from decimal import Decimal
from enum import Enum

from src.models.ledger import LEDGER_FIELDS

PROJECTION_FIELDS: tuple[str, ...] = (
    "income",
    "policy_growth",
    "bills",
    "loan_interest",
    "loan_balance",
    "cashback",
    "cash_value",
    "net_equity",
)

PROJECTION_HEADERS: tuple[str, ...] = (
    "Income",
    "Growth",
    "Bills",
    "Interest",
    "Loan Balance",
    "Cashback",
    "Cash Value",
    "Net Equity",
)

LEDGER_HEADERS: tuple[str, ...] = (
    "Year",
    "Age",
    "Premium Outlay",
    "Premium Expense",
    "Cost of Insurance",
    "Other Benefits",
    "Policy Fee",
    "Expense Charge",
    "Accumulated Value Charge",
    "Policy Charges",
    "Interest Credit",
    "Additional Bonus",
    "Total Credits",
    "Accumulated Value",
    "Surrender Charge",
    "Cash Surrender Value",
    "Net Death Benefit",
)


class ExportSchema(Enum):
    YEARLY_PROJECTION = "yearly_projection"
    MONTHLY_PROJECTION = "monthly_projection"
    LEDGER = "ledger"

    @property
    def headers(self) -> tuple[str, ...]:
        if self is ExportSchema.YEARLY_PROJECTION:
            return ("Year",) + PROJECTION_HEADERS
        if self is ExportSchema.MONTHLY_PROJECTION:
            return ("Month",) + PROJECTION_HEADERS
        return LEDGER_HEADERS

    @property
    def fields(self) -> tuple[str, ...]:
        if self is ExportSchema.YEARLY_PROJECTION:
            return ("year",) + PROJECTION_FIELDS
        if self is ExportSchema.MONTHLY_PROJECTION:
            return ("month",) + PROJECTION_FIELDS
        return LEDGER_FIELDS


def format_value(value: object) -> str:
    """Plain positional notation for Decimals (never "1E+3")."""
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def to_delimited_text(rows: Sequence[object], schema: ExportSchema) -> str:
    """Header line plus one comma-joined line per row."""
    lines = [",".join(schema.headers)]
    for row in rows:
        lines.append(",".join(format_value(getattr(row, name)) for name in schema.fields))
    return "\n".join(lines)


def parse_header(text: str) -> list[str]:
    """Column names from the first line of an export."""
    first_line = text.split("\n", 1)[0]
    return first_line.split(",")
