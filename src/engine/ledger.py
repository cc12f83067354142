"""Policy illustration ledger parser.

Turns text pasted from an insurer illustration into LedgerRows. A record
line starts with the policy year and the insured's age; the remaining
columns are currency amounts. Individual bad amounts read as zero.
"""

import logging
import re

from src.engine.currency import parse_currency, parse_int
from src.engine.errors import NoDataFound, ParseError
from src.models.ledger import LEDGER_FIELDS, LedgerRow

logger = logging.getLogger(__name__)

RECORD_ARITY = len(LEDGER_FIELDS)  # 17 columns
INTEGER_FIELDS = 2  # policy_year, age

_RECORD_LINE = re.compile(r"[0-9]+\s+[0-9]+")
_WHITESPACE = re.compile(r"\s+")

NO_DATA_MESSAGE = "No valid data rows found. Please check the input format."


def is_record_line(line: str) -> bool:
    """True when the line opens with two whitespace-separated integers (year, age)."""
    return _RECORD_LINE.match(line) is not None


def tokenize_record(line: str) -> list[str]:
    """Split a record line into its 17 positional tokens.

    Extra trailing tokens are dropped. A short line raises IndexError.
    """
    tokens = _WHITESPACE.split(line.strip())
    if len(tokens) < RECORD_ARITY:
        raise IndexError(
            f"expected {RECORD_ARITY} columns, found {len(tokens)}"
        )
    return tokens[:RECORD_ARITY]


def build_row(tokens: list[str]) -> LedgerRow:
    values: dict[str, object] = {}
    for i, (name, token) in enumerate(zip(LEDGER_FIELDS, tokens)):
        values[name] = parse_int(token) if i < INTEGER_FIELDS else parse_currency(token)
    return LedgerRow(**values)


def parse_ledger(raw_text: str) -> list[LedgerRow]:
    """Parse every record line of an illustration ledger.

    Raises:
        NoDataFound: no line looks like a record.
        ParseError: a record line could not be converted; nothing is returned.
    """
    lines = [line for line in raw_text.splitlines() if is_record_line(line)]
    if not lines:
        raise NoDataFound(NO_DATA_MESSAGE)

    rows: list[LedgerRow] = []
    for line in lines:
        try:
            rows.append(build_row(tokenize_record(line)))
        except Exception as e:
            raise ParseError(f"Error parsing data: {e}", cause=e) from e

    logger.debug("Parsed %d ledger rows from %d input lines", len(rows), len(raw_text.splitlines()))
    return rows
