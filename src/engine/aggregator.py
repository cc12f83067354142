"""Ledger summary statistics.

Pure functions: LedgerRows in, AggregateSummary out. No I/O.
"""

from collections.abc import Sequence
from decimal import Decimal

from src.engine.ledger import parse_ledger
from src.engine.sustainability import find_ledger_sustainable_year
from src.models.ledger import AggregateSummary, LedgerAnalysis, LedgerRow


def aggregate(rows: Sequence[LedgerRow]) -> AggregateSummary:
    """Totals across all years plus the final year's values.

    An empty ledger yields an all-zero summary.
    """
    final = rows[-1] if rows else None
    return AggregateSummary(
        total_premium_outlay=sum((r.premium_outlay for r in rows), Decimal("0")),
        total_policy_charges=sum((r.policy_charges for r in rows), Decimal("0")),
        total_credits=sum((r.total_credits for r in rows), Decimal("0")),
        final_accumulated_value=final.accumulated_value if final else Decimal("0"),
        final_death_benefit=final.net_death_benefit if final else Decimal("0"),
        sustainable_year=find_ledger_sustainable_year(rows),
        row_count=len(rows),
    )


def analyze_ledger(raw_text: str) -> LedgerAnalysis:
    """Parse illustration text and summarize it."""
    rows = parse_ledger(raw_text)
    return LedgerAnalysis(rows=rows, summary=aggregate(rows))
