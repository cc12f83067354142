"""Self-sustaining crossover detection.

Two rules, one per input shape:

- Simulation: a year sustains when policy growth covers that year's loan
  interest plus bills. Evaluated inline by the projection loop.
- Ledger: a year sustains when its accumulated value plus the next year's
  credits covers the next year's charges. Evaluated over parsed rows.

Pure functions. No I/O.
"""

from collections.abc import Sequence
from decimal import Decimal

from src.models.ledger import LedgerRow


def is_self_sustaining(policy_growth: Decimal, total_costs: Decimal) -> bool:
    """Growth alone pays for the period's loan interest + bills."""
    return policy_growth >= total_costs


def find_ledger_sustainable_year(rows: Sequence[LedgerRow]) -> int | None:
    """Policy year immediately preceding the first ledger crossover.

    Looks one row ahead, so the last row can never qualify and a ledger
    with fewer than two rows returns None.
    """
    for current, following in zip(rows, rows[1:]):
        covered = current.accumulated_value + following.total_credits
        if covered >= following.policy_charges:
            return current.policy_year
    return None
