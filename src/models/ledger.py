"""Policy illustration ledger data types."""

from dataclasses import dataclass, field, fields
from decimal import Decimal


@dataclass(frozen=True)
class LedgerRow:
    """One policy year of an insurer-produced illustration.

    Field order matches the column order of the ledger text.
    """
    policy_year: int
    age: int
    premium_outlay: Decimal = Decimal("0")
    premium_expense_charge: Decimal = Decimal("0")
    cost_of_insurance: Decimal = Decimal("0")
    cost_of_other_benefits: Decimal = Decimal("0")
    policy_fee: Decimal = Decimal("0")
    expense_charge: Decimal = Decimal("0")
    accumulated_value_charge: Decimal = Decimal("0")
    policy_charges: Decimal = Decimal("0")
    interest_credit: Decimal = Decimal("0")
    additional_bonus: Decimal = Decimal("0")
    total_credits: Decimal = Decimal("0")
    accumulated_value: Decimal = Decimal("0")
    surrender_charge: Decimal = Decimal("0")
    cash_surrender_value: Decimal = Decimal("0")
    net_death_benefit: Decimal = Decimal("0")


LEDGER_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(LedgerRow))


@dataclass(frozen=True)
class AggregateSummary:
    total_premium_outlay: Decimal = Decimal("0")
    total_policy_charges: Decimal = Decimal("0")
    total_credits: Decimal = Decimal("0")
    final_accumulated_value: Decimal = Decimal("0")
    final_death_benefit: Decimal = Decimal("0")
    sustainable_year: int | None = None
    row_count: int = 0


@dataclass(frozen=True)
class LedgerAnalysis:
    rows: list[LedgerRow] = field(default_factory=list)
    summary: AggregateSummary = field(default_factory=AggregateSummary)
