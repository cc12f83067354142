from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class BillEscalation(Enum):
    FLAT = "flat"
    RAMPED = "ramped"  # 80% of income through year 7, 100% after


@dataclass(frozen=True)
class ProjectionConfig:
    annual_contribution: Decimal  # Active premium, already resolved
    monthly_bills: Decimal
    policy_growth_rate: Decimal  # Percent, e.g. Decimal("6.2")
    loan_interest_rate: Decimal  # Percent
    cashback_rate: Decimal  # Percent
    policy_length_years: int
    bill_escalation: BillEscalation = BillEscalation.FLAT

    @property
    def monthly_income(self) -> Decimal:
        return self.annual_contribution / 12

    @property
    def annual_income(self) -> Decimal:
        """Annual premium as monthly income * 12 (not the raw contribution)."""
        return self.monthly_income * 12


@dataclass(frozen=True)
class YearlyProjectionRow:
    year: int
    income: Decimal
    policy_growth: Decimal
    bills: Decimal
    loan_interest: Decimal
    loan_balance: Decimal
    cashback: Decimal
    cash_value: Decimal
    net_equity: Decimal  # cash_value - loan_balance


@dataclass(frozen=True)
class MonthlyProjectionRow:
    month: int
    income: Decimal
    policy_growth: Decimal
    bills: Decimal
    loan_interest: Decimal
    loan_balance: Decimal
    cashback: Decimal
    cash_value: Decimal
    net_equity: Decimal


@dataclass(frozen=True)
class ProjectionResult:
    config: ProjectionConfig
    yearly: list[YearlyProjectionRow] = field(default_factory=list)
    monthly: list[MonthlyProjectionRow] = field(default_factory=list)
    sustainable_year: int | None = None

    @property
    def spread(self) -> Decimal:
        """Policy growth rate minus loan rate, in percentage points."""
        return self.config.policy_growth_rate - self.config.loan_interest_rate

    @property
    def is_self_sustaining(self) -> bool:
        return self.sustainable_year is not None

    @property
    def final_year(self) -> YearlyProjectionRow | None:
        return self.yearly[-1] if self.yearly else None
