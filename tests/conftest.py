"""Canonical test fixtures used across all engine tests.

Scenario: $45K annual premium, $3K/month bills, 6.2% policy growth,
0% loan rate, 2% cashback, 30-year projection.
"""

import pytest
from decimal import Decimal

from src.models.projection import BillEscalation, ProjectionConfig

SINGLE_ROW_LEDGER = (
    "1  35  10000.00  500.00  200.00  0  50.00  100.00  20.00  870.00  "
    "450.00  0  450.00  9580.00  0  9580.00  100000.00"
)

THREE_ROW_LEDGER = """\
Policy Illustration - Guaranteed and Non-Guaranteed Values
Year Age Premium ...
1  35  $10,000.00  $500.00  $2,000.00  0  $50.00  $100.00  $20.00  $2,670.00  $400.00  0  $400.00  $1,000.00  $5,000.00  $0.00  $500,000.00
2  36  $10,000.00  $500.00  $2,100.00  0  $50.00  $100.00  $20.00  $2,770.00  $800.00  0  $800.00  $15,760.00  $4,500.00  $11,260.00  $500,000.00
3  37  $0.00  $0.00  $2,200.00  0  $50.00  $100.00  $20.00  $2,370.00  $1,200.00  $100.00  $1,300.00  $14,690.00  $4,000.00  $10,690.00  $500,000.00
"""


@pytest.fixture
def canonical_config() -> ProjectionConfig:
    """The calculator's default scenario, flat bills."""
    return ProjectionConfig(
        annual_contribution=Decimal("45000"),
        monthly_bills=Decimal("3000"),
        policy_growth_rate=Decimal("6.2"),
        loan_interest_rate=Decimal("0.0"),
        cashback_rate=Decimal("2.0"),
        policy_length_years=30,
        bill_escalation=BillEscalation.FLAT,
    )


@pytest.fixture
def ramped_config() -> ProjectionConfig:
    """$12K premium, bills ramp from 80% to 100% of income after year 7."""
    return ProjectionConfig(
        annual_contribution=Decimal("12000"),
        monthly_bills=Decimal("800"),
        policy_growth_rate=Decimal("0"),
        loan_interest_rate=Decimal("0"),
        cashback_rate=Decimal("2.0"),
        policy_length_years=10,
        bill_escalation=BillEscalation.RAMPED,
    )


@pytest.fixture
def early_crossover_config() -> ProjectionConfig:
    """Tiny bills and 10% growth: self-sustaining in year 2."""
    return ProjectionConfig(
        annual_contribution=Decimal("1000"),
        monthly_bills=Decimal("1"),
        policy_growth_rate=Decimal("10"),
        loan_interest_rate=Decimal("0"),
        cashback_rate=Decimal("0"),
        policy_length_years=5,
    )


@pytest.fixture
def single_row_ledger() -> str:
    return SINGLE_ROW_LEDGER


@pytest.fixture
def three_row_ledger() -> str:
    return THREE_ROW_LEDGER
