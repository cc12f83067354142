"""Pydantic schemas for caller-supplied scenario input."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from src.config import settings
from src.engine.projection import derive_monthly_bills
from src.models.projection import BillEscalation, ProjectionConfig


class PremiumSelector(Enum):
    ANNUAL_CONTRIBUTION = "annual_premium"
    MAX_NON_MEC_PREMIUM = "max_non_mec_premium"


class ScenarioInput(BaseModel):
    """Calculator inputs before the active premium is chosen.

    Both premium amounts are carried; `selected_premium` decides which one
    the projection runs on. Rates are percentages (6.2 means 6.2%).
    """

    annual_premium: Decimal = settings.default_annual_premium
    max_non_mec_premium: Decimal = settings.default_max_non_mec_premium
    selected_premium: PremiumSelector = PremiumSelector.ANNUAL_CONTRIBUTION

    # None under RAMPED means derive from the premium
    monthly_bills: Decimal | None = settings.default_monthly_bills

    policy_rate: Decimal = settings.default_policy_rate
    loan_rate: Decimal = settings.default_loan_rate
    cashback_rate: Decimal = settings.default_cashback_rate
    policy_length: int = Field(default=settings.default_policy_length, gt=0)
    bill_escalation: BillEscalation = BillEscalation.FLAT

    def resolved_premium(self) -> Decimal:
        if self.selected_premium is PremiumSelector.MAX_NON_MEC_PREMIUM:
            return self.max_non_mec_premium
        return self.annual_premium

    def resolved_monthly_bills(self) -> Decimal:
        if self.monthly_bills is not None:
            return self.monthly_bills
        if self.bill_escalation is BillEscalation.RAMPED:
            return derive_monthly_bills(self.resolved_premium())
        return settings.default_monthly_bills

    def to_config(self) -> ProjectionConfig:
        return ProjectionConfig(
            annual_contribution=self.resolved_premium(),
            monthly_bills=self.resolved_monthly_bills(),
            policy_growth_rate=self.policy_rate,
            loan_interest_rate=self.loan_rate,
            cashback_rate=self.cashback_rate,
            policy_length_years=self.policy_length,
            bill_escalation=self.bill_escalation,
        )
