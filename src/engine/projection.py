"""Premium-financed policy projection: cash value vs. loan balance.

Pure functions: ProjectionConfig in, ProjectionResult out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from src.engine.errors import InvalidConfig
from src.engine.sustainability import is_self_sustaining
from src.models.projection import (
    BillEscalation,
    MonthlyProjectionRow,
    ProjectionConfig,
    ProjectionResult,
    YearlyProjectionRow,
)

WHOLE = Decimal("1")
HUNDRED = Decimal("100")

RAMP_FACTOR = Decimal("0.8")  # Share of income spent on bills during the ramp
RAMP_YEARS = 7


def _round(value: Decimal) -> Decimal:
    return value.quantize(WHOLE, ROUND_HALF_UP)


def _finite_number(name: str, value: object) -> Decimal:
    """Finite Decimal or int; anything else is InvalidConfig."""
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise InvalidConfig(f"{name} must be a Decimal or int, got {type(value).__name__} {value!r}")
    number = Decimal(value)
    if not number.is_finite():
        raise InvalidConfig(f"{name} must be a finite number, got {value!r}")
    return number


def validate_config(config: ProjectionConfig) -> None:
    """Raise InvalidConfig unless every input can be simulated."""
    length = config.policy_length_years
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidConfig(f"policy_length_years must be a positive integer, got {length!r}")

    rates = {
        name: _finite_number(name, getattr(config, name))
        for name in ("policy_growth_rate", "loan_interest_rate", "cashback_rate")
    }

    # (1 + r/100) ** (1/12) has no real value at or below -100%
    for name in ("policy_growth_rate", "loan_interest_rate"):
        if rates[name] <= -HUNDRED:
            raise InvalidConfig(f"{name} must be greater than -100, got {rates[name]!r}")

    _finite_number("monthly_bills", config.monthly_bills)

    contribution = _finite_number("annual_contribution", config.annual_contribution)
    if contribution <= 0:
        raise InvalidConfig(f"annual_contribution must be positive, got {config.annual_contribution!r}")


def derive_monthly_bills(annual_contribution: Decimal) -> Decimal:
    """Year-one monthly bill level of the ramped schedule."""
    return annual_contribution / 12 * RAMP_FACTOR


def annual_bills(config: ProjectionConfig, year: int) -> Decimal:
    """Bills charged to the loan in a given policy year (1-indexed)."""
    if config.bill_escalation is BillEscalation.RAMPED:
        if year <= RAMP_YEARS:
            return config.annual_income * RAMP_FACTOR
        return config.annual_income
    return config.monthly_bills * 12


def monthly_rate(annual_rate: Decimal) -> Decimal:
    """Monthly-compounded equivalent of an annual percentage rate, as a fraction."""
    return (1 + annual_rate / HUNDRED) ** (Decimal(1) / Decimal(12)) - 1


def project_yearly(config: ProjectionConfig) -> tuple[list[YearlyProjectionRow], int | None]:
    """Year-by-year schedule and the first self-sustaining year.

    Premiums stop flowing into the policy once growth covers loan interest
    plus bills. Loan draws never stop.
    """
    annual_income = config.annual_income
    ramped = config.bill_escalation is BillEscalation.RAMPED

    rows: list[YearlyProjectionRow] = []
    cash_value = Decimal("0")
    loan_balance = Decimal("0")
    sustainable_year: int | None = None

    for year in range(1, config.policy_length_years + 1):
        bills = annual_bills(config, year)
        policy_growth = cash_value * config.policy_growth_rate / HUNDRED
        loan_interest = loan_balance * config.loan_interest_rate / HUNDRED

        if sustainable_year is None and is_self_sustaining(policy_growth, loan_interest + bills):
            sustainable_year = year

        if sustainable_year is None:
            cash_value += annual_income

        cash_value += policy_growth
        loan_balance += bills + loan_interest

        income = annual_income
        if sustainable_year is not None and year > sustainable_year:
            income = Decimal("0")

        stored_cash = _round(cash_value)
        stored_loan = _round(loan_balance)
        rows.append(YearlyProjectionRow(
            year=year,
            income=_round(income),
            policy_growth=_round(policy_growth),
            # Ramped bills keep full precision; display rounding is the caller's
            bills=bills if ramped else _round(bills),
            loan_interest=_round(loan_interest),
            loan_balance=stored_loan,
            cashback=_round(bills * config.cashback_rate / HUNDRED),
            cash_value=stored_cash,
            net_equity=stored_cash - stored_loan,
        ))

    return rows, sustainable_year


def project_first_year_monthly(config: ProjectionConfig) -> list[MonthlyProjectionRow]:
    """Month-by-month detail of policy year one.

    Always uses the flat monthly bill amount, whatever the yearly
    escalation policy.
    """
    growth_rate = monthly_rate(config.policy_growth_rate)
    loan_rate = monthly_rate(config.loan_interest_rate)
    income = config.monthly_income
    bills = config.monthly_bills
    cashback = _round(bills * config.cashback_rate / HUNDRED)

    rows: list[MonthlyProjectionRow] = []
    cash_value = Decimal("0")
    loan_balance = Decimal("0")

    for month in range(1, 13):
        cash_value += income
        policy_growth = cash_value * growth_rate
        cash_value += policy_growth

        loan_interest = loan_balance * loan_rate
        loan_balance += bills + loan_interest

        stored_cash = _round(cash_value)
        stored_loan = _round(loan_balance)
        rows.append(MonthlyProjectionRow(
            month=month,
            income=income,
            policy_growth=_round(policy_growth),
            bills=bills,
            loan_interest=_round(loan_interest),
            loan_balance=stored_loan,
            cashback=cashback,
            cash_value=stored_cash,
            net_equity=stored_cash - stored_loan,
        ))

    return rows


def simulate(config: ProjectionConfig) -> ProjectionResult:
    """Validate the config and run both the yearly and first-year monthly projections."""
    validate_config(config)
    yearly, sustainable_year = project_yearly(config)
    monthly = project_first_year_monthly(config)
    return ProjectionResult(
        config=config,
        yearly=yearly,
        monthly=monthly,
        sustainable_year=sustainable_year,
    )
