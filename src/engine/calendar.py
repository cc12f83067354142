"""Monthly payment calendar for a premium-financed policy.

Each month: pay the premium on day 1, put bills on a cashback card through
day 28, borrow the bill amount against the policy on day 2.
"""

from decimal import Decimal

from src.models.calendar import CalendarEvent, CalendarMonth, EventKind

MONTH_NAMES = (
    "January", "February", "March", "April",
    "May", "June", "July", "August",
    "September", "October", "November", "December",
)


def month_events(
    monthly_bills: Decimal, monthly_premium: Decimal, cashback_rate: Decimal
) -> tuple[CalendarEvent, ...]:
    return (
        CalendarEvent(
            kind=EventKind.PREMIUM,
            days="Day 1",
            amount=monthly_premium,
            description=f"Premium Payment: ${monthly_premium:,.2f}",
        ),
        CalendarEvent(
            kind=EventKind.CREDIT,
            days="Days 1-28",
            amount=monthly_bills,
            description=f"Pay Bills with your credit card ({cashback_rate}% back)",
        ),
        CalendarEvent(
            kind=EventKind.BORROW,
            days="Day 2",
            amount=monthly_bills,
            description=f"Borrow: ${monthly_bills:,.2f}",
        ),
    )


def payment_calendar(
    monthly_bills: Decimal, monthly_premium: Decimal, cashback_rate: Decimal
) -> list[CalendarMonth]:
    """The same three events repeated for every month of the year."""
    events = month_events(monthly_bills, monthly_premium, cashback_rate)
    return [CalendarMonth(name=name, events=events) for name in MONTH_NAMES]
