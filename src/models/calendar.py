from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class EventKind(Enum):
    PREMIUM = "premium"
    CREDIT = "credit"
    BORROW = "borrow"


@dataclass(frozen=True)
class CalendarEvent:
    kind: EventKind
    days: str  # "Day 1", "Days 1-28"
    amount: Decimal
    description: str


@dataclass(frozen=True)
class CalendarMonth:
    name: str
    events: tuple[CalendarEvent, ...]
