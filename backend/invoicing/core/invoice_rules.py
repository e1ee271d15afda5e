"""Invoice Rules — pure derivations from validated form fields.

Invariants:
    - to_cents is exact for decimal input: Decimal("19.99") -> 1999, never 1998
    - Half-cent inputs round half away from zero
    - utc_today is the calendar date in UTC (the stored invoice date)

Design Decisions:
    - Decimal over float: amounts arrive as text, float parsing would drift
"""

from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

from invoicing.core.domain_types import AmountCents

_CENTS_PER_UNIT = Decimal(100)


def to_cents(amount: Decimal) -> AmountCents:
    """Convert a validated amount to integer cents."""
    cents = (amount * _CENTS_PER_UNIT).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return AmountCents(int(cents))


def utc_today() -> date:
    return datetime.now(timezone.utc).date()
