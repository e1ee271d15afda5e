"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId, UserId wrap UUIDs, never use bare UUID in domain logic
    - AmountCents is an integer number of cents in [0, MAX_AMOUNT_CENTS]
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to raw form values and serialize without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", UUID)
UserId = NewType("UserId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

AmountCents = NewType("AmountCents", int)   # >= 0
MAX_AMOUNT_CENTS = 2_147_483_647   # signed 32-bit `amount` column


# ─── Constants ───────────────────────────────────────────────────

CREDENTIALS_STRATEGY = "credentials"
INVOICES_PATH = "/dashboard/invoices"
DASHBOARD_PATH = "/dashboard"


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice payment states, maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


class AuthErrorKind(str, Enum):
    """Subtype tags an identity provider attaches to a failed sign-in."""
    INVALID_CREDENTIALS = "invalid_credentials"
    UNSUPPORTED_STRATEGY = "unsupported_strategy"
    CALLBACK_FAILED = "callback_failed"
