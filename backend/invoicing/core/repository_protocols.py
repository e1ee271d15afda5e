"""Boundary Protocols — contracts between the actions and their collaborators.

Invariants:
    - Actions NEVER import concrete store, cache, or identity implementations
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Each store method issues exactly one statement (no multi-statement transactions)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Protocol

from invoicing.core.domain_types import (
    AmountCents, InvoiceId, InvoiceStatus, UserId,
)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity returned by a successful sign-in."""
    id: UserId
    name: str
    email: str


class InvoiceStore(Protocol):
    """Contract for invoice persistence, implemented by shell."""
    async def insert(
        self, customer_id: str, amount_cents: AmountCents,
        status: InvoiceStatus, invoice_date: date,
    ) -> InvoiceId: ...

    async def update(
        self, invoice_id: str, customer_id: str,
        amount_cents: AmountCents, status: InvoiceStatus,
    ) -> None: ...

    async def delete(self, invoice_id: str) -> bool: ...

    async def list_invoices(self) -> list[dict]: ...


class ViewInvalidator(Protocol):
    """Marks a rendered view path stale so the next render recomputes it."""
    def revalidate_path(self, path: str) -> None: ...


class IdentityProvider(Protocol):
    """Contract for sign-in; raises AuthenticationError on rejection."""
    async def sign_in(
        self, strategy: str, credentials: Mapping[str, Any],
    ) -> AuthenticatedUser: ...
