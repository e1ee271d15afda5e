"""Request Dependencies — builds per-request action collaborators for routes.

Invariants:
    - One SqlInvoiceStore / CredentialsIdentityProvider per request, bound to that request's session
    - RenderedViewCache is process-wide (app.state.view_cache)

Design Decisions:
    - Dependencies instead of module globals: tests override them via app.dependency_overrides
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from invoicing.config import get_settings
from invoicing.infrastructure.database import get_db
from invoicing.infrastructure.identity_provider import CredentialsIdentityProvider
from invoicing.infrastructure.invoice_store import SqlInvoiceStore
from invoicing.infrastructure.view_cache import RenderedViewCache
from invoicing.services.invoice_actions import InvoiceActions


def get_view_cache(request: Request) -> RenderedViewCache:
    return request.app.state.view_cache


def get_invoice_store(db: AsyncSession = Depends(get_db)) -> SqlInvoiceStore:
    return SqlInvoiceStore(db)


def get_invoice_actions(
    store: SqlInvoiceStore = Depends(get_invoice_store),
    views: RenderedViewCache = Depends(get_view_cache),
) -> InvoiceActions:
    return InvoiceActions(store, views, list_path=get_settings().invoices_path)


def get_identity_provider(
    db: AsyncSession = Depends(get_db),
) -> CredentialsIdentityProvider:
    return CredentialsIdentityProvider(db)
