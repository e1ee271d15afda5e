"""Invoice Routes — form POST endpoints for the invoice actions, plus the cached list view.

Invariants:
    - Routes never validate or write themselves: everything goes through InvoiceActions
    - The list view is served from RenderedViewCache and re-rendered only after revalidation
    - A list render that overlaps a revalidation is returned but not cached

Design Decisions:
    - Raw request.form() passed through untouched: coercion belongs to the form schemas
"""

import logging

from fastapi import APIRouter, Depends, Request

from invoicing.api.action_responses import to_response
from invoicing.api.dependencies import (
    get_invoice_actions, get_invoice_store, get_view_cache,
)
from invoicing.config import get_settings
from invoicing.infrastructure.invoice_store import SqlInvoiceStore
from invoicing.infrastructure.view_cache import RenderedViewCache
from invoicing.services.invoice_actions import InvoiceActions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dashboard/invoices", tags=["invoices"])


@router.get("")
async def list_invoices(
    store: SqlInvoiceStore = Depends(get_invoice_store),
    views: RenderedViewCache = Depends(get_view_cache),
):
    """Invoice list view (cached until an action revalidates it)."""
    path = get_settings().invoices_path
    rendered = views.get(path)
    if rendered is None:
        generation = views.generation(path)
        rendered = {"invoices": await store.list_invoices()}
        if views.put(path, rendered, generation):
            logger.info("Invoice list rendered", extra={"path": path})
    return rendered


@router.post("")
async def create_invoice(
    request: Request, actions: InvoiceActions = Depends(get_invoice_actions),
):
    form = await request.form()
    return to_response(await actions.create_invoice(form))


@router.post("/{invoice_id}/edit")
async def update_invoice(
    invoice_id: str, request: Request,
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    form = await request.form()
    return to_response(await actions.update_invoice(invoice_id, form))


@router.post("/{invoice_id}/delete")
async def delete_invoice(
    invoice_id: str, actions: InvoiceActions = Depends(get_invoice_actions),
):
    return to_response(await actions.delete_invoice(invoice_id))
