"""Invoice Actions — validated create/update/delete of invoice rows.

Invariants:
    - Validation runs fully before the store is touched; failure means ZERO store calls
    - Each successful validation leads to exactly one store write
    - amount persisted as to_cents(amount); date is today's UTC date (create only)
    - create/update success: list view revalidated, NavigateTo(list view) returned
    - delete success: list view revalidated, None returned (no navigation)
    - DatabaseError is logged and re-raised with a user-facing message on every action

Design Decisions:
    - Store, view invalidator, and clock injected per instance: no module-level
      connection (ADR: explicit lifecycle, test fakes without patching)
    - prev_state accepted but unused: form callers always pass it back, the
      legacy create call shape omits it
    - Delete of a missing row is a logged no-op, not an error
"""

import logging
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any, Awaitable, TypeVar

from invoicing.core.action_result import ActionState, NavigateTo
from invoicing.core.domain_types import INVOICES_PATH
from invoicing.core.errors import DatabaseError
from invoicing.core.invoice_rules import to_cents, utc_today
from invoicing.core.repository_protocols import InvoiceStore, ViewInvalidator
from invoicing.schemas.invoice_form import (
    CreateInvoiceForm, DeleteInvoiceForm, UpdateInvoiceForm,
)
from invoicing.schemas.validation import validate

logger = logging.getLogger(__name__)

T = TypeVar("T")

CREATE_FAILED_MESSAGE = "Missing Fields. Failed to Create Invoice."
UPDATE_FAILED_MESSAGE = "Missing Fields. Failed to Update Invoice."
DELETE_FAILED_MESSAGE = "Missing Fields. Failed to Delete Invoice."

CREATE_DB_MESSAGE = "Database error occurred while creating the invoice."
UPDATE_DB_MESSAGE = "Database error occurred while updating the invoice."
DELETE_DB_MESSAGE = "Database error occurred while deleting the invoice."


class InvoiceActions:
    """Form actions for the invoices dashboard."""

    def __init__(
        self,
        store: InvoiceStore,
        views: ViewInvalidator,
        list_path: str = INVOICES_PATH,
        today: Callable[[], date] = utc_today,
    ):
        self.store = store
        self.views = views
        self.list_path = list_path
        self.today = today

    async def create_invoice(
        self, form: Mapping[str, Any], prev_state: ActionState | None = None,
    ) -> ActionState | NavigateTo:
        result = validate(CreateInvoiceForm, form)
        if not result.success:
            return ActionState(errors=result.field_errors, message=CREATE_FAILED_MESSAGE)

        data = result.data
        invoice_id = await self._write(
            "create_invoice", CREATE_DB_MESSAGE, None,
            self.store.insert(
                data.customer_id, to_cents(data.amount), data.status, self.today(),
            ),
        )
        logger.info(
            f"Invoice {invoice_id} created",
            extra={"action": "create_invoice", "invoice_id": str(invoice_id)},
        )
        self.views.revalidate_path(self.list_path)
        return NavigateTo(self.list_path)

    async def update_invoice(
        self, invoice_id: str, form: Mapping[str, Any],
        prev_state: ActionState | None = None,
    ) -> ActionState | NavigateTo:
        result = validate(UpdateInvoiceForm, {**form, "id": invoice_id})
        if not result.success:
            return ActionState(errors=result.field_errors, message=UPDATE_FAILED_MESSAGE)

        data = result.data
        await self._write(
            "update_invoice", UPDATE_DB_MESSAGE, data.id,
            self.store.update(
                data.id, data.customer_id, to_cents(data.amount), data.status,
            ),
        )
        logger.info(
            f"Invoice {data.id} updated",
            extra={"action": "update_invoice", "invoice_id": data.id},
        )
        self.views.revalidate_path(self.list_path)
        return NavigateTo(self.list_path)

    async def delete_invoice(self, invoice_id: str) -> ActionState | None:
        result = validate(DeleteInvoiceForm, {"id": invoice_id})
        if not result.success:
            return ActionState(errors=result.field_errors, message=DELETE_FAILED_MESSAGE)

        data = result.data
        deleted = await self._write(
            "delete_invoice", DELETE_DB_MESSAGE, data.id,
            self.store.delete(data.id),
        )
        if deleted:
            logger.info(
                f"Invoice {data.id} deleted",
                extra={"action": "delete_invoice", "invoice_id": data.id},
            )
        else:
            logger.warning(
                f"Invoice {data.id} not found, nothing deleted",
                extra={"action": "delete_invoice", "invoice_id": data.id},
            )
        self.views.revalidate_path(self.list_path)
        return None

    async def _write(
        self, action: str, user_message: str, invoice_id: str | None,
        write: Awaitable[T],
    ) -> T:
        """Await the single store write; log and re-raise DatabaseError."""
        try:
            return await write
        except DatabaseError as e:
            e.context.action = action
            e.context.invoice_id = invoice_id
            e.context.user_message = user_message
            logger.error(
                f"Database Error in {action}: {e.message}",
                extra={"action": action, "error_code": e.code, "invoice_id": invoice_id},
            )
            raise
