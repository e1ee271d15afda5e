"""SQL Invoice Store — parameterized single-statement writes against the invoices table.

Invariants:
    - Each write issues exactly ONE statement followed by commit
    - Values always travel as bound parameters (SQLAlchemy Core), never string-built SQL
    - Every SQLAlchemyError is rolled back and re-raised as DatabaseError
    - Invoice ids that are not well-formed UUIDs match no row
    - update() of a missing row raises ResourceNotFoundError; delete() of one is a no-op

Design Decisions:
    - Store owns its error mapping (not get_db): the same store is used from routes,
      background jobs, and tests where no dependency teardown is involved
    - Fresh uuid4 generated here, so callers never choose invoice ids
"""

import datetime as dt
import logging
import uuid
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from invoicing.core.domain_types import AmountCents, InvoiceId, InvoiceStatus
from invoicing.core.errors import DatabaseError, ResourceNotFoundError
from invoicing.infrastructure.database import to_database_error
from invoicing.models.customer import Customer
from invoicing.models.invoice import Invoice

logger = logging.getLogger(__name__)


def _parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(str(value))
    except ValueError:
        return None


def _customer_uuid(customer_id: str, operation: str) -> UUID:
    parsed = _parse_uuid(customer_id)
    if parsed is None:
        raise DatabaseError(f"Invalid customer reference '{customer_id}'", operation)
    return parsed


class SqlInvoiceStore:
    """InvoiceStore backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self, customer_id: str, amount_cents: AmountCents,
        status: InvoiceStatus, invoice_date: dt.date,
    ) -> InvoiceId:
        invoice_id = InvoiceId(uuid.uuid4())
        stmt = insert(Invoice).values(
            id=invoice_id,
            customer_id=_customer_uuid(customer_id, "insert"),
            amount=amount_cents,
            status=InvoiceStatus(status).value,
            date=invoice_date,
        )
        await self._execute(stmt, "insert")
        return invoice_id

    async def update(
        self, invoice_id: str, customer_id: str,
        amount_cents: AmountCents, status: InvoiceStatus,
    ) -> None:
        row_id = _parse_uuid(invoice_id)
        if row_id is None:
            raise ResourceNotFoundError("Invoice", invoice_id)
        stmt = (
            update(Invoice)
            .where(Invoice.id == row_id)
            .values(
                customer_id=_customer_uuid(customer_id, "update"),
                amount=amount_cents,
                status=InvoiceStatus(status).value,
            )
        )
        result = await self._execute(stmt, "update")
        if result.rowcount == 0:
            raise ResourceNotFoundError("Invoice", invoice_id)

    async def delete(self, invoice_id: str) -> bool:
        """Delete by id. Returns False when no row matched."""
        row_id = _parse_uuid(invoice_id)
        if row_id is None:
            return False
        result = await self._execute(
            delete(Invoice).where(Invoice.id == row_id), "delete",
        )
        return result.rowcount > 0

    async def list_invoices(self) -> list[dict]:
        """All invoices with their customer, newest first."""
        query = (
            select(
                Invoice.id, Invoice.amount, Invoice.status, Invoice.date,
                Invoice.customer_id, Customer.name, Customer.email,
            )
            .outerjoin(Customer, Customer.id == Invoice.customer_id)
            .order_by(Invoice.date.desc(), Invoice.id)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_database_error(e, "select") from e
        return [
            {
                "id": str(row.id),
                "customer_id": str(row.customer_id),
                "name": row.name,
                "email": row.email,
                "amount": row.amount,
                "status": row.status,
                "date": row.date.isoformat(),
            }
            for row in result
        ]

    async def _execute(self, stmt, operation: str):
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_database_error(e, operation) from e
        return result
