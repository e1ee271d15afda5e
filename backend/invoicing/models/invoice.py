"""Invoice ORM — one billed amount owed by a customer.

Invariants:
    - id is UUID primary key, generated by the writer (never by the caller)
    - amount is stored in integer cents (validated amount x 100)
    - status is one of InvoiceStatus values ("pending", "paid")
    - date is the calendar date the invoice was created (UTC)

Design Decisions:
    - No ORM relationship to Customer: actions only ever write customer_id,
      the list view joins explicitly
"""

import datetime as dt
import uuid

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from invoicing.db.base import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("customers.id"), nullable=False,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
