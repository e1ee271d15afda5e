"""Invoice Form Schemas — Pydantic models that validate and coerce raw form fields.

Invariants:
    - customerId: required, non-empty -> "Please select a customer."
    - amount: text coerced to Decimal, strictly > 0 -> "Amount must be greater than 0"
    - amount that rounds to 0 cents is not > 0; amount above MAX_AMOUNT is rejected
      before any cents arithmetic, so to_cents never sees an unrepresentable value
    - status: one of {pending, paid} -> "Please select a valid status."
    - id (update/delete): required non-empty string, pydantic's generic messages
    - Error locations use the form field names (aliases), not attribute names

Design Decisions:
    - mode="before" validators with validate_default=True: a missing field reaches
      the validator and gets the field-specific message instead of "Field required"
    - PydanticCustomError over ValueError: message is used verbatim (no "Value error, " prefix)
    - Empty amount coerces to 0 and fails the > 0 rule, like a numeric form field left blank
"""

from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from invoicing.core.domain_types import MAX_AMOUNT_CENTS, InvoiceStatus
from invoicing.core.invoice_rules import to_cents

CUSTOMER_REQUIRED = "Please select a customer."
AMOUNT_NOT_POSITIVE = "Amount must be greater than 0"
AMOUNT_NOT_NUMBER = "Amount must be a number."
AMOUNT_TOO_LARGE = "Amount must not exceed 21474836.47"
STATUS_INVALID = "Please select a valid status."

_STATUS_VALUES = frozenset(s.value for s in InvoiceStatus)
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS) / 100


class CreateInvoiceForm(BaseModel):
    """Fields submitted by the create-invoice form."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    customer_id: str = Field(None, alias="customerId", validate_default=True)
    amount: Decimal = Field(None, validate_default=True)
    status: InvoiceStatus = Field(None, validate_default=True)

    @field_validator("customer_id", mode="before")
    @classmethod
    def require_customer(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("customer_required", CUSTOMER_REQUIRED)
        return v.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            v = "0"
        try:
            amount = Decimal(str(v).strip())
        except InvalidOperation:
            raise PydanticCustomError("amount_not_number", AMOUNT_NOT_NUMBER)
        if not amount.is_finite():
            raise PydanticCustomError("amount_not_number", AMOUNT_NOT_NUMBER)
        if amount > MAX_AMOUNT:
            raise PydanticCustomError("amount_too_large", AMOUNT_TOO_LARGE)
        if amount <= 0 or to_cents(amount) == 0:
            raise PydanticCustomError("amount_not_positive", AMOUNT_NOT_POSITIVE)
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def require_known_status(cls, v):
        if not isinstance(v, str) or v not in _STATUS_VALUES:
            raise PydanticCustomError("status_invalid", STATUS_INVALID)
        return v


class UpdateInvoiceForm(CreateInvoiceForm):
    """Edit form: same fields plus the id of the invoice being edited."""
    id: str = Field(min_length=1)


class DeleteInvoiceForm(BaseModel):
    id: str = Field(min_length=1)
