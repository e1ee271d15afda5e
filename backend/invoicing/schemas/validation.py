"""Schema Validation — runs a Pydantic schema over form data and returns a ValidationResult.

Invariants:
    - Never raises for invalid input: failures come back as ValidationFailure
    - field_errors keyed by the first location element (the form field name);
      model-level errors keyed by "__root__"
    - Messages kept in the order Pydantic reports them
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from invoicing.core.action_result import (
    FieldErrors, ValidationFailure, ValidationResult, ValidationSuccess,
)


def validate(schema: type[BaseModel], data: Mapping[str, Any]) -> ValidationResult:
    """Validate `data` against `schema`."""
    try:
        model = schema.model_validate(dict(data))
    except ValidationError as e:
        return ValidationFailure(field_errors=collect_field_errors(e))
    return ValidationSuccess(data=model)


def collect_field_errors(exc: ValidationError) -> FieldErrors:
    errors: FieldErrors = {}
    for err in exc.errors():
        key = str(err["loc"][0]) if err["loc"] else "__root__"
        errors.setdefault(key, []).append(err["msg"])
    return errors
