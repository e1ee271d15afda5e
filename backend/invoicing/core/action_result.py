"""Action Results — the values a form action hands back to its caller.

Invariants:
    - ActionState is recreated per invocation, never persisted
    - NavigateTo is terminal: the caller transitions to `path` and renders nothing else
    - ValidationResult is either ValidationSuccess(data) or ValidationFailure(field_errors)
    - field_errors maps a form field name to its messages in the order they were raised

Design Decisions:
    - Navigation is a returned tagged value, not an exception: the calling layer
      decides how to redirect (ADR: no control flow through raise)
    - Frozen dataclasses: results are values, callers never mutate them
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")

FieldErrors = dict[str, list[str]]


@dataclass(frozen=True)
class ActionState:
    """Feedback for a form after a failed submission."""
    errors: FieldErrors | None = None
    message: str | None = None

    def to_dict(self) -> dict:
        return {"errors": self.errors or {}, "message": self.message}


@dataclass(frozen=True)
class NavigateTo:
    """Terminal result: the caller must transition to `path`."""
    path: str


@dataclass(frozen=True)
class ValidationSuccess(Generic[T]):
    data: T
    success: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ValidationFailure:
    field_errors: FieldErrors
    success: bool = field(default=False, init=False)


ValidationResult = Union[ValidationSuccess[Any], ValidationFailure]
