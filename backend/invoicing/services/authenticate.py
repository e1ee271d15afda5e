"""Authenticate — credentials sign-in action with classified failure messages.

Invariants:
    - Always signs in with the "credentials" strategy
    - INVALID_CREDENTIALS -> "Invalid credentials."; other AuthErrorKinds -> "Something went wrong."
    - Errors that are not AuthenticationError propagate unchanged
    - A failed sign-in returns a message and never navigates
    - redirectTo is honored only when it is a same-site path

Design Decisions:
    - Returns the message string (not ActionState): the login form renders a single line
"""

import logging
from collections.abc import Mapping
from typing import Any

from invoicing.core.action_result import NavigateTo
from invoicing.core.domain_types import AuthErrorKind, CREDENTIALS_STRATEGY, DASHBOARD_PATH
from invoicing.core.errors import AuthenticationError
from invoicing.core.repository_protocols import IdentityProvider

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_AUTH_MESSAGE = "Something went wrong."


async def authenticate(
    provider: IdentityProvider,
    form: Mapping[str, Any],
    prev_state: str | None = None,
    default_redirect: str = DASHBOARD_PATH,
) -> str | NavigateTo:
    """Sign in with the submitted credentials."""
    try:
        user = await provider.sign_in(CREDENTIALS_STRATEGY, form)
    except AuthenticationError as e:
        logger.info(
            f"Sign-in failed: {e.kind.value}",
            extra={"strategy": CREDENTIALS_STRATEGY, "error_code": e.kind.value},
        )
        if e.kind == AuthErrorKind.INVALID_CREDENTIALS:
            return INVALID_CREDENTIALS_MESSAGE
        return GENERIC_AUTH_MESSAGE

    logger.info(f"User {user.id} signed in", extra={"strategy": CREDENTIALS_STRATEGY})
    return NavigateTo(_safe_redirect(form.get("redirectTo"), default_redirect))


def _safe_redirect(target: Any, default: str) -> str:
    """Only same-site absolute paths are honored."""
    if isinstance(target, str) and target.startswith("/") and not target.startswith("//"):
        return target
    return default
