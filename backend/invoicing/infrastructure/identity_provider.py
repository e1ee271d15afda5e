"""Credentials Identity Provider — email/password sign-in against the users table.

Invariants:
    - Only the "credentials" strategy is supported; anything else is UNSUPPORTED_STRATEGY
    - Malformed payload, unknown email, and wrong password are all INVALID_CREDENTIALS
      (callers cannot tell which one happened)
    - A stored hash argon2 cannot read is CALLBACK_FAILED
    - Database failures are DatabaseError, never AuthenticationError

Design Decisions:
    - argon2-cffi PasswordHasher: memory-hard default parameters, hash carries its own salt
    - hash_password exported for seeding and user administration
"""

import logging
from collections.abc import Mapping
from typing import Any

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from invoicing.core.domain_types import AuthErrorKind, CREDENTIALS_STRATEGY, UserId
from invoicing.core.errors import AuthenticationError
from invoicing.core.repository_protocols import AuthenticatedUser
from invoicing.infrastructure.database import to_database_error
from invoicing.models.user import User
from invoicing.schemas.credentials import SignInCredentials
from invoicing.schemas.validation import validate

logger = logging.getLogger(__name__)

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    return _hasher.hash(password)


class CredentialsIdentityProvider:
    """IdentityProvider that checks email/password against stored argon2 hashes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def sign_in(
        self, strategy: str, credentials: Mapping[str, Any],
    ) -> AuthenticatedUser:
        if strategy != CREDENTIALS_STRATEGY:
            raise AuthenticationError(AuthErrorKind.UNSUPPORTED_STRATEGY)

        parsed = validate(SignInCredentials, credentials)
        if not parsed.success:
            logger.info("Sign-in rejected: malformed credentials")
            raise AuthenticationError(AuthErrorKind.INVALID_CREDENTIALS)

        user = await self._get_user(parsed.data.email)
        if user is None:
            raise AuthenticationError(AuthErrorKind.INVALID_CREDENTIALS)

        try:
            _hasher.verify(user.password, parsed.data.password)
        except VerifyMismatchError:
            raise AuthenticationError(AuthErrorKind.INVALID_CREDENTIALS)
        except (InvalidHashError, VerificationError) as e:
            logger.error(f"Stored password hash unusable for user {user.id}: {e}")
            raise AuthenticationError(AuthErrorKind.CALLBACK_FAILED)

        return AuthenticatedUser(
            id=UserId(user.id), name=user.name, email=user.email,
        )

    async def _get_user(self, email: str) -> User | None:
        try:
            result = await self.db.execute(select(User).where(User.email == email))
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_database_error(e, "select") from e
        return result.scalar_one_or_none()
