"""
Authentication session service.

Verifies administrator credentials, issues tokens and persists the rotated
refresh token before anything is returned to the caller.
"""

import asyncio

from gatehouse_core import get_logger
from gatehouse_core.auth import TokenIssuer, verify_password
from gatehouse_core.exceptions import BadRequestError, UnauthenticatedError
from gatehouse_core.schemas import LoginRequest, TokenPair
from gatehouse_core.store import CredentialStore

logger = get_logger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Username and password are required."


class AuthSessionService:
    """Authentication session service."""

    def __init__(self, store: CredentialStore, token_issuer: TokenIssuer) -> None:
        """
        Initialize authentication session service.

        Args:
            store: Credential store holding administrator records.
            token_issuer: Issuer for access and refresh tokens.
        """
        self.store = store
        self.token_issuer = token_issuer

    async def login(self, request: LoginRequest) -> TokenPair:
        """Authenticate a login request. See ``authenticate``."""
        return await self.authenticate(request.username, request.password)

    async def authenticate(self, username: str | None, password: str | None) -> TokenPair:
        """
        Authenticate an administrator and rotate their refresh token.

        Args:
            username: Username as submitted.
            password: Plain text password as submitted.

        Returns:
            Access and refresh tokens. The refresh token has already been
            durably stored on the user's record.

        Raises:
            BadRequestError: If username or password is missing or empty.
            UnauthenticatedError: If the user is unknown or the password does not match.
            PersistenceError: If the rotated refresh token could not be stored.
        """
        if not username or not password:
            raise BadRequestError(MISSING_CREDENTIALS_MESSAGE)

        record = self.store.find_by_username(username)
        if record is None:
            logger.info(
                "Login rejected",
                extra={"username": username, "reason": UnauthenticatedError.UNKNOWN_USER},
            )
            raise UnauthenticatedError(UnauthenticatedError.UNKNOWN_USER)

        # bcrypt is CPU bound; run it off the event loop
        matched = await asyncio.to_thread(verify_password, password, record.password_hash)
        if not matched:
            logger.info(
                "Login rejected",
                extra={"username": username, "reason": UnauthenticatedError.PASSWORD_MISMATCH},
            )
            raise UnauthenticatedError(UnauthenticatedError.PASSWORD_MISMATCH)

        access_token = self.token_issuer.issue_access_token(record.username)
        refresh_token = self.token_issuer.issue_refresh_token(record.username)

        async with self.store.transaction() as txn:
            # Re-read under the lock; another login may have replaced the collection.
            current = txn.find_by_username(record.username)
            if current is None:
                raise UnauthenticatedError(UnauthenticatedError.UNKNOWN_USER)

            updated = current.with_refresh_token(refresh_token)
            await txn.replace_all(
                updated if other.username == updated.username else other
                for other in txn.records
            )

        logger.info("Login succeeded", extra={"username": record.username})
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    async def logout(self, refresh_token: str | None) -> bool:
        """
        Clear a stored refresh token.

        Args:
            refresh_token: Refresh token presented by the client.

        Returns:
            True if a record held the token and was cleared, False otherwise.

        Raises:
            PersistenceError: If the cleared record could not be stored.
        """
        if not refresh_token:
            return False

        async with self.store.transaction() as txn:
            holder = next(
                (record for record in txn.records if record.refresh_token == refresh_token),
                None,
            )
            if holder is None:
                return False

            await txn.replace_all(
                record.with_refresh_token(None) if record.username == holder.username else record
                for record in txn.records
            )

        logger.info("Logout cleared refresh token", extra={"username": holder.username})
        return True
