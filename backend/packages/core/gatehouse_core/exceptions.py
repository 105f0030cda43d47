"""
Domain exceptions.

Services raise these; the API layer maps them to HTTP responses.
"""


class GatehouseError(Exception):
    """Base class for all Gatehouse errors."""


class BadRequestError(GatehouseError):
    """Client input is malformed or incomplete."""


class UnauthenticatedError(GatehouseError):
    """
    Credentials did not match a stored record.

    ``reason`` distinguishes an unknown user from a wrong password for
    logging only; clients always get the same response.
    """

    UNKNOWN_USER = "unknown_user"
    PASSWORD_MISMATCH = "password_mismatch"

    def __init__(self, reason: str) -> None:
        super().__init__("Invalid username or password")
        self.reason = reason


class PersistenceError(GatehouseError):
    """The durable write of the credential document did not complete."""


class CredentialStoreError(GatehouseError):
    """The credential document is malformed or violates store invariants."""


class DuplicateUsernameError(CredentialStoreError):
    """Two records share the same username."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Duplicate username: {username}")
        self.username = username
