"""
In-memory credential store.

No durable storage; used by tests and throwaway deployments.
"""

from gatehouse_core.schemas import UserRecord

from .base import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    """Credential store that keeps records in process memory only."""

    async def _persist(self, records: tuple[UserRecord, ...]) -> None:
        return None
