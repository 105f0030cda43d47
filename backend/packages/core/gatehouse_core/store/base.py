"""
Base credential store.

This module defines the store contract shared by all backends: snapshot
reads, and serialized whole-collection replacement that commits to memory
only after the durable write succeeded.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager

from gatehouse_core import get_logger
from gatehouse_core.exceptions import DuplicateUsernameError
from gatehouse_core.schemas import UserRecord

logger = get_logger(__name__)


def _check_unique(records: tuple[UserRecord, ...]) -> None:
    seen: set[str] = set()
    for record in records:
        if record.username in seen:
            raise DuplicateUsernameError(record.username)
        seen.add(record.username)


class StoreTransaction:
    """
    Read-modify-write handle returned by ``CredentialStore.transaction``.

    Valid only inside the ``async with`` block that created it; the store's
    write lock is held for its whole lifetime.
    """

    def __init__(self, store: "CredentialStore") -> None:
        self._store = store

    @property
    def records(self) -> tuple[UserRecord, ...]:
        return self._store.records

    def find_by_username(self, username: str) -> UserRecord | None:
        return self._store.find_by_username(username)

    async def replace_all(self, records: Iterable[UserRecord]) -> None:
        await self._store._commit(tuple(records))


class CredentialStore(ABC):
    """
    Abstract credential store.

    Readers see an immutable tuple that is swapped in one assignment, so they
    observe either the old or the new collection. Writers are serialized by a
    single lock owned by the store instance.
    """

    def __init__(self, records: Iterable[UserRecord] = ()) -> None:
        """
        Initialize the store.

        Args:
            records: Initial collection, already durable.

        Raises:
            DuplicateUsernameError: If two records share a username.
        """
        initial = tuple(records)
        _check_unique(initial)
        self._records = initial
        self._write_lock = asyncio.Lock()

    @property
    def records(self) -> tuple[UserRecord, ...]:
        """Current snapshot of all records, in stored order."""
        return self._records

    def find_by_username(self, username: str) -> UserRecord | None:
        """
        Find a record by exact, case-sensitive username.

        Args:
            username: Username to look up.

        Returns:
            Matching record, or None.
        """
        for record in self._records:
            if record.username == username:
                return record
        return None

    async def replace_all(self, records: Iterable[UserRecord]) -> None:
        """
        Replace the entire collection and persist it.

        Args:
            records: New full collection.

        Raises:
            DuplicateUsernameError: If two records share a username.
            PersistenceError: If the durable write did not complete.
        """
        async with self._write_lock:
            await self._commit(tuple(records))

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[StoreTransaction]:
        """
        Hold the write lock for a read-modify-write sequence.

        Yields:
            Transaction handle whose snapshot cannot change until the block exits,
            except through its own ``replace_all``.
        """
        async with self._write_lock:
            yield StoreTransaction(self)

    async def _commit(self, records: tuple[UserRecord, ...]) -> None:
        # Caller holds the write lock.
        _check_unique(records)

        # Once the write has started, memory must follow disk even if the
        # caller is cancelled; the lock stays held until both are done.
        commit = asyncio.ensure_future(self._persist_and_swap(records))
        cancelled = False
        while not commit.done():
            try:
                await asyncio.shield(commit)
            except asyncio.CancelledError:
                if commit.done() and commit.cancelled():
                    raise
                cancelled = True

        commit.result()
        if cancelled:
            raise asyncio.CancelledError()

    async def _persist_and_swap(self, records: tuple[UserRecord, ...]) -> None:
        await self._persist(records)
        self._records = records
        logger.debug("Credential store replaced", extra={"record_count": len(records)})

    @abstractmethod
    async def _persist(self, records: tuple[UserRecord, ...]) -> None:
        """
        Durably write the full collection.

        Raises:
            PersistenceError: If the write did not complete.
        """
        pass
