"""
JSON file credential store.

Persists the whole collection as one JSON array document, rewritten
atomically on every replacement.
"""

import asyncio
import json
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from gatehouse_core import get_logger
from gatehouse_core.exceptions import CredentialStoreError, PersistenceError
from gatehouse_core.schemas import UserRecord

from .base import CredentialStore

logger = get_logger(__name__)


def _read_document(path: Path) -> list[UserRecord]:
    if not path.exists():
        return []

    try:
        raw = json.loads(path.read_text(encoding="utf-8") or "[]")
    except json.JSONDecodeError as e:
        raise CredentialStoreError(f"Credential document {path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise CredentialStoreError(f"Credential document {path} must be a JSON array")

    try:
        return [UserRecord.model_validate(item) for item in raw]
    except ValidationError as e:
        raise CredentialStoreError(f"Credential document {path} has an invalid record: {e}") from e


def _write_document(path: Path, records: tuple[UserRecord, ...]) -> None:
    payload = json.dumps([record.to_document() for record in records], indent=2)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Write to a sibling temp file and rename over the target so the document
    # on disk is always a complete old or new version.
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(payload)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class JSONFileCredentialStore(CredentialStore):
    """Credential store backed by a single JSON document on disk."""

    def __init__(self, path: str | os.PathLike[str], records: list[UserRecord] | None = None) -> None:
        """
        Initialize the store.

        Args:
            path: Location of the credential document.
            records: Initial collection. Use ``load`` to read it from ``path``.
        """
        super().__init__(records or [])
        self.path = Path(path)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "JSONFileCredentialStore":
        """
        Load the store from its document. A missing file yields an empty store.

        Args:
            path: Location of the credential document.

        Returns:
            Loaded store.

        Raises:
            CredentialStoreError: If the document is malformed or has duplicate usernames.
        """
        path = Path(path)
        records = _read_document(path)
        store = cls(path, records)
        logger.info(
            "Loaded credential store", extra={"path": str(path), "record_count": len(records)}
        )
        return store

    async def _persist(self, records: tuple[UserRecord, ...]) -> None:
        try:
            await asyncio.to_thread(_write_document, self.path, records)
        except OSError as e:
            logger.error(
                "Failed to write credential document",
                extra={"path": str(self.path), "error": str(e)},
            )
            raise PersistenceError(f"Failed to write credential document {self.path}") from e
