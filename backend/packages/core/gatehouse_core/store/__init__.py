"""
Credential stores.

Hold administrator records and persist them as a whole collection.
"""

from .base import CredentialStore, StoreTransaction
from .json_file import JSONFileCredentialStore
from .memory import InMemoryCredentialStore

__all__ = [
    "CredentialStore",
    "StoreTransaction",
    "JSONFileCredentialStore",
    "InMemoryCredentialStore",
]
