"""Ports - interfaces/protocols for external dependencies."""

from .entry_store import (
    DirectoryUnavailableError,
    EntryIOError,
    EntryNotFoundError,
    EntryStore,
    EntryStoreError,
)

__all__ = [
    "EntryStore",
    "EntryStoreError",
    "EntryNotFoundError",
    "EntryIOError",
    "DirectoryUnavailableError",
]
