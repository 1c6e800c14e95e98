"""Entry storage interface."""

from typing import Protocol

from diaryx.core.entries import Entry, EntryMetadata


class EntryStoreError(Exception):
    """Base class for entry store failures."""

    pass


class EntryNotFoundError(EntryStoreError):
    """Raised when an id has no corresponding entry."""

    def __init__(self, entry_id: str):
        super().__init__(f"Entry not found: {entry_id}")
        self.entry_id = entry_id


class EntryIOError(EntryStoreError):
    """Raised when reading, writing or removing an existing path fails."""

    pass


class DirectoryUnavailableError(EntryIOError):
    """Raised when the entries directory cannot be resolved or created."""

    pass


class EntryStore(Protocol):
    """Interface for reading and writing journal entries."""

    def list(self) -> list[EntryMetadata]:
        """All entries, most recently modified first."""
        ...

    def get(self, entry_id: str) -> Entry:
        """Read a full entry. Raises EntryNotFoundError if absent."""
        ...

    def get_metadata(self, entry_id: str) -> EntryMetadata:
        """Read the listing projection of one entry."""
        ...

    def exists(self, entry_id: str) -> bool:
        """Check if an entry exists."""
        ...

    def save(self, entry_id: str, content: str) -> None:
        """Write/overwrite entry content."""
        ...

    def create(self, title: str) -> str:
        """Create a new entry headed by `title`. Returns the new id."""
        ...

    def rename(self, entry_id: str, new_title: str) -> None:
        """Rewrite the title heading of an entry, keeping its id."""
        ...

    def delete(self, entry_id: str) -> None:
        """Delete an entry. Deleting a missing entry is a no-op."""
        ...
