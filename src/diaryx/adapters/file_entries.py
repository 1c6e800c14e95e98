"""File-based entry storage adapter."""

import logging
import os
from pathlib import Path

from diaryx.core.entries import (
    ENTRY_EXTENSION,
    PREVIEW_LENGTH,
    Entry,
    EntryMetadata,
    generate_entry_id,
    initial_content,
    retitle,
    sort_by_modified,
    validate_title,
)
from diaryx.ports.entry_store import DirectoryUnavailableError, EntryIOError, EntryNotFoundError

logger = logging.getLogger(__name__)


class FileEntryStore:
    """
    File-based entry storage.

    Implements EntryStore protocol. Each entry is one markdown file named
    `<id>.md`; the directory is the only source of truth and nothing is
    cached between calls.
    """

    def __init__(self, entries_dir: Path | str, preview_length: int = PREVIEW_LENGTH):
        self.entries_dir = Path(entries_dir).expanduser()
        self.preview_length = preview_length

    def ensure_directory(self) -> None:
        """Create the entries directory (and parents) if missing."""
        try:
            self.entries_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryUnavailableError(
                f"Cannot create entries directory {self.entries_dir}: {e}"
            ) from e

    def _path_for_id(self, entry_id: str) -> Path:
        """Get the file path for a given entry id."""
        if (
            not entry_id
            or entry_id in (".", "..")
            or "/" in entry_id
            or "\x00" in entry_id
            or os.sep in entry_id
            or (os.altsep and os.altsep in entry_id)
        ):
            raise ValueError(f"Invalid entry id: {entry_id!r}")
        return self.entries_dir / f"{entry_id}{ENTRY_EXTENSION}"

    def _read(self, entry_id: str, path: Path) -> Entry:
        """Read content and mtime. Lets OSError and UnicodeDecodeError through."""
        # newline="" keeps content byte-for-byte as saved
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
        mtime = path.stat().st_mtime
        return Entry.from_file_data(entry_id, content, mtime, path.resolve())

    def _load(self, entry_id: str) -> Entry:
        self.ensure_directory()
        path = self._path_for_id(entry_id)
        if not path.is_file():
            raise EntryNotFoundError(entry_id)
        try:
            return self._read(entry_id, path)
        except FileNotFoundError as e:
            # removed between the check and the read
            raise EntryNotFoundError(entry_id) from e
        except (OSError, UnicodeDecodeError) as e:
            raise EntryIOError(f"Failed to read entry {entry_id}: {e}") from e

    def get(self, entry_id: str) -> Entry:
        """Read a full entry. Raises EntryNotFoundError if absent."""
        return self._load(entry_id)

    def get_metadata(self, entry_id: str) -> EntryMetadata:
        """Read the listing projection of one entry."""
        return self._load(entry_id).to_metadata(self.preview_length)

    def exists(self, entry_id: str) -> bool:
        """Check if an entry exists."""
        self.ensure_directory()
        return self._path_for_id(entry_id).is_file()

    def save(self, entry_id: str, content: str) -> None:
        """Write/overwrite entry content. Last writer wins."""
        self.ensure_directory()
        path = self._path_for_id(entry_id)
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise EntryIOError(f"Failed to write entry {entry_id}: {e}") from e
        logger.debug(f"Saved entry {entry_id} ({len(content)} chars)")

    def create(self, title: str) -> str:
        """
        Create a new entry headed by `title`. Returns the new id.

        Ids have second resolution; a second create within the same second
        overwrites the first.
        """
        title = validate_title(title)
        entry_id = generate_entry_id()
        self.save(entry_id, initial_content(title))
        logger.debug(f"Created entry {entry_id}")
        return entry_id

    def rename(self, entry_id: str, new_title: str) -> None:
        """
        Change the title heading of an existing entry.

        Only the first heading line is rewritten; the id and the body stay
        the same.
        """
        new_title = validate_title(new_title)
        entry = self._load(entry_id)
        self.save(entry_id, retitle(entry.content, new_title))
        logger.debug(f"Renamed entry {entry_id}")

    def delete(self, entry_id: str) -> None:
        """Delete an entry. Deleting a missing entry is a no-op."""
        self.ensure_directory()
        path = self._path_for_id(entry_id)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise EntryIOError(f"Failed to delete entry {entry_id}: {e}") from e
        logger.debug(f"Deleted entry {entry_id}")

    def list(self) -> list[EntryMetadata]:
        """
        All entries, most recently modified first.

        A file that can't be read is skipped and logged so one bad file
        doesn't hide the rest.
        """
        self.ensure_directory()
        entries = []
        for path in self.entries_dir.glob(f"*{ENTRY_EXTENSION}"):
            try:
                if not path.is_file():
                    continue
                entry = self._read(path.stem, path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping unreadable entry {path.name}: {e}")
                continue
            entries.append(entry.to_metadata(self.preview_length))
        return sort_by_modified(entries)
