"""Shared workflow layer between the CLI and other shells."""

from pathlib import Path

from .adapters.file_entries import FileEntryStore
from .config import DEFAULT_ENTRIES_DIR, Config


def get_store(config: Config) -> FileEntryStore:
    """Resolve entries directory from config."""
    if config.entries_dir:
        entries_dir = Path(config.entries_dir).expanduser()
    else:
        entries_dir = DEFAULT_ENTRIES_DIR
    return FileEntryStore(entries_dir, preview_length=config.preview_length)
