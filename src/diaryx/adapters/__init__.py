"""Adapters - I/O implementations of ports."""

from .file_entries import FileEntryStore

__all__ = [
    "FileEntryStore",
]
