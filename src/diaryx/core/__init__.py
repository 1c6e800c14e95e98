"""Functional core - pure business logic with no I/O."""

from .entries import (
    Entry,
    EntryMetadata,
    extract_title,
    make_preview,
    generate_entry_id,
    initial_content,
    retitle,
    sort_by_modified,
    validate_title,
)

__all__ = [
    "Entry",
    "EntryMetadata",
    "extract_title",
    "make_preview",
    "generate_entry_id",
    "initial_content",
    "retitle",
    "sort_by_modified",
    "validate_title",
]
