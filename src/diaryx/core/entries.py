"""Pure entry domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

ENTRY_EXTENSION = ".md"
ID_FORMAT = "%Y-%m-%d_%H-%M-%S"
PREVIEW_LENGTH = 150
ELLIPSIS = "..."
MAX_TITLE_LENGTH = 200


@dataclass
class EntryMetadata:
    """Lightweight projection of an entry for list views."""

    id: str
    title: str
    created_at: datetime
    modified_at: datetime
    file_path: Path
    preview: str = ""


@dataclass
class Entry:
    """
    A single journal record, backed by one markdown file.

    created_at and modified_at both come from the file's mtime, so they are
    always equal.
    """

    id: str
    title: str
    content: str
    created_at: datetime
    modified_at: datetime
    file_path: Path

    def to_metadata(self, preview_length: int = PREVIEW_LENGTH) -> EntryMetadata:
        """Project this entry for listings."""
        return EntryMetadata(
            id=self.id,
            title=self.title,
            created_at=self.created_at,
            modified_at=self.modified_at,
            file_path=self.file_path,
            preview=make_preview(self.content, preview_length),
        )

    @classmethod
    def from_file_data(cls, entry_id: str, content: str, mtime: float, file_path: Path) -> "Entry":
        """Build an Entry from raw file content and an mtime in epoch seconds."""
        modified = datetime.fromtimestamp(mtime, tz=timezone.utc)
        return cls(
            id=entry_id,
            title=extract_title(content, entry_id),
            content=content,
            created_at=modified,
            modified_at=modified,
            file_path=file_path,
        )


def _split_first_line(content: str) -> tuple[str, str]:
    first, _, rest = content.partition("\n")
    return first, rest


def extract_title(content: str, fallback: str) -> str:
    """
    Title from the first line, without heading markers.

    "# My Day" -> "My Day". Falls back to `fallback` (normally the id) when
    the first line is empty or only markers.
    """
    first, _ = _split_first_line(content)
    title = first.strip().lstrip("#").strip()
    return title or fallback


def make_preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    """Up to `length` characters of the body below the title line."""
    _, body = _split_first_line(content)
    body = body.strip()
    if len(body) > length:
        return body[:length] + ELLIPSIS
    return body


def generate_entry_id(now: datetime | None = None) -> str:
    """Entry id from a UTC instant at second resolution."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(ID_FORMAT)


def validate_title(title: str) -> str:
    """
    Check a title supplied for a new or renamed entry.

    Returns the title with surrounding whitespace removed. Raises ValueError
    for empty titles, titles over 200 characters, and titles containing line
    breaks (a title must fit on the heading line).
    """
    if not isinstance(title, str):
        raise ValueError("Title must be a non-empty string")
    trimmed = title.strip()
    if not trimmed:
        raise ValueError("Title cannot be empty")
    if len(trimmed) > MAX_TITLE_LENGTH:
        raise ValueError(f"Title too long (max {MAX_TITLE_LENGTH} characters)")
    if "\n" in trimmed or "\r" in trimmed:
        raise ValueError("Title cannot contain line breaks")
    return trimmed


def initial_content(title: str) -> str:
    """Body written for a freshly created entry."""
    return f"# {title}\n\n"


def retitle(content: str, title: str) -> str:
    """
    Replace the heading on the first line with `title`.

    The heading level and the rest of the content are kept. Content whose
    first line is not a heading gets a new `# title` line on top.
    """
    first, sep, rest = content.partition("\n")
    stripped = first.lstrip()
    if not stripped.startswith("#"):
        return f"# {title}\n{content}"
    markers = stripped[: len(stripped) - len(stripped.lstrip("#"))]
    line_end = "\r" if first.endswith("\r") else ""
    return f"{markers} {title}{line_end}{sep}{rest}"


def sort_by_modified(entries: list[EntryMetadata]) -> list[EntryMetadata]:
    """Most recently modified first; equal times ordered by id, descending."""
    return sorted(entries, key=lambda e: (e.modified_at, e.id), reverse=True)
