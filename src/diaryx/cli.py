"""Diaryx CLI - local journal entries."""

import json
import logging
import sys

import click

from .config import load_config
from .core.entries import Entry, EntryMetadata
from .ports.entry_store import EntryStoreError
from .workflows import get_store


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _metadata_json(m: EntryMetadata) -> dict:
    return {
        "id": m.id,
        "title": m.title,
        "created_at": m.created_at.isoformat(),
        "modified_at": m.modified_at.isoformat(),
        "file_path": str(m.file_path),
        "preview": m.preview,
    }


def _entry_json(e: Entry) -> dict:
    return {
        "id": e.id,
        "title": e.title,
        "content": e.content,
        "created_at": e.created_at.isoformat(),
        "modified_at": e.modified_at.isoformat(),
        "file_path": str(e.file_path),
    }


@click.group()
@click.version_option(package_name="diaryx")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Diaryx - local markdown journal."""
    config = load_config()
    level = logging.DEBUG if debug else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )
    ctx.obj = get_store(config)


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_entries(store, as_json: bool):
    """List entries, newest first."""
    try:
        entries = store.list()
    except EntryStoreError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps([_metadata_json(m) for m in entries], indent=2))
        return

    if not entries:
        click.echo("No entries.")
        return

    for m in entries:
        modified = m.modified_at.strftime("%Y-%m-%d %H:%M")
        click.echo(f"{m.id}  {modified}  {m.title}")
        if m.preview:
            click.echo(f"    {m.preview.splitlines()[0]}")


@main.command()
@click.argument("entry_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show(store, entry_id: str, as_json: bool):
    """Print an entry."""
    try:
        entry = store.get(entry_id)
    except (EntryStoreError, ValueError) as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(_entry_json(entry), indent=2))
    else:
        click.echo(entry.content)


@main.command()
@click.argument("title")
@click.pass_obj
def new(store, title: str):
    """Create an entry and print its id."""
    try:
        entry_id = store.create(title)
    except (EntryStoreError, ValueError) as e:
        _fail(str(e))
    click.echo(entry_id)


@main.command()
@click.argument("entry_id")
@click.option(
    "--file",
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="Read content from a file instead of stdin",
)
@click.pass_obj
def save(store, entry_id: str, source):
    """Overwrite an entry with new content."""
    content = source.read()
    try:
        store.save(entry_id, content)
    except (EntryStoreError, ValueError) as e:
        _fail(str(e))
    click.echo(f"Saved {entry_id}")


@main.command()
@click.argument("entry_id")
@click.argument("title")
@click.pass_obj
def rename(store, entry_id: str, title: str):
    """Change an entry's title heading."""
    try:
        store.rename(entry_id, title)
    except (EntryStoreError, ValueError) as e:
        _fail(str(e))
    click.echo(f"Renamed {entry_id}")


@main.command()
@click.argument("entry_id")
@click.pass_obj
def delete(store, entry_id: str):
    """Delete an entry (no error if it is already gone)."""
    try:
        store.delete(entry_id)
    except (EntryStoreError, ValueError) as e:
        _fail(str(e))
    click.echo(f"Deleted {entry_id}")


@main.command()
@click.pass_obj
def path(store):
    """Print the entries directory."""
    click.echo(str(store.entries_dir))


if __name__ == "__main__":
    main()
