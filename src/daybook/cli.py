"""Daybook CLI - daily journal with habit stats."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.sqlite_store import StoreError
from .config import load_config
from .core.entries import JournalEntry, filter_favorites
from .workflows import compile_stats, format_stats, get_store


def _parse_date(ctx, param, value: str | None) -> date | None:
    """Click callback: YYYY-MM-DD string to date."""
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}")


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _serialize_entry(entry: JournalEntry) -> dict:
    return {
        "id": entry.id,
        "date": entry.entry_date.isoformat(),
        "title": entry.title,
        "content": entry.content,
        "primary_mood": entry.mood,
        "secondary_moods": [m for m in (entry.secondary_mood_1, entry.secondary_mood_2) if m],
        "tags": entry.tag_list,
        "is_favorite": entry.is_favorite,
        "words": entry.word_count,
        "created_at": entry.created_at.isoformat() if entry.created_at else None,
        "updated_at": entry.updated_at.isoformat() if entry.updated_at else None,
    }


def _entry_line(entry: JournalEntry) -> str:
    star = "*" if entry.is_favorite else " "
    title = entry.title or "(untitled)"
    return f"{star} {entry.entry_date}  {title:30} {entry.mood:10} {entry.word_count:5d} words"


date_option = click.option(
    "--date", "-d", "target_date", default=None, callback=_parse_date,
    help="Date (YYYY-MM-DD), defaults to today",
)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Daybook - one journal entry per day, with streaks and stats."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.argument("content", required=False)
@date_option
@click.option("--title", "-t", default="", help="Entry title")
@click.option("--mood", "-m", default=None, help="Primary mood")
@click.option("--secondary-mood", "secondary_moods", multiple=True, help="Secondary mood (up to two)")
@click.option("--tags", default="", help="Comma-separated tags")
@click.option("--favorite", is_flag=True, help="Mark as favorite")
def write(
    content: str | None,
    target_date: date | None,
    title: str,
    mood: str | None,
    secondary_moods: tuple[str, ...],
    tags: str,
    favorite: bool,
):
    """Write (or overwrite) the entry for a day."""
    config = load_config()
    target = target_date or date.today()

    if len(secondary_moods) > 2:
        raise click.BadParameter("at most two secondary moods", param_hint="--secondary-mood")
    second_1, second_2 = (list(secondary_moods) + ["", ""])[:2]

    if content is None:
        content = click.prompt("Entry", default="", show_default=False)

    entry = JournalEntry(
        entry_date=target,
        title=title,
        content=content,
        primary_mood=mood or config.default_mood,
        secondary_mood_1=second_1,
        secondary_mood_2=second_2,
        tags=tags,
        is_favorite=favorite,
    )

    try:
        store = get_store(config)
        if store.get_by_date(target) is not None:
            click.echo(f"Overwriting existing entry for {target}.")
        stored = store.upsert(entry)
    except StoreError as e:
        _fail(e)

    click.echo(f"✓ Saved entry for {stored.entry_date} ({stored.word_count} words)")


@main.command()
@date_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(target_date: date | None, as_json: bool):
    """Show the entry for a day."""
    config = load_config()
    target = target_date or date.today()

    try:
        entry = get_store(config).get_by_date(target)
    except StoreError as e:
        _fail(e)

    if entry is None:
        click.echo(f"No journal entry for {target.strftime('%A, %b %d')}.")
        return

    if as_json:
        click.echo(json.dumps(_serialize_entry(entry), indent=2))
        return

    click.echo(f"{entry.title or 'Journal'} - {target.strftime('%A, %b %d')}")
    moods = ", ".join(m for m in (entry.mood, entry.secondary_mood_1, entry.secondary_mood_2) if m)
    click.echo(f"Mood: {moods}")
    if entry.tag_list:
        click.echo(f"Tags: {', '.join(entry.tag_list)}")
    click.echo()
    click.echo(entry.content.strip() or "(empty)")


@main.command("list")
@click.option("--favorites", is_flag=True, help="Only favorite entries")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_entries(favorites: bool, as_json: bool):
    """List entries, newest first."""
    config = load_config()
    try:
        entries = get_store(config).list_all()
    except StoreError as e:
        _fail(e)

    if favorites:
        entries = filter_favorites(entries)

    if as_json:
        click.echo(json.dumps([_serialize_entry(e) for e in entries], indent=2))
        return

    if not entries:
        click.echo("No entries.")
        return

    for entry in entries:
        click.echo(_entry_line(entry))


@main.command()
@date_option
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
def delete(target_date: date | None, yes: bool):
    """Delete the entry for a day."""
    config = load_config()
    target = target_date or date.today()

    try:
        store = get_store(config)
        entry = store.get_by_date(target)
        if entry is None:
            click.echo(f"No journal entry for {target}.")
            return
        if not yes and not click.confirm(f"Delete entry for {target}?"):
            return
        store.delete(entry.id)
    except StoreError as e:
        _fail(e)

    click.echo(f"✓ Deleted entry for {target}")


@main.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
def clear(yes: bool):
    """Delete every entry."""
    config = load_config()
    if not yes and not click.confirm("Delete ALL journal entries?"):
        return

    try:
        count = get_store(config).delete_all()
    except StoreError as e:
        _fail(e)

    click.echo(f"✓ Deleted {count} entries")


@main.command()
@click.option("--date", "-d", "as_of", default=None, callback=_parse_date,
              help="Compute stats as of this date (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(as_of: date | None, as_json: bool):
    """Show streaks, missed days, top tags, top mood and word trend."""
    config = load_config()
    try:
        result = compile_stats(get_store(config), config, as_of)
    except StoreError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(format_stats(result))


if __name__ == "__main__":
    main()
