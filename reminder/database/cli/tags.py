"""
Tag Commands
------------

Commands:
    - tag list: All tag slugs (sorted) with their groups
    - tag add: Register a new tag
    - tag notes: Notes carrying a tag, filtered by status
"""
import click

from reminder.core.cli_options import status_option
from reminder.core.logging_manager import handle_cli_error
from reminder.core.exceptions import ReminderError
from . import get_data
from .notes import echo_note_list


@click.group()
@click.pass_context
def tag(ctx: click.Context) -> None:
    """Manage tags."""
    pass


@tag.command("list")
@click.pass_context
def list_tags(ctx):
    """List tags sorted by slug."""
    try:
        data = get_data(ctx)
        click.echo(f"\n🏷️  Tags ({len(data.tags)})")
        for slug in data.sorted_tag_slugs():
            group = data.tag_from_slug(slug).group
            suffix = f"  [{group}]" if group else ""
            click.echo(f"  • {slug}{suffix}")

    except ReminderError as e:
        handle_cli_error(ctx, e, "list_tags")


@tag.command("add")
@click.argument("slug")
@click.option("-g", "--group", default="", help="Tag group (e.g. 'repeat')")
@click.pass_context
def add_tag(ctx, slug, group):
    """Register a new tag."""
    try:
        new_tag = get_data(ctx).register_tag(slug, group)
        click.echo(f"✅ Added tag '{new_tag.slug}' (id {new_tag.id})")

    except ReminderError as e:
        handle_cli_error(ctx, e, "add_tag", {"slug": slug, "group": group})


@tag.command("notes")
@click.argument("slug")
@status_option()
@click.pass_context
def tag_notes(ctx, slug, status):
    """List notes carrying a tag."""
    try:
        data = get_data(ctx)
        notes = data.find_notes_by_tag_slug(slug.strip().lower(), status)
        if not notes:
            click.echo(f"No {status} notes tagged '{slug}'")
            return
        click.echo(f"\n🏷️  {slug}: {len(notes)} {status} note(s)")
        echo_note_list(data, notes)

    except ReminderError as e:
        handle_cli_error(ctx, e, "tag_notes", {"slug": slug, "status": status})
