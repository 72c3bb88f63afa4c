"""
Query & Browse Commands
------------------------

Read-only views over the data file.

Commands:
    - stats: Tag and note counts
    - due: Pending notes whose due date is approaching
    - search: Case-insensitive search over note text and comments
"""
import json

import click

from reminder.core.cli_options import json_option
from reminder.core.logging_manager import handle_cli_error
from reminder.core.exceptions import ReminderError
from reminder.database.managers import sort_notes
from . import get_data
from .notes import echo_note_list


@click.command()
@json_option
@click.pass_context
def stats(ctx, as_json):
    """Display data file statistics."""
    try:
        report = get_data(ctx).stats()
        if as_json:
            click.echo(json.dumps(report.to_dict(), indent=2))
        else:
            click.echo(report.summary(), nl=False)

    except ReminderError as e:
        handle_cli_error(ctx, e, "stats")


@click.command()
@click.pass_context
def due(ctx):
    """List pending notes whose due date is approaching."""
    try:
        data = get_data(ctx)
        notes = sort_notes(data.notes_approaching_due_date())
        if not notes:
            click.echo("🎉 Nothing is due")
            return
        click.echo(f"\n⏰ Approaching due date ({len(notes)})")
        echo_note_list(data, notes)

    except ReminderError as e:
        handle_cli_error(ctx, e, "due")


@click.command()
@click.argument("query")
@click.pass_context
def search(ctx, query):
    """Search note text and comments."""
    try:
        data = get_data(ctx)
        notes = data.search(query)
        if not notes:
            click.echo(f"No notes match '{query}'")
            return
        click.echo(f"\n🔍 {len(notes)} match(es) for '{query}'")
        echo_note_list(data, notes)

    except ReminderError as e:
        handle_cli_error(ctx, e, "search", {"query": query})
