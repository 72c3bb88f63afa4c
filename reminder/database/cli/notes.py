"""
Note Commands
-------------

Notes are addressed by INDEX: the 1-based position in `reminder note list
--status all`, i.e. every note ordered by most recent update first.
Indexes shift after a note is modified.

Commands:
    - note add / list / show
    - note comment / done / pending / due-date
    - note text / summary / tags / toggle-main
"""
import click

from reminder.core.cli_options import main_option, tag_option
from reminder.core.logging_manager import handle_cli_error
from reminder.core.exceptions import ReminderError
from reminder.models import NoteStatus, Outcome
from reminder.utils.display import external_texts
from . import get_data, resolve_note, resolve_tag_ids

LIST_WIDTH = 60
ALL_STATUSES = "all"


def echo_note_list(data, notes) -> None:
    """Echo notes in compact form, each prefixed with its canonical index."""
    positions = {id(n): i for i, n in enumerate(data.note_store.sorted(), start=1)}
    for note, line in zip(notes, external_texts(notes, LIST_WIDTH)):
        click.echo(f"{positions[id(note)]:>4}. {line}")


def _echo_outcome(outcome: Outcome, applied: str, skipped: str) -> None:
    if outcome is Outcome.SKIPPED:
        click.echo(f"⏭️  {skipped}")
    else:
        click.echo(f"✅ {applied}")


@click.group()
@click.pass_context
def note(ctx: click.Context) -> None:
    """Manage notes."""
    pass


@note.command("add")
@click.argument("text")
@tag_option()
@click.pass_context
def add_note(ctx, text, tags):
    """Register a new note."""
    try:
        data = get_data(ctx)
        new_note = data.register_note(resolve_tag_ids(ctx, tags), text)
        click.echo(f"✅ Added note: {new_note.text}")

    except ReminderError as e:
        handle_cli_error(ctx, e, "add_note", {"tags": list(tags)})


@note.command("list")
@click.option(
    "-s", "--status",
    type=click.Choice(NoteStatus.choices() + [ALL_STATUSES], case_sensitive=False),
    default=NoteStatus.PENDING.value,
    show_default=True,
    help="Note status to filter on",
)
@main_option
@click.pass_context
def list_notes(ctx, status, only_main):
    """List notes, most recently updated first."""
    try:
        data = get_data(ctx)
        if status == ALL_STATUSES:
            notes = data.note_store.sorted()
        else:
            notes = data.note_store.with_status(status)
        if only_main:
            notes = [n for n in notes if n.is_main]

        if not notes:
            click.echo("No notes found")
            return
        click.echo(f"\n📝 Notes ({len(notes)})")
        echo_note_list(data, notes)

    except ReminderError as e:
        handle_cli_error(ctx, e, "list_notes", {"status": status})


@note.command("show")
@click.argument("index", type=int)
@click.pass_context
def show_note(ctx, index):
    """Display note details."""
    try:
        data = get_data(ctx)
        click.echo(data.note_text(resolve_note(ctx, index)), nl=False)

    except ReminderError as e:
        handle_cli_error(ctx, e, "show_note", {"index": index})


@note.command("comment")
@click.argument("index", type=int)
@click.argument("text")
@click.pass_context
def comment_note(ctx, index, text):
    """Append a comment to a note."""
    try:
        outcome = get_data(ctx).add_note_comment(resolve_note(ctx, index), text)
        _echo_outcome(outcome, "Comment added", "Comment not added")

    except ReminderError as e:
        handle_cli_error(ctx, e, "comment_note", {"index": index})


def _set_status(ctx, index: int, status: NoteStatus) -> None:
    try:
        outcome = get_data(ctx).update_note_status(resolve_note(ctx, index), status)
        _echo_outcome(
            outcome,
            f"Marked as {status.value}",
            "Status unchanged (already set, or note repeats)",
        )

    except ReminderError as e:
        handle_cli_error(ctx, e, "update_status", {"index": index, "status": status.value})


@note.command("done")
@click.argument("index", type=int)
@click.pass_context
def mark_done(ctx, index):
    """Mark a note as done."""
    _set_status(ctx, index, NoteStatus.DONE)


@note.command("pending")
@click.argument("index", type=int)
@click.pass_context
def mark_pending(ctx, index):
    """Mark a note as pending."""
    _set_status(ctx, index, NoteStatus.PENDING)


@note.command("due-date")
@click.argument("index", type=int)
@click.argument("date")
@click.pass_context
def due_date(ctx, index, date):
    """Set the due date (DD-MM-YYYY, or 'nil' to clear)."""
    try:
        get_data(ctx).update_note_complete_by(resolve_note(ctx, index), date)
        click.echo(f"✅ Due date set to {date.strip()}")

    except ReminderError as e:
        handle_cli_error(ctx, e, "update_complete_by", {"index": index, "date": date})


@note.command("text")
@click.argument("index", type=int)
@click.argument("text")
@click.pass_context
def update_text(ctx, index, text):
    """Replace a note's text."""
    try:
        get_data(ctx).update_note_text(resolve_note(ctx, index), text)
        click.echo("✅ Text updated")

    except ReminderError as e:
        handle_cli_error(ctx, e, "update_text", {"index": index})


@note.command("summary")
@click.argument("index", type=int)
@click.argument("text")
@click.pass_context
def update_summary(ctx, index, text):
    """Replace a note's summary."""
    try:
        get_data(ctx).update_note_summary(resolve_note(ctx, index), text)
        click.echo("✅ Summary updated")

    except ReminderError as e:
        handle_cli_error(ctx, e, "update_summary", {"index": index})


@note.command("tags")
@click.argument("index", type=int)
@tag_option()
@click.pass_context
def update_tags(ctx, index, tags):
    """Replace a note's tags."""
    try:
        target = resolve_note(ctx, index)
        get_data(ctx).update_note_tags(target, resolve_tag_ids(ctx, tags))
        click.echo(f"✅ Tags set to {', '.join(tags)}")

    except ReminderError as e:
        handle_cli_error(ctx, e, "update_tags", {"index": index, "tags": list(tags)})


@note.command("toggle-main")
@click.argument("index", type=int)
@click.pass_context
def toggle_main(ctx, index):
    """Flip a note between main and incidental."""
    try:
        target = resolve_note(ctx, index)
        get_data(ctx).toggle_note_main_flag(target)
        label = "main" if target.is_main else "incidental"
        click.echo(f"✅ Note is now {label}")

    except ReminderError as e:
        handle_cli_error(ctx, e, "toggle_main", {"index": index})
