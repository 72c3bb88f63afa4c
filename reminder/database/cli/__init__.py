#!/usr/bin/env python3
"""
Reminder Command-Line Interface
-------------------------------

Modular command-line interface for the reminder data file.

This module provides the main CLI group and shared context setup
for all commands.

Command Structure:
    - Setup (init)
    - Query & Browse (stats, due, search)
    - Backup & Restore (backup, auto-backup, backups, restore)
    - Tags (tag list, tag add, tag notes)
    - Notes (note add, note list, note show, note comment, ...)

Usage:
    # Get general help
    reminder --help

    # Get help for a specific command group
    reminder note --help

    # Use another data file
    reminder --data-file ~/Dropbox/reminder/data.json due
"""
import click
from pathlib import Path

from reminder.core.cli_options import verbose_option
from reminder.core.cli_utils import setup_logger
from reminder.core.config import ReminderConfig
from reminder.core.logging_manager import handle_cli_error
from reminder.core.paths import CONFIG_FILE
from reminder.core.exceptions import ReminderError, ValidationError
from reminder.database import ReminderData
from reminder.models import Note


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to data file (default: from config)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(CONFIG_FILE),
    show_default=True,
    help="Path to YAML config file",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Path to log directory (default: from config)",
)
@verbose_option
@click.pass_context
def cli(ctx, data_file, config_path, log_dir, verbose):
    """Personal task and reminder tracker"""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        config = ReminderConfig.load(Path(config_path).expanduser())
    except ReminderError as e:
        handle_cli_error(ctx, e, "load_config", {"config": config_path})

    if data_file:
        config.data_file = Path(data_file).expanduser()
    if log_dir:
        config.log_dir = Path(log_dir).expanduser()

    ctx.obj["config"] = config
    ctx.obj["data_file"] = config.data_file
    ctx.obj["log_dir"] = config.log_dir
    ctx.obj["logger"] = setup_logger(config.log_dir, "reminder")


def get_data(ctx) -> ReminderData:
    """Get or load the reminder data from context, creating the file if missing."""
    if "data" not in ctx.obj:
        ctx.obj["data"] = ReminderData.ensure_data_file(
            ctx.obj["data_file"],
            clock=ctx.obj.get("clock"),
            logger=ctx.obj.get("logger"),
        )
    return ctx.obj["data"]


def resolve_note(ctx, index: int) -> Note:
    """
    Look up a note by its 1-based position in the canonical listing.

    Exits with an error message when the index is out of range.
    """
    notes = get_data(ctx).note_store.sorted()
    if index < 1 or index > len(notes):
        handle_cli_error(
            ctx,
            ValidationError(f"No note at index {index} (have {len(notes)})"),
            "resolve_note",
            {"index": index},
        )
    return notes[index - 1]


def resolve_tag_ids(ctx, slugs) -> list:
    """Map tag slugs to ids; exits on the first unknown slug."""
    data = get_data(ctx)
    tag_ids = []
    for slug in slugs:
        tag = data.tag_from_slug(slug.strip().lower())
        if tag is None:
            handle_cli_error(
                ctx, ValidationError(f"Unknown tag: {slug}"), "resolve_tag", {"slug": slug}
            )
        tag_ids.append(tag.id)
    return tag_ids


# Import and register command modules
# These imports must come after CLI group definition
from .setup import init  # noqa: E402
from .query import stats, due, search  # noqa: E402
from .backup import backup, auto_backup, backups, restore  # noqa: E402
from .tags import tag  # noqa: E402
from .notes import note  # noqa: E402

# Register top-level commands
cli.add_command(init)
cli.add_command(stats)
cli.add_command(due)
cli.add_command(search)
cli.add_command(backup)
cli.add_command(auto_backup)
cli.add_command(backups)
cli.add_command(restore)

# Register command groups
cli.add_command(tag)
cli.add_command(note)


if __name__ == "__main__":
    cli(obj={})
