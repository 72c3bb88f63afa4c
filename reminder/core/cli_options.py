#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for the reminder CLI.

Usage:
    from reminder.core.cli_options import status_option, tag_option

    @note.command("list")
    @status_option()
    def list_notes(ctx, status):
        pass
"""
import click

from reminder.models.enums import NoteStatus


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show detailed errors and tracebacks"
)


# ═══════════════════════════════════════════════════════════════════════════
# NOTE OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

def status_option(default: str = NoteStatus.PENDING.value):
    """
    Factory function for the note status filter.

    Args:
        default: Status selected when the flag is omitted

    Returns:
        Click option decorator
    """
    return click.option(
        "-s", "--status",
        type=click.Choice(NoteStatus.choices(), case_sensitive=False),
        default=default,
        show_default=True,
        help="Note status to filter on"
    )


def tag_option(required: bool = True):
    """
    Factory function for a repeatable --tag option holding tag slugs.

    Args:
        required: Whether at least one --tag must be given

    Returns:
        Click option decorator
    """
    return click.option(
        "-t", "--tag",
        "tags",
        multiple=True,
        required=required,
        help="Tag slug (repeat for several tags)"
    )


main_option = click.option(
    "--main",
    "only_main",
    is_flag=True,
    help="Only notes flagged as main"
)


# ═══════════════════════════════════════════════════════════════════════════
# OUTPUT FORMAT OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Output in JSON format"
)


# ═══════════════════════════════════════════════════════════════════════════
# BACKUP OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

gap_option = click.option(
    "--gap",
    type=click.IntRange(min=0),
    default=None,
    help="Minimum seconds since the last backup (default: from config)"
)
