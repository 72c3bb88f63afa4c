"""
Backup & Restore Commands
--------------------------

Data file backup and restore operations.

Commands:
    - backup: Create timestamped backup
    - auto-backup: Back up only if the last automatic backup is old enough
    - backups: List all backups
    - restore: Restore from backup

Usage:
    # Create a manual backup
    reminder backup

    # Back up at most once a day
    reminder auto-backup --gap 86400

    # Restore from a specific backup file
    reminder restore ~/reminder/data_backup_1700000000.json
"""
import click
from pathlib import Path

from reminder.core.cli_options import gap_option
from reminder.core.logging_manager import handle_cli_error
from reminder.core.exceptions import ReminderError
from . import get_data


@click.command()
@click.pass_context
def backup(ctx):
    """Create timestamped backup."""
    try:
        click.echo("💾 Creating backup...")
        backup_path = get_data(ctx).create_backup()
        click.echo(f"✅ Backup created: {backup_path}")

    except ReminderError as e:
        handle_cli_error(ctx, e, "backup")


@click.command("auto-backup")
@gap_option
@click.pass_context
def auto_backup(ctx, gap):
    """Create a backup if the last one is older than the gap."""
    if gap is None:
        gap = ctx.obj["config"].auto_backup_gap_secs
    try:
        backup_path = get_data(ctx).auto_backup(gap)
        if backup_path is None:
            click.echo("⏭️  Last backup is recent, skipping")
        else:
            click.echo(f"✅ Backup created: {backup_path}")

    except ReminderError as e:
        handle_cli_error(ctx, e, "auto_backup", {"gap": gap})


@click.command()
@click.pass_context
def backups(ctx):
    """List all available backups."""
    try:
        backup_list = get_data(ctx).list_backups()

        click.echo("\n📦 Available Backups")
        click.echo("=" * 70)

        if not backup_list:
            click.echo("\n  No backups found")
            return

        for entry in backup_list:
            click.echo(f"  • {entry['name']}")
            click.echo(f"    Created: {entry['created']}")
            click.echo(f"    Size: {entry['size']:,} bytes")
        click.echo(f"\nTotal backups: {len(backup_list)}")

    except ReminderError as e:
        handle_cli_error(ctx, e, "backups")


@click.command()
@click.argument("backup_path", type=click.Path(exists=True, dir_okay=False))
@click.confirmation_option(
    prompt="⚠️  This will overwrite the current data file! Continue?"
)
@click.pass_context
def restore(ctx, backup_path):
    """Restore from a backup file."""
    try:
        click.echo(f"♻️  Restoring from: {backup_path}")
        safety = get_data(ctx).restore_backup(Path(backup_path))
        if safety is not None:
            click.echo(f"💾 Previous data saved to: {safety}")
        click.echo("✅ Data file restored successfully!")

    except ReminderError as e:
        handle_cli_error(
            ctx,
            e,
            "restore",
            additional_context={"backup_path": backup_path},
        )
