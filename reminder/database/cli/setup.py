"""
Setup & Initialization Commands
--------------------------------

Data file initialization.

Commands:
    - init: Create the data file with the basic tags
"""
import click

from reminder.core.logging_manager import handle_cli_error
from reminder.core.exceptions import ReminderError
from reminder.models import User
from reminder.database import ReminderData


@click.command()
@click.option("--name", default="", help="Owner name stored in the data file")
@click.option("--email", default="", help="Owner email stored in the data file")
@click.pass_context
def init(ctx, name, email):
    """Create the data file (with basic tags) if it does not exist."""
    data_file = ctx.obj["data_file"]
    try:
        if data_file.exists():
            click.echo(f"📁 Data file already exists: {data_file}")
            return

        click.echo(f"🚀 Initializing {data_file}...")
        data = ReminderData.ensure_data_file(
            data_file,
            user=User(name=name, email_id=email),
            clock=ctx.obj.get("clock"),
            logger=ctx.obj.get("logger"),
        )
        ctx.obj["data"] = data
        click.echo(f"✅ Created with {len(data.tags)} tags")

    except ReminderError as e:
        handle_cli_error(ctx, e, "init", {"data_file": str(data_file)})
