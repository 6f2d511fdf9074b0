"""
sftpsync check - Validate config and connectivity without transferring anything.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from sftpsync.config import SyncSettings, load_config
from sftpsync.connections import open_session
from sftpsync.exceptions import SyncError
from sftpsync.sync import plan_sync
from sftpsync.utils.logging import setup_logging

console = Console(soft_wrap=True)


def check(
    config_path: Path = typer.Argument(..., help="Path to the YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Verbose output"),
) -> None:
    """
    Show what a run would download, without downloading or archiving.
    """
    setup_logging(level="DEBUG" if verbose else "WARNING")

    try:
        settings = SyncSettings.from_config(load_config(config_path))
        console.print(f"[green]Config OK[/green] ({escape(str(config_path))})")

        with open_session(settings.connection_url(), settings) as session:
            plan = plan_sync(session, settings)
    except SyncError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1) from e

    console.print(f"  Pending:  {plan.pending} files in {settings.read_path}")
    console.print(f"  Archived: {plan.archived} files in {settings.archive_path}")
    console.print(f"  New:      {len(plan.new)} files would be downloaded to {settings.download_path}")
    for name in plan.new:
        console.print(f"    {escape(name)}", highlight=False)
