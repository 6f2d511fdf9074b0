"""
Main CLI entry point.
"""

import typer

from sftpsync import __version__
from sftpsync.cli import check, run


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"sftpsync version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="sftpsync",
    help="sftpsync - Download new files from an SFTP directory and archive them remotely",
    add_completion=False,
)

app.command(name="run")(run.run)
app.command(name="check")(check.check)


@app.callback(invoke_without_command=True)
def entrypoint(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """
    sftpsync - One-shot SFTP download-and-archive sync.

    Run 'sftpsync <command> --help' for help on a specific command.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
