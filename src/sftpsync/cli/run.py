"""
sftpsync run - Execute one sync pass.
"""

from pathlib import Path

import typer

from sftpsync.config import SyncSettings, load_config
from sftpsync.connections import open_session
from sftpsync.exceptions import SyncError
from sftpsync.sync import run_sync
from sftpsync.utils.logging import get_logger, setup_logging


def run(
    config_path: Path = typer.Argument(..., help="Path to the YAML config file"),
    log_file: Path | None = typer.Argument(None, help="Log file to append to (default: console only)"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Verbose output (overrides config)"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Disable console logging"),
) -> None:
    """
    Download new remote files and move them into the remote archive directory.
    """
    setup_logging(level="DEBUG" if verbose else "INFO", log_file=log_file, console_enabled=not quiet)
    logger = get_logger("sftpsync.cli.run")

    settings: SyncSettings | None = None
    try:
        settings = SyncSettings.from_config(load_config(config_path))
        if settings.verbose and not verbose:
            setup_logging(level="DEBUG", log_file=log_file, console_enabled=not quiet)
        logger.debug(f"Loaded config from {config_path}")

        session = open_session(settings.connection_url(), settings)
        with session:
            result = run_sync(session, settings, logger=logger)
    except SyncError as e:
        logger.error(f"Sync failed: {e}", exc_info=bool(settings and settings.verbose) or verbose)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(f"Downloaded and archived {result.processed} of {len(result.new)} new files in {result.duration_s:.2f}s")
