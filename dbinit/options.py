from pathlib import Path
from typing import Optional

import typer

from dbinit.config import Settings, load_settings
from dbinit.utils import setup_logging

CONFIG_OPTION = typer.Option(None, "--config", dir_okay=False, help="YAML settings file (default: ./dbinit.yaml if present)")
CLIENT_OPTION = typer.Option(None, "--client", help="Database client executable")
DB_DIR_OPTION = typer.Option(None, "--db-dir", help="Directory to create for the database")
DB_NAME_OPTION = typer.Option(None, "--db-name", help="Database file name inside the directory")
TRACE_OPTION = typer.Option(None, "--trace/--no-trace", help="Echo each step to stderr")


def settings_from_options(config: Optional[Path], **overrides) -> Settings:
    """Load settings for a command, exiting 2 on a bad config file."""
    try:
        settings = load_settings(config, **overrides)
    except (ValueError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    setup_logging(settings.trace)
    return settings
