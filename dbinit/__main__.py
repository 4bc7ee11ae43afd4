from pathlib import Path
from typing import Optional

import typer

from dbinit import commands
from dbinit.errors import BootstrapError
from dbinit.options import (
    CLIENT_OPTION,
    CONFIG_OPTION,
    DB_DIR_OPTION,
    DB_NAME_OPTION,
    TRACE_OPTION,
    settings_from_options,
)

app = typer.Typer(add_completion=False)


@app.command("init")
def init(
    config: Optional[Path] = CONFIG_OPTION,
    client: Optional[str] = CLIENT_OPTION,
    db_dir: Optional[Path] = DB_DIR_OPTION,
    db_name: Optional[str] = DB_NAME_OPTION,
    trace: Optional[bool] = TRACE_OPTION,
) -> None:
    """Create the database directory and file, then open an interactive session."""
    settings = settings_from_options(config, client=client, db_dir=db_dir, db_name=db_name, trace=trace)
    try:
        commands.bootstrap(settings)
    except BootstrapError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(e.exit_code)
    typer.echo(commands.INITIALIZED_MESSAGE, err=True)


@app.command("shell")
def shell(
    config: Optional[Path] = CONFIG_OPTION,
    client: Optional[str] = CLIENT_OPTION,
    db_dir: Optional[Path] = DB_DIR_OPTION,
    db_name: Optional[str] = DB_NAME_OPTION,
    trace: Optional[bool] = TRACE_OPTION,
) -> None:
    """Open an interactive session on an existing database."""
    settings = settings_from_options(config, client=client, db_dir=db_dir, db_name=db_name, trace=trace)
    try:
        commands.shell(settings)
    except BootstrapError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(e.exit_code)


@app.command("check")
def check(
    config: Optional[Path] = CONFIG_OPTION,
    client: Optional[str] = CLIENT_OPTION,
) -> None:
    """Report where the database client is installed."""
    settings = settings_from_options(config, client=client, trace=False)
    try:
        path = commands.check(settings)
    except BootstrapError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(e.exit_code)
    typer.echo(str(path))


if __name__ == "__main__":
    app()
