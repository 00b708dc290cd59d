"""Entry point: global options, logging setup and API URL resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from devdb_cli import __version__
from devdb_cli.client.errors import error_handler
from devdb_cli.commands import config_cmd, db, project
from devdb_cli.config.constants import ENV_CONFIG_FILE
from devdb_cli.config.manager import ConfigManager
from devdb_cli.logging_config import setup_logging

app = typer.Typer(
    name="devdb",
    help="DevDB - Development Database Manager.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"devdb {__version__}")
        raise typer.Exit()


@app.callback()
@error_handler
def main_callback(
    ctx: typer.Context,
    api_url: Annotated[
        Optional[str],
        typer.Option("--api-url", help="DevDB API URL for this invocation (overrides the config file)"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            envvar=ENV_CONFIG_FILE,
            dir_okay=False,
            help="Config file (default: per-user config directory)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log config resolution and HTTP requests to stderr"),
    ] = False,
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """DevDB is a tool for managing development databases.

    It allows you to create, manage, and share databases from backups,
    without needing to know Kubernetes or infrastructure details.
    """
    setup_logging(verbose)
    ctx.obj = ConfigManager(config_path=config).resolve(api_url)


# Command groups
app.add_typer(project.app, name="project")
app.add_typer(db.app, name="db")
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
