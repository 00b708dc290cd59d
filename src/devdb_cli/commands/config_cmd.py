"""Config commands for inspecting and persisting the API URL."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from devdb_cli.client.errors import error_handler
from devdb_cli.commands._common import FormatOpt, get_settings
from devdb_cli.config.manager import ConfigManager
from devdb_cli.output.formatter import check_format, output_json, output_yaml
from devdb_cli.output.tables import settings_table

app = typer.Typer(name="config", help="Inspect and change the stored CLI configuration.")
console = Console()


def _get_manager(ctx: typer.Context) -> ConfigManager:
    return ConfigManager(config_path=get_settings(ctx).config_path)


@app.command()
@error_handler
def show(ctx: typer.Context, fmt: FormatOpt = "text") -> None:
    """Show the API URL in effect and where it came from."""
    check_format(fmt)
    settings = get_settings(ctx)
    mgr = _get_manager(ctx)
    data = {
        "api_url": settings.api_url,
        "source": settings.source,
        "stored_api_url": mgr.config.api_url,
        "config_file": str(settings.config_path),
    }
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    else:
        console.print(settings_table(settings, mgr.config.api_url))


@app.command("set-url")
@error_handler
def set_url(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(help="API base URL, e.g. https://devdb.example.com")],
) -> None:
    """Store the API URL used when --api-url is not given."""
    mgr = _get_manager(ctx)
    stored = mgr.set_api_url(url)
    console.print(
        f"[green]API URL set to {escape(stored)}.[/] Saved to {escape(str(mgr.config_path))}",
        soft_wrap=True,
    )


@app.command("unset-url")
@error_handler
def unset_url(ctx: typer.Context) -> None:
    """Remove the stored API URL, falling back to the built-in default."""
    mgr = _get_manager(ctx)
    if mgr.unset_api_url():
        console.print("[green]Stored API URL removed.[/]")
    else:
        console.print("[yellow]No API URL stored; the default is in use.[/]")
