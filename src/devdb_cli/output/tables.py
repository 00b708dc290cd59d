"""Rich tables for the config commands."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from devdb_cli.config.models import Settings

_SOURCE_STYLE = {"flag": "green", "config": "cyan", "default": "dim"}


def settings_table(settings: Settings, stored_api_url: str | None) -> Table:
    """Show the effective API URL next to the value kept in the config file."""
    table = Table(title="DevDB configuration", show_header=False)
    table.add_column("Setting", style="bold", no_wrap=True)
    table.add_column("Value", overflow="fold")
    table.add_row("API URL", escape(settings.api_url))
    table.add_row("Source", f"[{_SOURCE_STYLE[settings.source]}]{settings.source}[/]")
    table.add_row("Stored API URL", escape(stored_api_url) if stored_api_url else "[dim](not set)[/]")
    table.add_row("Config file", escape(str(settings.config_path)))
    return table
