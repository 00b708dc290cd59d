"""Helpers shared by the command modules."""

from __future__ import annotations

import getpass
from typing import Annotated

import typer

from devdb_cli.client.api import DevDBClient
from devdb_cli.client.errors import UsageError
from devdb_cli.config.manager import ConfigManager
from devdb_cli.config.models import Settings
from devdb_cli.models import DbType

# Shared Typer option type aliases
ProjectOpt = Annotated[
    str | None,
    typer.Option("--project", "-p", help="Project ID (required)"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: text, json or yaml"),
]


def get_settings(ctx: typer.Context) -> Settings:
    """Return the settings resolved by the root callback."""
    settings = ctx.find_object(Settings)
    if settings is None:
        settings = ConfigManager().resolve()
    return settings


def make_client(ctx: typer.Context) -> DevDBClient:
    """Create a DevDBClient for the API URL resolved for this invocation."""
    return DevDBClient(get_settings(ctx))


def _blank(values: dict[str, str | None]) -> str:
    return ", ".join(
        f'"{name.replace("_", "-")}"'
        for name, value in values.items()
        if value is None or not value.strip()
    )


def require_flags(**flags: str | None) -> list[str]:
    """Return the flag values, or raise UsageError naming every unset flag."""
    missing = _blank(flags)
    if missing:
        raise UsageError(f"required flag(s) {missing} not set")
    return [value for value in flags.values() if value is not None]


def require_args(**args: str) -> None:
    """Raise UsageError naming every blank positional argument."""
    blank = _blank(args)
    if blank:
        raise UsageError(f"argument(s) {blank} must not be empty")


def parse_db_type(value: str) -> DbType:
    try:
        return DbType(value.strip().lower())
    except ValueError:
        choices = ", ".join(t.value for t in DbType)
        raise UsageError(
            f"invalid database type '{value}' (choose from {choices})"
        ) from None


def current_user() -> str:
    """Account name of the invoking user."""
    try:
        return getpass.getuser()
    except (OSError, KeyError, ImportError) as exc:
        raise UsageError(f"error getting current user: {exc}") from exc
