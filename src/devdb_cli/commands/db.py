"""Database commands.

create, list, show, delete. Every command works inside one project,
selected with ``--project``.
"""

from __future__ import annotations

from typing import Annotated

import typer

from devdb_cli.client.errors import error_handler
from devdb_cli.commands._common import (
    FormatOpt,
    ProjectOpt,
    make_client,
    require_args,
    require_flags,
)
from devdb_cli.output import reports
from devdb_cli.output.formatter import check_format, output

app = typer.Typer(
    name="db",
    help=(
        "Create and manage development databases.\n\n"
        "No Kubernetes knowledge required - DevDB handles all the infrastructure for you."
    ),
    no_args_is_help=True,
)

NameArg = Annotated[str, typer.Argument(help="Database name")]


@app.command()
@error_handler
def create(
    ctx: typer.Context,
    name: NameArg,
    project: ProjectOpt = None,
    fmt: FormatOpt = "text",
) -> None:
    """Create a new database in a project."""
    project_id = require_flags(project=project)[0]
    require_args(name=name)
    check_format(fmt)
    with make_client(ctx) as client:
        db = client.create_database(project_id, name)
    output(db, fmt, render=reports.database_created)


@app.command("list")
@error_handler
def list_databases(
    ctx: typer.Context,
    project: ProjectOpt = None,
    fmt: FormatOpt = "text",
) -> None:
    """List the databases of a project and their current status."""
    project_id = require_flags(project=project)[0]
    check_format(fmt)
    with make_client(ctx) as client:
        databases = client.list_databases(project_id)
    output(databases, fmt, render=reports.database_list)


@app.command()
@error_handler
def show(
    ctx: typer.Context,
    name: NameArg,
    project: ProjectOpt = None,
    fmt: FormatOpt = "text",
) -> None:
    """Show database details and connection information."""
    project_id = require_flags(project=project)[0]
    require_args(name=name)
    check_format(fmt)
    with make_client(ctx) as client:
        db = client.show_database(project_id, name)
    output(db, fmt, render=reports.database_details)


@app.command()
@error_handler
def delete(
    ctx: typer.Context,
    name: NameArg,
    project: ProjectOpt = None,
) -> None:
    """Delete a database and all its resources."""
    project_id = require_flags(project=project)[0]
    require_args(name=name)
    with make_client(ctx) as client:
        client.delete_database(project_id, name)
    output(name, render=reports.database_deleted)
