"""Project commands.

create, list, show, delete.
"""

from __future__ import annotations

from typing import Annotated

import typer

from devdb_cli.client.errors import UsageError, error_handler
from devdb_cli.commands._common import (
    FormatOpt,
    current_user,
    make_client,
    parse_db_type,
    require_args,
    require_flags,
)
from devdb_cli.output import reports
from devdb_cli.output.formatter import check_format, output

app = typer.Typer(
    name="project",
    help="Create and manage projects for organizing your databases.",
    no_args_is_help=True,
)


@app.command()
@error_handler
def create(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Project name")],
    owner: Annotated[
        str | None,
        typer.Option("--owner", help="Owner of the project (defaults to current user)"),
    ] = None,
    db_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Type of database: postgres or mysql (required)"),
    ] = None,
    db_version: Annotated[
        str | None,
        typer.Option("--version", help="Version of the database (required)"),
    ] = None,
    fmt: FormatOpt = "text",
) -> None:
    """Create a new project."""
    type_name, version = require_flags(type=db_type, version=db_version)
    require_args(name=name)
    engine = parse_db_type(type_name)
    check_format(fmt)
    owner = owner or current_user()
    with make_client(ctx) as client:
        project = client.create_project(owner, name, engine, version)
    output(project, fmt, render=reports.project_created)


@app.command("list")
@error_handler
def list_projects(
    ctx: typer.Context,
    owner: Annotated[
        str | None,
        typer.Option("--owner", help="Only list projects of this owner (defaults to current user)"),
    ] = None,
    all_owners: Annotated[
        bool,
        typer.Option("--all", help="List projects of every owner"),
    ] = False,
    fmt: FormatOpt = "text",
) -> None:
    """List your projects, or filter by owner."""
    if owner and all_owners:
        raise UsageError("--owner and --all cannot be used together")
    check_format(fmt)
    owner_filter = None if all_owners else owner or current_user()
    with make_client(ctx) as client:
        projects = client.list_projects(owner_filter)
    output(projects, fmt, render=reports.project_list)


@app.command()
@error_handler
def show(
    ctx: typer.Context,
    project_id: Annotated[str, typer.Argument(metavar="ID", help="Project ID")],
    fmt: FormatOpt = "text",
) -> None:
    """Show project details, including its databases."""
    require_args(id=project_id)
    check_format(fmt)
    with make_client(ctx) as client:
        project = client.show_project(project_id)
    output(project, fmt, render=reports.project_details)


@app.command()
@error_handler
def delete(
    ctx: typer.Context,
    project_id: Annotated[str, typer.Argument(metavar="ID", help="Project ID")],
) -> None:
    """Delete a project."""
    require_args(id=project_id)
    with make_client(ctx) as client:
        client.delete_project(project_id)
    output(project_id, render=reports.project_deleted)
