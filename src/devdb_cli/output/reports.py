"""Fixed-layout text reports for each command.

Every function returns the report as a list of lines. Optional connection
fields are left out entirely when the backend has not populated them.
"""

from __future__ import annotations

from collections.abc import Sequence

from devdb_cli.models import Database, Project


def _connection_lines(db: Database, indent: str = "") -> list[str]:
    lines = []
    if db.host:
        lines.append(f"{indent}Host: {db.host}")
    if db.port:
        lines.append(f"{indent}Port: {db.port}")
    if db.username:
        lines.append(f"{indent}Username: {db.username}")
    if db.database:
        lines.append(f"{indent}Database: {db.database}")
    return lines


def _project_fields(project: Project, indent: str) -> list[str]:
    return [
        f"{indent}ID: {project.id}",
        f"{indent}Name: {project.name}",
        f"{indent}Owner: {project.owner}",
        f"{indent}DbType: {project.db_type}",
        f"{indent}DbVersion: {project.db_version}",
    ]


def project_created(project: Project) -> list[str]:
    return [
        "Project created successfully",
        "Details:",
        *_project_fields(project, "  "),
    ]


def project_list(projects: Sequence[Project]) -> list[str]:
    if not projects:
        return ["No projects found"]
    lines = ["Projects:"]
    for project in projects:
        lines += [
            f"- {project.name} (ID: {project.id})",
            f"  Owner: {project.owner}",
            f"  DbType: {project.db_type}",
            f"  DbVersion: {project.db_version}",
        ]
    return lines


def project_details(project: Project) -> list[str]:
    lines = ["Project Details:", *_project_fields(project, "")]
    if project.backup_location:
        lines.append(f"BackupLocation: {project.backup_location}")
    if project.databases:
        lines += ["", "Databases:"]
        for db in project.databases:
            lines.append(f"- {db.name} (Status: {db.status})")
            lines += [
                f"  {label}: {value}"
                for label, value in (("Host", db.host), ("Port", db.port), ("Username", db.username))
                if value is not None
            ]
    return lines


def project_deleted(project_id: str) -> list[str]:
    return [f"Project {project_id} deleted successfully"]


def database_created(db: Database) -> list[str]:
    return [
        "Database created successfully",
        "Details:",
        f"  Name: {db.name}",
        f"  Status: {db.status}",
        *_connection_lines(db, "  "),
    ]


def database_list(databases: Sequence[Database]) -> list[str]:
    if not databases:
        return ["No databases found"]
    lines = ["Databases:"]
    for db in databases:
        lines.append(f"- {db.name} (Status: {db.status})")
        lines += _connection_lines(db, "  ")
    return lines


def database_details(db: Database) -> list[str]:
    return [
        "Database Details:",
        f"Name: {db.name}",
        f"Status: {db.status}",
        *_connection_lines(db),
    ]


def database_deleted(name: str) -> list[str]:
    return [f"Database {name} deleted successfully"]
