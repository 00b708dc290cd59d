"""Pydantic data models for the DevDB REST API."""

from devdb_cli.models.common import Ack, Credentials
from devdb_cli.models.database import CreateDatabaseRequest, Database
from devdb_cli.models.project import CreateProjectRequest, DbType, Project

__all__ = [
    "Ack",
    "CreateDatabaseRequest",
    "CreateProjectRequest",
    "Credentials",
    "Database",
    "DbType",
    "Project",
]
