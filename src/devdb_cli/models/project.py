"""Project-related data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from devdb_cli.models.common import Credentials
from devdb_cli.models.database import Database


class DbType(str, Enum):
    """Database engines a project can be created with."""

    POSTGRES = "postgres"
    MYSQL = "mysql"


class Project(BaseModel):
    """A project as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    owner: str
    db_type: str = Field(alias="dbType")
    db_version: str = Field(alias="dbVersion")
    backup_location: str | None = Field(default=None, alias="backupLocation")
    default_credentials: Credentials | None = Field(
        default=None, alias="defaultCredentials",
    )
    databases: list[Database] | None = None


class CreateProjectRequest(BaseModel):
    """Request body for ``POST /projects``."""

    model_config = ConfigDict(populate_by_name=True)

    owner: str
    name: str
    db_type: DbType = Field(alias="dbType")
    db_version: str = Field(alias="dbVersion")
