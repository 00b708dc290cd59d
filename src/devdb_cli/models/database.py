"""Database data models."""

from __future__ import annotations

from pydantic import BaseModel


class Database(BaseModel):
    """A provisioned database instance inside a project.

    Connection fields stay ``None`` until the backend has provisioned the
    instance and issued credentials.
    """

    name: str
    status: str
    host: str | None = None
    port: int | None = None
    username: str | None = None
    database: str | None = None


class CreateDatabaseRequest(BaseModel):
    """Request body for ``POST /projects/{projectId}/databases``."""

    name: str
