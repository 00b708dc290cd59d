"""Common response models."""

from __future__ import annotations

from pydantic import BaseModel


class Ack(BaseModel):
    """Acknowledgement returned by delete operations."""

    message: str | None = None


class Credentials(BaseModel):
    """Connection credentials issued by the backend."""

    username: str | None = None
    password: str | None = None
    database: str | None = None
