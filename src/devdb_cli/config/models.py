"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SettingSource = Literal["flag", "config", "default"]


def normalize_api_url(value: str) -> str:
    """Strip whitespace and trailing slashes, rejecting non-HTTP origins."""
    value = value.strip()
    if not value.startswith(("http://", "https://")):
        raise ValueError("URL must start with http:// or https://")
    return value.rstrip("/")


class CLIConfig(BaseModel):
    """Root of the persisted configuration file."""

    api_url: str | None = Field(default=None, description="DevDB API base URL")

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return normalize_api_url(v)


class Settings(BaseModel):
    """Resolved configuration for one CLI invocation."""

    model_config = ConfigDict(frozen=True)

    api_url: str
    source: SettingSource
    config_path: Path
