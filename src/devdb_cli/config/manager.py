"""Reads and writes the TOML config file and resolves the API URL."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import structlog
import tomli_w
from pydantic import ValidationError

from devdb_cli.client.errors import DevDBError, UsageError
from devdb_cli.config.constants import CONFIG_FILE, DEFAULT_API_URL
from devdb_cli.config.models import CLIConfig, Settings, normalize_api_url

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

logger = structlog.get_logger(__name__)


def _write_private(path: Path, text: str) -> None:
    """Replace *path* with *text*, readable by the owner only."""
    if not path.parent.exists():
        path.parent.mkdir(parents=True, mode=0o700)
    temp = path.with_name(f".{path.name}.tmp")
    fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as fh:
        fh.write(text)
    temp.replace(path)


class ConfigManager:
    """Manages CLI configuration on disk and resolves the API base URL."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        # Anything wrong with the file means "no stored value", never an error.
        if not self.config_path.exists():
            return CLIConfig()
        try:
            data = tomllib.loads(self.config_path.read_bytes().decode())
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            logger.debug("config_unreadable", path=str(self.config_path), error=str(exc))
            return CLIConfig()
        api = data.get("api")
        url = api.get("url") if isinstance(api, dict) else None
        try:
            return CLIConfig(api_url=url)
        except ValidationError as exc:
            logger.debug(
                "config_invalid",
                path=str(self.config_path),
                error=exc.errors()[0]["msg"],
            )
            return CLIConfig()

    def save(self) -> None:
        data: dict[str, Any] = {}
        if self.config.api_url:
            data["api"] = {"url": self.config.api_url}
        try:
            _write_private(self.config_path, tomli_w.dumps(data))
        except OSError as exc:
            raise DevDBError(f"Cannot write config file {self.config_path}: {exc}") from exc
        logger.debug("config_saved", path=str(self.config_path))

    def set_api_url(self, url: str) -> str:
        """Persist *url* as the stored API URL and return the normalized value."""
        try:
            normalized = normalize_api_url(url)
        except ValueError as exc:
            raise UsageError(f"invalid API URL '{url}': {exc}") from exc
        self.config.api_url = normalized
        self.save()
        return normalized

    def unset_api_url(self) -> bool:
        if self.config.api_url is None:
            return False
        self.config.api_url = None
        self.save()
        return True

    def resolve(self, api_url: str | None = None) -> Settings:
        """Resolve the API base URL for this invocation.

        Precedence: --api-url flag > config file > built-in default.
        """
        if api_url is not None and api_url.strip():
            try:
                resolved = normalize_api_url(api_url)
            except ValueError as exc:
                raise UsageError(f"invalid --api-url '{api_url}': {exc}") from exc
            source = "flag"
        elif self.config.api_url:
            resolved, source = self.config.api_url, "config"
        else:
            resolved, source = DEFAULT_API_URL, "default"

        logger.debug("config_resolved", api_url=resolved, source=source)
        return Settings(api_url=resolved, source=source, config_path=self.config_path)
