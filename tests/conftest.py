"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from devdb_cli.config.manager import ConfigManager
from devdb_cli.config.models import Settings

API = "http://devdb.test"


def pytest_addoption(parser):
    parser.addoption("--api-url", action="store", default=None)


@pytest.fixture
def live_api_url(request):
    url = request.config.getoption("--api-url")
    if not url:
        pytest.skip("Live DevDB API URL not provided")
    return url


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config file at a temp path and pin the invoking user."""
    config_path = tmp_path / "devdb" / "config.toml"
    monkeypatch.setattr("devdb_cli.config.manager.CONFIG_FILE", config_path)
    monkeypatch.delenv("DEVDB_CONFIG", raising=False)
    monkeypatch.setenv("LOGNAME", "testuser")
    return config_path


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def settings(tmp_config: Path) -> Settings:
    return Settings(api_url=API, source="flag", config_path=tmp_config)


@pytest.fixture
def project_payload() -> dict:
    """Project as returned by POST /projects."""
    return {
        "id": "proj-123",
        "owner": "testuser",
        "name": "testproject",
        "dbType": "postgres",
        "dbVersion": "15.3",
        "backupLocation": "",
        "defaultCredentials": {
            "username": "devdb",
            "password": "generated-password",
            "database": "testproject",
        },
    }


@pytest.fixture
def project_detail_payload() -> dict:
    """Project as returned by GET /projects/{id}, with its databases."""
    return {
        "id": "proj-123",
        "owner": "testuser",
        "name": "testproject",
        "dbType": "postgres",
        "dbVersion": "15.3",
        "backupLocation": "s3://backups/testproject.dump",
        "databases": [
            {
                "name": "testdb1",
                "status": "running",
                "host": "testdb1.devdb.svc",
                "port": 5432,
                "username": "postgres",
                "database": "testdb1",
            },
            {"name": "testdb2", "status": "pending", "host": None, "port": None},
        ],
    }


@pytest.fixture
def databases_payload() -> list[dict]:
    return [
        {
            "name": "testdb1",
            "status": "running",
            "host": "localhost",
            "port": 5432,
            "username": "postgres",
            "database": "testdb1",
        },
        {"name": "testdb2", "status": "stopped"},
    ]
