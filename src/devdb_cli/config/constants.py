"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "devdb"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONFIG_FILE = "DEVDB_CONFIG"

# API defaults
DEFAULT_API_URL = "http://localhost:5000"
