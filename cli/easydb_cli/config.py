from __future__ import annotations

import os

from platformdirs import user_config_dir

from easydb_client.config_types import DEFAULT_CONFIG_FILENAME

APP_NAME = "easydb"
ENV_CONFIG_PATH = "EASYDB_CONFIG"


def local_config_path() -> str:
    return os.path.join(".", DEFAULT_CONFIG_FILENAME)


def user_config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{DEFAULT_CONFIG_FILENAME}"


def resolve_config_path(explicit: str | None = None) -> str:
    """Pick the config file: --config, then $EASYDB_CONFIG, then ./easydb.toml, then the user config dir.

    Falls back to ./easydb.toml when none of the candidates exist.
    """
    if explicit and explicit.strip():
        return explicit.strip()
    env_value = os.getenv(ENV_CONFIG_PATH, "").strip()
    if env_value:
        return env_value
    local = local_config_path()
    if os.path.exists(local):
        return local
    user = user_config_path()
    if os.path.exists(user):
        return user
    return local
