from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w

from .errors import ConfigError

DEFAULT_BASE_URL = "https://app.easydb.io/database/"
DEFAULT_CONFIG_FILENAME = "easydb.toml"
DEFAULT_TIMEOUT_S = 15.0

# canonical name first, then the names older config files use
_FIELD_ALIASES = {
    "database_id": ("database_id", "UUID", "uuid"),
    "token": ("token", "Token"),
    "base_url": ("base_url", "URL", "url"),
}


@dataclass(frozen=True)
class ClientConfig:
    database_id: str
    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    client_version: str | None = None


def _pick(data: dict[str, Any], field: str) -> Any:
    for name in _FIELD_ALIASES[field]:
        if name in data:
            return data[name]
    return None


def _required_str(data: dict[str, Any], field: str) -> str:
    value = _pick(data, field)
    if value is None:
        raise ConfigError(f"missing field `{field}`")
    if not isinstance(value, str):
        raise ConfigError(f"field `{field}` must be a string, got {type(value).__name__}")
    value = value.strip()
    if not value:
        raise ConfigError(f"field `{field}` is empty")
    return value


def validate_token(token: str) -> str:
    # sent verbatim as the `token` header value
    if not isinstance(token, str) or not token or not all(" " <= ch <= "~" for ch in token):
        raise ConfigError("field `token` must be non-empty printable ASCII")
    return token


def config_from_dict(data: dict[str, Any]) -> ClientConfig:
    database_id = _required_str(data, "database_id")
    token = validate_token(_required_str(data, "token"))

    base_url = _pick(data, "base_url")
    if base_url is None or (isinstance(base_url, str) and not base_url.strip()):
        base_url = DEFAULT_BASE_URL
    elif not isinstance(base_url, str):
        raise ConfigError(f"field `base_url` must be a string, got {type(base_url).__name__}")

    timeout_raw = data.get("timeout_s", DEFAULT_TIMEOUT_S)
    if isinstance(timeout_raw, bool) or not isinstance(timeout_raw, (int, float)) or timeout_raw <= 0:
        raise ConfigError(f"field `timeout_s` must be a positive number, got {timeout_raw!r}")

    return ClientConfig(
        database_id=database_id,
        token=token,
        base_url=base_url.strip(),
        timeout_s=float(timeout_raw),
    )


def config_from_toml(text: str) -> ClientConfig:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}") from e
    return config_from_dict(data)


def load_config_file(path: str | os.PathLike[str]) -> ClientConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read config file {os.fspath(path)}: {e}") from e
    return config_from_toml(text)


def config_to_toml(cfg: ClientConfig) -> str:
    data: dict[str, Any] = {
        "database_id": cfg.database_id,
        "token": cfg.token,
    }
    if cfg.base_url != DEFAULT_BASE_URL:
        data["base_url"] = cfg.base_url
    if cfg.timeout_s != DEFAULT_TIMEOUT_S:
        data["timeout_s"] = cfg.timeout_s
    return tomli_w.dumps(data)


def save_config_file(cfg: ClientConfig, path: str | os.PathLike[str]) -> str:
    path = os.fspath(path)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "wb") as f:
        f.write(config_to_toml(cfg).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
