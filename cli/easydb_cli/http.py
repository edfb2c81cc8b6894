from __future__ import annotations

from dataclasses import replace

import httpx

from easydb_client import ClientConfig, EasyDB
from easydb_client.config_types import DEFAULT_BASE_URL, load_config_file

from . import __version__

INVALID_ARGS_MSG = "Invalid args, accepts 0, 2, or 3 arguments: [<UUID> <Token> [URL]]"


def cli_version() -> str:
    return f"easydb-cli/{__version__}"


def make_client(
    args: list[str],
    *,
    config_path: str,
    http_transport: httpx.BaseTransport | None = None,
) -> EasyDB:
    """Build a client from positional args, or from the config file when there are none."""
    if not args:
        cfg = load_config_file(config_path)
    elif len(args) in (2, 3):
        cfg = ClientConfig(
            database_id=args[0],
            token=args[1],
            base_url=args[2] if len(args) == 3 else DEFAULT_BASE_URL,
        )
    else:
        raise ValueError(INVALID_ARGS_MSG)
    return EasyDB(replace(cfg, client_version=cli_version()), http_transport=http_transport)
