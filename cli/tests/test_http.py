from __future__ import annotations

import httpx
import pytest

from conftest import DATABASE_ID, TOKEN, FakeService
from easydb_client.config_types import DEFAULT_BASE_URL
from easydb_client.errors import ConfigError
from easydb_cli.http import INVALID_ARGS_MSG, cli_version, make_client


def test_make_client_from_args_defaults_url() -> None:
    client = make_client([DATABASE_ID, TOKEN], config_path="unused.toml")
    assert client.url == DEFAULT_BASE_URL
    assert client.config.client_version == cli_version()
    client.close()


def test_make_client_from_args_with_url() -> None:
    client = make_client([DATABASE_ID, TOKEN, "http://localhost:9000/db/"], config_path="unused.toml")
    assert client.url == "http://localhost:9000/db/"
    client.close()


def test_make_client_from_config_file(tmp_path) -> None:
    path = tmp_path / "easydb.toml"
    path.write_text(f'UUID = "{DATABASE_ID}"\nToken = "{TOKEN}"\n', encoding="utf-8")
    service = FakeService()

    client = make_client([], config_path=str(path), http_transport=httpx.MockTransport(service))
    client.put("hello", "world")
    client.close()

    assert service.data == {"hello": "world"}
    assert service.requests[0].headers["user-agent"].endswith(cli_version())


def test_make_client_missing_config(tmp_path) -> None:
    with pytest.raises(ConfigError):
        make_client([], config_path=str(tmp_path / "easydb.toml"))


def test_make_client_rejects_wrong_arg_count() -> None:
    with pytest.raises(ValueError) as exc:
        make_client([DATABASE_ID], config_path="unused.toml")
    assert str(exc.value) == INVALID_ARGS_MSG
