from __future__ import annotations

import json
import logging
import os
from typing import Any, BinaryIO, Union

import httpx

from .config_types import (
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG_FILENAME,
    ClientConfig,
    config_from_toml,
    load_config_file,
    validate_token,
)
from .errors import DecodeError, NotAStringError, TransportError
from .transport import Transport
from .urls import database_url, key_url

log = logging.getLogger(__name__)

Json = Union[None, bool, int, float, str, list, dict]


class EasyDB:
    """Client for a single easydb.io database.

    Every operation is one blocking HTTP round trip (``clear`` is one per key).
    Nothing is cached: reads right after a write may return the old value.
    """

    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        # config errors surface before any network object exists
        self._db_url = database_url(cfg.base_url, cfg.database_id)
        validate_token(cfg.token)
        self._cfg = cfg
        self._t = Transport(cfg, http_transport=http_transport)

    @classmethod
    def from_config_file(
            cls,
            path: str | os.PathLike[str] = DEFAULT_CONFIG_FILENAME,
            *,
            http_transport: httpx.BaseTransport | None = None,
    ) -> EasyDB:
        """Build a client from a TOML config file (``./easydb.toml`` by default).

        Raises ConfigError if the file cannot be read or parsed or the token is
        not printable ASCII, and UrlError if its base URL and database id do
        not form a valid URL.
        """
        return cls(load_config_file(path), http_transport=http_transport)

    @classmethod
    def from_credentials(
            cls,
            database_id: str,
            token: str,
            base_url: str | None = None,
            *,
            timeout_s: float | None = None,
            http_transport: httpx.BaseTransport | None = None,
    ) -> EasyDB:
        kwargs: dict[str, Any] = {}
        if timeout_s is not None:
            kwargs["timeout_s"] = timeout_s
        cfg = ClientConfig(
            database_id=database_id,
            token=token,
            base_url=base_url or DEFAULT_BASE_URL,
            **kwargs,
        )
        return cls(cfg, http_transport=http_transport)

    @classmethod
    def from_toml(cls, text: str, *, http_transport: httpx.BaseTransport | None = None) -> EasyDB:
        return cls(config_from_toml(text), http_transport=http_transport)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> EasyDB:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"EasyDB(database_id={self.database_id!r}, url={self.url!r})"

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def database_id(self) -> str:
        return self._cfg.database_id

    @property
    def token(self) -> str:
        return self._cfg.token

    @property
    def url(self) -> str:
        return self._cfg.base_url

    # --- reads ---
    def get(self, key: str) -> str:
        value = self.get_json(key)
        if not isinstance(value, str):
            raise NotAStringError(key, value)
        return value

    def get_json(self, key: str) -> Json:
        """Return the decoded value stored under `key`.

        The service answers unknown or deleted keys with an empty body, which
        is returned as an empty string.
        """
        r = self._read(key_url(self._db_url, key))
        return _decode_json(r.content, empty="")

    def list(self) -> dict[str, str]:
        result: dict[str, str] = {}
        for key, value in self.list_json().items():
            if not isinstance(value, str):
                raise NotAStringError(key, value)
            result[key] = value
        return result

    def list_json(self) -> dict[str, Json]:
        r = self._read(self._db_url)
        data = _decode_json(r.content, empty={})
        if not isinstance(data, dict):
            raise DecodeError(f"expected a JSON object from list, got {type(data).__name__}")
        return data

    def get_writer(self, key: str, fp: BinaryIO) -> int:
        """Write the raw response body for `key` into `fp` and return the status code.

        No status check and no decoding happen here.
        """
        r = self._t.request("GET", key_url(self._db_url, key))
        fp.write(r.content)
        return r.status_code

    def list_writer(self, fp: BinaryIO) -> int:
        r = self._t.request("GET", self._db_url)
        fp.write(r.content)
        return r.status_code

    # --- writes ---
    def put(self, key: str, value: str) -> int:
        return self.put_json(key, value)

    def put_json(self, key: str, value: Json) -> int:
        url = key_url(self._db_url, key)
        r = self._t.request("POST", url, json_body={"value": value})
        return r.status_code

    def delete(self, key: str) -> int:
        r = self._t.request("DELETE", key_url(self._db_url, key))
        return r.status_code

    def clear(self) -> None:
        """Delete every key, one request at a time, stopping at the first error."""
        keys = list(self.list_json())
        log.debug("clearing %d keys from %s", len(keys), self.database_id)
        for key in keys:
            self.delete(key)

    def _read(self, url: str) -> httpx.Response:
        r = self._t.request("GET", url)
        if r.status_code >= 400:
            text = r.text[:1000] if r.content else ""
            msg = f"GET {url} failed with {r.status_code}"
            if text:
                msg = f"{msg}: {text}"
            raise TransportError(msg, status_code=r.status_code)
        return r


def _decode_json(content: bytes, *, empty: Json) -> Json:
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"response body is not valid UTF-8: {e}") from e
    if not text.strip():
        return empty
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"response body is not valid JSON: {e}") from e
