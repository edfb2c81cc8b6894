from __future__ import annotations

import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import TransportError

log = logging.getLogger(__name__)

USER_AGENT = "easydb-client/0.2.0"


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        user_agent = USER_AGENT
        if cfg.client_version:
            user_agent = f"{user_agent} {cfg.client_version}"
        # the service reads the credential from a plain `token` header
        headers = {"User-Agent": user_agent, "token": cfg.token}

        self._client = httpx.Client(
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=http_transport,
        )

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, url: str, *, json_body: Any | None = None) -> httpx.Response:
        log.debug("%s %s", method, url)
        try:
            if json_body is None:
                r = self._client.request(method, url)
            else:
                r = self._client.request(method, url, json=json_body)
        except httpx.RequestError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        log.debug("%s %s -> %s (%d bytes)", method, url, r.status_code, len(r.content))
        return r
