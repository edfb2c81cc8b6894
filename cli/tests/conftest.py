from __future__ import annotations

import json
from urllib.parse import unquote

import httpx
import pytest

from easydb_client import EasyDB

DATABASE_ID = "aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee"
TOKEN = "ffffffff-0000-1111-2222-333333333333"
BASE_URL = "https://app.easydb.io/database/"


class FakeService:
    """In-memory stand-in for the easydb.io HTTP API."""

    def __init__(self, database_id: str = DATABASE_ID, token: str = TOKEN) -> None:
        self.database_id = database_id
        self.token = token
        self.data: dict[str, object] = {}
        self.requests: list[httpx.Request] = []
        self.fail_delete_for: set[str] = set()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.headers.get("token") != self.token:
            return httpx.Response(401, text="Unauthorized")

        prefix = f"/database/{self.database_id}/"
        path = request.url.path
        if not path.startswith(prefix):
            return httpx.Response(404, text="no such database")
        key = unquote(path[len(prefix):])

        if not key:
            if request.method == "GET":
                return httpx.Response(200, json=self.data)
            return httpx.Response(405)

        if request.method == "GET":
            if key not in self.data:
                return httpx.Response(200, content=b"")
            return httpx.Response(200, content=json.dumps(self.data[key]).encode("utf-8"))
        if request.method == "POST":
            body = json.loads(request.content)
            self.data[key] = body["value"]
            return httpx.Response(200)
        if request.method == "DELETE":
            if key in self.fail_delete_for:
                raise httpx.ConnectError("connection reset", request=request)
            if key not in self.data:
                return httpx.Response(404)
            del self.data[key]
            return httpx.Response(200)
        return httpx.Response(405)


@pytest.fixture
def service() -> FakeService:
    return FakeService()


@pytest.fixture
def edb(service: FakeService):
    client = EasyDB.from_credentials(DATABASE_ID, TOKEN, http_transport=httpx.MockTransport(service))
    yield client
    client.close()


def patch_cli_client(monkeypatch, service: FakeService) -> None:
    """Route the CLI's client through `service` instead of the network."""
    from easydb_cli import http, main

    def _make_client(args, *, config_path):
        return http.make_client(args, config_path=config_path, http_transport=httpx.MockTransport(service))

    monkeypatch.setattr(main, "make_client", _make_client)
