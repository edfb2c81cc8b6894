from __future__ import annotations

from urllib.parse import quote

import pytest

from easydb_client.errors import UrlError
from easydb_client.urls import database_url, key_url, validate_base_url, validate_segment


def test_validate_base_url_adds_single_trailing_slash() -> None:
    assert validate_base_url("https://app.easydb.io/database") == "https://app.easydb.io/database/"
    assert validate_base_url("https://app.easydb.io/database//") == "https://app.easydb.io/database/"


@pytest.mark.parametrize(
    "value",
    ["", "   ", "not a url", "ftp://example.com/db/", "https://example.com/db/?x=1", "https://example.com/#top"],
)
def test_validate_base_url_rejects(value: str) -> None:
    with pytest.raises(UrlError):
        validate_base_url(value)


@pytest.mark.parametrize("key", ["hello", "a-b_c.d~", "user@host:1", "%20spaced", "k=v;x", "..."])
def test_validate_segment_accepts_path_characters(key: str) -> None:
    assert validate_segment(key) == key


@pytest.mark.parametrize("key", ["", "hello world", "a?b", "a#b", "a/b", ".", "..", "café", "%zz", "tab\t"])
def test_validate_segment_rejects(key: str) -> None:
    with pytest.raises(UrlError) as exc:
        validate_segment(key)
    assert "Invalid key" in str(exc.value)


def test_validate_segment_rejects_non_string() -> None:
    with pytest.raises(UrlError):
        validate_segment(42)  # type: ignore[arg-type]


def test_database_url_and_key_url() -> None:
    db = database_url("https://app.easydb.io/database/", "abcd")
    assert db == "https://app.easydb.io/database/abcd/"
    assert key_url(db, "hello") == "https://app.easydb.io/database/abcd/hello"


def test_database_url_rejects_bad_database_id() -> None:
    with pytest.raises(UrlError) as exc:
        database_url("https://app.easydb.io/database/", "ab cd")
    assert "database id" in str(exc.value)


def test_non_ascii_key_is_accepted_once_percent_encoded() -> None:
    encoded = quote("café", safe="")
    assert validate_segment(encoded) == "caf%C3%A9"
