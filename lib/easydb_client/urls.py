from __future__ import annotations

import re

import httpx

from .errors import UrlError

# RFC 3986 pchar: unreserved / pct-encoded / sub-delims / ":" / "@"
_SEGMENT_RE = re.compile(r"(?:[A-Za-z0-9\-._~!$&'()*+,;=:@]|%[0-9A-Fa-f]{2})+")


def validate_base_url(base_url: str) -> str:
    value = (base_url or "").strip()
    if not value:
        raise UrlError("base URL is empty")
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise UrlError(f"Invalid base URL: {value}") from e
    if url.scheme not in ("http", "https"):
        raise UrlError(f"Invalid base URL (expected http or https): {value}")
    if not url.host:
        raise UrlError(f"Invalid base URL (no host): {value}")
    if url.query or url.fragment or "?" in value or "#" in value:
        raise UrlError(f"Invalid base URL (query or fragment not allowed): {value}")
    return value.rstrip("/") + "/"


def validate_segment(value: str, what: str = "key") -> str:
    """Check that `value` is one URL path segment and return it unchanged.

    Nothing is percent-encoded here: non-ASCII characters, spaces and other
    reserved characters must already be written as %XX escapes
    (`urllib.parse.quote(key, safe="")`), otherwise UrlError is raised.
    """
    if not isinstance(value, str):
        raise UrlError(f"Invalid {what}: expected a string, got {type(value).__name__}")
    if value in (".", "..") or not _SEGMENT_RE.fullmatch(value):
        raise UrlError(f"Invalid {what}: {value!r}")
    return value


def database_url(base_url: str, database_id: str) -> str:
    base = validate_base_url(base_url)
    return f"{base}{validate_segment(database_id, 'database id')}/"


def key_url(db_url: str, key: str) -> str:
    return f"{db_url}{validate_segment(key)}"
