from __future__ import annotations

from typing import Any


class EasyDBError(Exception):
    """Base client error."""


class ConfigError(EasyDBError):
    """Config file is unreadable or malformed."""


class UrlError(EasyDBError):
    """Base URL, database id or key do not form a valid URL."""


class TransportError(EasyDBError):
    """Transport/network layer error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(EasyDBError):
    """Response body is not UTF-8 JSON of the expected shape."""


class NotAStringError(EasyDBError):
    def __init__(self, key: str, value: Any):
        super().__init__(f"Value was not a string: key: {key}, value: {value!r}")
        self.key = key
        self.value = value
