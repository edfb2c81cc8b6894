from .client import EasyDB, Json
from .config_types import DEFAULT_BASE_URL, ClientConfig
from .errors import ConfigError, DecodeError, EasyDBError, NotAStringError, TransportError, UrlError

__all__ = [
    "EasyDB",
    "Json",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "EasyDBError",
    "ConfigError",
    "UrlError",
    "TransportError",
    "DecodeError",
    "NotAStringError",
]
