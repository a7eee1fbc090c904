"""Core client, transport and backend presets."""

from .exceptions import (
    WebDriverClientError,
    SessionClosedError,
    DriverConnectionError,
    JsonPathError,
)
from .backends import DriverBackend, get_backend
from .client import WebDriverClient

__all__ = [
    "WebDriverClientError",
    "SessionClosedError",
    "DriverConnectionError",
    "JsonPathError",
    "DriverBackend",
    "get_backend",
    "WebDriverClient",
]
