"""Synchronous client for the W3C WebDriver wire protocol."""

__version__ = "0.1.0"

from .core import (
    WebDriverClient,
    DriverBackend,
    get_backend,
    WebDriverClientError,
    SessionClosedError,
    DriverConnectionError,
    JsonPathError,
)

__all__ = [
    "__version__",
    "WebDriverClient",
    "DriverBackend",
    "get_backend",
    "WebDriverClientError",
    "SessionClosedError",
    "DriverConnectionError",
    "JsonPathError",
]
