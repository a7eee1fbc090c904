"""Shared utilities for the WebDriver client."""

from .error_mapper import map_protocol_error, check_response
from .json_path import find_first
from .selectors import locator_strategy, selector_script

__all__ = [
    "map_protocol_error",
    "check_response",
    "find_first",
    "locator_strategy",
    "selector_script",
]
