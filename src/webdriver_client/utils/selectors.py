"""Locator helpers: lookup strategy and in-page selector scripts."""

import json

from selenium.webdriver.common.by import By


def is_xpath(locator: str) -> bool:
    """XPath locators are recognised by a leading slash."""
    return locator.startswith("/")


def locator_strategy(locator: str) -> str:
    """
    Return the WebDriver `using` strategy for a locator.

    Args:
        locator: XPath expression (starting with "/") or CSS selector

    Returns:
        "xpath" or "css selector"
    """
    return By.XPATH if is_xpath(locator) else By.CSS_SELECTOR


def selector_script(locator: str) -> str:
    """
    Build a JavaScript expression that evaluates to the element for `locator`.

    The locator is embedded as a JSON string literal so quotes and
    backslashes survive intact.
    """
    literal = json.dumps(locator)
    if is_xpath(locator):
        return f"document.evaluate({literal}, document, null, 9, null).singleNodeValue"
    return f"document.querySelector({literal})"
