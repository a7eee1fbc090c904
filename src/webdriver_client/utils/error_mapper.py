"""Map WebDriver error responses to selenium exceptions."""

from typing import Any, Optional

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    ElementNotInteractableException,
    ElementClickInterceptedException,
    InvalidSelectorException,
    TimeoutException,
    NoSuchWindowException,
    NoSuchFrameException,
    NoAlertPresentException,
    UnexpectedAlertPresentException,
    JavascriptException,
    WebDriverException,
    InvalidArgumentException,
    InvalidSessionIdException,
    SessionNotCreatedException,
    InsecureCertificateException,
    InvalidCookieDomainException,
    UnableToSetCookieException,
    MoveTargetOutOfBoundsException,
    InvalidElementStateException,
    NoSuchCookieException,
    UnknownMethodException,
)


# W3C "error" codes (https://www.w3.org/TR/webdriver/#errors)
W3C_ERROR_MAP: dict[str, type[WebDriverException]] = {
    "no such element": NoSuchElementException,
    "stale element reference": StaleElementReferenceException,
    "element not interactable": ElementNotInteractableException,
    "element click intercepted": ElementClickInterceptedException,
    "invalid selector": InvalidSelectorException,
    "timeout": TimeoutException,
    "script timeout": TimeoutException,
    "no such window": NoSuchWindowException,
    "no such frame": NoSuchFrameException,
    "no such alert": NoAlertPresentException,
    "unexpected alert open": UnexpectedAlertPresentException,
    "javascript error": JavascriptException,
    "invalid argument": InvalidArgumentException,
    "invalid session id": InvalidSessionIdException,
    "session not created": SessionNotCreatedException,
    "insecure certificate": InsecureCertificateException,
    "invalid cookie domain": InvalidCookieDomainException,
    "unable to set cookie": UnableToSetCookieException,
    "move target out of bounds": MoveTargetOutOfBoundsException,
    "invalid element state": InvalidElementStateException,
    "no such cookie": NoSuchCookieException,
    "unknown command": UnknownMethodException,
    "unknown method": UnknownMethodException,
}

# Numeric status codes of the legacy JSON wire protocol (chromedriver, msedgedriver)
LEGACY_STATUS_MAP: dict[int, type[WebDriverException]] = {
    6: InvalidSessionIdException,
    7: NoSuchElementException,
    8: NoSuchFrameException,
    9: UnknownMethodException,
    10: StaleElementReferenceException,
    11: ElementNotInteractableException,
    12: InvalidElementStateException,
    17: JavascriptException,
    21: TimeoutException,
    23: NoSuchWindowException,
    24: InvalidCookieDomainException,
    25: UnableToSetCookieException,
    26: UnexpectedAlertPresentException,
    27: NoAlertPresentException,
    28: TimeoutException,
    32: InvalidSelectorException,
    33: SessionNotCreatedException,
    34: MoveTargetOutOfBoundsException,
    61: InvalidArgumentException,
}


def _split_stacktrace(stacktrace: Any) -> Optional[list[str]]:
    if not stacktrace:
        return None
    if isinstance(stacktrace, str):
        return stacktrace.splitlines()
    return [str(line) for line in stacktrace]


def map_protocol_error(status_code: int, payload: Any) -> Optional[WebDriverException]:
    """
    Build the selenium exception described by a WebDriver response.

    Handles both response shapes found in the wild:
    - W3C: ``{"value": {"error": "no such element", "message": ..., "stacktrace": ...}}``
    - Legacy JSON wire: ``{"status": 7, "value": {"message": ...}}``

    Args:
        status_code: HTTP status of the response
        payload: Decoded JSON body (or None if the body was empty / not JSON)

    Returns:
        Exception instance to raise, or None if the response is a success
    """
    value = payload.get("value") if isinstance(payload, dict) else None
    details = value if isinstance(value, dict) else {}

    # W3C error body (always sent with a 4xx/5xx status)
    error = details.get("error")
    if status_code >= 400 and isinstance(error, str):
        exc_class = W3C_ERROR_MAP.get(error, WebDriverException)
        message = details.get("message") or error
        return exc_class(
            msg=message,
            stacktrace=_split_stacktrace(details.get("stacktrace")),
        )

    # Legacy JSON wire body (status 0 means success)
    legacy_status = payload.get("status") if isinstance(payload, dict) else None
    if isinstance(legacy_status, int) and not isinstance(legacy_status, bool) and legacy_status != 0:
        exc_class = LEGACY_STATUS_MAP.get(legacy_status, WebDriverException)
        message = details.get("message") or f"status {legacy_status}"
        return exc_class(msg=message)

    if status_code >= 400:
        message = details.get("message") or f"HTTP {status_code}"
        return WebDriverException(msg=message)

    return None


def check_response(status_code: int, payload: Any) -> None:
    """
    Raise the mapped selenium exception if the response signals an error.

    Raises:
        WebDriverException: (or a subclass) for any remote error
    """
    exc = map_protocol_error(status_code, payload)
    if exc is not None:
        raise exc
