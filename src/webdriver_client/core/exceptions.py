"""Domain-specific exceptions for the WebDriver client."""


class WebDriverClientError(Exception):
    """Base exception for all WebDriver client errors."""

    pass


class SessionClosedError(WebDriverClientError):
    """Raised when a browser operation is attempted after the window was closed."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session is closed: {session_id}")


class DriverConnectionError(WebDriverClientError):
    """Raised when the remote WebDriver server cannot be reached."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to reach WebDriver server at {url}: {message}")


class JsonPathError(WebDriverClientError):
    """Raised when a JSON-path expression matches nothing in a response."""

    def __init__(self, expression: str, message: str | None = None):
        self.expression = expression
        detail = message or "no match"
        super().__init__(f"JSON path '{expression}' failed: {detail}")
