"""WebDriver client: browser verbs translated to W3C WebDriver REST calls."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Optional, Protocol, Union

import httpx

from .backends import W3C, DriverBackend, get_backend
from .exceptions import SessionClosedError
from .http import Http, HttpResponse
from ..utils.selectors import locator_strategy, selector_script

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)

MAX_WAIT_RETRIES = 3
DOCUMENT_READY_SCRIPT = "return document.readyState == 'complete'"


class Closeable(Protocol):
    """Handle for a locally spawned driver process."""

    def close(self) -> None: ...


class WebDriverClient:
    """
    Drives one remote browser session over the WebDriver protocol.

    Every operation performs a single blocking round trip (except
    `submit` and `wait_for_eval_true`). Elements are looked up again on
    every call; no element references are cached.

    The session is Open until `close()` or `quit()`; after that every
    browser operation raises SessionClosedError.
    """

    def __init__(
        self,
        http: Http,
        session_id: str,
        backend: DriverBackend = W3C,
        command: Optional[Closeable] = None,
        window_id: Optional[str] = None,
        wait_interval: Optional[int] = None,
    ):
        self.http = http
        self.session_id = session_id
        self.backend = backend
        self.command = command
        self.window_id = window_id
        self._wait_interval = wait_interval
        self.open = True
        self._quit = False

    @classmethod
    def connect(
        cls,
        driver_url: str,
        session_id: str,
        backend: Union[str, DriverBackend] = W3C,
        *,
        client: Optional[httpx.Client] = None,
        timeout: Optional[httpx.Timeout] = None,
        command: Optional[Closeable] = None,
        window_id: Optional[str] = None,
        wait_interval: Optional[int] = None,
    ) -> WebDriverClient:
        """
        Attach to an existing session on a WebDriver server.

        Args:
            driver_url: Server root, e.g. "http://localhost:9515"
            session_id: Session ID issued by the server
            backend: Backend preset name or DriverBackend record
            client: Optional httpx.Client to send requests with (not closed on quit)
            timeout: Transport timeout when no client is given
            command: Optional driver process handle, closed on quit
            window_id: Optional current window handle
            wait_interval: Poll interval in ms, overriding the backend default

        Returns:
            Client bound to `<driver_url>/session/<session_id>`
        """
        if isinstance(backend, str):
            backend = get_backend(backend)
        base_url = f"{driver_url.rstrip('/')}/session/{session_id}"
        http = Http(base_url, client=client, timeout=timeout)
        return cls(
            http,
            session_id,
            backend=backend,
            command=command,
            window_id=window_id,
            wait_interval=wait_interval,
        )

    @classmethod
    def from_settings(
        cls,
        session_id: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> WebDriverClient:
        """
        Build a client from Settings (environment variables by default).

        Raises:
            ValueError: If no session ID is given or configured
        """
        if settings is None:
            from ..config import settings

        session_id = session_id or settings.session_id
        if not session_id:
            raise ValueError("A session ID is required (set WEBDRIVER_CLIENT_SESSION_ID)")

        logging.getLogger("webdriver_client").setLevel(settings.log_level.upper())

        http = Http(settings.session_url(session_id), timeout=settings.request_timeout)
        return cls(
            http,
            session_id,
            backend=get_backend(settings.backend),
            wait_interval=settings.wait_interval_ms,
        )

    def __enter__(self) -> WebDriverClient:
        return self

    def __exit__(self, *_) -> None:
        self.quit()

    @property
    def wait_interval(self) -> int:
        """Delay in milliseconds before each readiness poll."""
        if self._wait_interval is not None:
            return self._wait_interval
        return self.backend.wait_interval_ms

    def _ensure_open(self) -> None:
        if not self.open:
            raise SessionClosedError(self.session_id)

    def _execute(self, expression: str) -> HttpResponse:
        self._ensure_open()
        body = {"script": expression, "args": []}
        return self.http.path("execute", "sync").post(body)

    def eval(self, expression: str) -> Any:
        """Run `expression` synchronously in the page and return its result."""
        return self._execute(expression).json_path("$.value")

    def get_element_id(self, locator: str) -> str:
        """Resolve a locator to the server's opaque element reference."""
        self._ensure_open()
        body = {"using": locator_strategy(locator), "value": locator}
        logger.debug(f"body: {body}")
        response = self.http.path("element").post(body)
        return str(response.json_path(self.backend.element_id_path))

    def navigate(self, url: str) -> None:
        self._ensure_open()
        self.http.path("url").post({"url": url})

    def get_dimensions(self) -> dict:
        """Window rectangle as {left, top, width, height}."""
        self._ensure_open()
        rect = self.http.path("window", "rect").get().as_map()
        rect["left"] = rect.pop("x", None)
        rect["top"] = rect.pop("y", None)
        return rect

    def set_dimensions(self, dimensions: dict) -> None:
        """Move/resize the window from {left, top, width, height}."""
        self._ensure_open()
        rect = dict(dimensions)
        if "left" in rect:
            rect["x"] = rect.pop("left")
        if "top" in rect:
            rect["y"] = rect.pop("top")
        self.http.path("window", "rect").post(rect)

    def refresh(self) -> None:
        self._ensure_open()
        self.http.path("refresh").post({})

    def reload(self) -> None:
        # WebDriver has no distinct reload command
        self.refresh()

    def back(self) -> None:
        self._ensure_open()
        self.http.path("back").post({})

    def forward(self) -> None:
        self._ensure_open()
        self.http.path("forward").post({})

    def maximize(self) -> None:
        self._ensure_open()
        self.http.path("window", "maximize").post({})

    def minimize(self) -> None:
        self._ensure_open()
        self.http.path("window", "minimize").post({})

    def fullscreen(self) -> None:
        self._ensure_open()
        self.http.path("window", "fullscreen").post({})

    def focus(self, locator: str) -> None:
        self.eval(selector_script(locator) + ".focus()")

    def input(self, locator: str, value: str) -> None:
        """Type `value` into the element matched by `locator`."""
        element_id = self.get_element_id(locator)
        self.http.path("element", element_id, "value").post(self.backend.input_body(value))

    def click(self, locator: str) -> None:
        self.eval(selector_script(locator) + ".click()")

    def submit(self, locator: str) -> None:
        """Click, then wait (best effort) for the next page to finish loading."""
        self.click(locator)
        self.wait_for_eval_true(DOCUMENT_READY_SCRIPT)

    def close(self) -> None:
        """Close the current window; the session itself stays alive until quit()."""
        self._ensure_open()
        self.http.path("window").delete()
        self.open = False
        logger.info(f"Closed window of session {self.session_id}")

    def quit(self) -> None:
        """
        End the session: close the window if still open, delete the session,
        then release the driver process and the HTTP client.

        An error from either DELETE propagates before the driver process
        is closed. Calling quit() again after it succeeded does nothing.
        """
        if self._quit:
            return
        if self.open:
            self.close()
        self.http.delete()
        if self.command is not None:
            self.command.close()
        self.http.close()
        self._quit = True
        logger.info(f"Quit session {self.session_id}")

    def get_location(self) -> Optional[str]:
        """Current page URL."""
        self._ensure_open()
        return self.http.path("url").get().as_string("$.value")

    def html(self, locator: str) -> Optional[str]:
        element_id = self.get_element_id(locator)
        segment = self.backend.property_path_segment
        return self.http.path("element", element_id, segment, "innerHTML").get().as_string("$.value")

    def text(self, locator: str) -> Optional[str]:
        element_id = self.get_element_id(locator)
        return self.http.path("element", element_id, "text").get().as_string("$.value")

    def value(self, locator: str) -> Optional[str]:
        element_id = self.get_element_id(locator)
        segment = self.backend.property_path_segment
        return self.http.path("element", element_id, segment, "value").get().as_string("$.value")

    def wait_for_eval_true(self, expression: str) -> None:
        """
        Poll `expression` until it returns boolean true.

        Sleeps `wait_interval` ms before each attempt and makes at most
        1 + MAX_WAIT_RETRIES attempts. Gives up silently: callers must check
        the post-condition themselves.
        """
        interval = self.wait_interval / 1000.0
        for _ in range(MAX_WAIT_RETRIES + 1):
            time.sleep(interval)
            if self._execute(expression).is_true():
                return
        logger.warning(
            f"Gave up waiting after {MAX_WAIT_RETRIES + 1} attempts for: {expression}"
        )

    def get_title(self) -> Optional[str]:
        self._ensure_open()
        return self.http.path("title").get().as_string("$.value")
