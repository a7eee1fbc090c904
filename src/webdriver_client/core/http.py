"""HTTP transport bound to a WebDriver session URL."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .exceptions import DriverConnectionError, JsonPathError
from ..utils.error_mapper import check_response
from ..utils.json_path import find_first

logger = logging.getLogger(__name__)

VALUE_PATH = "$.value"


class HttpResponse:
    """Decoded WebDriver response with JSON-path accessors."""

    def __init__(self, response: httpx.Response, payload: Any):
        self.response = response
        self.payload = payload

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def json_path(self, expression: str = VALUE_PATH) -> Any:
        """Return the first value matched by `expression`."""
        if self.payload is None:
            raise JsonPathError(expression, "response has no JSON body")
        return find_first(self.payload, expression)

    def as_string(self, expression: str = VALUE_PATH) -> Optional[str]:
        """Return the matched value as a string (JSON null stays None)."""
        value = self.json_path(expression)
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return str(value)

    def as_map(self, expression: str = VALUE_PATH) -> dict:
        """Return a copy of the matched JSON object."""
        value = self.json_path(expression)
        if not isinstance(value, dict):
            raise JsonPathError(expression, f"expected an object, got {type(value).__name__}")
        return dict(value)

    def is_true(self, expression: str = VALUE_PATH) -> bool:
        """True only when the matched value is the JSON boolean `true`."""
        return self.json_path(expression) is True


class HttpRequest:
    """A request bound to one URL below the session root."""

    def __init__(self, http: Http, url: str):
        self._http = http
        self.url = url

    def get(self) -> HttpResponse:
        return self._http.send("GET", self.url)

    def post(self, body: Any) -> HttpResponse:
        return self._http.send("POST", self.url, body)

    def delete(self) -> HttpResponse:
        return self._http.send("DELETE", self.url)


class Http:
    """
    Thin wrapper over an httpx.Client for one WebDriver session.

    All paths are resolved relative to the session base URL
    (``<driver_url>/session/<session_id>``). Every response is checked for
    WebDriver error payloads, which are raised as selenium exceptions.
    """

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.Client] = None,
        timeout: Optional[httpx.Timeout] = None,
    ):
        self.base_url = base_url.rstrip("/")
        if client is None:
            self._client = httpx.Client(timeout=timeout)
            self._owns_client = True
        else:
            self._client = client
            self._owns_client = False

    def path(self, *segments: str) -> HttpRequest:
        """Bind a request to `base_url/segment/...` (each segment URL-quoted)."""
        suffix = "/".join(quote(str(segment), safe="") for segment in segments)
        url = f"{self.base_url}/{suffix}" if suffix else self.base_url
        return HttpRequest(self, url)

    def get(self) -> HttpResponse:
        return self.send("GET", self.base_url)

    def post(self, body: Any) -> HttpResponse:
        return self.send("POST", self.base_url, body)

    def delete(self) -> HttpResponse:
        return self.send("DELETE", self.base_url)

    def send(self, method: str, url: str, body: Any = None) -> HttpResponse:
        """
        Perform one blocking round trip.

        Raises:
            DriverConnectionError: If the server cannot be reached
            WebDriverException: If the server answers with an error payload
        """
        logger.debug(f"{method} {url} body: {body}")
        try:
            if body is None:
                response = self._client.request(method, url)
            else:
                response = self._client.request(method, url, json=body)
        except httpx.TransportError as e:
            raise DriverConnectionError(url, str(e)) from e

        payload = self._decode(response)
        logger.debug(f"{method} {url} -> {response.status_code}")
        check_response(response.status_code, payload)
        return HttpResponse(response, payload)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()
