"""Unit tests for the HTTP transport."""

import httpx
import pytest
from selenium.common.exceptions import WebDriverException

from webdriver_client.core.http import Http
from webdriver_client.core.exceptions import DriverConnectionError, JsonPathError

from conftest import DRIVER_URL, SESSION_ID

BASE_URL = f"{DRIVER_URL}/session/{SESSION_ID}"


@pytest.fixture
def http(http_client):
    return Http(BASE_URL, client=http_client)


class TestPaths:
    """Tests for URL building."""

    def test_path_joins_segments(self, http):
        assert http.path("window", "rect").url == f"{BASE_URL}/window/rect"

    def test_path_quotes_segments(self, http):
        """Opaque element IDs should not break the URL."""
        assert http.path("element", "a/b c").url == f"{BASE_URL}/element/a%2Fb%20c"

    def test_root_requests(self, http, server):
        """get/post/delete on the transport itself target the session root."""
        http.delete()

        assert server.requests == [("DELETE", "", None)]

    def test_post_sends_json(self, http, server):
        http.path("url").post({"url": "https://example.com/"})

        assert server.requests == [("POST", "url", {"url": "https://example.com/"})]


class TestResponseAccessors:
    """Tests for JSON-path accessors on responses."""

    def test_as_string(self, http, server):
        server.respond("GET", "title", {"value": "Hello"})

        assert http.path("title").get().as_string() == "Hello"

    def test_as_string_null(self, http, server):
        """JSON null should come back as None."""
        server.respond("GET", "title", {"value": None})

        assert http.path("title").get().as_string() is None

    def test_as_string_number(self, http, server):
        server.respond("GET", "title", {"value": 3})

        assert http.path("title").get().as_string() == "3"

    def test_as_map_returns_copy(self, http, server):
        server.respond("GET", "window/rect", {"value": {"x": 1, "y": 2}})
        response = http.path("window", "rect").get()

        rect = response.as_map()
        rect["x"] = 99

        assert response.as_map() == {"x": 1, "y": 2}

    def test_as_map_rejects_scalars(self, http, server):
        server.respond("GET", "title", {"value": "not a map"})

        with pytest.raises(JsonPathError):
            http.path("title").get().as_map()

    def test_is_true(self, http, server):
        server.respond("POST", "execute/sync", {"value": True}, {"value": 1})

        assert http.path("execute", "sync").post({}).is_true() is True
        assert http.path("execute", "sync").post({}).is_true() is False

    def test_recursive_path_first_match(self, http, server):
        server.respond("POST", "element", {"value": [{"ELEMENT": "first"}, {"ELEMENT": "second"}]})

        assert http.path("element").post({}).json_path("$..ELEMENT") == "first"

    def test_missing_path_raises(self, http, server):
        server.respond("GET", "title", {"status": 0})

        with pytest.raises(JsonPathError) as exc:
            http.path("title").get().json_path("$.value")

        assert "$.value" in str(exc.value)


class TestErrors:
    """Tests for transport and protocol failures."""

    def test_connection_error(self):
        """Transport failures should raise DriverConnectionError."""

        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client = httpx.Client(transport=httpx.MockTransport(refuse))
        http = Http(BASE_URL, client=client)

        with pytest.raises(DriverConnectionError) as exc:
            http.path("url").get()

        assert BASE_URL in str(exc.value)
        assert isinstance(exc.value.__cause__, httpx.ConnectError)

    def test_non_json_error_body(self):
        """A non-JSON 5xx answer should still raise WebDriverException."""

        def broken(request):
            return httpx.Response(502, text="Bad Gateway")

        client = httpx.Client(transport=httpx.MockTransport(broken))
        http = Http(BASE_URL, client=client)

        with pytest.raises(WebDriverException) as exc:
            http.path("url").get()

        assert "HTTP 502" in exc.value.msg

    def test_non_json_success_has_no_value(self):
        """A 2xx answer without JSON cannot be queried."""

        def plain(request):
            return httpx.Response(200, text="ok")

        client = httpx.Client(transport=httpx.MockTransport(plain))
        response = Http(BASE_URL, client=client).path("url").get()

        with pytest.raises(JsonPathError):
            response.as_string()


class TestClientOwnership:
    """Tests for httpx.Client lifetime."""

    def test_owned_client_closed(self):
        http = Http(BASE_URL)

        http.close()

        assert http._client.is_closed is True

    def test_borrowed_client_left_open(self, http, http_client):
        http.close()

        assert http_client.is_closed is False

    def test_owned_client_uses_timeout(self):
        http = Http(BASE_URL, timeout=httpx.Timeout(5.0))

        assert http._client.timeout == httpx.Timeout(5.0)
        http.close()
