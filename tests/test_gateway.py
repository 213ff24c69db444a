"""Tests for proxypass.gateway module."""

import asyncio

import httpx
import pytest

from proxypass.config import FetchConfig
from proxypass.gateway import FetchError, HttpGateway, is_error_payload


def make_gateway(handler, **config) -> HttpGateway:
    return HttpGateway(FetchConfig(**config), transport=httpx.MockTransport(handler))


class TestIsErrorPayload:
    @pytest.mark.parametrize("payload", [
        "error: boom",
        "Error: boom",
        "HTTP error 404: Not Found",
        "HTTP ERROR 500",
    ])
    def test_default_prefixes(self, payload):
        assert is_error_payload(payload)

    @pytest.mark.parametrize("payload", [
        "<html>error: inside a page</html>",
        "",
        "errors are fine here",
    ])
    def test_regular_content(self, payload):
        assert not is_error_payload(payload)

    def test_custom_prefixes(self):
        assert is_error_payload("Blocked: by policy", ["blocked:"])
        assert not is_error_payload("Error: boom", ["blocked:"])


class TestHttpGateway:
    def test_returns_body(self):
        gateway = make_gateway(lambda request: httpx.Response(200, text="<html>ok</html>"))
        assert asyncio.run(gateway.fetch("https://a.com/")) == "<html>ok</html>"

    def test_sends_configured_user_agent(self):
        seen = {}

        def handler(request):
            seen["ua"] = request.headers["User-Agent"]
            return httpx.Response(200, text="ok")

        gateway = make_gateway(handler, user_agent="ProxyPass-Test/1.0")
        asyncio.run(gateway.fetch("https://a.com/"))
        assert seen["ua"] == "ProxyPass-Test/1.0"

    def test_error_status_becomes_sentinel(self):
        gateway = make_gateway(lambda request: httpx.Response(404, text="missing"))
        result = asyncio.run(gateway.fetch("https://a.com/missing"))
        assert result == "HTTP error 404: Not Found"
        assert is_error_payload(result)

    def test_follows_redirects(self):
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(302, headers={"Location": "https://a.com/new"})
            return httpx.Response(200, text=f"at {request.url.path}")

        gateway = make_gateway(handler)
        assert asyncio.run(gateway.fetch("https://a.com/old")) == "at /new"

    def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        gateway = make_gateway(handler)
        with pytest.raises(FetchError, match="connection refused"):
            asyncio.run(gateway.fetch("https://a.com/"))

    def test_default_config(self):
        gateway = HttpGateway()
        assert gateway.config.timeout == 10.0
        assert gateway.config.follow_redirects is True
