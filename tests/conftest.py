"""Shared fixtures for proxypass tests."""

import asyncio

import pytest

from proxypass.controller import NavigationController


def default_page(url: str) -> str:
    return f"<html><head><title>{url}</title></head><body><p>{url}</p></body></html>"


class FakeGateway:
    """Gateway returning canned responses and recording requested URLs.

    A response may be an exception instance, which is raised instead.
    URLs can be held until the test releases them.
    """

    def __init__(self, pages: dict | None = None) -> None:
        self.pages = dict(pages or {})
        self.requests: list[str] = []
        self._gates: dict[str, asyncio.Event] = {}

    def hold(self, url: str) -> asyncio.Event:
        """Make fetches of url wait until the returned event is set."""
        gate = asyncio.Event()
        self._gates[url] = gate
        return gate

    async def fetch(self, url: str) -> str:
        self.requests.append(url)
        gate = self._gates.get(url)
        if gate is not None:
            await gate.wait()
        response = self.pages.get(url, default_page(url))
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def controller(gateway):
    return NavigationController(gateway)


@pytest.fixture
def sample_markup():
    """A small page exercising every rewritten construct."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        '<head lang="en">\n'
        "  <title>Sample Page</title>\n"
        '  <link rel="stylesheet" href="css/site.css">\n'
        '  <script src="//cdn.example.net/lib.js"></script>\n'
        "  <style>body { background: url(\"img/bg.png\"); }</style>\n"
        "</head>\n"
        "<body>\n"
        '  <a href="/about">About</a>\n'
        "  <a href='next.html'><span>Next</span></a>\n"
        '  <a href="#top">Top</a>\n'
        '  <img src="../shared/logo.png" alt="logo">\n'
        '  <form action="/search" method="get"><input name="q"></form>\n'
        "</body>\n"
        "</html>\n"
    )
