"""Tests for the ProxyPass Textual app wiring."""

import asyncio

from proxypass.app import ProxyPassApp
from proxypass.config import Config
from proxypass.widgets import AddressBar, PageView


class StubLinkClicked:
    """Stands in for Markdown.LinkClicked."""

    def __init__(self, href: str) -> None:
        self.href = href
        self.prevented = False
        self.stopped = False

    def prevent_default(self) -> None:
        self.prevented = True

    def stop(self) -> None:
        self.stopped = True


async def settle(app, pilot) -> None:
    """Let queued messages start their workers, then wait for them to finish."""
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


def make_app(tmp_path, gateway, **config) -> ProxyPassApp:
    return ProxyPassApp(Config(data_directory=tmp_path, **config), gateway=gateway)


class TestProxyPassApp:
    def test_submit_from_address_bar(self, tmp_path, gateway):
        async def scenario():
            app = make_app(tmp_path, gateway)
            async with app.run_test() as pilot:
                address_bar = app.query_one("#address-bar", AddressBar)
                address_bar.input.value = "a.com"
                await pilot.press("enter")
                await settle(app, pilot)

                assert gateway.requests == ["https://a.com"]
                assert address_bar.input.value == "https://a.com"
                page = app.query_one("#page-view", PageView)
                assert page.content_document.base_url == "https://a.com"

        asyncio.run(scenario())

    def test_home_url_loaded_on_mount(self, tmp_path, gateway):
        async def scenario():
            app = make_app(tmp_path, gateway, home_url="example.com")
            async with app.run_test() as pilot:
                await settle(app, pilot)
                assert app.controller.state.current_url == "https://example.com"

        asyncio.run(scenario())

    def test_link_click_navigates_and_back_returns(self, tmp_path, gateway):
        gateway.pages["https://a.com"] = (
            '<html><head></head><body><a href="/next">Next</a></body></html>'
        )

        async def scenario():
            app = make_app(tmp_path, gateway, home_url="a.com")
            async with app.run_test() as pilot:
                await settle(app, pilot)

                page = app.query_one("#page-view", PageView)
                event = StubLinkClicked("proxylink:0")
                page.on_markdown_link_clicked(event)
                assert event.prevented
                assert event.stopped
                await settle(app, pilot)

                assert app.controller.state.current_url == "https://a.com/next"
                assert len(app.controller.history) == 2

                app.action_back()
                await settle(app, pilot)
                assert app.controller.state.current_url == "https://a.com"
                assert app.controller.history.cursor == 0

        asyncio.run(scenario())

    def test_clear_keeps_history(self, tmp_path, gateway):
        async def scenario():
            app = make_app(tmp_path, gateway, home_url="a.com")
            async with app.run_test() as pilot:
                await settle(app, pilot)
                app.action_clear()
                await pilot.pause()

                assert app.controller.state.current_url == ""
                assert len(app.controller.history) == 1
                address_bar = app.query_one("#address-bar", AddressBar)
                assert address_bar.input.value == ""

        asyncio.run(scenario())
