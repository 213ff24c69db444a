"""Main Textual application for ProxyPass."""

import logging
from collections.abc import Awaitable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer
from textual.worker import Worker

from .actions import NavigationActionsMixin
from .config import Config
from .controller import NavigationController
from .gateway import HttpGateway
from .navigation import NavigationState
from .protocols import FetchGateway
from .widgets import AddressBar, Banner, PageView

logger = logging.getLogger(__name__)


class ProxyPassApp(NavigationActionsMixin, App):
    """ProxyPass - browse remote pages through a fetch proxy."""

    TITLE = "ProxyPass"
    SUB_TITLE = "Anonymous Browsing"

    CSS = """
    #address-bar {
        border: solid $accent;
    }

    #address-bar:focus-within {
        border: solid cyan;
    }

    #page-view {
        height: 1fr;
        border: solid $success;
    }

    #page-view:focus-within {
        border: solid green;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("alt+left", "back", "Back"),
        Binding("alt+right", "forward", "Forward"),
        Binding("f5", "reload", "Reload"),
        Binding("f8", "clear", "Clear"),
        Binding("ctrl+l", "focus_address", "Address", priority=True),
        Binding("f9", "open_original", "Open Original"),
        Binding("f1", "help", "Help"),
    ]

    def __init__(self, config: Config, gateway: FetchGateway | None = None) -> None:
        super().__init__()
        self.config = config
        self.controller = NavigationController(
            gateway or HttpGateway(config.fetch),
            error_prefixes=config.fetch.error_prefixes,
        )
        self.controller.subscribe(self._on_state_changed)

    def compose(self) -> ComposeResult:
        yield Banner()
        yield AddressBar(id="address-bar")
        yield PageView(id="page-view")
        yield Footer()

    async def on_mount(self) -> None:
        """Initialize the app after mounting."""
        self.query_one("#address-bar", AddressBar).input.focus()

        if self.config.home_url:
            self._dispatch(self.controller.submit(self.config.home_url))

    def _dispatch(self, intent: Awaitable[None]) -> None:
        """Run a navigation intent in the background.

        Intents are never cancelled; the controller drops superseded results.
        """
        self.run_worker(intent, name="_navigate", group="navigation", exit_on_error=False)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Report navigation workers that died with an unexpected error."""
        if event.worker.name == "_navigate" and event.state.name == "ERROR":
            logger.error("Navigation failed: %s", event.worker.error)
            self.notify(f"Navigation failed: {event.worker.error}", severity="error")

    def _on_state_changed(self, state: NavigationState) -> None:
        """Schedule a redraw after a controller transition."""
        self.call_later(self._refresh_view)

    async def _refresh_view(self) -> None:
        """Redraw the address bar and page view from the controller state."""
        state = self.controller.state
        history = self.controller.history
        position = history.position if not history.is_empty() else None

        self.query_one("#address-bar", AddressBar).show_state(state, position)
        await self.query_one("#page-view", PageView).show_state(state)


def run_app(config: Config) -> None:
    """Run the ProxyPass application."""
    app = ProxyPassApp(config)
    app.run()
