"""Navigation action handlers for ProxyPassApp."""

from __future__ import annotations

import webbrowser

from ..widgets import AddressBar, PageView


class NavigationActionsMixin:
    """Mixin providing browsing actions (submit, links, back, forward, reload, clear)."""

    def on_address_bar_url_submitted(self, event: AddressBar.UrlSubmitted) -> None:
        """Load the URL typed into the address bar."""
        self._dispatch(self.controller.submit(event.value))

    def on_page_view_link_activated(self, event: PageView.LinkActivated) -> None:
        """Follow a link intercepted in the page view."""
        self._dispatch(self.controller.click_link(event.url))

    def action_back(self) -> None:
        """Go back one page in history."""
        if self.controller.state.is_loading or not self.controller.can_go_back:
            return
        self._dispatch(self.controller.back())

    def action_forward(self) -> None:
        """Go forward one page in history."""
        if self.controller.state.is_loading or not self.controller.can_go_forward:
            return
        self._dispatch(self.controller.forward())

    def action_reload(self) -> None:
        """Fetch the current page again."""
        if self.controller.state.is_loading or not self.controller.can_reload:
            return
        self._dispatch(self.controller.reload())

    def action_clear(self) -> None:
        """Clear the page view; history is kept."""
        self.controller.clear()
        self.query_one("#address-bar", AddressBar).input.focus()

    def action_focus_address(self) -> None:
        """Focus the address bar and select its contents."""
        address_input = self.query_one("#address-bar", AddressBar).input
        address_input.focus()
        address_input.select_all()

    def action_open_original(self) -> None:
        """Open the current URL directly in the system browser, outside the proxy."""
        url = self.controller.state.current_url
        if not url:
            self.notify("No page loaded", severity="warning")
            return
        webbrowser.open(url)
        self.notify(f"Opened {url} outside the proxy")

    def action_help(self) -> None:
        """Show help information."""
        self.notify(
            "Enter=Go, Alt+Left=Back, Alt+Right=Forward, F5=Reload, F8=Clear, "
            "Ctrl+L=Address, F9=Open original, Ctrl+Q=Quit",
            timeout=5,
        )
