"""Address bar widget: URL input and navigation status line."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, Static

from ..navigation import NavigationState, Phase


def status_text(state: NavigationState) -> str:
    """Status line text for the given navigation state."""
    if state.phase is Phase.LOADING:
        return "▶ Fetching via proxy..."
    if state.current_url:
        return f"✓ {state.page_title or state.current_url}"
    return "Enter a URL above to start browsing anonymously"


class AddressBar(Vertical):
    """Widget holding the URL input and the status line."""

    DEFAULT_CSS = """
    AddressBar {
        height: auto;
    }

    AddressBar > #address-input {
        border: tall $accent;
    }

    AddressBar > #address-input:focus {
        border: tall $success;
    }

    AddressBar > #address-status {
        color: $text-muted;
        padding: 0 1;
        height: 1;
    }
    """

    class UrlSubmitted(Message):
        """Message emitted when the user submits a URL."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self) -> ComposeResult:
        yield Input(placeholder="https://example.com", id="address-input")
        yield Static("", id="address-status", markup=False)

    @property
    def input(self) -> Input:
        return self.query_one("#address-input", Input)

    @property
    def status_label(self) -> Static:
        return self.query_one("#address-status", Static)

    def show_state(self, state: NavigationState, position: str | None = None) -> None:
        """Reflect the navigation state in the input and status line.

        Args:
            state: Current navigation state.
            position: History position like "2/3", or None when history is empty.
        """
        if self.input.value != state.current_url:
            self.input.value = state.current_url

        text = status_text(state)
        if position:
            text = f"{text}    [{position}]"
        self.status_label.update(text)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Forward a non-blank submission to the app."""
        event.stop()
        if event.value.strip():
            self.post_message(self.UrlSubmitted(event.value))
