"""Page view widget: the isolated surface that displays proxied pages."""

from bs4 import ParserRejectedMarkup
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Markdown, Static

from ..document import DocumentAccessError, IsolatedDocument, parse_link_handle
from ..interceptor import ClickEvent, ClickInterceptor
from ..navigation import NavigationState, Phase

WELCOME_TEXT = """\
# PROXYPASS

Browse the web anonymously. Enter any URL above and route your request
through the proxy.

- **Anonymous** - the remote site never sees this terminal
- **Any website** - access any public URL
- **Sandboxed** - pages are rendered without running their scripts

`$ type a URL and press Enter`
"""


def loading_text(url: str) -> str:
    return f"*Routing request through proxy...*\n\n`{url}`"


def error_text(message: str) -> str:
    return f"## ⚠ Connection Error\n\n```\n{message}\n```"


def render_document(markup: str) -> tuple[IsolatedDocument | None, str]:
    """Build the document for rewritten markup and its markdown rendering.

    Returns:
        Tuple of (document, markdown). If the markup cannot be parsed the
        document is None and the markup is shown as source.
    """
    try:
        document = IsolatedDocument(markup)
    except ParserRejectedMarkup:
        return (None, f"```html\n{markup}\n```")
    return (document, document.to_markdown())


class PageView(Vertical):
    """Widget displaying the current page, error, or welcome text."""

    class LinkActivated(Message):
        """Message emitted when a link in the page is activated."""

        def __init__(self, url: str) -> None:
            super().__init__()
            self.url = url

    DEFAULT_CSS = """
    PageView {
        width: 1fr;
        height: 1fr;
    }

    PageView > #page-header {
        background: $primary-background;
        color: $success;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    PageView > VerticalScroll {
        height: 1fr;
    }

    PageView Markdown {
        padding: 0 1;
    }

    PageView VerticalScroll:focus {
        border: solid $accent;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._document: IsolatedDocument | None = None
        self._shown_markup: str | None = None
        self._interceptor = ClickInterceptor(self._on_link_intercepted)

    def compose(self) -> ComposeResult:
        yield Static("PAGE", id="page-header", markup=False)
        with VerticalScroll(id="page-scroll"):
            yield Markdown(WELCOME_TEXT, id="page-content", open_links=False)

    @property
    def scroll_view(self) -> VerticalScroll:
        return self.query_one("#page-scroll", VerticalScroll)

    @property
    def markdown_widget(self) -> Markdown:
        return self.query_one("#page-content", Markdown)

    @property
    def content_document(self) -> IsolatedDocument:
        if self._document is None:
            raise DocumentAccessError("No readable document is displayed")
        return self._document

    async def show_state(self, state: NavigationState) -> None:
        """Display whatever the navigation state calls for.

        The previous page stays on screen while a new one loads.
        """
        header = self.query_one("#page-header", Static)
        if state.current_url:
            header.update(f"PAGE - {state.current_url}")
        else:
            header.update("PAGE")

        markup = state.rendered_markup
        if markup is not None:
            if markup == self._shown_markup:
                return
            self._shown_markup = markup
            self._document, content = render_document(markup)
            self._interceptor.attach(self)
            await self.markdown_widget.update(content)
            self.scroll_view.scroll_home(animate=False)
            return

        self._shown_markup = None
        self._document = None
        self._interceptor.detach()

        if state.phase is Phase.LOADING:
            await self.markdown_widget.update(loading_text(state.current_url))
        elif state.phase is Phase.FAILED:
            await self.markdown_widget.update(error_text(state.error or ""))
        else:
            await self.markdown_widget.update(WELCOME_TEXT)

    def _on_link_intercepted(self, url: str) -> None:
        self.post_message(self.LinkActivated(url))

    def on_markdown_link_clicked(self, event: Markdown.LinkClicked) -> None:
        """Route link clicks in the rendered page through the interceptor."""
        index = parse_link_handle(event.href)
        if index is None or self._document is None:
            return

        anchor = self._document.anchor(index)
        if anchor is None:
            return

        click = ClickEvent(target=anchor)
        self._interceptor.handle_click(click)
        if click.default_prevented:
            event.prevent_default()
        if click.propagation_stopped:
            event.stop()
