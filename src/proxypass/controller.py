"""Navigation controller: turns user intents into proxied fetches and history."""

import logging
from collections.abc import Callable, Iterable

from .config import DEFAULT_ERROR_PREFIXES
from .gateway import is_error_payload
from .navigation import HistoryEntry, HistoryStack, NavigationState, normalize_url
from .protocols import FetchGateway
from .rewriter import extract_title, rewrite

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An unexpected error occurred."

StateListener = Callable[[NavigationState], None]


class NavigationController:
    """State machine owning the navigation state and the history stack.

    Every intent bumps a request token. A fetch that completes after a newer
    intent has started is discarded, so the latest intent always wins.
    """

    def __init__(
        self,
        gateway: FetchGateway,
        error_prefixes: Iterable[str] = DEFAULT_ERROR_PREFIXES,
    ) -> None:
        self.state = NavigationState()
        self.history = HistoryStack()
        self._gateway = gateway
        self._error_prefixes = tuple(error_prefixes)
        self._token = 0
        self._listeners: list[StateListener] = []

    def subscribe(self, listener: StateListener) -> None:
        """Register a callable invoked with the state after every transition."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.state)

    @property
    def can_go_back(self) -> bool:
        return self.history.can_go_back

    @property
    def can_go_forward(self) -> bool:
        return self.history.can_go_forward

    @property
    def can_reload(self) -> bool:
        return bool(self.state.current_url)

    async def submit(self, raw_input: str) -> None:
        """Navigate to a URL typed by the user."""
        await self._load(raw_input, record=True)

    async def click_link(self, href: str) -> None:
        """Navigate to a link activated inside the page view."""
        await self._load(href, record=True)

    async def reload(self) -> None:
        """Fetch the current URL again without touching history."""
        if not self.can_reload:
            return
        await self._load(self.state.current_url, record=False)

    async def back(self) -> None:
        """Replay the previous history entry."""
        entry = self.history.back()
        if entry is None:
            return
        await self._load(entry.url, record=False)

    async def forward(self) -> None:
        """Replay the next history entry."""
        entry = self.history.forward()
        if entry is None:
            return
        await self._load(entry.url, record=False)

    def clear(self) -> None:
        """Reset the view to idle. History is kept."""
        # Any fetch still in flight belongs to a superseded intent now
        self._token += 1
        self.state = NavigationState()
        self._notify()

    async def _load(self, target: str, record: bool) -> None:
        url = normalize_url(target)
        if not url:
            return

        self._token += 1
        token = self._token

        self.state.current_url = url
        self.state.error = None
        self.state.is_loading = True
        self._notify()

        try:
            payload = await self._gateway.fetch(url)
        except Exception as e:
            if token != self._token:
                logger.debug("Dropping stale failure for %s", url)
                return
            logger.info("Load failed for %s: %s", url, e)
            self._fail(str(e) or GENERIC_ERROR)
            return

        if token != self._token:
            logger.debug("Dropping stale response for %s", url)
            return

        if is_error_payload(payload, self._error_prefixes):
            logger.info("Gateway reported an error for %s", url)
            self._fail(payload)
            return

        title = extract_title(payload)
        self.state.rendered_markup = rewrite(payload, url)
        self.state.page_title = title
        self.state.error = None
        self.state.is_loading = False

        if record:
            self.history.push(HistoryEntry(url=url, title=title))

        logger.info("Loaded %s", url)
        self._notify()

    def _fail(self, message: str) -> None:
        self.state.error = message
        self.state.rendered_markup = None
        self.state.page_title = None
        self.state.is_loading = False
        self._notify()
