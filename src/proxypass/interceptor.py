"""Click interception for links inside the rendered page."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from bs4 import Tag

from .document import DocumentAccessError, IsolatedDocument
from .protocols import RenderSurface
from .rewriter import PROXY_HREF_ATTR

logger = logging.getLogger(__name__)

# Destinations that stay with the page view's own handling
_IGNORED_PREFIXES = ("#", "javascript:")


@dataclass
class ClickEvent:
    """A click on an element of the rendered document."""

    target: Tag
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


def closest_anchor(element: Tag) -> Tag | None:
    """Return the element itself if it is an anchor, else its nearest anchor ancestor."""
    if element.name == "a":
        return element
    return element.find_parent("a")


class ClickInterceptor:
    """Routes link activations in a rendered document to a navigate callback."""

    def __init__(self, navigate: Callable[[str], None]) -> None:
        self._navigate = navigate
        self._document: IsolatedDocument | None = None

    @property
    def attached(self) -> bool:
        return self._document is not None

    def attach(self, surface: RenderSurface) -> None:
        """Start observing the surface's current document.

        If the document cannot be read the interceptor stays inert and
        clicks keep their default behaviour.
        """
        try:
            self._document = surface.content_document
        except DocumentAccessError as e:
            logger.debug("Document not accessible, clicks not intercepted: %s", e)
            self._document = None

    def detach(self) -> None:
        self._document = None

    def handle_click(self, event: ClickEvent) -> bool:
        """Intercept a click if it activates a navigable link.

        Returns:
            True if the click was turned into a navigation.
        """
        if self._document is None:
            return False

        anchor = closest_anchor(event.target)
        if anchor is None:
            return False

        href = anchor.get(PROXY_HREF_ATTR) or anchor.get("href")
        if not href or href.startswith(_IGNORED_PREFIXES):
            return False

        event.prevent_default()
        event.stop_propagation()
        self._navigate(self._document.resolve(href))
        return True
