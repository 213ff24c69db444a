"""Inert document model for rewritten markup shown in the page view."""

from bs4 import BeautifulSoup, Tag
from markdownify import markdownify

from .resolver import ABSOLUTE_PREFIXES, base_context, resolve

# Scheme used for anchor handles in rendered markdown
LINK_SCHEME = "proxylink:"

# Elements that never contribute visible page text
_HIDDEN_TAGS = ["head", "script", "style", "noscript", "template"]


class DocumentAccessError(Exception):
    """Raised when a surface cannot expose its document for inspection."""


def link_handle(index: int) -> str:
    """Build the markdown link target for the anchor at index."""
    return f"{LINK_SCHEME}{index}"


def parse_link_handle(href: str) -> int | None:
    """Return the anchor index encoded in a link handle, or None."""
    if not href.startswith(LINK_SCHEME):
        return None
    try:
        return int(href[len(LINK_SCHEME) :])
    except ValueError:
        return None


class IsolatedDocument:
    """A parsed page that cannot run scripts or reach the network.

    Anchors are indexed in document order; the rendered markdown refers to
    them only through link handles, so every activation has to come back
    here to find out where it leads.
    """

    def __init__(self, markup: str) -> None:
        self.markup = markup
        self._soup = BeautifulSoup(markup, "html.parser")
        self._anchors: list[Tag] = self._soup.find_all("a")

    @property
    def anchors(self) -> list[Tag]:
        return list(self._anchors)

    @property
    def base_url(self) -> str | None:
        """The href of the document's <base> element, if any."""
        base = self._soup.find("base", href=True)
        if base is None:
            return None
        return base["href"]

    def anchor(self, index: int) -> Tag | None:
        """Get the anchor element at index, or None if out of range."""
        if 0 <= index < len(self._anchors):
            return self._anchors[index]
        return None

    def resolve(self, href: str) -> str:
        """Resolve an href the way the document itself would, via its <base>."""
        base_url = self.base_url
        if not base_url or href.startswith(ABSOLUTE_PREFIXES):
            return href
        try:
            return resolve(href, base_context(base_url))
        except ValueError:
            return href

    def to_markdown(self) -> str:
        """Render the visible document content as markdown.

        Anchor targets are replaced by link handles. The document itself
        is left untouched; rendering works on a fresh parse.
        """
        soup = BeautifulSoup(self.markup, "html.parser")

        # Label before removing hidden elements so indexes match self._anchors
        for index, anchor in enumerate(soup.find_all("a")):
            anchor["href"] = link_handle(index)

        for tag in soup.find_all(_HIDDEN_TAGS):
            # Nested inside an element that is already gone
            if tag.decomposed:
                continue
            tag.decompose()

        return markdownify(str(soup), heading_style="ATX").strip()
