"""Rewrite fetched markup so it renders and navigates from inside the page view."""

import html
import logging
import re

from .resolver import BaseContext, base_context, resolve

logger = logging.getLogger(__name__)

# Attribute carrying the resolved anchor destination for the click interceptor
PROXY_HREF_ATTR = "data-proxy-href"

# Opening <a> tag; its attributes are rewritten one tag at a time
_ANCHOR_TAG = re.compile(r"<a\s[^>]*>", re.IGNORECASE)

# Quoted attribute values. The lookbehind keeps data-src, data-proxy-href
# and friends from matching as src / href.
_HREF_ATTR = re.compile(r"""(?<![\w-])href\s*=\s*(['"])(.*?)\1""", re.IGNORECASE | re.DOTALL)
_MARKER_ATTR = re.compile(
    r"""\s+data-proxy-href\s*=\s*(['"]).*?\1""", re.IGNORECASE | re.DOTALL
)

_MEDIA_SRC = re.compile(
    r"""(<(?:img|script|iframe|video|audio|source|embed)\s[^>]*?)(?<![\w-])src\s*=\s*(['"])(.*?)\2""",
    re.IGNORECASE,
)
_LINK_HREF = re.compile(
    r"""(<link\s[^>]*?)(?<![\w-])href\s*=\s*(['"])(.*?)\2""",
    re.IGNORECASE,
)
_FORM_ACTION = re.compile(
    r"""(<form\s[^>]*?)(?<![\w-])action\s*=\s*(['"])(.*?)\2""",
    re.IGNORECASE,
)

# url(...) in style content, skipping data: URIs
_STYLE_URL = re.compile(
    r"""url\(\s*(['"]?)((?!data:)[^'")]+)\1\s*\)""",
    re.IGNORECASE,
)

_BASE_TAG = re.compile(r"<base\s", re.IGNORECASE)
# <head> with or without attributes, but not <header>
_HEAD_OPEN = re.compile(r"<head(?:\s[^>]*)?>", re.IGNORECASE)
_HTML_OPEN = re.compile(r"<html(?:\s[^>]*)?>", re.IGNORECASE)

_TITLE = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)


def _rewrite_anchors(markup: str, base: BaseContext) -> str:
    """Resolve anchor hrefs and mirror them into the marker attribute."""

    def replace_tag(match: re.Match) -> str:
        tag = match.group(0)
        if not _HREF_ATTR.search(tag):
            return tag

        # Drop a marker left by an earlier rewrite so it is never duplicated
        tag = _MARKER_ATTR.sub("", tag)

        def replace_href(attr: re.Match) -> str:
            quote = attr.group(1)
            resolved = resolve(attr.group(2), base)
            return (
                f"href={quote}{resolved}{quote} "
                f"{PROXY_HREF_ATTR}={quote}{resolved}{quote}"
            )

        return _HREF_ATTR.sub(replace_href, tag, count=1)

    return _ANCHOR_TAG.sub(replace_tag, markup)


def _rewrite_attribute(pattern: re.Pattern, name: str, markup: str, base: BaseContext) -> str:
    """Resolve one quoted attribute in place for every tag the pattern matches."""

    def replace(match: re.Match) -> str:
        prefix, quote, url = match.groups()
        return f"{prefix}{name}={quote}{resolve(url, base)}{quote}"

    return pattern.sub(replace, markup)


def _rewrite_style_urls(markup: str, base: BaseContext) -> str:
    """Resolve url(...) references, keeping their quoting style."""

    def replace(match: re.Match) -> str:
        quote, url = match.groups()
        return f"url({quote}{resolve(url.strip(), base)}{quote})"

    return _STYLE_URL.sub(replace, markup)


def _inject_base(markup: str, requested_url: str) -> str:
    """Add a <base> element pointing at the requested URL if none exists."""
    if _BASE_TAG.search(markup):
        return markup

    base_tag = f'<base href="{html.escape(requested_url)}">'

    head = _HEAD_OPEN.search(markup)
    if head:
        return markup[: head.end()] + base_tag + markup[head.end() :]

    root = _HTML_OPEN.search(markup)
    if root:
        return markup[: root.end()] + f"<head>{base_tag}</head>" + markup[root.end() :]

    return base_tag + markup


def rewrite(markup: str, requested_url: str) -> str:
    """Rewrite every URL-bearing construct in the markup to an absolute URL.

    Passes run in a fixed order: anchors, media src, link href, form action,
    style url(). A <base> element is injected when the markup has none.

    Args:
        markup: Raw page markup as returned by the fetch gateway.
        requested_url: The normalized URL the markup was fetched from.

    Returns:
        The rewritten markup, or the original markup unchanged if any
        stage fails.
    """
    try:
        base = base_context(requested_url)
        result = _rewrite_anchors(markup, base)
        result = _rewrite_attribute(_MEDIA_SRC, "src", result, base)
        result = _rewrite_attribute(_LINK_HREF, "href", result, base)
        result = _rewrite_attribute(_FORM_ACTION, "action", result, base)
        result = _rewrite_style_urls(result, base)
        return _inject_base(result, requested_url)
    except (ValueError, re.error) as e:
        logger.debug("Rewrite skipped for %s: %s", requested_url, e)
        return markup


def extract_title(markup: str) -> str | None:
    """Return the trimmed text of the first <title> element, or None."""
    match = _TITLE.search(markup)
    if match is None:
        return None
    return html.unescape(match.group(1)).strip()
