"""URL resolution against the page that is being displayed."""

from dataclasses import dataclass
from urllib.parse import urljoin, urlsplit

# References that must never be rewritten
PASSTHROUGH_PREFIXES = ("data:", "javascript:", "#")

ABSOLUTE_PREFIXES = ("http://", "https://")


@dataclass(frozen=True)
class BaseContext:
    """Reference point for resolving the URLs found in one page."""

    origin: str
    protocol: str
    directory: str


def base_context(url: str) -> BaseContext:
    """Derive the base context for a requested page URL.

    Raises:
        ValueError: If the URL has no scheme or host.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Not an absolute URL: {url!r}")

    # Drop any userinfo, like an origin does
    host = parts.netloc.rpartition("@")[2]
    origin = f"{parts.scheme}://{host}"

    path = parts.path or "/"
    directory = origin + path[: path.rfind("/") + 1]

    return BaseContext(
        origin=origin,
        protocol=f"{parts.scheme}:",
        directory=directory,
    )


def resolve(reference: str, base: BaseContext) -> str:
    """Resolve a URL reference to an absolute URL.

    Pseudo-scheme, fragment and already-absolute references are returned
    as they are. If resolution fails the reference is returned unchanged.

    Examples:
        /path       -> https://a.com/path
        //cdn.a.com -> https://cdn.a.com
        img.png     -> https://a.com/dir/img.png   (base https://a.com/dir/page.html)
    """
    if not reference or reference.startswith(PASSTHROUGH_PREFIXES):
        return reference

    try:
        if reference.startswith(ABSOLUTE_PREFIXES):
            return reference
        if reference.startswith("//"):
            return base.protocol + reference
        if reference.startswith("/"):
            return base.origin + reference
        return urljoin(base.directory, reference)
    except ValueError:
        return reference
