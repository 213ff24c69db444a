"""HTTP fetch gateway: retrieves remote pages on behalf of the page view."""

import logging
from collections.abc import Iterable

import httpx

from .config import DEFAULT_ERROR_PREFIXES, FetchConfig

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the gateway cannot produce a response for a URL."""


def is_error_payload(payload: str, prefixes: Iterable[str] = DEFAULT_ERROR_PREFIXES) -> bool:
    """Check whether a response body is an error report rather than a page."""
    lowered = payload.lower()
    return any(lowered.startswith(prefix.lower()) for prefix in prefixes)


class HttpGateway:
    """Fetch gateway backed by httpx.

    Non-2xx responses are reported as text ("HTTP error 404: Not Found"),
    transport failures as FetchError.
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or FetchConfig()
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }

    async def fetch(self, url: str) -> str:
        """Fetch a page and return its body as text.

        Raises:
            FetchError: On network failures, timeouts and invalid URLs.
        """
        logger.debug("Fetching %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout,
                follow_redirects=self.config.follow_redirects,
                transport=self._transport,
            ) as client:
                response = await client.get(url, headers=self._headers())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            raise FetchError(f"Error: {str(e) or type(e).__name__}") from e

        if response.is_error:
            logger.info("Upstream returned %d for %s", response.status_code, url)
            return f"HTTP error {response.status_code}: {response.reason_phrase}"

        logger.info("Fetched %s (%d bytes)", url, len(response.content))
        return response.text
