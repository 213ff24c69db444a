"""Type protocols for the collaborators around the navigation core.

These protocols define what the controller expects from a fetch gateway
and what the click interceptor expects from a rendering surface, so that
tests and alternative front ends can supply their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .document import IsolatedDocument


@runtime_checkable
class FetchGateway(Protocol):
    """Fetches a URL and returns the page markup as text.

    Failures are reported either by returning text that starts with an
    error prefix or by raising.
    """

    async def fetch(self, url: str) -> str: ...


@runtime_checkable
class RenderSurface(Protocol):
    """Surface displaying a rewritten document.

    Reading content_document raises DocumentAccessError when the document
    is not accessible.
    """

    @property
    def content_document(self) -> IsolatedDocument: ...
