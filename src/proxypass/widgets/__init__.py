"""ProxyPass widgets."""

from .address_bar import AddressBar
from .banner import Banner
from .page_view import PageView

__all__ = [
    "AddressBar",
    "Banner",
    "PageView",
]
