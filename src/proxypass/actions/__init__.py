"""Action handler mixins for ProxyPassApp."""

from .navigation_actions import NavigationActionsMixin

__all__ = [
    "NavigationActionsMixin",
]
