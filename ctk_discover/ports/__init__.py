"""Port interfaces for hook discovery."""

from ctk_discover.ports.discover import Discover, ExecutableLocatorProtocol

__all__ = [
    "Discover",
    "ExecutableLocatorProtocol",
]
