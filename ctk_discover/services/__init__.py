"""Service layer for hook discovery."""

from ctk_discover.services.resolver import ExecutableResolver, find_nvidia_ctk

__all__ = [
    "ExecutableResolver",
    "find_nvidia_ctk",
]
