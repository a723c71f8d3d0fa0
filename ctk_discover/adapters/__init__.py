"""Adapters for host-side collaborators."""

from ctk_discover.adapters.lookup import DEFAULT_SEARCH_PATHS, ExecutableLocator, get_search_paths

__all__ = [
    "DEFAULT_SEARCH_PATHS",
    "ExecutableLocator",
    "get_search_paths",
]
