"""NVIDIA Container Toolkit hook discovery - lifecycle hooks for CDI container edits."""

__version__ = "0.1.0"

# Re-export core components for convenience
from ctk_discover.config import Settings, get_settings
from ctk_discover.core import (
    CTKDiscoverError,
    ConfigurationError,
    Device,
    DiscoverError,
    Hook,
    HookLifecycle,
    LocateError,
    MergedDiscoverer,
    Mount,
    NoneDiscoverer,
    create_create_symlink_hook,
    create_nvidia_ctk_hook,
    merge,
)
from ctk_discover.ports import Discover, ExecutableLocatorProtocol
from ctk_discover.services import ExecutableResolver, find_nvidia_ctk

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "CTKDiscoverError",
    "ConfigurationError",
    "DiscoverError",
    "LocateError",
    # Models
    "Device",
    "Hook",
    "HookLifecycle",
    "Mount",
    # Discoverers
    "Discover",
    "MergedDiscoverer",
    "NoneDiscoverer",
    "merge",
    # Resolution
    "ExecutableLocatorProtocol",
    "ExecutableResolver",
    "find_nvidia_ctk",
    # Hook builders
    "create_create_symlink_hook",
    "create_nvidia_ctk_hook",
]
