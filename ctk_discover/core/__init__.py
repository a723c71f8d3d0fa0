"""Core components for NVIDIA Container Toolkit hook discovery."""

from ctk_discover.core.discover import MergedDiscoverer, NoneDiscoverer, merge
from ctk_discover.core.errors import (
    CTKDiscoverError,
    ConfigurationError,
    DiscoverError,
    LocateError,
)
from ctk_discover.core.hooks import (
    CREATE_SYMLINKS_HOOK,
    create_create_symlink_hook,
    create_nvidia_ctk_hook,
)
from ctk_discover.core.models import Device, Hook, HookLifecycle, Mount

__all__ = [
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
    "MergedDiscoverer",
    "NoneDiscoverer",
    "merge",
    # Hook builders
    "CREATE_SYMLINKS_HOOK",
    "create_create_symlink_hook",
    "create_nvidia_ctk_hook",
]
