"""Builders for hooks that invoke the NVIDIA Container Toolkit CLI."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ctk_discover.core.discover import NoneDiscoverer
from ctk_discover.core.models import Hook, HookLifecycle

if TYPE_CHECKING:
    from ctk_discover.ports.discover import Discover

CREATE_SYMLINKS_HOOK = "create-symlinks"


def create_create_symlink_hook(nvidia_ctk_path: str, links: Sequence[str]) -> Discover:
    """Create a hook which creates the requested symlinks in the container.

    Each link is passed verbatim as a ``--link`` argument, in the order given.
    Duplicates are kept.

    Args:
        nvidia_ctk_path: Path to the nvidia-ctk executable.
        links: Link specifications, passed through verbatim.

    Returns:
        A NoneDiscoverer when there are no links, otherwise the Hook.
    """
    if not links:
        return NoneDiscoverer()

    args: list[str] = []
    for link in links:
        args.extend(["--link", link])
    return create_nvidia_ctk_hook(nvidia_ctk_path, CREATE_SYMLINKS_HOOK, *args)


def create_nvidia_ctk_hook(nvidia_ctk_path: str, hook_name: str, *additional_args: str) -> Hook:
    """Create a hook which invokes an ``nvidia-ctk hook`` subcommand at container creation."""
    return Hook(
        lifecycle=HookLifecycle.CREATE_CONTAINER,
        path=nvidia_ctk_path,
        args=[os.path.basename(nvidia_ctk_path), "hook", hook_name, *additional_args],
    )
