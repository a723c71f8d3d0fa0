"""Tests for nvidia-ctk hook builders."""

from __future__ import annotations

import pytest

from ctk_discover.core.discover import NoneDiscoverer
from ctk_discover.core.hooks import (
    CREATE_SYMLINKS_HOOK,
    create_create_symlink_hook,
    create_nvidia_ctk_hook,
)
from ctk_discover.core.models import Hook, HookLifecycle


@pytest.mark.unit
class TestCreateNvidiaCTKHook:
    """Tests for the generic hook builder."""

    def test_argument_vector(self) -> None:
        hook = create_nvidia_ctk_hook("/usr/bin/nvidia-ctk", "update-ldcache", "--folder", "/lib")
        assert hook.lifecycle is HookLifecycle.CREATE_CONTAINER
        assert hook.path == "/usr/bin/nvidia-ctk"
        assert hook.args == ("nvidia-ctk", "hook", "update-ldcache", "--folder", "/lib")

    def test_argv0_is_base_name(self) -> None:
        hook = create_nvidia_ctk_hook("/opt/toolkit/bin/custom-ctk", "chmod")
        assert hook.args[0] == "custom-ctk"

    def test_bare_name_path(self) -> None:
        hook = create_nvidia_ctk_hook("nvidia-ctk", "chmod")
        assert hook.path == "nvidia-ctk"
        assert hook.args == ("nvidia-ctk", "hook", "chmod")

    def test_idempotent(self) -> None:
        first = create_nvidia_ctk_hook("/usr/bin/nvidia-ctk", "chmod", "--mode", "755")
        second = create_nvidia_ctk_hook("/usr/bin/nvidia-ctk", "chmod", "--mode", "755")
        assert first == second
        assert first is not second


@pytest.mark.unit
class TestCreateCreateSymlinkHook:
    """Tests for the create-symlinks hook builder."""

    def test_no_links_returns_none_discoverer(self) -> None:
        discoverer = create_create_symlink_hook("/usr/bin/nvidia-ctk", [])
        assert isinstance(discoverer, NoneDiscoverer)
        assert discoverer.devices() == []
        assert discoverer.mounts() == []
        assert discoverer.hooks() == []

    def test_links_in_order(self) -> None:
        discoverer = create_create_symlink_hook("/usr/bin/nvidia-ctk", ["/a->/b", "/c->/d"])
        assert isinstance(discoverer, Hook)

        hooks = discoverer.hooks()
        assert len(hooks) == 1
        assert hooks[0].path == "/usr/bin/nvidia-ctk"
        assert hooks[0].args == (
            "nvidia-ctk",
            "hook",
            CREATE_SYMLINKS_HOOK,
            "--link",
            "/a->/b",
            "--link",
            "/c->/d",
        )
        assert discoverer.devices() == []
        assert discoverer.mounts() == []

    def test_duplicates_kept(self) -> None:
        discoverer = create_create_symlink_hook("/usr/bin/nvidia-ctk", ["x::y", "x::y"])
        (hook,) = discoverer.hooks()
        assert hook.args[3:] == ("--link", "x::y", "--link", "x::y")

    def test_accepts_tuple(self) -> None:
        discoverer = create_create_symlink_hook("/usr/bin/nvidia-ctk", ("libcuda.so.1::/usr/lib/libcuda.so",))
        (hook,) = discoverer.hooks()
        assert hook.args[-2:] == ("--link", "libcuda.so.1::/usr/lib/libcuda.so")

    def test_idempotent(self) -> None:
        links = ["/a->/b"]
        assert create_create_symlink_hook("/usr/bin/nvidia-ctk", links) == create_create_symlink_hook(
            "/usr/bin/nvidia-ctk", links
        )
