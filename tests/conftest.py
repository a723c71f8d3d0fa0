"""Pytest fixtures for hook discovery tests."""

from __future__ import annotations

import stat
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from ctk_discover.config import Settings, override_settings, reset_settings

# ---------------------------------------------------------------------------
# Basic fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep the settings singleton and NVIDIA_CTK_ environment out of tests."""
    for name in (
        "NVIDIA_CTK_EXECUTABLE_NAME",
        "NVIDIA_CTK_DEFAULT_PATH",
        "NVIDIA_CTK_DRIVER_ROOT",
        "NVIDIA_CTK_SEARCH_PATHS",
        "NVIDIA_CTK_LOG_LEVEL",
        "NVIDIA_CTK_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def test_settings(tmp_path: Path) -> Generator[Settings, None, None]:
    """Provide settings that search only an empty temporary directory."""
    empty_dir = tmp_path / "empty-bin"
    empty_dir.mkdir()
    settings = Settings(search_paths=[str(empty_dir)], log_level="DEBUG")
    override_settings(settings)
    yield settings
    reset_settings()


@pytest.fixture
def make_executable(tmp_path: Path) -> Callable[..., Path]:
    """Create a file under tmp_path, executable unless told otherwise."""

    def _make(relative: str, executable: bool = True) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\n")
        mode = 0o755 if executable else 0o644
        path.chmod(mode)
        assert bool(path.stat().st_mode & stat.S_IXUSR) is executable
        return path

    return _make
