"""Executable search on the host filesystem.

Searches the directories listed in ``PATH`` followed by the standard system
binary directories, optionally below a driver root, and returns every
matching regular file with an execute bit set.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Sequence
from pathlib import Path

from ctk_discover.core.errors import LocateError

DEFAULT_SEARCH_PATHS: tuple[str, ...] = (
    "/usr/local/sbin",
    "/usr/local/bin",
    "/usr/sbin",
    "/usr/bin",
    "/sbin",
    "/bin",
)


def get_search_paths(env_path: str | None = None) -> list[str]:
    """Build the ordered list of directories to search.

    Args:
        env_path: A ``PATH``-style string. Defaults to the ``PATH`` environment
            variable.

    Returns:
        PATH entries followed by the system defaults, without duplicates. Relative
        PATH entries are skipped.
    """
    if env_path is None:
        env_path = os.environ.get("PATH", "")

    paths: list[str] = []
    for directory in [*env_path.split(os.pathsep), *DEFAULT_SEARCH_PATHS]:
        if os.path.isabs(directory) and directory not in paths:
            paths.append(directory)
    return paths


class ExecutableLocator:
    """Locates executables by name in a list of search directories."""

    def __init__(
        self,
        root: str = "",
        search_paths: Sequence[str] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the locator.

        Args:
            root: Prefix applied to every candidate path (e.g. a driver root).
            search_paths: Directories to search. Defaults to PATH plus the
                standard system directories, computed at each lookup.
                Relative directories are ignored unless a root is set.
            logger: Logger for diagnostics. Defaults to the module logger.
        """
        self._root = root
        self._search_paths = list(search_paths) if search_paths else None
        self._logger = logger or logging.getLogger(__name__)

    def locate(self, name: str) -> list[str]:
        """Locate candidate paths for the named executable.

        Args:
            name: Executable name, or an absolute path checked directly.

        Returns:
            Matching executable paths in search order. Empty if none exist.

        Raises:
            LocateError: If the name is empty or a candidate cannot be
                inspected (permission denied, symlink loop, name too long).
        """
        if not name:
            raise LocateError(name, "empty executable name")

        if os.path.isabs(name):
            candidates = [self._with_root(name)]
        else:
            search_paths = [
                d for d in self._search_paths or get_search_paths() if self._root or os.path.isabs(d)
            ]
            candidates = [self._with_root(os.path.join(d, name)) for d in search_paths]

        found: list[str] = []
        for candidate in candidates:
            self._logger.debug("Checking candidate %s", candidate)
            if self._is_executable(name, candidate):
                found.append(candidate)
        return found

    def _with_root(self, path: str) -> str:
        if not self._root:
            return path
        return str(Path(self._root) / path.lstrip("/"))

    def _is_executable(self, name: str, candidate: str) -> bool:
        try:
            info = os.stat(candidate)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            raise LocateError(name, f"cannot inspect {candidate}: {e.strerror or e}") from e

        if not stat.S_ISREG(info.st_mode):
            return False
        return bool(info.st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
