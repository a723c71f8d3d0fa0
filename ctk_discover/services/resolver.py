"""Resolution of the nvidia-ctk executable used in hooks.

Resolution policy, in order:
- an absolute path is used as is, without checking that it exists
- an empty name is replaced with the configured executable name
- the first candidate returned by the executable search is used
- if the search fails or finds nothing, the configured default path is used

Resolution never raises and is recomputed on every call.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from ctk_discover.adapters.lookup import ExecutableLocator
from ctk_discover.config import Settings, get_settings
from ctk_discover.core.errors import LocateError

if TYPE_CHECKING:
    from ctk_discover.ports.discover import ExecutableLocatorProtocol

DEFAULT_EXECUTABLE_NAME = "nvidia-ctk"
DEFAULT_EXECUTABLE_PATH = "/usr/bin/nvidia-ctk"


class ExecutableResolver:
    """Turns an executable name or explicit path into the path to invoke."""

    def __init__(
        self,
        locator: ExecutableLocatorProtocol | None = None,
        *,
        executable_name: str = DEFAULT_EXECUTABLE_NAME,
        default_path: str = DEFAULT_EXECUTABLE_PATH,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            locator: Executable search collaborator. Defaults to an
                ExecutableLocator over PATH and the system directories.
            executable_name: Name searched for when none is requested.
            default_path: Fallback path when the search yields nothing.
            logger: Logger for diagnostics. Defaults to the module logger.
        """
        self._logger = logger or logging.getLogger(__name__)
        self._locator = locator or ExecutableLocator(logger=self._logger)
        self.executable_name = executable_name
        self.default_path = default_path

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        locator: ExecutableLocatorProtocol | None = None,
        logger: logging.Logger | None = None,
    ) -> ExecutableResolver:
        """Build a resolver from configuration.

        Args:
            settings: Source of the executable name, default path and search
                directories.
            locator: Overrides the locator built from settings.
            logger: Logger for diagnostics.

        Returns:
            A configured ExecutableResolver.
        """
        if locator is None:
            locator = ExecutableLocator(
                root=settings.driver_root,
                search_paths=settings.search_paths or None,
                logger=logger,
            )
        return cls(
            locator,
            executable_name=settings.executable_name,
            default_path=settings.default_path,
            logger=logger,
        )

    def resolve(self, preferred: str = "") -> str:
        """Resolve the executable to use in hooks.

        Args:
            preferred: Explicit path, executable name, or empty for the
                configured executable name.

        Returns:
            The path to invoke. Always non-empty.
        """
        if os.path.isabs(preferred):
            self._logger.debug("Using specified NVIDIA Container Toolkit CLI path %s", preferred)
            return preferred

        name = preferred or self.executable_name
        self._logger.debug("Locating NVIDIA Container Toolkit CLI as %s", name)

        hook_path = self.default_path
        try:
            candidates = self._locator.locate(name)
        except LocateError as e:
            self._logger.warning("Failed to locate %s: %s", name, e)
        else:
            if not candidates:
                self._logger.warning("%s not found", name)
            else:
                self._logger.debug("Found %s candidates: %s", name, candidates)
                hook_path = candidates[0]

        self._logger.debug("Using NVIDIA Container Toolkit CLI path %s", hook_path)
        return hook_path


def find_nvidia_ctk(
    nvidia_ctk_path: str = "",
    *,
    logger: logging.Logger | None = None,
    locator: ExecutableLocatorProtocol | None = None,
    settings: Settings | None = None,
) -> str:
    """Locate the nvidia-ctk executable to be used in hooks.

    If an absolute path is given it is returned without checking for an
    executable at that path.
    """
    resolver = ExecutableResolver.from_settings(
        settings or get_settings(),
        locator=locator,
        logger=logger,
    )
    return resolver.resolve(nvidia_ctk_path)
