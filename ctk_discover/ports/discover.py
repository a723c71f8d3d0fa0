"""Protocol interfaces for sources of container edits.

- Discover: devices, mounts and hooks contributed to a container
- ExecutableLocatorProtocol: search for an executable on the host
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ctk_discover.core.models import Device, Hook, Mount


@runtime_checkable
class Discover(Protocol):
    """A source of devices, mounts and hooks for a container.

    Every contribution source implements all three capabilities, returning
    empty lists where a capability does not apply. Failures are reported by
    raising ``DiscoverError``.
    """

    def devices(self) -> list[Device]:
        """Return the devices to inject, in order."""
        ...

    def mounts(self) -> list[Mount]:
        """Return the mounts to add, in order."""
        ...

    def hooks(self) -> list[Hook]:
        """Return the hooks to register, in order."""
        ...


class ExecutableLocatorProtocol(Protocol):
    """Search for candidate paths of an executable.

    Consumers: ExecutableResolver.
    """

    def locate(self, name: str) -> list[str]:
        """Locate candidate absolute paths for an executable.

        Args:
            name: Executable name (or path) to search for.

        Returns:
            Candidate paths ordered by preference. May be empty.

        Raises:
            LocateError: If the search could not be performed.
        """
        ...
