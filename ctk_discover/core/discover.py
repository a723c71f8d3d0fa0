"""Discoverer implementations that contribute nothing or combine other sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ctk_discover.core.models import Device, Hook, Mount

if TYPE_CHECKING:
    from ctk_discover.ports.discover import Discover


@dataclass(frozen=True)
class NoneDiscoverer:
    """A discoverer that returns no devices, mounts or hooks."""

    def devices(self) -> list[Device]:
        return []

    def mounts(self) -> list[Mount]:
        return []

    def hooks(self) -> list[Hook]:
        return []


@dataclass(frozen=True)
class MergedDiscoverer:
    """Concatenates the contributions of several discoverers in member order.

    A ``DiscoverError`` raised by any member propagates unchanged.
    """

    members: tuple[Discover, ...] = ()

    def devices(self) -> list[Device]:
        result: list[Device] = []
        for member in self.members:
            result.extend(member.devices())
        return result

    def mounts(self) -> list[Mount]:
        result: list[Mount] = []
        for member in self.members:
            result.extend(member.mounts())
        return result

    def hooks(self) -> list[Hook]:
        result: list[Hook] = []
        for member in self.members:
            result.extend(member.hooks())
        return result


def merge(*discoverers: Discover) -> MergedDiscoverer:
    """Combine discoverers into one.

    Args:
        *discoverers: Sources to combine, in the order their contributions
            should appear.

    Returns:
        A MergedDiscoverer over the given sources.
    """
    return MergedDiscoverer(members=tuple(discoverers))
