"""Custom exceptions for the NVIDIA Container Toolkit hook discovery."""


class CTKDiscoverError(Exception):
    """Base exception for all hook discovery errors."""

    pass


class LocateError(CTKDiscoverError):
    """Raised when the executable search cannot enumerate candidates.

    Covers conditions such as an empty executable name or a candidate that
    cannot be inspected because of a permission error.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to locate {name!r}: {reason}")


class DiscoverError(CTKDiscoverError):
    """Raised when a discoverer cannot enumerate its devices, mounts or hooks."""

    pass


class ConfigurationError(CTKDiscoverError):
    """Raised when configuration is invalid."""

    pass
