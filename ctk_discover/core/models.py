"""Data models for container edits contributed by discoverers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HookLifecycle(str, Enum):
    """Point in the container lifecycle at which the runtime invokes a hook.

    Values match the CDI hook names.
    """

    PRESTART = "prestart"
    CREATE_RUNTIME = "createRuntime"
    CREATE_CONTAINER = "createContainer"
    START_CONTAINER = "startContainer"
    POSTSTART = "poststart"
    POSTSTOP = "poststop"


class Device(BaseModel):
    """A device node to inject into the container."""

    model_config = ConfigDict(frozen=True)

    host_path: str = Field(..., min_length=1, description="Device node path on the host")
    path: str = Field(..., min_length=1, description="Device node path in the container")

    def to_cdi(self) -> dict[str, Any]:
        return {"hostPath": self.host_path, "path": self.path}


class Mount(BaseModel):
    """A host path to bind-mount into the container."""

    model_config = ConfigDict(frozen=True)

    host_path: str = Field(..., min_length=1, description="Source path on the host")
    path: str = Field(..., min_length=1, description="Target path in the container")
    options: tuple[str, ...] = Field(default_factory=tuple, description="Mount options")

    def to_cdi(self) -> dict[str, Any]:
        return {
            "hostPath": self.host_path,
            "containerPath": self.path,
            "options": list(self.options),
        }


class Hook(BaseModel):
    """A single lifecycle hook invocation.

    By convention ``args[0]`` is the base name of ``path``. A hook is also a
    discoverer: it contributes itself and no devices or mounts, so it can be
    aggregated alongside any other source.
    """

    model_config = ConfigDict(frozen=True)

    lifecycle: HookLifecycle = Field(
        default=HookLifecycle.CREATE_CONTAINER,
        description="When the runtime invokes the hook",
    )
    path: str = Field(..., min_length=1, description="Executable invoked by the runtime")
    args: tuple[str, ...] = Field(..., min_length=1, description="Argument vector, argv[0] first")

    def devices(self) -> list[Device]:
        """Return an empty list of devices for a hook discoverer."""
        return []

    def mounts(self) -> list[Mount]:
        """Return an empty list of mounts for a hook discoverer."""
        return []

    def hooks(self) -> list[Hook]:
        """Return this hook as the single discovered hook."""
        return [self]

    def to_cdi(self) -> dict[str, Any]:
        """Render the hook in the CDI container-edits form."""
        return {
            "hookName": self.lifecycle.value,
            "path": self.path,
            "args": list(self.args),
        }
