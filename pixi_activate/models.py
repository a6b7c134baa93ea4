"""Data models for the environment registry and activation requests.

A :class:`RegisteredEnvironment` mirrors one object of the registry's
JSON array.  An :class:`ActivationRequest` is what the CLI hands to an
activator, and a :class:`WorkspaceConfig` is the small slice of a pixi
manifest the shell activator needs to find an environment prefix.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from .exceptions import MalformedRegistryError

if TYPE_CHECKING:
    from typing import Any


@dataclass(frozen=True)
class RegisteredEnvironment:
    """A named pointer to a pixi workspace on disk.

    ``path`` is kept exactly as it was written to the registry; it may be
    relative and is not checked for existence.
    """

    name: str
    path: str

    @classmethod
    def from_dict(
        cls, data: Any, source: str | Path = "<registry>"
    ) -> RegisteredEnvironment:
        """Build a record from one registry JSON object.

        Raises ``MalformedRegistryError`` when *data* is not an object
        with string ``name`` and ``path`` members.
        """
        if not isinstance(data, dict):
            raise MalformedRegistryError(
                source, f"expected an object, got {type(data).__name__}"
            )
        for key in ("name", "path"):
            if key not in data:
                raise MalformedRegistryError(source, f"entry is missing '{key}'")
            if not isinstance(data[key], str):
                raise MalformedRegistryError(
                    source, f"'{key}' must be a string, got {type(data[key]).__name__}"
                )
        return cls(name=data["name"], path=data["path"])

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "path": self.path}


@dataclass(frozen=True)
class ActivationRequest:
    """Everything an activator needs to enter a workspace environment."""

    manifest_path: Path
    environment: str | None = None

    @property
    def environment_name(self) -> str:
        """The targeted environment, falling back to ``default``."""
        return self.environment or WorkspaceConfig.DEFAULT_ENVIRONMENT


@dataclass
class WorkspaceConfig:
    """Minimal view of a pixi workspace.

    Only the environment names are read from the manifest; pixi itself
    owns dependencies, features and solving.
    """

    DEFAULT_ENVIRONMENT: ClassVar[str] = "default"
    ENVS_DIR: ClassVar[str] = ".pixi/envs"

    name: str | None = None
    root: str = "."
    manifest_path: str = ""
    environments: list[str] = field(default_factory=lambda: ["default"])

    @property
    def envs_dir(self) -> Path:
        """Directory where pixi installs the workspace environments."""
        return Path(self.root) / self.ENVS_DIR

    def env_prefix(self, env_name: str) -> Path:
        """Return the prefix path for a named environment."""
        return self.envs_dir / env_name
