"""Exception hierarchy for pixi-activate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conda.exceptions import CondaError

if TYPE_CHECKING:
    from pathlib import Path


class PixiActivateError(CondaError):
    """Base exception for all pixi-activate errors."""


class ConfigurationError(PixiActivateError):
    """The registry location could not be determined or created."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not set up the environment registry: {reason}")


class MalformedRegistryError(PixiActivateError):
    """The registry file exists but does not hold a valid registry."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"Environment registry '{path}' is malformed: {reason}\n"
            "Fix or remove the file and register your environments again."
        )


class UsageError(PixiActivateError):
    """The command line arguments are inconsistent."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NotFoundError(PixiActivateError):
    """No registered environment has the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Environment name '{name}' not found in registry.")


class PathError(PixiActivateError):
    """The manifest path given on the command line could not be resolved."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error canonicalizing path '{path}': {reason}")


class ActivationError(PixiActivateError):
    """Environment activation failed."""


class WorkspaceNotFoundError(ActivationError):
    """No pixi manifest was found at *path*."""

    def __init__(self, path: str | Path) -> None:
        self.path = path
        super().__init__(
            f"No pixi workspace manifest found at '{path}'.\n"
            "Expected a pixi.toml, or a pyproject.toml with [tool.pixi] tables."
        )


class WorkspaceParseError(ActivationError):
    """The workspace manifest could not be parsed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse workspace manifest '{path}': {reason}")


class EnvironmentNotFoundError(ActivationError):
    """The requested environment is not defined in the workspace."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        hint = ""
        if available:
            hint = f"\nAvailable environments: {', '.join(sorted(available))}"
        super().__init__(f"Environment '{name}' is not defined in the workspace.{hint}")


class EnvironmentNotInstalledError(ActivationError):
    """The requested environment exists but is not installed."""

    def __init__(self, name: str, prefix: str | Path) -> None:
        self.name = name
        self.prefix = prefix
        super().__init__(
            f"Environment '{name}' is not installed at '{prefix}'.\n"
            f"Run 'pixi install -e {name}' first."
        )
