"""Activation dispatcher -- hand a resolved workspace to a shell.

Activation is a capability: anything implementing :class:`Activator`
can be passed to :func:`activate`.  The default :class:`ShellActivator`
delegates to ``conda-spawn``, which handles shell detection, activation
scripts, prompt modification, and process lifecycle.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .exceptions import EnvironmentNotFoundError, EnvironmentNotInstalledError
from .models import ActivationRequest
from .workspace import load_workspace

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


class Activator(ABC):
    """Something that can enter a workspace environment."""

    @abstractmethod
    def activate(self, request: ActivationRequest) -> int:
        """Activate *request* and return the resulting exit code.

        Raises ``ActivationError`` (or a subclass) on failure.
        """


class ShellActivator(Activator):
    """Spawn an interactive shell with a pixi environment activated.

    The user exits the spawned shell with ``exit`` or Ctrl+D; its exit
    code becomes ours.
    """

    def activate(self, request: ActivationRequest) -> int:
        from conda.core.prefix_data import PrefixData
        from conda_spawn.main import spawn

        config = load_workspace(request.manifest_path)
        env_name = request.environment_name

        if env_name not in config.environments:
            raise EnvironmentNotFoundError(env_name, config.environments)

        prefix = config.env_prefix(env_name)
        if not PrefixData(str(prefix)).is_environment():
            raise EnvironmentNotInstalledError(env_name, prefix)

        log.debug("Spawning shell for environment %r at %s", env_name, prefix)
        return spawn(prefix=prefix, command=None)


def activate(
    manifest_path: Path,
    environment: str | None = None,
    *,
    activator: Activator | None = None,
) -> int:
    """Build an activation request and dispatch it to *activator*."""
    request = ActivationRequest(manifest_path=manifest_path, environment=environment)
    if activator is None:
        activator = ShellActivator()
    log.debug("Dispatching %r to %s", request, type(activator).__name__)
    return activator.activate(request)
