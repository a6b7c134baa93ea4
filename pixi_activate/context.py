"""Activation context -- lazy properties for pixi-activate's configuration.

The registry lives under the pixi home directory, which is
``$PIXI_HOME`` when set and ``~/.pixi`` otherwise.  Nothing touches the
filesystem until a property is first accessed.
"""

from __future__ import annotations

import os
from pathlib import Path

from .exceptions import ConfigurationError

PIXI_HOME_ENV = "PIXI_HOME"
REGISTRY_DIRNAME = "register"
REGISTRY_FILENAME = "environments.json"


class ActivateContext:
    """Lazy-evaluated locations used by pixi-activate.

    Properties are resolved on first access and cached.
    """

    def __init__(self, pixi_home: str | Path | None = None) -> None:
        self._pixi_home = Path(pixi_home) if pixi_home is not None else None
        self._cache: dict[str, object] = {}

    @property
    def pixi_home(self) -> Path:
        """The pixi home directory (``$PIXI_HOME`` or ``~/.pixi``)."""
        if self._pixi_home is not None:
            return self._pixi_home
        if "pixi_home" not in self._cache:
            env_home = os.environ.get(PIXI_HOME_ENV)
            if env_home:
                self._cache["pixi_home"] = Path(env_home)
            else:
                try:
                    home = Path.home()
                except (RuntimeError, KeyError) as exc:
                    raise ConfigurationError(
                        f"could not determine the user home directory ({exc})"
                    ) from exc
                self._cache["pixi_home"] = home / ".pixi"
        return self._cache["pixi_home"]  # type: ignore[return-value]

    @property
    def registry_dir(self) -> Path:
        """Directory holding the environment registry."""
        return self.pixi_home / REGISTRY_DIRNAME

    @property
    def registry_path(self) -> Path:
        """Path of the environment registry file."""
        return self.registry_dir / REGISTRY_FILENAME
