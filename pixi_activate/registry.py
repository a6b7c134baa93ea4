"""Environment registry -- persisted mapping of names to workspace paths.

The registry is a flat JSON array of ``{"name": ..., "path": ...}``
objects stored at ``<pixi-home>/register/environments.json``.  External
registration tools write the same format, so it must stay a flat array
of string pairs.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from .context import REGISTRY_FILENAME, ActivateContext
from .exceptions import ConfigurationError, MalformedRegistryError
from .models import RegisteredEnvironment

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = logging.getLogger(__name__)


class RegistryStore(ABC):
    """Interface for anything that can hand out registered environments."""

    @abstractmethod
    def ensure_directory(self) -> Path:
        """Create the registry directory if needed and return it."""

    @abstractmethod
    def load(self) -> list[RegisteredEnvironment]:
        """Return all registered environments in stored order."""


class FileRegistryStore(RegistryStore):
    """Registry backed by a JSON file in the pixi home directory.

    *registry_dir* overrides the location; by default it comes from
    :class:`~pixi_activate.context.ActivateContext`.
    """

    def __init__(self, registry_dir: str | Path | None = None) -> None:
        self._registry_dir = Path(registry_dir) if registry_dir is not None else None

    @property
    def registry_dir(self) -> Path:
        if self._registry_dir is None:
            self._registry_dir = ActivateContext().registry_dir
        return self._registry_dir

    def ensure_directory(self) -> Path:
        directory = self.registry_dir
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(
                f"could not create registry directory '{directory}': {exc}"
            ) from exc
        return directory

    def registry_path(self) -> Path:
        """Return the registry file path, creating its directory."""
        return self.ensure_directory() / REGISTRY_FILENAME

    def load(self) -> list[RegisteredEnvironment]:
        """Read the registry file.

        A missing or unreadable file counts as an empty registry.  A file
        that exists but is not a JSON array of ``{name, path}`` objects
        raises ``MalformedRegistryError``; nothing is skipped or repaired.
        """
        path = self.registry_path()
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log.debug("Registry %s not readable (%s), treating as empty", path, exc)
            text = "[]"
        if not text.strip():
            text = "[]"

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedRegistryError(path, str(exc)) from exc

        if not isinstance(data, list):
            raise MalformedRegistryError(
                path, f"expected a JSON array, got {type(data).__name__}"
            )
        records = [RegisteredEnvironment.from_dict(item, path) for item in data]
        log.debug("Loaded %d registered environment(s) from %s", len(records), path)
        return records

    def save(self, records: Iterable[RegisteredEnvironment]) -> Path:
        """Write *records* to the registry file and return its path.

        The CLI never writes the registry; this keeps the on-disk format
        in one place for registration tools built on this package.
        """
        path = self.registry_path()
        payload = [record.to_dict() for record in records]
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        log.debug("Wrote %d registered environment(s) to %s", len(payload), path)
        return path


def find_path_by_name(
    records: Sequence[RegisteredEnvironment], name: str
) -> Path | None:
    """Return the stored path of the first record named *name*.

    Matching is exact and case-sensitive.  Returns ``None`` when no
    record matches.  The stored string is wrapped in a ``Path`` without
    resolving it, so only pathlib's lexical normalization applies
    (trailing slashes and ``./`` segments are dropped).
    """
    for record in records:
        if record.name == name:
            return Path(record.path)
    return None
