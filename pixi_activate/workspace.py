"""Pixi manifest detection and the minimal reading activation needs.

Search order when given a directory
-----------------------------------
1. ``pixi.toml``      – pixi-native workspace format
2. ``pyproject.toml`` – only when it carries ``[tool.pixi]`` tables

Only environment names are extracted.  The ``default`` environment
always exists, whether or not the manifest declares it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import tomlkit

from .exceptions import WorkspaceNotFoundError, WorkspaceParseError
from .models import WorkspaceConfig

if TYPE_CHECKING:
    from typing import Any

# File names to look for, in priority order
_SEARCH_FILES: list[str] = [
    "pixi.toml",
    "pyproject.toml",
]


def _load_toml(path: Path) -> Any:
    try:
        return tomlkit.loads(path.read_text(encoding="utf-8"))
    except Exception as exc:
        raise WorkspaceParseError(path, str(exc)) from exc


def _pixi_tables(path: Path, data: Any) -> Any | None:
    """Return the table holding pixi configuration, or ``None``."""
    if path.name == "pyproject.toml":
        return data.get("tool", {}).get("pixi")
    if "workspace" in data or "project" in data:
        return data
    return None


def has_workspace(path: Path) -> bool:
    """Return True if *path* is a manifest with pixi configuration."""
    if not path.is_file() or path.name not in _SEARCH_FILES:
        return False
    try:
        data = _load_toml(path)
    except WorkspaceParseError:
        return False
    return bool(_pixi_tables(path, data))


def detect_manifest(manifest_path: str | Path) -> Path:
    """Return the manifest file for *manifest_path*.

    *manifest_path* may point at a manifest file or a project directory.
    Raises ``WorkspaceNotFoundError`` if no pixi manifest is there.
    """
    path = Path(manifest_path)
    if path.is_dir():
        for fname in _SEARCH_FILES:
            candidate = path / fname
            if has_workspace(candidate):
                return candidate
        raise WorkspaceNotFoundError(path)
    if path.is_file():
        return path
    raise WorkspaceNotFoundError(path)


def load_workspace(manifest_path: str | Path) -> WorkspaceConfig:
    """Detect the manifest at *manifest_path* and read its environments."""
    path = detect_manifest(manifest_path)
    data = _load_toml(path)

    tables = _pixi_tables(path, data)
    if not tables:
        raise WorkspaceParseError(path, "No pixi workspace configuration found")

    # workspace table (pixi v0.23+) or legacy project table
    ws = tables.get("workspace", tables.get("project", {}))
    environments = [WorkspaceConfig.DEFAULT_ENVIRONMENT]
    for env_name in tables.get("environments", {}):
        if env_name not in environments:
            environments.append(str(env_name))

    name = ws.get("name")
    if name is None and path.name == "pyproject.toml":
        name = data.get("project", {}).get("name")

    return WorkspaceConfig(
        name=str(name) if name is not None else None,
        root=str(path.parent),
        manifest_path=str(path),
        environments=environments,
    )
