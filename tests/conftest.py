"""Shared test fixtures for pixi-activate."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from pixi_activate.activation import Activator
from pixi_activate.models import RegisteredEnvironment
from pixi_activate.registry import RegistryStore

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from pixi_activate.models import ActivationRequest


class FakeActivator(Activator):
    """Records activation requests instead of spawning a shell."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.requests: list[ActivationRequest] = []

    def activate(self, request: ActivationRequest) -> int:
        self.requests.append(request)
        return self.exit_code


class InMemoryRegistryStore(RegistryStore):
    """Registry that never touches the filesystem and counts loads."""

    def __init__(self, records: list[RegisteredEnvironment] | None = None) -> None:
        self.records = list(records or [])
        self.load_calls = 0

    def ensure_directory(self) -> Path:
        raise AssertionError("in-memory registry has no directory")

    def load(self) -> list[RegisteredEnvironment]:
        self.load_calls += 1
        return list(self.records)


@pytest.fixture
def fake_activator() -> FakeActivator:
    return FakeActivator()


@pytest.fixture
def memory_registry() -> Callable[..., InMemoryRegistryStore]:
    """Return a factory for in-memory registries."""

    def _make(*pairs: tuple[str, str]) -> InMemoryRegistryStore:
        return InMemoryRegistryStore(
            [RegisteredEnvironment(name=name, path=path) for name, path in pairs]
        )

    return _make


@pytest.fixture
def registry_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``PIXI_HOME`` at tmp_path and return the registry directory."""
    pixi_home = tmp_path / "pixi-home"
    monkeypatch.setenv("PIXI_HOME", str(pixi_home))
    return pixi_home / "register"


@pytest.fixture
def write_registry(registry_dir: Path) -> Callable[[object], Path]:
    """Return a helper writing JSON (or raw text) to the registry file."""

    def _write(content: object) -> Path:
        registry_dir.mkdir(parents=True, exist_ok=True)
        path = registry_dir / "environments.json"
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def pixi_workspace(tmp_path: Path) -> Path:
    """Create a minimal pixi.toml workspace and return its directory."""
    content = """\
[workspace]
name = "activate-test"
channels = ["conda-forge"]
platforms = ["linux-64", "osx-arm64", "win-64"]

[dependencies]
python = ">=3.10"

[feature.test.dependencies]
pytest = ">=8.0"

[environments]
default = {solve-group = "default"}
test = {features = ["test"], solve-group = "default"}
"""
    root = tmp_path / "project"
    root.mkdir()
    (root / "pixi.toml").write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def install_env() -> Callable[[Path, str], Path]:
    """Return a helper making ``<root>/.pixi/envs/<name>`` look installed."""

    def _install(root: Path, env_name: str) -> Path:
        prefix = root / ".pixi" / "envs" / env_name
        meta = prefix / "conda-meta"
        meta.mkdir(parents=True)
        (meta / "history").write_text("", encoding="utf-8")
        return prefix

    return _install
