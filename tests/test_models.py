"""Tests for pixi_activate.models."""

from __future__ import annotations

from pathlib import Path

import pytest

from pixi_activate.exceptions import MalformedRegistryError
from pixi_activate.models import (
    ActivationRequest,
    RegisteredEnvironment,
    WorkspaceConfig,
)


def test_registered_environment_from_dict() -> None:
    record = RegisteredEnvironment.from_dict({"name": "web", "path": "/srv/web"})
    assert record == RegisteredEnvironment(name="web", path="/srv/web")


def test_registered_environment_ignores_extra_keys() -> None:
    record = RegisteredEnvironment.from_dict(
        {"name": "web", "path": "../web", "registered": "2024-01-01"}
    )
    assert record.path == "../web"


@pytest.mark.parametrize(
    "data, fragment",
    [
        (["web", "/srv/web"], "expected an object"),
        ({"path": "/srv/web"}, "missing 'name'"),
        ({"name": "web"}, "missing 'path'"),
        ({"name": "web", "path": 42}, "'path' must be a string"),
        ({"name": None, "path": "/srv/web"}, "'name' must be a string"),
    ],
    ids=["not-object", "no-name", "no-path", "int-path", "null-name"],
)
def test_registered_environment_invalid(data: object, fragment: str) -> None:
    with pytest.raises(MalformedRegistryError, match=fragment):
        RegisteredEnvironment.from_dict(data, "environments.json")


def test_registered_environment_to_dict() -> None:
    record = RegisteredEnvironment(name="web", path="/srv/web")
    assert record.to_dict() == {"name": "web", "path": "/srv/web"}


@pytest.mark.parametrize(
    "environment, expected",
    [(None, "default"), ("", "default"), ("test", "test")],
    ids=["none", "empty", "named"],
)
def test_activation_request_environment_name(
    environment: str | None, expected: str
) -> None:
    request = ActivationRequest(manifest_path=Path("/srv/web"), environment=environment)
    assert request.environment_name == expected


def test_workspace_config_env_prefix() -> None:
    config = WorkspaceConfig(root="/srv/web", environments=["default", "test"])
    assert config.envs_dir == Path("/srv/web/.pixi/envs")
    assert config.env_prefix("test") == Path("/srv/web/.pixi/envs/test")


def test_workspace_config_defaults() -> None:
    assert WorkspaceConfig().environments == ["default"]
