"""CLI for ``pixi-activate`` -- argparse configuration and dispatch."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from conda.cli.helpers import add_parser_help

from .. import __version__
from ..activation import activate
from ..exceptions import NotFoundError, PathError, UsageError
from ..registry import FileRegistryStore, find_path_by_name

if TYPE_CHECKING:
    from ..activation import Activator
    from ..registry import RegistryStore

log = logging.getLogger(__name__)


def generate_parser() -> argparse.ArgumentParser:
    """Build and return the standalone ``pixi-activate`` parser."""
    parser = argparse.ArgumentParser(
        prog="pixi-activate",
        description="Activate a pixi-registered environment.",
        add_help=False,
    )
    configure_parser(parser)
    return parser


def configure_parser(parser: argparse.ArgumentParser) -> None:
    """Set up the ``pixi-activate`` arguments."""
    add_parser_help(parser)

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-n",
        "--name",
        default=None,
        help="Name of the registered environment to activate.",
    )
    parser.add_argument(
        "--manifest-path",
        default=None,
        help="The path to `pixi.toml`, `pyproject.toml`, or the project directory.",
    )
    parser.add_argument(
        "-e",
        "--environment",
        default=None,
        help="The environment to activate in the shell (default: default).",
    )


def resolve_manifest_path(
    args: argparse.Namespace, registry: RegistryStore | None = None
) -> Path:
    """Turn ``--name`` or ``--manifest-path`` into the manifest to activate.

    Exactly one of the two must be given; this is checked before the
    registry is read or any path is touched.  Registered paths are used
    exactly as stored, explicit paths are made absolute with symlinks
    resolved.
    """
    name = getattr(args, "name", None)
    manifest_path = getattr(args, "manifest_path", None)

    if (name is None) == (manifest_path is None):
        raise UsageError("Must provide exactly one of `--name` or `--manifest-path`.")

    if name is not None:
        if registry is None:
            registry = FileRegistryStore()
        path = find_path_by_name(registry.load(), name)
        if path is None:
            raise NotFoundError(name)
        log.debug("Resolved registered environment %r to %s", name, path)
        return path

    if manifest_path == "":
        raise PathError(manifest_path, "empty path")
    try:
        path = Path(manifest_path).resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        # RuntimeError: symlink loops before Python 3.13
        raise PathError(manifest_path, str(exc)) from exc
    log.debug("Resolved manifest path %s to %s", manifest_path, path)
    return path


def execute(
    args: argparse.Namespace,
    *,
    registry: RegistryStore | None = None,
    activator: Activator | None = None,
) -> int:
    """Main entry point, also dispatched by the conda plugin system."""
    manifest_path = resolve_manifest_path(args, registry)
    return activate(
        manifest_path,
        getattr(args, "environment", None),
        activator=activator,
    )
