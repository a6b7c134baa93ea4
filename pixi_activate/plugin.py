"""Conda plugin registration for pixi-activate.

This module is imported on *every* conda invocation via the entry point
system.  Only ``hookimpl`` and type imports are used at module level;
everything else is lazily imported inside the hooks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conda.plugins import hookimpl
from conda.plugins.types import CondaSubcommand

if TYPE_CHECKING:
    from collections.abc import Iterable


@hookimpl
def conda_subcommands() -> Iterable[CondaSubcommand]:
    from .cli import configure_parser, execute

    yield CondaSubcommand(
        name="pixi-activate",
        summary="Activate a pixi-registered environment.",
        action=execute,  # ty: ignore[invalid-argument-type]
        configure_parser=configure_parser,
    )
