"""pixi-activate: Activate pixi workspaces by registered name or path."""

from __future__ import annotations

try:
    from ._version import __version__
except ImportError:  # pragma: no cover
    __version__ = "0.0.0.dev0"
