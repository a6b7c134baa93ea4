"""Standalone CLI entry point for ``pixi-activate``.

This module allows running pixi-activate without going through the
conda plugin dispatch::

    pixi-activate --name web
    pixi-activate --manifest-path . -e test

It reuses the same parser and execute logic as ``conda pixi-activate``
and is the one place where errors are turned into exit codes.
"""

from __future__ import annotations

import sys

from conda.exceptions import CondaError


def main(args: list[str] | None = None) -> None:
    """Entry point for the ``pixi-activate`` console script."""
    from .cli.main import execute, generate_parser

    parser = generate_parser()

    parsed = parser.parse_args(args)
    try:
        exit_code = execute(parsed)
    except CondaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        exit_code = 1
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
