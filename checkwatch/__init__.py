"""Checkwatch package: drive `cargo watch` through the check-and-format loop.

Exports:
- app, main: Typer CLI entrypoints (from checkwatch.cli)
- Invocation, build_invocation: the assembled cargo-watch command (from checkwatch.invocation)
- run: spawn the command and wait for it (from checkwatch.runner)
"""

from .cli import app, main  # noqa: F401
from .invocation import Invocation, build_invocation  # noqa: F401
from .runner import run  # noqa: F401

__all__ = [
    "app",
    "main",
    "Invocation",
    "build_invocation",
    "run",
]
