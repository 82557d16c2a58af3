import os
import shlex
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

WATCH_PROGRAM = "cargo"
WATCH_SUBCOMMAND = "watch"

# Scratch output written by the integration tests; changes there must not retrigger a run
IGNORE_GLOB = "tests/tmp/*"

# Run in order on every change
CHECK_STEPS: Tuple[str, ...] = (
    "check --tests",
    "check --lib",
    "fmt -- --write-mode=diff",
)

DIAGNOSTIC_ENV: Dict[str, str] = {"RUST_BACKTRACE": "1"}


@dataclass(frozen=True)
class Invocation:
    """A single external command: program, ordered args and env overrides."""

    program: str
    args: Tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> Tuple[str, ...]:
        return (self.program,) + tuple(self.args)

    def child_env(self, base: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Return a copy of ``base`` (default: os.environ) with our overrides applied."""
        merged = dict(os.environ if base is None else base)
        merged.update(self.env)
        return merged

    def describe(self) -> str:
        return " ".join(shlex.quote(part) for part in self.argv)


def build_invocation() -> Invocation:
    """Assemble the `cargo watch` call for the check-and-format loop."""
    args = [WATCH_SUBCOMMAND, "--ignore", IGNORE_GLOB, "--clear"]
    for step in CHECK_STEPS:
        args += ["-x", step]
    return Invocation(WATCH_PROGRAM, tuple(args), dict(DIAGNOSTIC_ENV))
