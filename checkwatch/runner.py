import logging
import subprocess
from typing import Callable, Optional

from .invocation import Invocation

# Shell conventions, so callers see the same codes the plain script produced
COMMAND_NOT_FOUND = 127
SIGNAL_BASE = 128


def exit_code_for(returncode: int) -> int:
    """Map a Popen return code to a shell-style exit status (signal N -> 128+N)."""
    if returncode < 0:
        return SIGNAL_BASE - returncode
    return returncode


def run(
    invocation: Invocation,
    popen: Optional[Callable[..., subprocess.Popen]] = None,
    base_env: Optional[dict] = None,
) -> int:
    """Spawn ``invocation`` once and block until it exits.

    stdio is inherited so the child's diagnostics stream straight to the terminal.
    Child failures are not inspected or retried; the exit code is passed through.
    """
    popen = popen or subprocess.Popen
    logging.info(f"Starting: {invocation.describe()}")
    for key, value in invocation.env.items():
        logging.debug(f"Child env: {key}={value}")

    try:
        proc = popen(list(invocation.argv), env=invocation.child_env(base_env))
    except FileNotFoundError:
        logging.error(f"Command not found: {invocation.program}")
        return COMMAND_NOT_FOUND

    try:
        returncode = proc.wait()
    except KeyboardInterrupt:
        # The child shares our process group and got the same SIGINT
        logging.info("Stopping watch...")
        returncode = proc.wait()

    return exit_code_for(returncode)
