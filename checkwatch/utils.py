import os
import logging
from typing import Mapping, Optional

LOGLEVEL_ENV = "CHECKWATCH_LOGLEVEL"
DEFAULT_LOGLEVEL = logging.INFO


def resolve_loglevel(environ: Optional[Mapping[str, str]] = None) -> int:
    """Read the log level name from CHECKWATCH_LOGLEVEL; unknown names mean INFO."""
    environ = os.environ if environ is None else environ
    name = (environ.get(LOGLEVEL_ENV) or "").strip().upper()
    level = logging.getLevelName(name) if name else DEFAULT_LOGLEVEL
    return level if isinstance(level, int) else DEFAULT_LOGLEVEL


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> None:
    logging.basicConfig(
        level=resolve_loglevel(environ),
        format="%(asctime)s %(levelname)s %(message)s",
    )
