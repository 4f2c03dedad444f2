"""Process-wide logging setup for the CLI entry point.

Modules never configure logging themselves; they call
``logging.getLogger(__name__)`` and the entry point calls
``configure_logging`` once.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def parse_level(name: str) -> int:
    """Map a level name to a logging constant. Raises ValueError on unknown names."""
    try:
        return _LEVELS[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {name!r}") from None


def configure_logging(level: int, debug: bool = False) -> None:
    """Send all records at `level` and above to stderr.

    Re-running replaces the previous handler, so tests can call it repeatedly.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG if debug else LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_pe_handler", False):
            root.removeHandler(existing)
    handler._pe_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
