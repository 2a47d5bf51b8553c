"""Central logging setup for the project."""
from __future__ import annotations
import logging
import sys
from typing import TextIO

# These loggers print full request URLs, which carry the API key.
_QUIET_LOGGERS = ("httpx", "httpcore")

def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Configure root logger so every diagnostic lands on stderr.

    Args:
        level: Logging level.
        stream: Target stream; defaults to ``sys.stderr``.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
