"""Logging utilities.

Configures the root logger once per process; modules log through
``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Stream logs to stderr at ``level`` (a name such as "DEBUG" or "INFO").

    Unknown level names fall back to INFO. ``basicConfig`` is a no-op when the
    root logger already has handlers, so repeated app creation is harmless.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("compounder").setLevel(resolved)
