"""Logging setup shared by the API process and the maintenance scripts."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the ``memberhub`` logger tree."""
    root = logging.getLogger("memberhub")
    root.setLevel(level.upper())
    if not any(getattr(h, "_memberhub", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._memberhub = True  # type: ignore[attr-defined]
        root.addHandler(handler)
