"""Logging setup for Sitemapper.

Every module logs through a child of the ``Sitemapper`` logger::

    from sitemapper.logger import get_logger
    log = get_logger("crawler")        # -> "Sitemapper.crawler"

Only the parent carries handlers: stderr always (stdout is reserved for the
rendered sitemap) and a rotating logfile on request. :func:`configure` may be
called again at any time, e.g. by the CLI once ``--log-level`` is known.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

LOGGER_NAME: Final[str] = "Sitemapper"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LevelT = Union[int, str]


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """Return the project logger, or its child named *component*."""
    root = logging.getLogger(LOGGER_NAME)
    return root.getChild(component) if component else root


def configure(
    *,
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the handlers of the project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Optional logfile, rotated at 5 MiB with three backups.
    log_format
        Format string for :class:`logging.Formatter`.
    """
    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )

    root = get_logger()
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return root


# used by the CLI; kept as a separate name for call sites that pass positionals
init_logging = configure

logger: logging.Logger = configure()

__all__ = ["logger", "get_logger", "configure", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
