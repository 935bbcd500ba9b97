"""Logging setup for applications embedding primesieve-wrap.

The library itself only creates module loggers
(``logging.getLogger(__name__)``) and never installs handlers.  The CLI
calls :func:`configure_logging` once at startup.

Rich is imported lazily so that a missing optional UI dependency falls
back to a plain stderr handler instead of failing.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER: str = "primesieve_wrap"
_PLAIN_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    """Return a RichHandler on stderr, or a plain StreamHandler without Rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach one handler to the package logger and set its level.

    Calling this again replaces the previously installed handler rather
    than stacking a second one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, "_primesieve_wrap", False):
            logger.removeHandler(existing)
    handler = _build_handler()
    handler._primesieve_wrap = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
