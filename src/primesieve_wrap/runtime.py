"""Process-scoped default engine.

Queries and iterators built without an explicit ``engine=`` resolve it
here.  The default is the ctypes binding to libprimesieve, loaded lazily
on first use with the configuration from :mod:`primesieve_wrap.settings`
applied exactly once.

:func:`use_engine` installs a different engine (tests, embedding in a
host that already loaded the library); :func:`reset_engine` forgets the
current one.  Swapping engines while queries are in flight is outside
the contract.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from primesieve_wrap.core.protocols import SieveEngine

logger = logging.getLogger(__name__)

_engine: SieveEngine | None = None
_lock = threading.Lock()


def _load_default_engine() -> SieveEngine:
    from primesieve_wrap.core.engine_config import apply_settings
    from primesieve_wrap.infra.libprimesieve import CtypesSieveEngine
    from primesieve_wrap.settings import get_settings

    settings = get_settings()
    engine = CtypesSieveEngine.load(settings.library_path)
    apply_settings(settings, engine)
    logger.info("Using libprimesieve %s", engine.version())
    return engine


def get_engine() -> SieveEngine:
    """Return the process default engine, loading it on first use.

    Raises
    ------
    LibraryNotFoundError
        If libprimesieve cannot be located or opened.
    ConfigurationError
        If the settings are invalid or rejected by the engine.
    """
    global _engine
    with _lock:
        if _engine is None:
            _engine = _load_default_engine()
        return _engine


def use_engine(engine: SieveEngine) -> None:
    """Install *engine* as the process default."""
    global _engine
    with _lock:
        _engine = engine
    logger.debug("Default engine replaced by %r", engine)


def reset_engine() -> None:
    """Drop the current default; the next :func:`get_engine` reloads it."""
    global _engine
    with _lock:
        _engine = None


def resolve_engine(engine: SieveEngine | None) -> SieveEngine:
    """Return *engine* itself, or the process default when it is ``None``."""
    if engine is not None:
        return engine
    return get_engine()
