"""Process-wide engine configuration.

The engine keeps its sieve size and worker count in global state shared
by every query in the process.  These helpers validate values before
forwarding them; an invalid value is reported as ``False`` and the
engine is left untouched.

Convention: configure once at startup, read thereafter.  Changing these
while queries run on other threads only affects resource usage, never
the results already being computed, and is outside the contract.
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Final, SupportsIndex

from primesieve_wrap import runtime
from primesieve_wrap.core.bounds import ceiling
from primesieve_wrap.core.protocols import SieveEngine
from primesieve_wrap.exceptions import ConfigurationError

if TYPE_CHECKING:
    from primesieve_wrap.settings import PrimesieveSettings

logger = logging.getLogger(__name__)

MIN_SIEVE_SIZE: Final[int] = 1
MAX_SIEVE_SIZE: Final[int] = 2048
MAX_NUM_THREADS: Final[int] = 2**31 - 1

_AUTO_THREADS: Final[int] = -1


def max_stop(engine: SieveEngine | None = None) -> int:
    """Return the engine's current maximum supported bound."""
    return ceiling(runtime.resolve_engine(engine))


# ---------------------------------------------------------------------------
# Sieve size
# ---------------------------------------------------------------------------

def set_sieve_size(sieve_size: SupportsIndex, engine: SieveEngine | None = None) -> bool:
    """Set the sieve array size in KiB (``1..2048``).

    Returns ``False`` without touching the engine when *sieve_size* is
    out of range.
    """
    size = operator.index(sieve_size)
    if not MIN_SIEVE_SIZE <= size <= MAX_SIEVE_SIZE:
        logger.warning("Rejected sieve size %d (allowed %d..%d)", size, MIN_SIEVE_SIZE, MAX_SIEVE_SIZE)
        return False
    runtime.resolve_engine(engine).set_sieve_size(size)
    return True


def get_sieve_size(engine: SieveEngine | None = None) -> int:
    return int(runtime.resolve_engine(engine).get_sieve_size())


# ---------------------------------------------------------------------------
# Worker threads
# ---------------------------------------------------------------------------

def set_num_threads(
    num_threads: SupportsIndex | None,
    engine: SieveEngine | None = None,
) -> bool:
    """Set the number of worker threads.

    ``None`` restores the engine default (all CPUs).  Otherwise the value
    must be positive and fit a C ``int``; anything else returns ``False``.
    """
    if num_threads is None:
        runtime.resolve_engine(engine).set_num_threads(_AUTO_THREADS)
        return True
    count = operator.index(num_threads)
    if not 1 <= count <= MAX_NUM_THREADS:
        logger.warning("Rejected thread count %d", count)
        return False
    runtime.resolve_engine(engine).set_num_threads(count)
    return True


def get_num_threads(engine: SieveEngine | None = None) -> int:
    return int(runtime.resolve_engine(engine).get_num_threads())


# ---------------------------------------------------------------------------
# Startup
# ---------------------------------------------------------------------------

def apply_settings(settings: PrimesieveSettings, engine: SieveEngine) -> None:
    """Push configured sieve size and thread count into *engine*.

    Unset fields leave the engine defaults alone.

    Raises
    ------
    ConfigurationError
        If the engine-side validation rejects a configured value.
    """
    if settings.sieve_size is not None and not set_sieve_size(settings.sieve_size, engine):
        raise ConfigurationError(
            f"Invalid sieve size: {settings.sieve_size}",
            hint=f"PRIMESIEVE_WRAP_SIEVE_SIZE must be in {MIN_SIEVE_SIZE}..{MAX_SIEVE_SIZE}.",
        )
    if settings.num_threads is not None and not set_num_threads(settings.num_threads, engine):
        raise ConfigurationError(
            f"Invalid thread count: {settings.num_threads}",
            hint="PRIMESIEVE_WRAP_NUM_THREADS must be a positive integer.",
        )
    logger.debug(
        "Engine configured: sieve_size=%s num_threads=%s",
        settings.sieve_size,
        settings.num_threads,
    )
