"""Bounds normalization and sentinel decoding.

Every start/stop value handed to the engine passes through :func:`clamp`
first, so it always lies in ``[0, ceiling]``.  The ceiling is asked of
the engine on each call: process-wide engine configuration may change it
between queries.

The engine reports failure of a numeric query with one reserved value,
:data:`PRIMESIEVE_ERROR`.  :func:`decode` matches that exact constant:
legitimate counts may be arbitrarily large, so "suspiciously big" is not
an error signal.
"""

from __future__ import annotations

import operator
from typing import Final, SupportsIndex

from primesieve_wrap.core.protocols import SieveEngine

PRIMESIEVE_ERROR: Final[int] = 2**64 - 1
"""libprimesieve's ``PRIMESIEVE_ERROR`` (``~0ULL``)."""


def ceiling(engine: SieveEngine) -> int:
    """Return the engine's current maximum supported bound."""
    return int(engine.max_stop())


def clamp(value: SupportsIndex, engine: SieveEngine) -> int:
    """Clamp *value* into ``[0, ceiling(engine)]``.

    Raises
    ------
    TypeError
        If *value* is not an integer.
    """
    number = operator.index(value)
    return min(max(number, 0), ceiling(engine))


def decode(raw: int) -> int | None:
    """Map the engine's error sentinel to ``None``; pass anything else through."""
    if raw == PRIMESIEVE_ERROR:
        return None
    return int(raw)
