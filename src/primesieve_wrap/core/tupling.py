"""Tuple classification: the closed set of prime constellations.

A *k*-tuple is a fixed, close-spaced pattern of *k* primes (twin primes
are ``(p, p + 2)``).  :class:`TupleKind` selects which pattern a count or
print query targets.  The engine supports exactly six kinds, so the
enumeration is closed: integers parse into it only when they fall in
``1..6``.
"""

from __future__ import annotations

import operator
from enum import IntEnum


class TupleKind(IntEnum):
    """Supported prime constellation sizes, ordered by *k*."""

    SINGLE = 1
    TWIN = 2
    TRIPLET = 3
    QUADRUPLET = 4
    QUINTUPLET = 5
    SEXTUPLET = 6

    @classmethod
    def default(cls) -> TupleKind:
        """Return the kind used when a query does not choose one."""
        return cls.SINGLE

    @classmethod
    def parse(cls, value: object) -> TupleKind | None:
        """Return the kind numbered *value*, or ``None``.

        Accepts existing :class:`TupleKind` members and plain integers.
        ``bool`` and non-integral values never parse.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        try:
            number = operator.index(value)  # type: ignore[arg-type]
        except TypeError:
            return None
        if cls.SINGLE <= number <= cls.SEXTUPLET:
            return cls(number)
        return None

    def encode(self) -> int:
        """Return the plain integer for this kind (``1`` through ``6``)."""
        return int(self.value)
