"""Query builders: count, nth-prime and print.

Each builder is a **frozen** dataclass: ``with_*`` setters validate or
clamp their argument and return an updated copy, leaving the original
untouched.  A terminal method dispatches exactly one engine call.

Usage::

    Count.new().with_tupling(TupleKind.TWIN).with_stop(100).run()   # 8
    Nth.new().after(10).with_start(100).run()                        # 149
    Print.new().with_stop(30).execute()

Builders hold the engine they dispatch to (excluded from equality and
``repr``); ``new()`` without an engine uses the process default from
:mod:`primesieve_wrap.runtime`.
"""

from __future__ import annotations

import dataclasses
import operator
from dataclasses import dataclass, field
from typing import Final, SupportsIndex

from primesieve_wrap import runtime
from primesieve_wrap.core.bounds import ceiling, clamp, decode
from primesieve_wrap.core.protocols import SieveEngine
from primesieve_wrap.core.tupling import TupleKind
from primesieve_wrap.exceptions import InvalidTuplingError

_MAX_NTH_MAGNITUDE: Final[int] = 2**63 - 1

_COUNT_PRIMITIVES: Final[dict[TupleKind, str]] = {
    TupleKind.SINGLE: "count_primes",
    TupleKind.TWIN: "count_twins",
    TupleKind.TRIPLET: "count_triplets",
    TupleKind.QUADRUPLET: "count_quadruplets",
    TupleKind.QUINTUPLET: "count_quintuplets",
    TupleKind.SEXTUPLET: "count_sextuplets",
}

_PRINT_PRIMITIVES: Final[dict[TupleKind, str]] = {
    TupleKind.SINGLE: "print_primes",
    TupleKind.TWIN: "print_twins",
    TupleKind.TRIPLET: "print_triplets",
    TupleKind.QUADRUPLET: "print_quadruplets",
    TupleKind.QUINTUPLET: "print_quintuplets",
    TupleKind.SEXTUPLET: "print_sextuplets",
}


# ---------------------------------------------------------------------------
# Count
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Count:
    """Count primes or prime *k*-tuples whose members lie in ``[start, stop]``."""

    tupling: TupleKind
    start: int
    stop: int
    engine: SieveEngine = field(compare=False, repr=False)

    @classmethod
    def new(cls, engine: SieveEngine | None = None) -> Count:
        """Count single primes over the whole engine domain."""
        resolved = runtime.resolve_engine(engine)
        return cls(
            tupling=TupleKind.default(),
            start=0,
            stop=ceiling(resolved),
            engine=resolved,
        )

    def with_tupling(self, tupling: TupleKind | int) -> Count:
        """Select the constellation to count.

        Raises
        ------
        InvalidTuplingError
            If *tupling* is not a valid kind number (``1..6``).
        """
        kind = TupleKind.parse(tupling)
        if kind is None:
            raise InvalidTuplingError(
                f"Invalid tupling: {tupling!r}",
                hint="Use 1 (primes) through 6 (sextuplets).",
            )
        return dataclasses.replace(self, tupling=kind)

    def with_start(self, start: SupportsIndex) -> Count:
        return dataclasses.replace(self, start=clamp(start, self.engine))

    def with_stop(self, stop: SupportsIndex) -> Count:
        return dataclasses.replace(self, stop=clamp(stop, self.engine))

    def run(self) -> int | None:
        """Return the count, or ``None`` when the engine reports an error."""
        primitive = getattr(self.engine, _COUNT_PRIMITIVES[self.tupling])
        return decode(primitive(self.start, self.stop))


# ---------------------------------------------------------------------------
# Nth
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Nth:
    """Find the *n*-th prime after or before ``start``.

    ``n`` is the signed index handed to the engine: positive searches
    upwards from ``start``, negative searches downwards.  Zero (the
    default) finds the first prime ``>= start``.
    """

    n: int
    start: int
    engine: SieveEngine = field(compare=False, repr=False)

    @classmethod
    def new(cls, engine: SieveEngine | None = None) -> Nth:
        return cls(n=0, start=0, engine=runtime.resolve_engine(engine))

    @staticmethod
    def _magnitude(n: SupportsIndex) -> int | None:
        """Return *n* as a signed-64-bit-representable magnitude, or ``None``."""
        number = operator.index(n)
        if not 0 <= number <= _MAX_NTH_MAGNITUDE:
            return None
        return number

    def after(self, n: SupportsIndex) -> Nth | None:
        """Target the *n*-th prime above ``start``.

        Returns ``None`` (invalid count requested) for negative *n* or
        one too large for the engine's signed index.
        """
        magnitude = self._magnitude(n)
        if magnitude is None:
            return None
        return dataclasses.replace(self, n=magnitude)

    def before(self, n: SupportsIndex) -> Nth | None:
        """Target the *n*-th prime below ``start``.

        *n* must be at least 1: a zero index would search upwards.
        Returns ``None`` otherwise.
        """
        magnitude = self._magnitude(n)
        if magnitude is None or magnitude == 0:
            return None
        return dataclasses.replace(self, n=-magnitude)

    def with_start(self, start: SupportsIndex) -> Nth:
        return dataclasses.replace(self, start=clamp(start, self.engine))

    def run(self) -> int | None:
        """Return the prime, or ``None`` when no such prime is in the domain."""
        return decode(self.engine.nth_prime(self.n, self.start))


# ---------------------------------------------------------------------------
# Print
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Print:
    """Print primes or prime *k*-tuples in ``[start, stop]`` to stdout.

    The engine writes straight to the process's standard output; nothing
    is returned and write failures are not observable here.
    """

    tupling: TupleKind
    start: int
    stop: int
    engine: SieveEngine = field(compare=False, repr=False)

    @classmethod
    def new(cls, engine: SieveEngine | None = None) -> Print:
        resolved = runtime.resolve_engine(engine)
        return cls(
            tupling=TupleKind.default(),
            start=0,
            stop=ceiling(resolved),
            engine=resolved,
        )

    def with_tupling(self, tupling: TupleKind | int) -> Print | None:
        """Select the constellation to print; ``None`` if *tupling* is invalid."""
        kind = TupleKind.parse(tupling)
        if kind is None:
            return None
        return dataclasses.replace(self, tupling=kind)

    def with_start(self, start: SupportsIndex) -> Print:
        return dataclasses.replace(self, start=clamp(start, self.engine))

    def with_stop(self, stop: SupportsIndex) -> Print:
        return dataclasses.replace(self, stop=clamp(stop, self.engine))

    def execute(self) -> None:
        getattr(self.engine, _PRINT_PRIMITIVES[self.tupling])(self.start, self.stop)
