"""Bidirectional prime iterator over an engine cursor.

The engine's cursor lives in storage that the engine keeps pointers
into, so the storage is allocated once per :class:`PrimeIterator` and
never copied or moved.  Callers only ever see the iterator object.

Lifecycle
---------
``Ready`` → ``Released`` (terminal).  Construction allocates and
initializes the cursor in one step, so there is no observable
uninitialized state.  The engine release runs exactly once: on
:meth:`PrimeIterator.close`, on leaving a ``with`` block, or when an
unclosed iterator is garbage collected.  Any use after release, including
a second :meth:`~PrimeIterator.close`, raises
:class:`~primesieve_wrap.exceptions.IteratorReleasedError`.

The iterator is single-owner: there is no locking, and it cannot be
copied or pickled.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Iterator
from typing import Any, SupportsIndex

from primesieve_wrap import runtime
from primesieve_wrap.core.bounds import ceiling, clamp, decode
from primesieve_wrap.core.protocols import SieveEngine
from primesieve_wrap.exceptions import IteratorReleasedError

logger = logging.getLogger(__name__)


def _release(engine: SieveEngine, storage: Any) -> None:
    engine.free_iterator(storage)
    logger.debug("Released prime iterator storage at %#x", id(storage))


class PrimeIterator(Iterator[int]):
    """Iterate over primes upwards (and downwards) from *start*.

    Parameters
    ----------
    start:
        First value considered; clamped into the engine domain.
    stop_hint:
        Expected largest prime needed.  Only a sizing hint for the
        engine; iteration may continue past it.  Defaults to the
        engine ceiling.
    engine:
        Engine to use; the process default when omitted.

    Usage::

        with PrimeIterator() as it:
            first = [next(it) for _ in range(4)]   # [2, 3, 5, 7]
    """

    __slots__ = ("_engine", "_storage", "_finalizer", "__weakref__")

    def __init__(
        self,
        start: SupportsIndex = 0,
        stop_hint: SupportsIndex | None = None,
        *,
        engine: SieveEngine | None = None,
    ) -> None:
        resolved = runtime.resolve_engine(engine)
        storage = resolved.new_iterator()
        resolved.init_iterator(storage)
        self._engine: SieveEngine = resolved
        self._storage: Any = storage
        self._finalizer = weakref.finalize(self, _release, resolved, storage)
        logger.debug("Initialized prime iterator storage at %#x", id(storage))
        self.skipto(start, stop_hint)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def _cursor(self) -> Any:
        if not self._finalizer.alive:
            raise IteratorReleasedError("Prime iterator has already been released.")
        return self._storage

    def close(self) -> None:
        """Release the engine cursor.

        Raises
        ------
        IteratorReleasedError
            If the iterator was already released.
        """
        self._cursor()
        self._finalizer()

    def __enter__(self) -> PrimeIterator:
        self._cursor()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._finalizer.alive:
            self._finalizer()

    def __copy__(self) -> PrimeIterator:
        raise TypeError("PrimeIterator owns an engine cursor and cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> PrimeIterator:
        raise TypeError("PrimeIterator owns an engine cursor and cannot be copied")

    def __reduce__(self) -> Any:
        raise TypeError("PrimeIterator owns an engine cursor and cannot be pickled")

    def __repr__(self) -> str:
        state = "released" if self.closed else "ready"
        return f"<PrimeIterator {state}>"

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def skipto(self, start: SupportsIndex, stop_hint: SupportsIndex | None = None) -> None:
        """Re-seek the cursor to *start* without reallocating it.

        The next :meth:`next_prime` returns the first prime ``>= start``
        and the next :meth:`prev_prime` the last prime ``<= start``.
        """
        cursor = self._cursor()
        low = clamp(start, self._engine)
        high = ceiling(self._engine) if stop_hint is None else clamp(stop_hint, self._engine)
        self._engine.skipto(cursor, low, high)

    def next_prime(self) -> int | None:
        """Advance and return the next prime; ``None`` past the engine domain."""
        return decode(self._engine.next_prime(self._cursor()))

    def prev_prime(self) -> int | None:
        """Step back and return the previous prime; ``None`` below 2."""
        prime = decode(self._engine.prev_prime(self._cursor()))
        if not prime:
            return None
        return prime

    def __iter__(self) -> PrimeIterator:
        return self

    def __next__(self) -> int:
        prime = self.next_prime()
        if prime is None:
            raise StopIteration
        return prime
