"""Protocols (interfaces) consumed by the core layer.

:class:`SieveEngine` is the primitive surface of the external sieve
engine.  Core code depends ONLY on this protocol, never on the ctypes
binding in ``infra``.

Every method is a synchronous, blocking call.  Results are raw: counts
and positions come back as unsigned 64-bit integers in which
:data:`~primesieve_wrap.core.bounds.PRIMESIEVE_ERROR` signals failure.
"""

from __future__ import annotations

from typing import Any, Protocol


class SieveEngine(Protocol):
    """Contract for sieve engine backends.

    Any object implementing these methods with the correct signatures
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    # ------------------------------------------------------------------
    # Domain and process-wide configuration
    # ------------------------------------------------------------------

    def max_stop(self) -> int:
        """Return the largest bound the engine currently accepts."""
        ...  # pragma: no cover

    def get_sieve_size(self) -> int: ...  # pragma: no cover

    def set_sieve_size(self, sieve_size: int) -> None: ...  # pragma: no cover

    def get_num_threads(self) -> int: ...  # pragma: no cover

    def set_num_threads(self, num_threads: int) -> None:
        """Set the worker count; ``-1`` selects the engine default."""
        ...  # pragma: no cover

    def version(self) -> str: ...  # pragma: no cover

    # ------------------------------------------------------------------
    # Counting (one primitive per constellation)
    # ------------------------------------------------------------------

    def count_primes(self, start: int, stop: int) -> int: ...  # pragma: no cover

    def count_twins(self, start: int, stop: int) -> int: ...  # pragma: no cover

    def count_triplets(self, start: int, stop: int) -> int: ...  # pragma: no cover

    def count_quadruplets(self, start: int, stop: int) -> int: ...  # pragma: no cover

    def count_quintuplets(self, start: int, stop: int) -> int: ...  # pragma: no cover

    def count_sextuplets(self, start: int, stop: int) -> int: ...  # pragma: no cover

    def nth_prime(self, n: int, start: int) -> int:
        """Return the *n*-th prime relative to *start*.

        ``n > 0`` counts primes above *start*, ``n < 0`` primes below it,
        and ``n == 0`` finds the first prime ``>= start``.
        """
        ...  # pragma: no cover

    # ------------------------------------------------------------------
    # Printing (writes straight to the process stdout)
    # ------------------------------------------------------------------

    def print_primes(self, start: int, stop: int) -> None: ...  # pragma: no cover

    def print_twins(self, start: int, stop: int) -> None: ...  # pragma: no cover

    def print_triplets(self, start: int, stop: int) -> None: ...  # pragma: no cover

    def print_quadruplets(self, start: int, stop: int) -> None: ...  # pragma: no cover

    def print_quintuplets(self, start: int, stop: int) -> None: ...  # pragma: no cover

    def print_sextuplets(self, start: int, stop: int) -> None: ...  # pragma: no cover

    # ------------------------------------------------------------------
    # Bulk generation
    # ------------------------------------------------------------------

    def generate_primes(self, start: int, stop: int, type_tag: int) -> tuple[int, int]:
        """Materialize the primes in ``[start, stop]`` into an engine buffer.

        Returns
        -------
        tuple[int, int]
            ``(address, size)``: the buffer address and its element
            count.  Elements have the width selected by *type_tag*.
            The buffer stays valid until :meth:`free` is called on it.
        """
        ...  # pragma: no cover

    def free(self, address: int) -> None:
        """Release a buffer returned by :meth:`generate_primes`."""
        ...  # pragma: no cover

    # ------------------------------------------------------------------
    # Cursor (iterator) primitives
    # ------------------------------------------------------------------

    def new_iterator(self) -> Any:
        """Allocate zeroed cursor storage.

        The engine keeps pointers into this storage once it has been
        initialized, so callers must hold on to the returned object and
        never copy it.
        """
        ...  # pragma: no cover

    def init_iterator(self, it: Any) -> None: ...  # pragma: no cover

    def free_iterator(self, it: Any) -> None: ...  # pragma: no cover

    def skipto(self, it: Any, start: int, stop_hint: int) -> None: ...  # pragma: no cover

    def next_prime(self, it: Any) -> int: ...  # pragma: no cover

    def prev_prime(self, it: Any) -> int:
        """Step backwards; ``0`` once there are no primes below the cursor."""
        ...  # pragma: no cover
