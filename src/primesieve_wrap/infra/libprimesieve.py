"""ctypes binding to libprimesieve implementing :class:`~primesieve_wrap.core.protocols.SieveEngine`.

This module is the **only** place in the codebase that opens the shared
library.  Loader failures (``OSError``, missing symbols) are caught here
and re-raised as :class:`~primesieve_wrap.exceptions.LibraryNotFoundError`
so nothing raw escapes the infrastructure boundary.

The C header declares ``primesieve_next_prime`` and
``primesieve_prev_prime`` as ``static inline``, so they are not exported
by the library.  :class:`CtypesSieveEngine` reimplements them over the
``primesieve_iterator`` structure, which requires the structure layout
of libprimesieve 8 or later.
"""

from __future__ import annotations

import ctypes
import logging
from typing import Any

from primesieve_wrap.exceptions import LibraryNotFoundError
from primesieve_wrap.infra.library_detector import require_libprimesieve

logger = logging.getLogger(__name__)


class PrimesieveIterator(ctypes.Structure):
    """``primesieve_iterator`` from ``primesieve/iterator.h``."""

    _fields_ = [
        ("i", ctypes.c_size_t),
        ("size", ctypes.c_size_t),
        ("start", ctypes.c_uint64),
        ("stop_hint", ctypes.c_uint64),
        ("primes", ctypes.POINTER(ctypes.c_uint64)),
        ("memory", ctypes.c_void_p),
        ("is_error", ctypes.c_int),
    ]


_u64 = ctypes.c_uint64
_iter_p = ctypes.POINTER(PrimesieveIterator)

# name -> (restype, argtypes)
_SIGNATURES: dict[str, tuple[Any, list[Any]]] = {
    "primesieve_get_max_stop": (_u64, []),
    "primesieve_get_sieve_size": (ctypes.c_int, []),
    "primesieve_set_sieve_size": (None, [ctypes.c_int]),
    "primesieve_get_num_threads": (ctypes.c_int, []),
    "primesieve_set_num_threads": (None, [ctypes.c_int]),
    "primesieve_version": (ctypes.c_char_p, []),
    "primesieve_count_primes": (_u64, [_u64, _u64]),
    "primesieve_count_twins": (_u64, [_u64, _u64]),
    "primesieve_count_triplets": (_u64, [_u64, _u64]),
    "primesieve_count_quadruplets": (_u64, [_u64, _u64]),
    "primesieve_count_quintuplets": (_u64, [_u64, _u64]),
    "primesieve_count_sextuplets": (_u64, [_u64, _u64]),
    "primesieve_nth_prime": (_u64, [ctypes.c_int64, _u64]),
    "primesieve_print_primes": (None, [_u64, _u64]),
    "primesieve_print_twins": (None, [_u64, _u64]),
    "primesieve_print_triplets": (None, [_u64, _u64]),
    "primesieve_print_quadruplets": (None, [_u64, _u64]),
    "primesieve_print_quintuplets": (None, [_u64, _u64]),
    "primesieve_print_sextuplets": (None, [_u64, _u64]),
    "primesieve_generate_primes": (
        ctypes.c_void_p,
        [_u64, _u64, ctypes.POINTER(ctypes.c_size_t), ctypes.c_int],
    ),
    "primesieve_free": (None, [ctypes.c_void_p]),
    "primesieve_init": (None, [_iter_p]),
    "primesieve_free_iterator": (None, [_iter_p]),
    "primesieve_skipto": (None, [_iter_p, _u64, _u64]),
    "primesieve_generate_next_primes": (None, [_iter_p]),
    "primesieve_generate_prev_primes": (None, [_iter_p]),
}


def _bind(lib: ctypes.CDLL) -> None:
    """Declare argument and return types for every primitive we call."""
    for name, (restype, argtypes) in _SIGNATURES.items():
        try:
            func = getattr(lib, name)
        except AttributeError as exc:
            raise LibraryNotFoundError(
                f"The loaded libprimesieve does not export {name}.",
                hint="primesieve-wrap requires libprimesieve 8 or later.",
            ) from exc
        func.restype = restype
        func.argtypes = argtypes


class CtypesSieveEngine:
    """Concrete :class:`SieveEngine` backed by the libprimesieve C API.

    Usage::

        engine = CtypesSieveEngine.load()
        engine.count_primes(0, 100)   # 25

    This class satisfies the :class:`~primesieve_wrap.core.protocols.SieveEngine`
    protocol structurally, no explicit inheritance required.
    """

    def __init__(self, lib: ctypes.CDLL) -> None:
        _bind(lib)
        self._lib: ctypes.CDLL = lib

    @classmethod
    def load(cls, path: str | None = None) -> CtypesSieveEngine:
        """Locate and open libprimesieve.

        Raises
        ------
        LibraryNotFoundError
            If the library cannot be located, opened, or lacks a symbol.
        """
        location = require_libprimesieve(path)
        try:
            lib = ctypes.CDLL(location)
        except OSError as exc:
            raise LibraryNotFoundError(
                f"Could not load libprimesieve from {location}: {exc}",
                hint="Check that the file is a shared library built for this platform.",
            ) from exc
        logger.debug("Loaded libprimesieve from %s", location)
        return cls(lib)

    # ------------------------------------------------------------------
    # Domain and configuration
    # ------------------------------------------------------------------

    def max_stop(self) -> int:
        return int(self._lib.primesieve_get_max_stop())

    def get_sieve_size(self) -> int:
        return int(self._lib.primesieve_get_sieve_size())

    def set_sieve_size(self, sieve_size: int) -> None:
        self._lib.primesieve_set_sieve_size(sieve_size)

    def get_num_threads(self) -> int:
        return int(self._lib.primesieve_get_num_threads())

    def set_num_threads(self, num_threads: int) -> None:
        self._lib.primesieve_set_num_threads(num_threads)

    def version(self) -> str:
        raw: bytes = self._lib.primesieve_version()
        return raw.decode("ascii")

    # ------------------------------------------------------------------
    # Counting
    # ------------------------------------------------------------------

    def count_primes(self, start: int, stop: int) -> int:
        return int(self._lib.primesieve_count_primes(start, stop))

    def count_twins(self, start: int, stop: int) -> int:
        return int(self._lib.primesieve_count_twins(start, stop))

    def count_triplets(self, start: int, stop: int) -> int:
        return int(self._lib.primesieve_count_triplets(start, stop))

    def count_quadruplets(self, start: int, stop: int) -> int:
        return int(self._lib.primesieve_count_quadruplets(start, stop))

    def count_quintuplets(self, start: int, stop: int) -> int:
        return int(self._lib.primesieve_count_quintuplets(start, stop))

    def count_sextuplets(self, start: int, stop: int) -> int:
        return int(self._lib.primesieve_count_sextuplets(start, stop))

    def nth_prime(self, n: int, start: int) -> int:
        return int(self._lib.primesieve_nth_prime(n, start))

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print_primes(self, start: int, stop: int) -> None:
        self._lib.primesieve_print_primes(start, stop)

    def print_twins(self, start: int, stop: int) -> None:
        self._lib.primesieve_print_twins(start, stop)

    def print_triplets(self, start: int, stop: int) -> None:
        self._lib.primesieve_print_triplets(start, stop)

    def print_quadruplets(self, start: int, stop: int) -> None:
        self._lib.primesieve_print_quadruplets(start, stop)

    def print_quintuplets(self, start: int, stop: int) -> None:
        self._lib.primesieve_print_quintuplets(start, stop)

    def print_sextuplets(self, start: int, stop: int) -> None:
        self._lib.primesieve_print_sextuplets(start, stop)

    # ------------------------------------------------------------------
    # Bulk generation
    # ------------------------------------------------------------------

    def generate_primes(self, start: int, stop: int, type_tag: int) -> tuple[int, int]:
        size = ctypes.c_size_t(0)
        address = self._lib.primesieve_generate_primes(start, stop, ctypes.byref(size), type_tag)
        return (address or 0, int(size.value))

    def free(self, address: int) -> None:
        if address:
            self._lib.primesieve_free(ctypes.c_void_p(address))

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def new_iterator(self) -> PrimesieveIterator:
        return PrimesieveIterator()

    def init_iterator(self, it: PrimesieveIterator) -> None:
        self._lib.primesieve_init(ctypes.byref(it))

    def free_iterator(self, it: PrimesieveIterator) -> None:
        self._lib.primesieve_free_iterator(ctypes.byref(it))

    def skipto(self, it: PrimesieveIterator, start: int, stop_hint: int) -> None:
        self._lib.primesieve_skipto(ctypes.byref(it), start, stop_hint)

    def next_prime(self, it: PrimesieveIterator) -> int:
        it.i += 1
        if it.i >= it.size:
            self._lib.primesieve_generate_next_primes(ctypes.byref(it))
        return int(it.primes[it.i])

    def prev_prime(self, it: PrimesieveIterator) -> int:
        if it.i == 0:
            self._lib.primesieve_generate_prev_primes(ctypes.byref(it))
        else:
            it.i -= 1
        return int(it.primes[it.i])
