"""Bulk prime generation into an owned, typed numpy array.

The engine materializes primes into one contiguous buffer whose element
width is chosen by an integer *type tag*, and hands back only the
buffer's address and length.  :meth:`Generate.run` is the one place that
reinterprets that untyped memory, so the element type is restricted to a
closed set of six numpy integer types, each mapped to exactly one tag:

=============  ===============
element type   engine tag
=============  ===============
``int16``      ``INT16_PRIMES``
``uint16``     ``UINT16_PRIMES``
``int32``      ``INT32_PRIMES``
``uint32``     ``UINT32_PRIMES``
``int64``      ``INT64_PRIMES``
``uint64``     ``UINT64_PRIMES``
=============  ===============

The ``element_type`` parameter is a constrained type variable, so type
checkers reject any other type; at runtime an unmapped type is refused
before the engine is called.
"""

from __future__ import annotations

import ctypes
import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final, SupportsIndex, TypeVar

import numpy as np
import numpy.typing as npt

from primesieve_wrap import runtime
from primesieve_wrap.core.bounds import ceiling, clamp
from primesieve_wrap.core.protocols import SieveEngine
from primesieve_wrap.exceptions import UnsupportedElementTypeError

# Values of libprimesieve's anonymous type enum in primesieve.h.
INT16_PRIMES: Final[int] = 8
UINT16_PRIMES: Final[int] = 9
INT32_PRIMES: Final[int] = 10
UINT32_PRIMES: Final[int] = 11
INT64_PRIMES: Final[int] = 12
UINT64_PRIMES: Final[int] = 13

Generable = TypeVar("Generable", np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64)

ELEMENT_TYPE_TAGS: Final[MappingProxyType[type[np.integer[Any]], int]] = MappingProxyType(
    {
        np.int16: INT16_PRIMES,
        np.uint16: UINT16_PRIMES,
        np.int32: INT32_PRIMES,
        np.uint32: UINT32_PRIMES,
        np.int64: INT64_PRIMES,
        np.uint64: UINT64_PRIMES,
    }
)


def type_tag(element_type: type[Generable]) -> int:
    """Return the engine tag registered for *element_type*.

    Raises
    ------
    UnsupportedElementTypeError
        If *element_type* is not one of the six supported numpy types.
    """
    try:
        return ELEMENT_TYPE_TAGS[element_type]
    except (KeyError, TypeError):
        supported = ", ".join(t.__name__ for t in ELEMENT_TYPE_TAGS)
        raise UnsupportedElementTypeError(
            f"Unsupported element type: {element_type!r}",
            hint=f"Use one of: {supported}.",
        ) from None


def copy_buffer(address: int, size: int, element_type: type[Generable]) -> npt.NDArray[Generable]:
    """Copy *size* elements of *element_type* starting at *address*.

    The returned array owns its memory; the source buffer may be freed
    as soon as this returns.
    """
    if size == 0:
        return np.empty(0, dtype=element_type)
    c_type = np.ctypeslib.as_ctypes_type(np.dtype(element_type))
    view = (c_type * size).from_address(address)
    return np.frombuffer(view, dtype=element_type, count=size).copy()


@dataclass(frozen=True, slots=True)
class Generate:
    """Generate every prime in ``[start, stop]`` as a numpy array."""

    start: int
    stop: int
    engine: SieveEngine = field(compare=False, repr=False)

    @classmethod
    def new(cls, engine: SieveEngine | None = None) -> Generate:
        resolved = runtime.resolve_engine(engine)
        return cls(start=0, stop=ceiling(resolved), engine=resolved)

    def with_start(self, start: SupportsIndex) -> Generate:
        return dataclasses.replace(self, start=clamp(start, self.engine))

    def with_stop(self, stop: SupportsIndex) -> Generate:
        return dataclasses.replace(self, stop=clamp(stop, self.engine))

    def run(self, element_type: type[Generable] = np.uint64) -> npt.NDArray[Generable]:  # type: ignore[assignment]
        """Return the primes in ascending order, stored as *element_type*.

        The engine buffer is released before this returns, whether or
        not the copy succeeded.  An empty range gives an empty array.

        Raises
        ------
        UnsupportedElementTypeError
            If *element_type* is not a supported type; the engine is
            not called.
        """
        tag = type_tag(element_type)
        address, size = self.engine.generate_primes(self.start, self.stop, tag)
        try:
            return copy_buffer(address, size, element_type)
        finally:
            self.engine.free(address)
