"""Core layer: validation, dispatch and safe conversion of engine results.

Rules
-----
* No ``print()`` calls; only the engine's own print primitives write output.
* No imports from ``cli`` or ``infra``.
* The engine is reached only through the :class:`SieveEngine` protocol,
  resolved via :mod:`primesieve_wrap.runtime` when not passed explicitly.
* Builders are immutable values; the iterator is the only resource owner.
"""

from primesieve_wrap.core.bounds import PRIMESIEVE_ERROR, ceiling, clamp, decode
from primesieve_wrap.core.generate import ELEMENT_TYPE_TAGS, Generate
from primesieve_wrap.core.iterator import PrimeIterator
from primesieve_wrap.core.protocols import SieveEngine
from primesieve_wrap.core.queries import Count, Nth, Print
from primesieve_wrap.core.tupling import TupleKind

__all__: list[str] = [
    "Count",
    "ELEMENT_TYPE_TAGS",
    "Generate",
    "Nth",
    "PRIMESIEVE_ERROR",
    "PrimeIterator",
    "Print",
    "SieveEngine",
    "TupleKind",
    "ceiling",
    "clamp",
    "decode",
]
