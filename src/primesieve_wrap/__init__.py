"""primesieve-wrap: typed queries over the libprimesieve sieve engine.

The engine does the sieving; this package validates parameters,
dispatches one engine call per query, and converts the engine's
sentinel-coded, untyped results into Python values.
"""

from primesieve_wrap.core.generate import Generate
from primesieve_wrap.core.iterator import PrimeIterator
from primesieve_wrap.core.queries import Count, Nth, Print
from primesieve_wrap.core.tupling import TupleKind
from primesieve_wrap.version import __version__

__all__: list[str] = [
    "Count",
    "Generate",
    "Nth",
    "PrimeIterator",
    "Print",
    "TupleKind",
    "__version__",
]
