"""Infrastructure layer: external system integration.

This layer wraps all interaction with the libprimesieve shared library
and the operating system's loader.  Every raw loader exception must be
caught here and re-raised as a
:class:`~primesieve_wrap.exceptions.PrimesieveWrapError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from primesieve_wrap.infra.libprimesieve import CtypesSieveEngine, PrimesieveIterator
from primesieve_wrap.infra.library_detector import (
    LibraryStatus,
    detect_libprimesieve,
    require_libprimesieve,
)

__all__: list[str] = [
    "CtypesSieveEngine",
    "LibraryStatus",
    "PrimesieveIterator",
    "detect_libprimesieve",
    "require_libprimesieve",
]
