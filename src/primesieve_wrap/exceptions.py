"""Custom exception hierarchy for primesieve-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`PrimesieveWrapError`.  Raw third-party exceptions (``OSError``
from ctypes, pydantic ``ValidationError``) must NEVER propagate beyond
the layer that meets them; they must be caught and re-raised as a
typed subclass defined here.

Ordinary caller-side validation (an invalid tuple integer for printing,
a negative nth offset, an out-of-range sieve size) is *not* an
exception: the offending setter returns ``None`` or ``False``.

Hierarchy
---------
PrimesieveWrapError
├── InvalidTuplingError
├── InvalidCountError
├── UnsupportedElementTypeError
├── IteratorReleasedError
├── NoResultError
├── ConfigurationError
└── EnvironmentError
    └── LibraryNotFoundError
"""

from __future__ import annotations


class PrimesieveWrapError(Exception):
    """Base exception for all primesieve-wrap errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Query construction ----------------------------------------------------

class InvalidTuplingError(PrimesieveWrapError, ValueError):
    """Raised when a count query is given an integer outside 1..6."""


class InvalidCountError(PrimesieveWrapError, ValueError):
    """Raised by the CLI when an nth-prime offset is rejected."""


class UnsupportedElementTypeError(PrimesieveWrapError, TypeError):
    """Raised when bulk generation is asked for an unmapped element type."""


# --- Resource lifecycle ----------------------------------------------------

class IteratorReleasedError(PrimesieveWrapError):
    """Raised when a released prime iterator is used or released again."""


# --- Engine results --------------------------------------------------------

class NoResultError(PrimesieveWrapError):
    """Raised by the CLI when the engine answers with its error sentinel."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(PrimesieveWrapError):
    """Raised when settings are invalid or rejected by the engine."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PrimesieveWrapError):
    """Raised when a required runtime dependency is not available."""


class LibraryNotFoundError(EnvironmentError):
    """Raised when the libprimesieve shared library cannot be loaded."""


def append_library_path_suggestion(hint: str) -> str:
    """Append library-path guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Or point at an existing build:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    export PRIMESIEVE_WRAP_LIBRARY_PATH=/path/to/libprimesieve.so",
        )
    )
