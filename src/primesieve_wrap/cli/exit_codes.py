"""Process exit codes returned by ``primesieve-wrap``.

Every exit path in :mod:`primesieve_wrap.cli.app` uses one of these
names so scripts can tell "no answer" apart from a real failure.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command ran and printed its result."""

GENERAL_ERROR: int = 1
"""A PrimesieveWrapError (bad input, missing library, bad settings) was reported."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the primesieve-wrap hierarchy escaped."""

NO_RESULT: int = 3
"""The engine answered with its error sentinel (e.g. nth prime beyond the domain)."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
