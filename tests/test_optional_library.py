"""Regression tests for running without libprimesieve.

Commands that never touch the engine must work when the shared library
is absent; engine paths must fail with a typed environment error.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from primesieve_wrap.cli import exit_codes
from primesieve_wrap.cli.app import main
from primesieve_wrap.core.queries import Count
from primesieve_wrap.exceptions import EnvironmentError, LibraryNotFoundError

FIND_LIBRARY = "primesieve_wrap.infra.library_detector.ctypes.util.find_library"


@pytest.fixture
def no_library():
    with patch(FIND_LIBRARY, return_value=None) as mock_find:
        yield mock_find


def test_help_works_without_library(no_library: object) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_library(no_library: object) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_library(no_library: object) -> None:
    assert main(["doctor"]) == exit_codes.GENERAL_ERROR


def test_query_raises_environment_error_without_library(no_library: object) -> None:
    with pytest.raises(EnvironmentError, match="not installed"):
        Count.new()


def test_missing_library_is_not_cached(no_library: object) -> None:
    with pytest.raises(LibraryNotFoundError):
        main(["count", "0", "10"])
    with pytest.raises(LibraryNotFoundError):
        main(["count", "0", "10"])
    assert no_library.call_count == 2  # type: ignore[attr-defined]
