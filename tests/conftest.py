"""Shared pytest fixtures and configuration for the primesieve-wrap test suite.

Guidelines
----------
* libprimesieve is replaced by :class:`FakeSieveEngine` at the engine
  boundary; tests needing the real library are marked ``libprimesieve``
  and skipped when it cannot be found.
* Core tests must be pure: no process-wide state leaks between tests.
* Tests must not depend on OS state or environment variables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from primesieve_wrap import runtime
from primesieve_wrap.settings import get_settings

from fakes import FakeSieveEngine


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def engine() -> FakeSieveEngine:
    """A fresh fake engine, passed explicitly to builders."""
    return FakeSieveEngine()


@pytest.fixture
def default_engine(engine: FakeSieveEngine) -> FakeSieveEngine:
    """Install the fake engine as the process default."""
    runtime.use_engine(engine)
    return engine


@pytest.fixture(autouse=True)
def _isolate_process_state(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> Iterator[None]:
    # Keep a developer .env in the checkout out of the settings under test.
    monkeypatch.chdir(tmp_path)
    for name in ("LIBRARY_PATH", "SIEVE_SIZE", "NUM_THREADS", "LOG_LEVEL"):
        monkeypatch.delenv(f"PRIMESIEVE_WRAP_{name}", raising=False)
    get_settings.cache_clear()
    runtime.reset_engine()
    yield
    runtime.reset_engine()
    get_settings.cache_clear()
    package_logger = logging.getLogger("primesieve_wrap")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
