"""Tests for process-wide engine configuration (core/engine_config.py)."""

from __future__ import annotations

import logging

import pytest

from primesieve_wrap.core import engine_config
from primesieve_wrap.exceptions import ConfigurationError
from primesieve_wrap.settings import PrimesieveSettings

from fakes import FakeSieveEngine


class TestMaxStop:
    def test_reports_engine_ceiling(self, engine: FakeSieveEngine) -> None:
        assert engine_config.max_stop(engine) == 10_000

    def test_uses_default_engine(self, default_engine: FakeSieveEngine) -> None:
        default_engine.ceiling = 123
        assert engine_config.max_stop() == 123


# ---------------------------------------------------------------------------
# Sieve size
# ---------------------------------------------------------------------------

class TestSieveSize:
    @pytest.mark.parametrize("size", [1, 256, 2048])
    def test_accepts_range(self, engine: FakeSieveEngine, size: int) -> None:
        assert engine_config.set_sieve_size(size, engine) is True
        assert engine_config.get_sieve_size(engine) == size

    @pytest.mark.parametrize("size", [0, -1, 2049, 2**40])
    def test_rejects_out_of_range(self, engine: FakeSieveEngine, size: int) -> None:
        assert engine_config.set_sieve_size(size, engine) is False
        assert engine.sieve_size == 32

    def test_rejection_is_logged(
        self, engine: FakeSieveEngine, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="primesieve_wrap"):
            engine_config.set_sieve_size(4096, engine)
        assert "Rejected sieve size 4096" in caplog.text

    def test_non_integer_raises(self, engine: FakeSieveEngine) -> None:
        with pytest.raises(TypeError):
            engine_config.set_sieve_size(32.0, engine)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Worker threads
# ---------------------------------------------------------------------------

class TestNumThreads:
    def test_set_and_get(self, engine: FakeSieveEngine) -> None:
        assert engine_config.set_num_threads(3, engine) is True
        assert engine_config.get_num_threads(engine) == 3

    def test_none_restores_default(self, engine: FakeSieveEngine) -> None:
        engine_config.set_num_threads(2, engine)
        assert engine_config.set_num_threads(None, engine) is True
        assert engine.num_threads == 8

    @pytest.mark.parametrize("count", [0, -1, 2**31])
    def test_rejects_invalid(self, engine: FakeSieveEngine, count: int) -> None:
        assert engine_config.set_num_threads(count, engine) is False
        assert engine.num_threads == 8

    def test_largest_c_int_accepted(self, engine: FakeSieveEngine) -> None:
        assert engine_config.set_num_threads(2**31 - 1, engine) is True


# ---------------------------------------------------------------------------
# apply_settings
# ---------------------------------------------------------------------------

class TestApplySettings:
    def test_unset_fields_leave_engine_alone(self, engine: FakeSieveEngine) -> None:
        engine_config.apply_settings(PrimesieveSettings(), engine)
        assert (engine.sieve_size, engine.num_threads) == (32, 8)

    def test_pushes_configured_values(self, engine: FakeSieveEngine) -> None:
        settings = PrimesieveSettings(sieve_size=512, num_threads=2)
        engine_config.apply_settings(settings, engine)
        assert (engine.sieve_size, engine.num_threads) == (512, 2)

    def test_rejected_value_raises(self, engine: FakeSieveEngine) -> None:
        # model_construct skips pydantic validation, as a hand-built
        # settings object might.
        settings = PrimesieveSettings.model_construct(sieve_size=9_999, num_threads=None)
        with pytest.raises(ConfigurationError, match="Invalid sieve size") as exc_info:
            engine_config.apply_settings(settings, engine)
        assert "PRIMESIEVE_WRAP_SIEVE_SIZE" in (exc_info.value.hint or "")

    def test_rejected_thread_count_raises(self, engine: FakeSieveEngine) -> None:
        settings = PrimesieveSettings.model_construct(sieve_size=None, num_threads=0)
        with pytest.raises(ConfigurationError, match="Invalid thread count"):
            engine_config.apply_settings(settings, engine)
