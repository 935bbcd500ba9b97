"""Tests for environment-driven settings (settings.py)."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from primesieve_wrap.exceptions import ConfigurationError
from primesieve_wrap.settings import PrimesieveSettings, get_settings


class TestDefaults:
    def test_defaults(self) -> None:
        settings = get_settings()
        assert settings.library_path is None
        assert settings.sieve_size is None
        assert settings.num_threads is None
        assert settings.log_level == "WARNING"
        assert settings.log_level_number == logging.WARNING

    def test_cached(self) -> None:
        assert get_settings() is get_settings()


class TestEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRIMESIEVE_WRAP_LIBRARY_PATH", "/opt/lib/libprimesieve.so")
        monkeypatch.setenv("PRIMESIEVE_WRAP_SIEVE_SIZE", "1024")
        monkeypatch.setenv("PRIMESIEVE_WRAP_NUM_THREADS", "4")
        monkeypatch.setenv("PRIMESIEVE_WRAP_LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.library_path == "/opt/lib/libprimesieve.so"
        assert settings.sieve_size == 1024
        assert settings.num_threads == 4
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG

    def test_variable_names_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("primesieve_wrap_sieve_size", "64")
        assert get_settings().sieve_size == 64

    def test_empty_values_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRIMESIEVE_WRAP_SIEVE_SIZE", "")
        assert get_settings().sieve_size is None

    def test_dotenv_file(self, tmp_path: Path) -> None:
        # conftest runs every test from tmp_path.
        (tmp_path / ".env").write_text("PRIMESIEVE_WRAP_NUM_THREADS=6\n", encoding="utf-8")
        assert get_settings().num_threads == 6

    def test_environment_overrides_dotenv(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
    ) -> None:
        (tmp_path / ".env").write_text("PRIMESIEVE_WRAP_NUM_THREADS=6\n", encoding="utf-8")
        monkeypatch.setenv("PRIMESIEVE_WRAP_NUM_THREADS", "2")
        assert get_settings().num_threads == 2


class TestValidation:
    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("SIEVE_SIZE", "0"),
            ("SIEVE_SIZE", "4096"),
            ("SIEVE_SIZE", "big"),
            ("NUM_THREADS", "0"),
            ("LOG_LEVEL", "chatty"),
        ],
    )
    def test_invalid_value_raises_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str,
    ) -> None:
        monkeypatch.setenv(f"PRIMESIEVE_WRAP_{name}", value)
        with pytest.raises(ConfigurationError, match="Invalid primesieve-wrap settings") as exc_info:
            get_settings()
        assert exc_info.value.hint

    def test_log_level_normalized(self) -> None:
        assert PrimesieveSettings(log_level="  info ").log_level == "INFO"
