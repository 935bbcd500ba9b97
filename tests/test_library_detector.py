"""Tests for libprimesieve detection (infra/library_detector.py).

All tests mock :func:`ctypes.util.find_library`, so there is no system dependency.

Coverage:
* ``detect_libprimesieve`` via the loader search, found and missing.
* ``detect_libprimesieve`` with an explicit path, present and absent.
* ``require_libprimesieve`` happy path and ``LibraryNotFoundError``.
* Platform-specific install commands.
* ``LibraryStatus`` frozen dataclass.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from primesieve_wrap.exceptions import EnvironmentError, LibraryNotFoundError
from primesieve_wrap.infra.library_detector import (
    LibraryStatus,
    _platform_install_commands,
    detect_libprimesieve,
    require_libprimesieve,
)

FIND_LIBRARY = "primesieve_wrap.infra.library_detector.ctypes.util.find_library"


# ---------------------------------------------------------------------------
# detect_libprimesieve
# ---------------------------------------------------------------------------

class TestDetectLibprimesieve:
    @patch(FIND_LIBRARY)
    def test_found(self, mock_find: object) -> None:
        mock_find.return_value = "libprimesieve.so.12"  # type: ignore[union-attr]
        status = detect_libprimesieve()

        assert status.found is True
        assert status.location == "libprimesieve.so.12"
        assert "libprimesieve.so.12" in status.version_hint
        assert status.install_commands == ()
        mock_find.assert_called_once_with("primesieve")  # type: ignore[union-attr]

    @patch(FIND_LIBRARY)
    def test_not_found(self, mock_find: object) -> None:
        mock_find.return_value = None  # type: ignore[union-attr]
        status = detect_libprimesieve()

        assert status.found is False
        assert status.location is None
        assert status.version_hint == "not found"
        assert len(status.install_commands) > 0

    @patch(FIND_LIBRARY)
    def test_explicit_path(self, mock_find: object, tmp_path: Path) -> None:
        library = tmp_path / "libprimesieve.so"
        library.write_bytes(b"")
        status = detect_libprimesieve(str(library))

        assert status.found is True
        assert status.location == str(library.resolve())
        mock_find.assert_not_called()  # type: ignore[union-attr]

    @patch(FIND_LIBRARY, return_value="libprimesieve.so.12")
    def test_missing_explicit_path_does_not_fall_back(
        self, mock_find: object, tmp_path: Path,
    ) -> None:
        status = detect_libprimesieve(str(tmp_path / "nope.so"))

        assert status.found is False
        assert "does not exist" in status.version_hint
        mock_find.assert_not_called()  # type: ignore[union-attr]

    def test_directory_is_not_a_library(self, tmp_path: Path) -> None:
        assert detect_libprimesieve(str(tmp_path)).found is False


# ---------------------------------------------------------------------------
# require_libprimesieve
# ---------------------------------------------------------------------------

class TestRequireLibprimesieve:
    @patch(FIND_LIBRARY, return_value="libprimesieve.so.12")
    def test_found_returns_location(self, _mock_find: object) -> None:
        assert require_libprimesieve() == "libprimesieve.so.12"

    @patch(FIND_LIBRARY, return_value=None)
    def test_missing_raises(self, _mock_find: object) -> None:
        with pytest.raises(LibraryNotFoundError, match="not installed"):
            require_libprimesieve()

    @patch(FIND_LIBRARY, return_value=None)
    def test_missing_hint_contains_install_and_path_guidance(self, _mock_find: object) -> None:
        with pytest.raises(LibraryNotFoundError) as exc_info:
            require_libprimesieve()
        hint = exc_info.value.hint
        assert hint is not None
        assert "Install libprimesieve" in hint
        assert "PRIMESIEVE_WRAP_LIBRARY_PATH" in hint

    def test_missing_is_environment_error(self, tmp_path: Path) -> None:
        with pytest.raises(EnvironmentError):
            require_libprimesieve(str(tmp_path / "missing.so"))


# ---------------------------------------------------------------------------
# Platform install commands
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @patch("primesieve_wrap.infra.library_detector.platform.system", return_value="Windows")
    def test_windows_commands(self, _mock_sys: object) -> None:
        assert _platform_install_commands() == ("conda install -c conda-forge primesieve",)

    @patch("primesieve_wrap.infra.library_detector.platform.system", return_value="Linux")
    def test_linux_commands(self, _mock_sys: object) -> None:
        cmds = _platform_install_commands()
        assert any("apt" in c for c in cmds)
        assert any("dnf" in c for c in cmds)

    @patch("primesieve_wrap.infra.library_detector.platform.system", return_value="Darwin")
    def test_darwin_commands(self, _mock_sys: object) -> None:
        assert _platform_install_commands() == ("brew install primesieve",)

    @patch("primesieve_wrap.infra.library_detector.platform.system", return_value="Plan9")
    def test_unknown_platform_points_at_sources(self, _mock_sys: object) -> None:
        (cmd,) = _platform_install_commands()
        assert "github.com/kimwalisch/primesieve" in cmd


# ---------------------------------------------------------------------------
# LibraryStatus dataclass
# ---------------------------------------------------------------------------

class TestLibraryStatus:
    def test_frozen(self) -> None:
        status = LibraryStatus(
            found=True,
            location="libprimesieve.so",
            version_hint="found",
            install_commands=(),
        )
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]
