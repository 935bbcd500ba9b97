"""Infrastructure: libprimesieve detection and platform guidance.

This module is responsible for locating the libprimesieve shared
library and providing platform-specific installation guidance when it
is missing.

Rules
-----
* Detection via :func:`ctypes.util.find_library` or an explicit path
  only; the library is not opened here.
* No automatic installation.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import ctypes.util
import platform
from dataclasses import dataclass
from pathlib import Path

from primesieve_wrap.exceptions import LibraryNotFoundError, append_library_path_suggestion

LIBRARY_NAME: str = "primesieve"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LibraryStatus:
    """Result of a libprimesieve detection probe.

    Attributes
    ----------
    found : bool
        Whether the library was located.
    location : str | None
        Path or loader name to hand to :class:`ctypes.CDLL`, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found as …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested shell commands for installing libprimesieve on the
        current platform.  Empty when the library is already present.
    """

    found: bool
    location: str | None
    version_hint: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_libprimesieve(path: str | None = None) -> LibraryStatus:
    """Probe for the libprimesieve shared library.

    An explicit *path* (typically ``PRIMESIEVE_WRAP_LIBRARY_PATH``) is
    checked as given and never falls back to the system search.

    Returns a :class:`LibraryStatus` regardless of the outcome; the
    caller decides whether to abort or merely warn.
    """
    if path is not None:
        candidate = Path(path).expanduser()
        if candidate.is_file():
            resolved = candidate.resolve()
            return LibraryStatus(
                found=True,
                location=str(resolved),
                version_hint=f"found at {resolved}",
                install_commands=(),
            )
        return LibraryStatus(
            found=False,
            location=None,
            version_hint=f"{candidate} does not exist",
            install_commands=_platform_install_commands(),
        )

    result = ctypes.util.find_library(LIBRARY_NAME)
    if result is not None:
        return LibraryStatus(
            found=True,
            location=result,
            version_hint=f"found as {result}",
            install_commands=(),
        )

    return LibraryStatus(
        found=False,
        location=None,
        version_hint="not found",
        install_commands=_platform_install_commands(),
    )


def require_libprimesieve(path: str | None = None) -> str:
    """Locate libprimesieve or raise :class:`LibraryNotFoundError`.

    Returns the location to pass to :class:`ctypes.CDLL`.
    """
    status = detect_libprimesieve(path)
    if not status.found or status.location is None:
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append("Install libprimesieve using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise LibraryNotFoundError(
            f"libprimesieve is not installed or not on the library path ({status.version_hint}).",
            hint=append_library_path_suggestion("\n".join(hint_lines)),
        )
    return status.location


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return ("conda install -c conda-forge primesieve",)
    if system == "linux":
        return (
            "sudo apt install libprimesieve-dev",
            "sudo dnf install primesieve-devel",
            "sudo pacman -S primesieve",
        )
    if system == "darwin":
        return ("brew install primesieve",)
    # Generic guidance.
    return ("Please build libprimesieve from https://github.com/kimwalisch/primesieve",)
