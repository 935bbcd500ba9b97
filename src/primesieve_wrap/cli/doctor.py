"""``primesieve-wrap doctor``: can this process reach libprimesieve?

Reports the interpreter, numpy, where the shared library was found and,
once it loads, the engine version, maximum stop, sieve size and thread
count.  Output is a Rich table on stderr, or aligned plain text when
Rich is unavailable.  A missing or unloadable library is a failure.
"""

from __future__ import annotations

import platform
import sys

from primesieve_wrap.cli import exit_codes
from primesieve_wrap.cli.console import console
from primesieve_wrap.exceptions import PrimesieveWrapError
from primesieve_wrap.infra.library_detector import detect_libprimesieve
from primesieve_wrap.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _numpy_version_check() -> Check:
    """Return (label, value, status) for the numpy row."""
    try:
        import numpy
    except ImportError:
        return "numpy", "NOT INSTALLED", "[red]FAIL[/red]"
    return "numpy", numpy.__version__, "[green]OK[/green]"


def _library_path_setting() -> str | None:
    from primesieve_wrap.settings import get_settings

    return get_settings().library_path


def _library_check() -> Check:
    """Return (label, value, status) for the libprimesieve location row."""
    status_obj = detect_libprimesieve(_library_path_setting())
    if status_obj.found:
        return "libprimesieve", status_obj.location or "found", "[green]OK[/green]"
    return "libprimesieve", status_obj.version_hint, "[red]FAIL[/red]"


def _engine_checks() -> list[Check]:
    """Load the engine and report its version and configuration."""
    from primesieve_wrap import runtime
    from primesieve_wrap.core.engine_config import get_num_threads, get_sieve_size, max_stop

    try:
        engine = runtime.get_engine()
    except PrimesieveWrapError as exc:
        return [("engine", str(exc), "[red]FAIL[/red]")]
    return [
        ("engine", engine.version(), "[green]OK[/green]"),
        ("max stop", str(max_stop(engine)), "[green]OK[/green]"),
        ("sieve size", f"{get_sieve_size(engine)} KiB", "[green]OK[/green]"),
        ("threads", str(get_num_threads(engine)), "[green]OK[/green]"),
    ]


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nprimesieve-wrap doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_doctor_table(checks: list[Check]) -> None:
    from rich.table import Table

    table = Table(
        title="primesieve-wrap doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=14)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        ("primesieve-wrap", __version__, "[green]OK[/green]"),
        _python_version_check(),
        _numpy_version_check(),
        _library_check(),
    ]
    library_found = "FAIL" not in checks[-1][2]
    if library_found:
        checks.extend(_engine_checks())
    checks.append(_os_check())

    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        _print_rich_doctor_table(checks)
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)

    if not library_found:
        library_status = detect_libprimesieve(_library_path_setting())
        console.print("libprimesieve is not installed.")
        console.print("Install using one of the following commands:\n")
        for cmd in library_status.install_commands:
            console.print(f"  {cmd}")
        console.print()

    if has_failure:
        console.print("Some checks failed.")
        return exit_codes.GENERAL_ERROR

    console.print("All checks passed.")
    return exit_codes.SUCCESS
