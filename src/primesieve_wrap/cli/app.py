"""CLI application entry point and command routing for primesieve-wrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~primesieve_wrap.exceptions.PrimesieveWrapError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here: every command builds one core query
  and renders its result.
* Results go to stdout; diagnostics and errors go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from primesieve_wrap.cli import exit_codes
from primesieve_wrap.cli.console import console, output
from primesieve_wrap.exceptions import NoResultError, PrimesieveWrapError
from primesieve_wrap.version import __version__

ELEMENT_TYPE_NAMES: tuple[str, ...] = ("int16", "uint16", "int32", "uint32", "int64", "uint64")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_range_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("start", type=int, help="Lower bound (inclusive).")
    parser.add_argument("stop", type=int, help="Upper bound (inclusive).")


def _add_tupling_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t",
        "--tuple",
        dest="tupling",
        type=int,
        default=1,
        metavar="K",
        help="Constellation size: 1 primes, 2 twins … 6 sextuplets (default: 1).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``primesieve-wrap count START STOP [-t K]``
    * ``primesieve-wrap nth N [--start S] [--before]``
    * ``primesieve-wrap print START STOP [-t K]``
    * ``primesieve-wrap generate START STOP [--type T]``
    * ``primesieve-wrap doctor``
    """
    parser = argparse.ArgumentParser(
        prog="primesieve-wrap",
        description="Typed prime queries backed by libprimesieve.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log engine loading and configuration to stderr.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    count = commands.add_parser("count", help="Count primes or prime k-tuples in a range.")
    _add_range_arguments(count)
    _add_tupling_argument(count)

    nth = commands.add_parser("nth", help="Find the n-th prime after (or before) START.")
    nth.add_argument("n", type=int, help="How many primes to step over.")
    nth.add_argument("--start", type=int, default=0, help="Reference point (default: 0).")
    nth.add_argument("--before", action="store_true", help="Search below START instead of above.")

    print_cmd = commands.add_parser("print", help="Print primes or prime k-tuples in a range.")
    _add_range_arguments(print_cmd)
    _add_tupling_argument(print_cmd)

    generate = commands.add_parser("generate", help="Generate the primes in a range as an array.")
    _add_range_arguments(generate)
    generate.add_argument(
        "--type",
        dest="element_type",
        choices=ELEMENT_TYPE_NAMES,
        default="uint64",
        help="Element type of the generated array (default: uint64).",
    )

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _require_result(value: int | None) -> int:
    if value is None:
        raise NoResultError(
            "The engine could not answer this query.",
            hint="The requested prime may lie beyond the engine's maximum stop.",
        )
    return value


def _handle_count(args: argparse.Namespace) -> int:
    from primesieve_wrap.core.queries import Count

    query = Count.new().with_tupling(args.tupling).with_start(args.start).with_stop(args.stop)
    output.print(str(_require_result(query.run())))
    return exit_codes.SUCCESS


def _handle_nth(args: argparse.Namespace) -> int:
    from primesieve_wrap.core.queries import Nth
    from primesieve_wrap.exceptions import InvalidCountError

    base = Nth.new().with_start(args.start)
    query = base.before(args.n) if args.before else base.after(args.n)
    if query is None:
        raise InvalidCountError(
            f"Invalid count requested: {args.n}",
            hint="Use a non-negative count (at least 1 with --before).",
        )
    output.print(str(_require_result(query.run())))
    return exit_codes.SUCCESS


def _handle_print(args: argparse.Namespace) -> int:
    from primesieve_wrap.core.queries import Print
    from primesieve_wrap.exceptions import InvalidTuplingError

    query = Print.new().with_tupling(args.tupling)
    if query is None:
        raise InvalidTuplingError(
            f"Invalid tupling: {args.tupling}",
            hint="Use 1 (primes) through 6 (sextuplets).",
        )
    sys.stdout.flush()
    query.with_start(args.start).with_stop(args.stop).execute()
    return exit_codes.SUCCESS


def _handle_generate(args: argparse.Namespace) -> int:
    import numpy as np

    from primesieve_wrap.core.generate import Generate

    element_type = getattr(np, args.element_type)
    primes = Generate.new().with_start(args.start).with_stop(args.stop).run(element_type)
    if primes.size:
        output.print("\n".join(str(p) for p in primes.tolist()))
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from primesieve_wrap.cli.doctor import run_doctor

    return run_doctor()


def _configure_logging(verbose: bool) -> None:
    from primesieve_wrap.settings import get_settings
    from primesieve_wrap.utils.log import configure_logging

    level = logging.DEBUG if verbose else get_settings().log_level_number
    configure_logging(level)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the primesieve-wrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    _configure_logging(args.verbose)

    if args.command == "doctor":
        return _handle_doctor()
    if args.command == "count":
        return _handle_count(args)
    if args.command == "nth":
        return _handle_nth(args)
    if args.command == "print":
        return _handle_print(args)
    return _handle_generate(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except NoResultError as exc:
        console.print(f"[bold yellow]No result:[/bold yellow] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.NO_RESULT)
    except PrimesieveWrapError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
