"""Entry point for ``python -m primesieve_wrap``.

Runs the same :func:`~primesieve_wrap.cli.app.cli` boundary as the
installed ``primesieve-wrap`` script, including its exit codes.
"""

from __future__ import annotations

from primesieve_wrap.cli.app import cli

if __name__ == "__main__":
    cli()
