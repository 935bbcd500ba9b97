"""CLI layer: sub-command parsing, result rendering and the error boundary.

Query results are written to stdout and everything else (diagnostics,
errors, the ``doctor`` table) to stderr.  Nothing outside this package
imports from it.
"""
