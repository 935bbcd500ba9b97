"""Shared utilities used by the CLI and by embedding applications.

Rules
-----
* No business logic.
* No engine calls.
* Importable by any layer.
"""
