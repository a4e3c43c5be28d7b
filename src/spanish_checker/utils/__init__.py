"""Shared utilities — cross-cutting concerns such as logging setup.

Rules
-----
* No business logic.
* No I/O beyond configuring diagnostics output.
* Importable by any layer.
"""
