"""Shared utilities — cross-cutting concerns such as logging.

Rules
-----
* No business logic.
* No imports from ``cli``, ``core`` or ``infra``.
* Importable by any layer.
"""
