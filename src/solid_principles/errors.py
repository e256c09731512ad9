# src/solid_principles/errors.py
"""
Errors raised when a demonstration hits a violated contract.
"""


class UnsupportedOperationError(NotImplementedError):
    """An inherited capability the concrete type cannot fulfil."""
