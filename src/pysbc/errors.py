"""Exception types raised by the solver core."""

from __future__ import annotations


class SolverError(Exception):
    """Base class for errors raised while solving a challenge."""


class InvalidRequirementsError(SolverError, ValueError):
    """Raised when a requirements payload is malformed or missing mandatory keys."""


class UnknownPresetError(SolverError, LookupError):
    """Raised when a named challenge preset is not configured."""


__all__ = ["SolverError", "InvalidRequirementsError", "UnknownPresetError"]
