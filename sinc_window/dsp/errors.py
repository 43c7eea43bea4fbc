"""Exceptions raised by the window and cutoff routines."""

from __future__ import annotations


class InvalidLength(ValueError):
    """Raised when a window or cutoff is requested for a non-positive length.

    A periodic window divides by its own length, so ``npoints == 0`` has no
    finite result.  Negative lengths are rejected for the same reason.
    """

    def __init__(self, npoints: int) -> None:
        super().__init__(f"npoints must be positive, got {npoints}")
        self.npoints = npoints


class UnknownWindowFamily(ValueError):
    """Raised when a window family name cannot be parsed."""
