"""Exception types raised by the ringcalc core."""

from __future__ import annotations


class RingCalcError(Exception):
    """Base class for all ringcalc errors."""


class InvalidCapacity(RingCalcError, ValueError):
    """Raised when a sample store is requested with a non-positive capacity."""

    def __init__(self, capacity: object) -> None:
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity


class AllocationFailure(RingCalcError, MemoryError):
    """Raised when the backing array of a sample store cannot be allocated."""


class DivisionByZero(RingCalcError, ZeroDivisionError):
    """Raised when a zero time step reaches a derivative or integral routine."""


__all__ = ["RingCalcError", "InvalidCapacity", "AllocationFailure", "DivisionByZero"]
