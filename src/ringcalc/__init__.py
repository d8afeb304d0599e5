"""Numerical integral and derivative over a fixed-capacity circular sample store."""

from .core import (
    AllocationFailure,
    DivisionByZero,
    InvalidCapacity,
    RingCalcError,
    SampleStore,
    calculate_integral,
    derivative_at,
    derivatives,
    integrate,
    trapezoidal,
)

__all__ = [
    "SampleStore",
    "calculate_integral",
    "trapezoidal",
    "integrate",
    "derivative_at",
    "derivatives",
    "RingCalcError",
    "InvalidCapacity",
    "AllocationFailure",
    "DivisionByZero",
]

__version__ = "0.1.0"
