"""Core data structures and estimators for ringcalc."""

from .buffer import BOUNDARY_POLICIES, SampleStore, create
from .derivative import derivative_at, derivatives
from .errors import AllocationFailure, DivisionByZero, InvalidCapacity, RingCalcError
from .integral import INTEGRATION_METHODS, calculate_integral, integrate, trapezoidal

__all__ = [
    "BOUNDARY_POLICIES",
    "SampleStore",
    "create",
    "derivative_at",
    "derivatives",
    "INTEGRATION_METHODS",
    "calculate_integral",
    "trapezoidal",
    "integrate",
    "RingCalcError",
    "InvalidCapacity",
    "AllocationFailure",
    "DivisionByZero",
]
