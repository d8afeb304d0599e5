"""Common result containers for ringcalc.

The structures are intentionally minimal; they bundle what the driver
computes so the CLI and tests can consume it without re-reading the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np


@dataclass(frozen=True)
class DerivativePoint:
    """Derivative estimate reported at abscissa ``x``."""

    x: float
    value: float


@dataclass
class RunResult:
    """Outcome of one sampling run."""

    capacity: int
    dt: float
    integral: float
    method: str
    derivatives: np.ndarray
    points: List[DerivativePoint] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.derivatives) != self.capacity:
            raise ValueError("derivatives must have one entry per sample")
