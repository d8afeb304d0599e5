"""Backward finite-difference derivative over a :class:`SampleStore`.

The estimate at slot ``i`` is ``(x[i] - x[i - 1]) / dt``.  Slot ``0`` has no
predecessor and is differenced against ``0.0``, so its value is
``x[0] / dt``.  This approximation is intentional and matches the edge policy
of :meth:`SampleStore.read_slot`.
"""

from __future__ import annotations

import math

import numpy as np

from .buffer import SampleStore
from .errors import DivisionByZero


def _validate_dt(dt: float) -> float:
    """Validate the sampling period ``dt``."""
    dt = float(dt)
    if dt == 0.0:
        raise DivisionByZero("dt must be non-zero")
    if not math.isfinite(dt) or dt < 0.0:
        raise ValueError(f"dt must be a positive finite number, got {dt!r}")
    return dt


def derivative_at(store: SampleStore, index: int, dt: float) -> float:
    """Return the backward first difference at physical slot ``index``.

    Parameters
    ----------
    store:
        Sample store to read from.
    index:
        Slot in ``[0, capacity)``.
    dt:
        Sampling period between successive samples.

    Returns
    -------
    float
        ``(store[index] - store[index - 1]) / dt``.
    """

    dt = _validate_dt(dt)
    if index < 0 or index >= store.capacity:
        raise IndexError(f"index {index} outside [0, {store.capacity})")
    delta = store.read_slot(index) - store.read_slot(index - 1)
    return delta / dt


def derivatives(store: SampleStore, dt: float) -> np.ndarray:
    """Return :func:`derivative_at` for every slot of ``store``."""

    dt = _validate_dt(dt)
    out = np.empty(store.capacity, dtype=float)
    for i in range(store.capacity):
        out[i] = derivative_at(store, i, dt)
    return out


__all__ = ["derivative_at", "derivatives"]
