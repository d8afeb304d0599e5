"""Definite integrals over the full contents of a :class:`SampleStore`.

Two rules are provided:

``wrap_aware``
    Sums ``x[i] + x[i - 1]`` for every slot, using ``0.0`` as the predecessor
    of slot ``0``, and scales by ``dt / 2``.  End terms are not halved, which
    leaves a small systematic bias at coarse resolution.

``trapezoidal``
    The composite trapezoidal rule
    ``dt / 2 * (x[0] + 2 * sum(x[1:-1]) + x_last)`` where ``x_last`` is read
    one past the final slot and is therefore resolved by the store's boundary
    policy.
"""

from __future__ import annotations

from typing import Callable, Dict

from .buffer import SampleStore
from .derivative import _validate_dt


def calculate_integral(store: SampleStore, dt: float) -> float:
    """Integrate ``store`` with the wrap-aware trapezoidal rule."""

    dt = _validate_dt(dt)
    total = 0.0
    for i in range(store.capacity):
        total += store.read_slot(i) + store.read_slot(i - 1)
    return total * dt / 2.0


def trapezoidal(store: SampleStore, dt: float) -> float:
    """Integrate ``store`` with the composite trapezoidal rule."""

    dt = _validate_dt(dt)
    n = store.capacity
    x_first = store.read_slot(0)
    between = 0.0
    for i in range(1, n - 1):
        between += store.read_slot(i)
    x_last = store.read_slot(n)
    return (dt / 2.0) * (x_first + 2.0 * between + x_last)


INTEGRATION_METHODS: Dict[str, Callable[[SampleStore, float], float]] = {
    "wrap_aware": calculate_integral,
    "trapezoidal": trapezoidal,
}


def integrate(store: SampleStore, dt: float, method: str = "wrap_aware") -> float:
    """Integrate ``store`` using the rule registered under ``method``."""

    try:
        rule = INTEGRATION_METHODS[method]
    except KeyError:
        raise ValueError(
            f"unknown integration method {method!r}; expected one of "
            f"{', '.join(INTEGRATION_METHODS)}"
        ) from None
    return rule(store, dt)


__all__ = ["INTEGRATION_METHODS", "calculate_integral", "trapezoidal", "integrate"]
