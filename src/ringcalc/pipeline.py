"""Sampling driver tying the store and the estimators together.

A run samples ``f`` at ``x = i * dt`` for ``i = 1..capacity``, integrates the
filled store once and differentiates it at every slot.  Derivatives are
additionally reduced to one reported point per unit of ``x``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .config import Settings
from .core import SampleStore, derivatives, integrate
from .functions import SampleFunction, get_function
from .types import DerivativePoint, RunResult

logger = logging.getLogger(__name__)


def fill_store(store: SampleStore, func: SampleFunction, dt: float) -> None:
    """Append ``func(i * dt)`` for ``i = 1..capacity`` to ``store``."""

    for i in range(1, store.capacity + 1):
        store.append(func(i * dt))


def display_points(
    values: Sequence[float], resolution_factor: int, dt: float
) -> List[DerivativePoint]:
    """Keep every ``resolution_factor``-th value, reported at ``x = (i + 1) * dt``."""

    if resolution_factor <= 0:
        raise ValueError("resolution_factor must be positive")
    points: List[DerivativePoint] = []
    for i, value in enumerate(values):
        sample = i + 1
        if sample % resolution_factor == 0:
            points.append(DerivativePoint(x=sample * dt, value=float(value)))
    return points


def build_store(settings: Settings) -> SampleStore:
    return SampleStore.create(settings.sampling.capacity, boundary=settings.buffer.boundary)


def run(
    settings: Optional[Settings] = None,
    func: Optional[SampleFunction] = None,
    *,
    method: Optional[str] = None,
) -> RunResult:
    """Sample, integrate and differentiate according to ``settings``.

    Parameters
    ----------
    settings:
        Run configuration.  Defaults to :class:`Settings` built from the
        environment.
    func:
        Function to sample.  Defaults to ``settings.sampling.function`` looked
        up in :mod:`ringcalc.functions`.
    method:
        Integration rule overriding ``settings.integral.method``.
    """

    if settings is None:
        settings = Settings()
    if func is None:
        func = get_function(settings.sampling.function)
    if method is None:
        method = settings.integral.method

    sampling = settings.sampling
    dt = sampling.dt
    logger.info(
        "Creating %d samples for %d resolution factor",
        sampling.capacity,
        sampling.resolution_factor,
    )

    with build_store(settings) as store:
        fill_store(store, func, dt)
        integral = integrate(store, dt, method)
        logger.debug("integral (%s) = %f", method, integral)
        values = derivatives(store, dt)
        capacity = store.capacity

    return RunResult(
        capacity=capacity,
        dt=dt,
        integral=integral,
        method=method,
        derivatives=values,
        points=display_points(values, sampling.resolution_factor, dt),
    )


__all__ = ["fill_store", "display_points", "build_store", "run"]
