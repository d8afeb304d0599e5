"""Fixed-capacity circular store for real-valued samples.

The store keeps its slots in a preallocated :class:`numpy.ndarray` and writes
new samples at a cursor that wraps around once every slot has been filled.
Reads come in two flavours:

* :meth:`SampleStore.read_slot` addresses the physical layout directly and
  applies the edge policy used by the estimators (``0.0`` before the first
  slot, the boundary policy past the last one).
* :meth:`SampleStore.read_recent` addresses samples by age, ``0`` being the
  most recently appended value.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from .errors import AllocationFailure, InvalidCapacity

logger = logging.getLogger(__name__)

BOUNDARY_POLICIES = ("clamp", "wrap")


class SampleStore:
    """Circular buffer of ``capacity`` float samples.

    Parameters
    ----------
    capacity:
        Number of slots.  Fixed for the lifetime of the store.
    boundary:
        How reads at ``index >= capacity`` are resolved.  ``"clamp"`` returns
        the last slot, ``"wrap"`` returns the first one.
    """

    def __init__(self, capacity: int, boundary: str = "clamp") -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise InvalidCapacity(capacity)
        if capacity <= 0:
            raise InvalidCapacity(capacity)
        if boundary not in BOUNDARY_POLICIES:
            raise ValueError(
                f"boundary must be one of {', '.join(BOUNDARY_POLICIES)}; got {boundary!r}"
            )
        try:
            samples = np.zeros(int(capacity), dtype=float)
        except (MemoryError, ValueError, OverflowError) as exc:
            raise AllocationFailure(
                f"unable to allocate {capacity} sample slots"
            ) from exc

        self._samples: np.ndarray | None = samples
        self._capacity = int(capacity)
        self._cursor = 0
        self.boundary = boundary
        logger.debug("allocated sample store with %d slots (boundary=%s)", capacity, boundary)

    @classmethod
    def create(cls, capacity: int, boundary: str = "clamp") -> "SampleStore":
        """Return a new zero-filled store with ``capacity`` slots."""

        return cls(capacity, boundary=boundary)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> "SampleStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def release(self) -> None:
        """Drop the backing array.  The store must not be used afterwards."""

        self._samples = None
        self._cursor = 0

    @property
    def released(self) -> bool:
        return self._samples is None

    def _live(self) -> np.ndarray:
        if self._samples is None:
            raise RuntimeError("sample store has been released")
        return self._samples

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def write_cursor(self) -> int:
        """Index of the slot the next :meth:`append` overwrites."""

        return self._cursor

    def append(self, value: float) -> None:
        """Store ``value`` and advance the cursor, overwriting the oldest slot."""

        samples = self._live()
        samples[self._cursor] = float(value)
        self._cursor = (self._cursor + 1) % self._capacity

    def extend(self, values: Iterable[float]) -> None:
        for value in values:
            self.append(value)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def size(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._capacity

    def read_slot(self, index: int) -> float:
        """Return the value stored in physical slot ``index``.

        Negative indices read as ``0.0`` so that the first slot has a
        zero predecessor.  Indices at or past ``capacity`` are resolved by
        the boundary policy.
        """

        samples = self._live()
        if index < 0:
            return 0.0
        if index >= self._capacity:
            if self.boundary == "wrap":
                return float(samples[0])
            return float(samples[self._capacity - 1])
        return float(samples[index])

    read_at = read_slot

    def read_recent(self, age: int) -> float:
        """Return the sample appended ``age`` writes ago (``0`` is the latest)."""

        samples = self._live()
        if age < 0 or age >= self._capacity:
            raise IndexError(f"age {age} outside [0, {self._capacity})")
        return float(samples[(self._cursor - 1 - age) % self._capacity])

    def snapshot(self) -> np.ndarray:
        """Return a copy of the slots in physical order."""

        return self._live().copy()

    def chronological(self) -> np.ndarray:
        """Return a copy of the slots ordered oldest first."""

        return np.roll(self._live(), -self._cursor)

    def format_contents(self, precision: int = 3) -> str:
        values = ", ".join(f"{value:.{precision}f}" for value in self._live())
        return f"Buffer Contents: {{{values}}}"

    def __repr__(self) -> str:
        state = "released" if self.released else f"cursor={self._cursor}"
        return f"SampleStore(capacity={self._capacity}, boundary={self.boundary!r}, {state})"


def create(capacity: int, boundary: str = "clamp") -> SampleStore:
    """Functional alias for :meth:`SampleStore.create`."""

    return SampleStore.create(capacity, boundary=boundary)


__all__ = ["BOUNDARY_POLICIES", "SampleStore", "create"]
