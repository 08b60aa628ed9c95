"""Interpolated lookups over a table of samples taken once per second.

Each index of the table is the x value (seconds) and the value stored at that
index is the y value. Between two indices the table is treated as a straight
line, which makes any table usable as the integrand of a quadrature rule:

    >>> accel = InterpolateLookup([0.0, 1.5, 3.0])
    >>> accel(1.5)
    2.25
"""

import math
from collections.abc import Iterable

import numpy as np

from trainsim.core.errors import AllocationError, TableIndexError
from trainsim.core.types import FloatArray


class InterpolateLookup:
    """Sample table that can be called as a piecewise-linear function.

    Integral x values return the stored sample directly. Any other x returns
    the linear interpolation between ``floor(x)`` and ``floor(x) + 1``. Every
    index the lookup needs must exist in the table; a miss raises
    ``TableIndexError`` rather than extrapolating.
    """

    def __init__(self, values: Iterable[float] = ()):
        try:
            self._values: FloatArray = np.fromiter(values, dtype=np.float64)
        except MemoryError as e:
            raise AllocationError("failed allocating lookup table") from e
        self._length = len(self._values)

    @classmethod
    def from_array(cls, values: FloatArray) -> "InterpolateLookup":
        """Wrap an existing float64 array as a table without copying it.

        The table takes ownership of ``values``; later writes through either
        reference are visible to the other.
        """
        if values.dtype != np.float64 or values.ndim != 1:
            raise ValueError(
                f"expected a 1-d float64 array, got {values.ndim}-d {values.dtype}"
            )
        table = cls.__new__(cls)
        table._values = values
        table._length = len(values)
        return table

    @classmethod
    def zeros(cls, length: int) -> "InterpolateLookup":
        """Allocate a zero-filled table of ``length`` samples.

        Raises:
            AllocationError: If the backing storage cannot be acquired.
        """
        if length < 0:
            raise AllocationError(f"invalid lookup table length: {length}")
        try:
            values = np.zeros(length, dtype=np.float64)
        except MemoryError as e:
            raise AllocationError(
                f"failed allocating lookup table of {length} samples"
            ) from e

        return cls.from_array(values)

    @property
    def values(self) -> FloatArray:
        """Read-only view of the stored samples."""
        view = self._values[: self._length].view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"InterpolateLookup(len={self._length})"

    def try_get_index(self, index) -> float | None:
        """Return the sample at ``index``, or None if it is not in the table."""
        if not isinstance(index, int):
            if not math.isfinite(index) or index != math.floor(index):
                return None
            index = int(index)
        if index < 0 or index >= self._length:
            return None
        return float(self._values[index])

    def get_index(self, index) -> float:
        """Return the sample at ``index``.

        Raises:
            TableIndexError: If ``index`` is not a valid table position.
        """
        value = self.try_get_index(index)
        if value is None:
            raise TableIndexError(index, self._length)
        return value

    def set_index(self, index: int, value: float) -> None:
        """Overwrite the sample at ``index``."""
        if index < 0 or index >= self._length:
            raise TableIndexError(index, self._length)
        self._values[index] = value

    def push(self, value: float) -> None:
        """Append a sample to the end of the table."""
        if self._length == len(self._values):
            # Grow geometrically so repeated pushes stay amortised O(1)
            capacity = max(8, 2 * len(self._values))
            try:
                grown = np.zeros(capacity, dtype=np.float64)
            except MemoryError as e:
                raise AllocationError("failed growing lookup table") from e
            grown[: self._length] = self._values[: self._length]
            self._values = grown
        self._values[self._length] = value
        self._length += 1

    def __call__(self, x: float) -> float:
        if not math.isfinite(x):
            raise TableIndexError(x, self._length)

        x0 = math.floor(x)

        # Whole seconds land exactly on a sample
        if x0 == x:
            return self.get_index(x0)

        y0 = self.get_index(x0)
        y1 = self.get_index(x0 + 1)

        # Samples are one second apart, so (x1 - x0) is always 1
        return y0 + (x - x0) * (y1 - y0)
