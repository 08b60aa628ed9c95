"""Exception types raised by the integration engine and its collaborators."""


class TrainSimError(Exception):
    """Base class for all errors raised by this package."""


class TableIndexError(TrainSimError, IndexError):
    """A table lookup or interpolation fell outside ``[0, len - 1]``."""

    def __init__(self, index, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"attempted to access table index that is out of bounds. "
            f"index: {index} len: {length}"
        )


class AllocationError(TrainSimError, MemoryError):
    """Backing storage for a sample table could not be acquired."""


class ConfigError(TrainSimError, ValueError):
    """Simulation configuration failed validation."""


class AccelerationSourceError(TrainSimError):
    """Acceleration samples could not be loaded from their source."""
