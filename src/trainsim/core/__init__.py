"""Core data structures and utilities."""

from trainsim.core.config import Settings, SummationAlgo
from trainsim.core.errors import (
    AccelerationSourceError,
    AllocationError,
    ConfigError,
    TableIndexError,
    TrainSimError,
)
from trainsim.core.types import FloatArray, Integrand, SummationRule

__all__ = [
    "AccelerationSourceError",
    "AllocationError",
    "ConfigError",
    "FloatArray",
    "Integrand",
    "Settings",
    "SummationAlgo",
    "SummationRule",
    "TableIndexError",
    "TrainSimError",
]
