"""Benchmark harness and timing utilities."""

from trainsim.simulation.runner import BenchmarkResult, BenchmarkRunner
from trainsim.simulation.timing import LogTimer, Timing

__all__ = [
    "BenchmarkResult",
    "BenchmarkRunner",
    "LogTimer",
    "Timing",
]
