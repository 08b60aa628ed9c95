"""Thread-pool integration pipeline.

The per-second integrals do not depend on each other, only the running sum
that turns them into velocities does. The work is therefore split into:

  A. velocity increments   parallel map, each worker writes its own slots
  B. prefix sum            single-threaded scan, the only barrier
  C. position              parallel map + sum of per-worker partial totals

Phase B must see every increment from phase A, and phase C must not read the
velocity table until phase B has finished.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial

import numpy as np

from trainsim.core.config import SummationAlgo
from trainsim.core.errors import AllocationError
from trainsim.core.types import FloatArray
from trainsim.pipeline.data import IntegrationResult, SimulationConfig
from trainsim.pipeline.sequential import require_samples
from trainsim.summation.lookup import InterpolateLookup
from trainsim.summation.rules import get_rule

logger = logging.getLogger(__name__)


def partition_seconds(length: int, parts: int) -> list[range]:
    """Split the seconds ``1..length-1`` into at most ``parts`` contiguous ranges.

    Ranges differ in size by at most one and are returned in ascending order.
    """
    intervals = max(length - 1, 0)
    parts = min(parts, intervals)
    if parts == 0:
        return []

    size, extra = divmod(intervals, parts)
    chunks = []
    start = 1
    for i in range(parts):
        stop = start + size + (1 if i < extra else 0)
        chunks.append(range(start, stop))
        start = stop
    return chunks


class ParallelPipeline:
    """Derives velocity and position across a bounded pool of worker threads.

    The pool is created with the pipeline and reused for every call to
    ``integrate``; call ``close`` (or use the pipeline as a context manager)
    to shut it down.
    """

    def __init__(
        self,
        algo: SummationAlgo = SummationAlgo.LEFT_RIEMANN,
        step: int = 100,
        threads: int = 2,
    ):
        if threads < 1:
            raise ValueError(f"threads must be at least 1, got {threads}")
        self.algo = SummationAlgo(algo)
        self.step = step
        self.threads = threads
        self._rule = get_rule(self.algo)
        self._executor = ThreadPoolExecutor(
            max_workers=threads,
            thread_name_prefix="trainsim-worker",
        )

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "ParallelPipeline":
        return cls(algo=config.algo, step=config.step, threads=config.threads)

    def _write_increments(
        self,
        table: InterpolateLookup,
        out: FloatArray,
        seconds: range,
    ) -> None:
        for sec in seconds:
            out[sec] = self._rule(sec - 1, sec, self.step, table)

    def _sum_increments(self, table: InterpolateLookup, seconds: range) -> float:
        total = 0.0
        for sec in seconds:
            total += self._rule(sec - 1, sec, self.step, table)
        return total

    def derive_velocity(self, acceleration: InterpolateLookup) -> InterpolateLookup:
        """Integrate acceleration into a velocity table starting at rest."""
        require_samples(acceleration)
        length = len(acceleration)

        try:
            increments = np.zeros(length, dtype=np.float64)
        except MemoryError as e:
            raise AllocationError(
                f"failed allocating velocity table of {length} samples"
            ) from e

        # Phase A: consuming the iterator waits for every chunk and re-raises
        # the first worker error
        chunks = partition_seconds(length, self.threads)
        list(self._executor.map(
            partial(self._write_increments, acceleration, increments),
            chunks,
        ))

        # Phase B: increments[0] is 0, so the scan starts from rest
        np.cumsum(increments, out=increments)

        return InterpolateLookup.from_array(increments)

    def derive_position(self, velocity: InterpolateLookup) -> float:
        """Integrate a velocity table into the final position."""
        chunks = partition_seconds(len(velocity), self.threads)
        partials = self._executor.map(
            partial(self._sum_increments, velocity),
            chunks,
        )

        # Phase C: partial totals combined in chunk order
        position = 0.0
        for value in partials:
            position += value
        return position

    def integrate(self, acceleration: InterpolateLookup) -> IntegrationResult:
        logger.debug(
            "parallel pass: len=%d algo=%s step=%d threads=%d",
            len(acceleration), self.algo.value, self.step, self.threads,
        )
        velocity = self.derive_velocity(acceleration)
        position = self.derive_position(velocity)

        return IntegrationResult(
            velocity=velocity,
            final_velocity=velocity.get_index(len(velocity) - 1),
            final_position=position,
        )

    def close(self) -> None:
        """Shut down the worker pool, waiting for running tasks."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "ParallelPipeline":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
