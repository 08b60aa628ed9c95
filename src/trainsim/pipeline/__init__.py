"""Sequential and thread-pool pipelines turning acceleration into motion.

    acceleration ──▶ velocity table ──▶ final position
       (input)      (integrated once)   (integrated twice)

With one thread every second is integrated in a single forward scan. With more,
per-second integrals run across a thread pool and a sequential prefix sum joins
them into velocities before position is reduced in parallel.
"""

from trainsim.pipeline.data import IntegrationResult, SimulationConfig
from trainsim.pipeline.parallel import ParallelPipeline
from trainsim.pipeline.pipeline import create_pipeline, run
from trainsim.pipeline.sequential import SequentialPipeline

__all__ = [
    "IntegrationResult",
    "ParallelPipeline",
    "SequentialPipeline",
    "SimulationConfig",
    "create_pipeline",
    "run",
]
