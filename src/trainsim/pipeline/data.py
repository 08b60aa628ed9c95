"""Data classes passed into and out of the integration pipelines."""

from dataclasses import dataclass

from trainsim.core.config import SummationAlgo
from trainsim.summation.lookup import InterpolateLookup


@dataclass(frozen=True)
class SimulationConfig:
    """Validated parameters for one simulation run.

    Values are expected to be range-checked already (see
    ``trainsim.core.config.load_simulation_config``).
    """

    # Worker threads; 1 selects the sequential pipeline
    threads: int = 1

    algo: SummationAlgo = SummationAlgo.LEFT_RIEMANN

    # Subdivisions within each one-second interval
    step: int = 100

    # Only consumed by the benchmark harness
    iterations: int = 100

    @property
    def is_parallel(self) -> bool:
        return self.threads > 1


@dataclass
class IntegrationResult:
    """Output of a single pass through a pipeline."""

    # Running velocity at every whole second, discarded after each iteration
    velocity: InterpolateLookup

    final_velocity: float
    final_position: float
