"""Single-threaded integration pipeline."""

import logging

from trainsim.core.config import SummationAlgo
from trainsim.pipeline.data import IntegrationResult, SimulationConfig
from trainsim.summation.lookup import InterpolateLookup
from trainsim.summation.rules import get_rule

logger = logging.getLogger(__name__)


def require_samples(table: InterpolateLookup) -> None:
    """Reject a table with no samples; there is no t=0 to start from."""
    if len(table) < 1:
        raise ValueError("acceleration table must contain at least one sample")


class SequentialPipeline:
    """Derives velocity then position in one forward scan per derivation.

    Each whole second ``sec`` contributes the integral over ``[sec - 1, sec]``.
    For velocity the contributions are accumulated into a table as they are
    computed; for position only the running total is kept.
    """

    def __init__(self, algo: SummationAlgo = SummationAlgo.LEFT_RIEMANN, step: int = 100):
        self.algo = SummationAlgo(algo)
        self.step = step
        self._rule = get_rule(self.algo)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "SequentialPipeline":
        return cls(algo=config.algo, step=config.step)

    def derive_velocity(self, acceleration: InterpolateLookup) -> InterpolateLookup:
        """Integrate acceleration into a velocity table starting at rest."""
        require_samples(acceleration)
        length = len(acceleration)

        velocity = InterpolateLookup.zeros(length)
        running = 0.0

        for sec in range(1, length):
            running += self._rule(sec - 1, sec, self.step, acceleration)
            velocity.set_index(sec, running)

        return velocity

    def derive_position(self, velocity: InterpolateLookup) -> float:
        """Integrate a velocity table into the final position."""
        position = 0.0

        for sec in range(1, len(velocity)):
            position += self._rule(sec - 1, sec, self.step, velocity)

        return position

    def integrate(self, acceleration: InterpolateLookup) -> IntegrationResult:
        logger.debug(
            "sequential pass: len=%d algo=%s step=%d",
            len(acceleration), self.algo.value, self.step,
        )
        velocity = self.derive_velocity(acceleration)
        position = self.derive_position(velocity)

        return IntegrationResult(
            velocity=velocity,
            final_velocity=velocity.get_index(len(velocity) - 1),
            final_position=position,
        )

    def close(self) -> None:
        """Nothing to release; present for symmetry with the parallel pipeline."""

    def __enter__(self) -> "SequentialPipeline":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
