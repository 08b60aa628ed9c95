"""Pipeline selection and the single-run entry point."""

from collections.abc import Iterable

from trainsim.pipeline.data import IntegrationResult, SimulationConfig
from trainsim.pipeline.parallel import ParallelPipeline
from trainsim.pipeline.sequential import SequentialPipeline
from trainsim.summation.lookup import InterpolateLookup


def create_pipeline(config: SimulationConfig) -> SequentialPipeline | ParallelPipeline:
    """Build the pipeline matching ``config.threads``.

    One thread selects the sequential pipeline; anything more gets a thread
    pool of exactly that size.
    """
    if config.is_parallel:
        return ParallelPipeline.from_config(config)
    return SequentialPipeline.from_config(config)


def run(
    config: SimulationConfig,
    acceleration: InterpolateLookup | Iterable[float],
) -> IntegrationResult:
    """Derive final velocity and position from an acceleration table.

    Args:
        config: Validated simulation parameters.
        acceleration: One sample per whole second, starting at t=0. Plain
            sequences of floats are copied into an ``InterpolateLookup``.

    Returns:
        Velocity table plus final velocity and position.

    Raises:
        TableIndexError: If a quadrature sample fell outside the table.
        AllocationError: If the velocity table could not be allocated.
    """
    if not isinstance(acceleration, InterpolateLookup):
        acceleration = InterpolateLookup(acceleration)

    with create_pipeline(config) as pipeline:
        return pipeline.integrate(acceleration)
