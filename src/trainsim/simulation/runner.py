"""Benchmark harness wrapping repeated pipeline runs with timers."""

import logging
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel

from trainsim.core.config import Settings, SummationAlgo, get_settings
from trainsim.core.errors import ConfigError
from trainsim.pipeline.data import IntegrationResult, SimulationConfig
from trainsim.pipeline.pipeline import create_pipeline
from trainsim.simulation.timing import LogTimer, Timing
from trainsim.summation.lookup import InterpolateLookup

# Configure module logger with immediate flushing
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


class BenchmarkResult(BaseModel):
    """Results from a benchmark run."""

    # Configuration
    threads: int
    algo: SummationAlgo
    step: int
    iterations: int
    samples: int

    # Output of the last iteration
    final_velocity: float
    final_position: float

    # Timing statistics (seconds)
    min_seconds: float
    max_seconds: float
    avg_seconds: float
    total_seconds: float

    def to_dict(self) -> dict:
        """Export to dictionary for JSON serialization."""
        return self.model_dump(mode="json")

    def save(self, path: Path) -> None:
        """Save results to JSON file."""
        import json
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


@dataclass
class BenchmarkRunner:
    """Runs one pipeline ``config.iterations`` times and times each pass.

    Only the integration is timed; pipeline construction and teardown happen
    once, outside the timed region.
    """

    config: SimulationConfig
    settings: Settings = field(default_factory=get_settings)
    log_fn: Callable[[str], None] | None = None

    # Populated by run()
    timing: Timing = field(default_factory=Timing)
    last_result: IntegrationResult | None = None

    def __post_init__(self):
        self.log = self.log_fn or logger.info
        if self.settings.debug:
            # Surface per-pass pipeline details through the same handlers
            pipeline_logger = logging.getLogger("trainsim.pipeline")
            pipeline_logger.setLevel(logging.DEBUG)
            if not pipeline_logger.handlers:
                for h in logger.handlers:
                    pipeline_logger.addHandler(h)
            logger.setLevel(logging.DEBUG)

    def run(self, acceleration: InterpolateLookup) -> BenchmarkResult:
        """Benchmark the configured pipeline against ``acceleration``.

        Raises:
            ConfigError: If no iterations are configured.
            TableIndexError: Propagated from the first failing iteration.
        """
        if self.config.iterations < 1:
            raise ConfigError(f"iterations must be at least 1, got {self.config.iterations}")

        self.timing = Timing()
        log_timer = LogTimer(interval=self.settings.benchmark.log_interval_seconds)
        cfg = self.config

        self.log(
            f"length: {len(acceleration)} step: {cfg.step} "
            f"iterations: {cfg.iterations} threads: {cfg.threads}"
        )

        with create_pipeline(cfg) as pipeline:
            for iteration in range(cfg.iterations):
                start = time.perf_counter()
                result = pipeline.integrate(acceleration)
                self.timing.update(time.perf_counter() - start)

                if log_timer.update():
                    self.log(f"iteration: {iteration}\n{self.timing}")

        self.last_result = result
        self.log(f"final velocity: {result.final_velocity:+}")
        self.log(f"final position: {result.final_position:+}")
        self.log(str(self.timing))

        return BenchmarkResult(
            threads=cfg.threads,
            algo=cfg.algo,
            step=cfg.step,
            iterations=cfg.iterations,
            samples=len(acceleration),
            final_velocity=result.final_velocity,
            final_position=result.final_position,
            min_seconds=self.timing.min,
            max_seconds=self.timing.max,
            avg_seconds=self.timing.avg,
            total_seconds=self.timing.total,
        )
