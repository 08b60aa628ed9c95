"""Configuration and settings for the simulation system."""

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from trainsim.core.errors import ConfigError

if TYPE_CHECKING:
    from trainsim.pipeline.data import SimulationConfig


class SummationAlgo(str, Enum):
    """Quadrature rule used for every unit-interval integration."""

    LEFT_RIEMANN = "left-riemann"
    MID_RIEMANN = "mid-riemann"
    RIGHT_RIEMANN = "right-riemann"
    TRAPEZOIDAL = "trapezoidal"
    SIMPSONS = "simpsons"  # exact only for an even step count


class SimulationSettings(BaseSettings):
    """Integration pipeline configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Worker threads (1 = sequential pipeline)
    threads: int = Field(default=1, ge=1)

    # Quadrature rule
    algo: SummationAlgo = SummationAlgo.LEFT_RIEMANN

    # Subdivisions within each one-second interval
    step: int = Field(default=100, ge=1)

    # Repeated runs for benchmarking
    iterations: int = Field(default=100, ge=1)


class BenchmarkSettings(BaseSettings):
    """Benchmark harness configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BENCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Minimum time between progress log lines (seconds)
    log_interval_seconds: float = Field(default=10.0, gt=0)


class Settings(BaseSettings):
    """Master configuration aggregating all subsystems."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    benchmark: BenchmarkSettings = Field(default_factory=BenchmarkSettings)

    # Debug mode
    debug: bool = False


def get_settings() -> Settings:
    """Load settings from environment and .env file.

    Raises:
        ConfigError: If any environment value fails validation.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"invalid settings: {e}") from e


def load_simulation_config(**overrides) -> "SimulationConfig":
    """Build a validated simulation config.

    Explicit overrides take precedence over the environment and ``.env``
    values held by ``get_settings().simulation``; ``None`` overrides are
    ignored so optional CLI flags can be passed straight through.

    Raises:
        ConfigError: If any value is out of range or the algorithm is unknown.
    """
    from trainsim.pipeline.data import SimulationConfig

    given = {key: value for key, value in overrides.items() if value is not None}
    base = get_settings().simulation
    try:
        settings = SimulationSettings.model_validate({**base.model_dump(), **given})
    except ValidationError as e:
        raise ConfigError(f"invalid simulation configuration: {e}") from e

    return SimulationConfig(
        threads=settings.threads,
        algo=settings.algo,
        step=settings.step,
        iterations=settings.iterations,
    )
