"""Synthetic acceleration profiles for development and benchmarking."""

import numpy as np

from trainsim.summation.lookup import InterpolateLookup


def generate_synthetic_profile(
    seconds: int = 600,
    peak_acceleration: float = 1.2,
    noise: float = 0.0,
    seed: int = 42,
) -> InterpolateLookup:
    """Generate a plausible train acceleration profile.

    The profile has three phases:
    - Departure: acceleration ramps up then eases off over the first 30%
    - Cruise: near-zero acceleration
    - Arrival: symmetric braking over the last 30%

    Args:
        seconds: Number of samples (one per second). Must be at least 1.
        peak_acceleration: Peak magnitude in m/s².
        noise: Standard deviation of Gaussian noise added to each sample.
        seed: Seed for the noise generator.

    Returns:
        Lookup table with ``seconds`` samples.
    """
    if seconds < 1:
        raise ValueError(f"seconds must be at least 1, got {seconds}")

    t = np.arange(seconds, dtype=np.float64)
    phase = t / max(seconds - 1, 1)
    accel = np.zeros(seconds, dtype=np.float64)

    departure = phase < 0.3
    accel[departure] = peak_acceleration * np.sin(np.pi * phase[departure] / 0.3)

    arrival = phase > 0.7
    accel[arrival] = -peak_acceleration * np.sin(np.pi * (phase[arrival] - 0.7) / 0.3)

    if noise > 0:
        rng = np.random.default_rng(seed)
        accel += rng.normal(0.0, noise, size=seconds)

    return InterpolateLookup(accel)
