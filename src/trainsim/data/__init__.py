"""Acceleration data sources."""

from trainsim.data.csv_source import load_csv_profile
from trainsim.data.synthetic import generate_synthetic_profile

__all__ = [
    "generate_synthetic_profile",
    "load_csv_profile",
]
