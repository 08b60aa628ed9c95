"""Visualization tools for simulation results."""

from trainsim.viz.plots import plot_motion_profile

__all__ = [
    "plot_motion_profile",
]
