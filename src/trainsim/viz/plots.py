"""Plotting functions for motion profiles."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from trainsim.summation.lookup import InterpolateLookup


def plot_motion_profile(
    acceleration: InterpolateLookup,
    velocity: InterpolateLookup,
    final_position: float | None = None,
    save_path: Path | None = None,
) -> Figure:
    """Plot acceleration and integrated velocity against time.

    Args:
        acceleration: Input samples, one per second.
        velocity: Velocity table derived from ``acceleration``.
        final_position: Optional distance travelled, shown as an annotation.
        save_path: Optional path to save figure.

    Returns:
        Matplotlib figure.
    """
    fig, (ax_accel, ax_vel) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    t_accel = np.arange(len(acceleration))
    t_vel = np.arange(len(velocity))

    ax_accel.plot(t_accel, acceleration.values, "b-", linewidth=1)
    ax_accel.axhline(0, color="k", linewidth=0.5, alpha=0.5)
    ax_accel.set_ylabel("Acceleration (m/s²)")
    ax_accel.set_title("Acceleration Profile")
    ax_accel.grid(True, alpha=0.3)

    ax_vel.plot(t_vel, velocity.values, "g-", linewidth=1)
    ax_vel.set_xlabel("Time (s)")
    ax_vel.set_ylabel("Velocity (m/s)")
    ax_vel.set_title("Integrated Velocity")
    ax_vel.grid(True, alpha=0.3)

    if final_position is not None:
        ax_vel.text(
            0.02, 0.95, f"Position: {final_position:.1f} m",
            transform=ax_vel.transAxes,
            verticalalignment="top",
            fontsize=9,
            bbox=dict(boxstyle="round", facecolor="white", alpha=0.8),
        )

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    return fig
