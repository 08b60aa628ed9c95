"""Tests for profile plotting."""

import matplotlib.pyplot as plt

from trainsim.pipeline import SequentialPipeline
from trainsim.summation.lookup import InterpolateLookup
from trainsim.viz.plots import plot_motion_profile


class TestPlotMotionProfile:
    """Tests for the acceleration/velocity figure."""

    def test_two_panels(self):
        accel = InterpolateLookup([0.0, 1.0, 2.0, 3.0])
        result = SequentialPipeline(step=1).integrate(accel)

        fig = plot_motion_profile(accel, result.velocity, final_position=result.final_position)

        assert len(fig.axes) == 2
        line = fig.axes[1].lines[0]
        assert list(line.get_ydata()) == [0.0, 0.0, 1.0, 3.0]
        plt.close(fig)

    def test_save(self, tmp_path):
        accel = InterpolateLookup([0.0, 1.0])
        result = SequentialPipeline(step=1).integrate(accel)
        path = tmp_path / "profile.png"

        fig = plot_motion_profile(accel, result.velocity, save_path=path)

        assert path.exists()
        plt.close(fig)
