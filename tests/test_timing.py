"""Tests for timing statistics and the progress log throttle."""

import pytest

from trainsim.simulation.timing import LogTimer, Timing


class TestTiming:
    """Tests for accumulated duration statistics."""

    def test_update(self):
        timing = Timing()
        for seconds in [0.5, 0.2, 0.8]:
            timing.update(seconds)

        assert timing.min == 0.2
        assert timing.max == 0.8
        assert timing.total == pytest.approx(1.5)
        assert timing.count == 3
        assert timing.avg == pytest.approx(0.5)

    def test_empty_average(self):
        assert Timing().avg == 0.0

    def test_single_sample_shows_total(self):
        timing = Timing()
        timing.update(1.5)

        assert str(timing) == "total: 1.500000000"

    def test_multiple_samples_show_all(self):
        timing = Timing()
        timing.update(1.0)
        timing.update(2.0)

        assert str(timing) == (
            "min: 1.000000000\n"
            "max: 2.000000000\n"
            "avg: 1.500000000\n"
            "tot: 3.000000000"
        )

    def test_nanosecond_rounding_carries(self):
        """A fraction that rounds up to a full second should carry over."""
        timing = Timing()
        timing.update(0.9999999999)

        assert str(timing) == "total: 1.000000000"


class TestLogTimer:
    """Tests for the interval-based log throttle."""

    def test_signals_after_interval(self):
        now = [0.0]
        timer = LogTimer(interval=10.0, clock=lambda: now[0])

        now[0] = 5.0
        assert timer.update() is False

        now[0] = 10.0
        assert timer.update() is True

    def test_restarts_after_signal(self):
        now = [0.0]
        timer = LogTimer(interval=10.0, clock=lambda: now[0])

        now[0] = 12.0
        assert timer.update() is True

        now[0] = 20.0
        assert timer.update() is False

        now[0] = 22.0
        assert timer.update() is True
