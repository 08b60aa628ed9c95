"""Tests for the sequential and thread-pool pipelines."""

import numpy as np
import pytest

from trainsim.core.config import SummationAlgo
from trainsim.core.errors import AllocationError, TableIndexError
from trainsim.data.synthetic import generate_synthetic_profile
from trainsim.pipeline import (
    ParallelPipeline,
    SequentialPipeline,
    SimulationConfig,
    create_pipeline,
    run,
)
from trainsim.pipeline.parallel import partition_seconds
from trainsim.summation.lookup import InterpolateLookup


class FailingLookup(InterpolateLookup):
    """Lookup that refuses to be sampled past a given x."""

    def __init__(self, values, fail_after: float):
        super().__init__(values)
        self.fail_after = fail_after

    def __call__(self, x: float) -> float:
        if x > self.fail_after:
            raise TableIndexError(x, len(self))
        return super().__call__(x)


@pytest.fixture
def profile():
    """Noisy synthetic profile long enough to exercise chunking."""
    return generate_synthetic_profile(seconds=120, noise=0.05)


class TestSequentialPipeline:
    """Tests for the single-threaded pipeline."""

    def test_left_riemann_scenario(self):
        """[0, 1, 2, 3] with one left subdivision."""
        pipeline = SequentialPipeline(algo=SummationAlgo.LEFT_RIEMANN, step=1)
        result = pipeline.integrate(InterpolateLookup([0.0, 1.0, 2.0, 3.0]))

        np.testing.assert_array_equal(result.velocity.values, [0.0, 0.0, 1.0, 3.0])
        assert result.final_velocity == 3.0
        assert result.final_position == 1.0

    def test_single_sample(self):
        """A one-sample table has no intervals to integrate."""
        result = SequentialPipeline().integrate(InterpolateLookup([5.0]))

        np.testing.assert_array_equal(result.velocity.values, [0.0])
        assert result.final_velocity == 0.0
        assert result.final_position == 0.0

    def test_empty_table(self):
        """An empty table should be rejected."""
        with pytest.raises(ValueError):
            SequentialPipeline().integrate(InterpolateLookup())

    def test_constant_acceleration(self):
        """Constant acceleration should give v = a*t and x = a*t²/2."""
        pipeline = SequentialPipeline(algo=SummationAlgo.TRAPEZOIDAL, step=4)
        result = pipeline.integrate(InterpolateLookup([2.0] * 10))

        np.testing.assert_allclose(result.velocity.values, 2.0 * np.arange(10))
        assert result.final_velocity == pytest.approx(18.0)
        assert result.final_position == pytest.approx(81.0)

    def test_index_error_propagates(self):
        """A table miss should abort the whole pass."""
        table = FailingLookup([1.0] * 5, fail_after=2.5)

        with pytest.raises(TableIndexError):
            SequentialPipeline(step=4).integrate(table)


class TestParallelPipeline:
    """Tests for the thread-pool pipeline."""

    @pytest.mark.parametrize("threads", [1, 2, 4])
    def test_left_riemann_scenario(self, threads):
        """Should reproduce the sequential scenario for any pool size."""
        with ParallelPipeline(algo=SummationAlgo.LEFT_RIEMANN, step=1, threads=threads) as pipeline:
            result = pipeline.integrate(InterpolateLookup([0.0, 1.0, 2.0, 3.0]))

        np.testing.assert_array_equal(result.velocity.values, [0.0, 0.0, 1.0, 3.0])
        assert result.final_velocity == 3.0
        assert result.final_position == 1.0

    def test_single_sample(self):
        """A one-sample table has no intervals to integrate."""
        with ParallelPipeline(threads=4) as pipeline:
            result = pipeline.integrate(InterpolateLookup([5.0]))

        assert result.final_velocity == 0.0
        assert result.final_position == 0.0

    def test_single_thread_matches_sequential_exactly(self, profile):
        """One worker sums in the same order as the sequential scan."""
        sequential = SequentialPipeline(algo=SummationAlgo.MID_RIEMANN, step=10).integrate(profile)
        with ParallelPipeline(algo=SummationAlgo.MID_RIEMANN, step=10, threads=1) as pipeline:
            parallel = pipeline.integrate(profile)

        np.testing.assert_array_equal(parallel.velocity.values, sequential.velocity.values)
        assert parallel.final_velocity == sequential.final_velocity
        assert parallel.final_position == sequential.final_position

    @pytest.mark.parametrize("algo", list(SummationAlgo))
    @pytest.mark.parametrize("threads", [1, 2, 4])
    def test_matches_sequential(self, profile, algo, threads):
        """Both pipelines should agree within floating-point tolerance."""
        sequential = SequentialPipeline(algo=algo, step=8).integrate(profile)
        with ParallelPipeline(algo=algo, step=8, threads=threads) as pipeline:
            parallel = pipeline.integrate(profile)

        np.testing.assert_allclose(
            parallel.velocity.values, sequential.velocity.values, rtol=1e-9, atol=1e-12
        )
        assert parallel.final_velocity == pytest.approx(sequential.final_velocity, rel=1e-9, abs=1e-12)
        assert parallel.final_position == pytest.approx(sequential.final_position, rel=1e-9, abs=1e-12)

    def test_more_threads_than_intervals(self):
        """Idle workers should not change the result."""
        with ParallelPipeline(step=1, threads=16) as pipeline:
            result = pipeline.integrate(InterpolateLookup([0.0, 1.0, 2.0, 3.0]))

        assert result.final_position == 1.0

    def test_pool_reused_across_passes(self, profile):
        """Repeated passes on one pipeline should give identical results."""
        with ParallelPipeline(step=4, threads=3) as pipeline:
            first = pipeline.integrate(profile)
            second = pipeline.integrate(profile)

        assert first.final_velocity == second.final_velocity
        assert first.final_position == second.final_position

    def test_worker_error_propagates(self):
        """A table miss inside a worker should surface to the caller."""
        table = FailingLookup([1.0] * 20, fail_after=12.5)

        with ParallelPipeline(step=4, threads=4) as pipeline:
            with pytest.raises(TableIndexError):
                pipeline.integrate(table)

    def test_velocity_table_not_copied(self, monkeypatch):
        """The prefix-summed buffer becomes the velocity table as-is."""
        table = InterpolateLookup([0.0, 1.0, 2.0, 3.0])

        def no_copy(*args, **kwargs):
            raise AssertionError("velocity table was copied")

        monkeypatch.setattr(np, "fromiter", no_copy)

        with ParallelPipeline(step=1, threads=2) as pipeline:
            result = pipeline.integrate(table)

        np.testing.assert_array_equal(result.velocity.values, [0.0, 0.0, 1.0, 3.0])

    def test_close_shuts_down_pool(self):
        """The pool should reject work once the pipeline is closed."""
        pipeline = ParallelPipeline(threads=2)
        pipeline.close()

        with pytest.raises(RuntimeError):
            pipeline.integrate(InterpolateLookup([0.0, 1.0, 2.0]))

    def test_invalid_thread_count(self):
        with pytest.raises(ValueError):
            ParallelPipeline(threads=0)


class TestAllocationFailure:
    """Velocity table allocation failures surface as AllocationError."""

    @pytest.fixture
    def no_memory(self, monkeypatch):
        def refuse(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(np, "zeros", refuse)

    def test_sequential(self, no_memory):
        table = InterpolateLookup([0.0, 1.0, 2.0, 3.0])

        with pytest.raises(AllocationError, match="4 samples"):
            SequentialPipeline(step=1).integrate(table)

    def test_parallel(self, no_memory):
        table = InterpolateLookup([0.0, 1.0, 2.0, 3.0])

        with ParallelPipeline(step=1, threads=2) as pipeline:
            with pytest.raises(AllocationError, match="velocity table"):
                pipeline.integrate(table)

    def test_is_memory_error(self, no_memory):
        with pytest.raises(MemoryError):
            SequentialPipeline().integrate(InterpolateLookup([1.0, 2.0]))


class TestPartitionSeconds:
    """Tests for splitting work between workers."""

    def test_covers_every_second_once(self):
        chunks = partition_seconds(10, 3)
        seconds = [sec for chunk in chunks for sec in chunk]

        assert seconds == list(range(1, 10))
        assert [len(c) for c in chunks] == [3, 3, 3]

    def test_uneven_split(self):
        chunks = partition_seconds(11, 3)

        assert [len(c) for c in chunks] == [4, 3, 3]
        assert chunks[0].start == 1
        assert chunks[-1].stop == 11

    def test_fewer_intervals_than_parts(self):
        assert len(partition_seconds(3, 8)) == 2

    def test_no_intervals(self):
        assert partition_seconds(1, 4) == []
        assert partition_seconds(0, 4) == []


class TestRun:
    """Tests for pipeline selection and the run entry point."""

    def test_single_thread_is_sequential(self):
        pipeline = create_pipeline(SimulationConfig(threads=1))

        assert isinstance(pipeline, SequentialPipeline)

    def test_multiple_threads_is_parallel(self):
        with create_pipeline(SimulationConfig(threads=3, step=5)) as pipeline:
            assert isinstance(pipeline, ParallelPipeline)
            assert pipeline.threads == 3
            assert pipeline.step == 5

    @pytest.mark.parametrize("threads", [1, 2, 4])
    def test_run_scenario(self, threads):
        config = SimulationConfig(threads=threads, algo=SummationAlgo.LEFT_RIEMANN, step=1)
        result = run(config, InterpolateLookup([0.0, 1.0, 2.0, 3.0]))

        assert result.final_velocity == 3.0
        assert result.final_position == 1.0

    def test_run_leaves_input_untouched(self, profile):
        before = profile.values.copy()
        run(SimulationConfig(threads=2, step=3), profile)

        np.testing.assert_array_equal(profile.values, before)

    def test_run_accepts_plain_sequence(self):
        """A list of samples is wrapped in a lookup before integrating."""
        result = run(SimulationConfig(step=1), [0.0, 1.0, 2.0, 3.0])

        assert result.final_velocity == 3.0
        assert result.final_position == 1.0
