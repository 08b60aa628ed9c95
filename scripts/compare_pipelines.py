#!/usr/bin/env python3
"""Compare sequential and thread-pool pipelines on the same profile.

Runs the benchmark harness once per thread count and prints the average time
per iteration and the speedup relative to one thread.

Usage:
    uv run python scripts/compare_pipelines.py --threads 1 2 4 8
    uv run python scripts/compare_pipelines.py --csv profile.csv --algo simpsons --step 200
"""

import sys

# Force unbuffered output for real-time logging
sys.stdout.reconfigure(line_buffering=True)
sys.stderr.reconfigure(line_buffering=True)

import argparse

from trainsim.core.config import SummationAlgo, load_simulation_config
from trainsim.data import generate_synthetic_profile, load_csv_profile
from trainsim.simulation.runner import BenchmarkRunner


def main():
    parser = argparse.ArgumentParser(
        description="Train simulation thread scaling comparison",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--threads",
        type=int,
        nargs="+",
        default=[1, 2, 4],
        help="Thread counts to compare (1 = sequential pipeline)",
    )
    parser.add_argument(
        "--algo",
        type=SummationAlgo,
        choices=list(SummationAlgo),
        default=SummationAlgo.LEFT_RIEMANN,
        help="Summation algorithm",
    )
    parser.add_argument(
        "--step",
        type=int,
        default=100,
        help="Subdivisions within each one-second interval",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=10,
        help="Iterations per thread count",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="CSV acceleration profile (default: synthetic profile)",
    )
    parser.add_argument(
        "--column",
        type=str,
        default=None,
        help="Named CSV column holding acceleration",
    )
    parser.add_argument(
        "--seconds",
        type=int,
        default=600,
        help="Synthetic profile length in seconds",
    )

    args = parser.parse_args()

    if args.csv:
        acceleration = load_csv_profile(args.csv, column=args.column)
    else:
        acceleration = generate_synthetic_profile(seconds=args.seconds)

    print("=" * 60)
    print("Pipeline Thread Scaling")
    print("=" * 60)
    print(f"Samples: {len(acceleration)}")
    print(f"Algorithm: {args.algo.value}  Step: {args.step}  Iterations: {args.iterations}")

    baseline = None
    for threads in args.threads:
        config = load_simulation_config(
            threads=threads,
            algo=args.algo,
            step=args.step,
            iterations=args.iterations,
        )
        result = BenchmarkRunner(config=config, log_fn=lambda _: None).run(acceleration)

        if baseline is None:
            baseline = result.avg_seconds
        speedup = baseline / result.avg_seconds if result.avg_seconds > 0 else float("nan")

        print(
            f"threads={threads:<3d} avg={result.avg_seconds:.6f}s "
            f"speedup={speedup:.2f}x "
            f"velocity={result.final_velocity:+.9f} position={result.final_position:+.9f}"
        )


if __name__ == "__main__":
    main()
