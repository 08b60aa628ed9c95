"""Train Motion Integration Benchmark.

Derives velocity and position from a sampled acceleration profile by repeated
numerical integration, using either a single-threaded or a thread-pool pipeline.
"""

__version__ = "0.1.0"
