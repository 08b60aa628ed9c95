"""Shared pytest configuration."""

import matplotlib

# Non-interactive backend for headless test runs
matplotlib.use("Agg")
