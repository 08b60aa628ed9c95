"""Quadrature rules and the interpolated sample table they integrate."""

from trainsim.summation.lookup import InterpolateLookup
from trainsim.summation.rules import (
    get_rule,
    integrate,
    left_riemann,
    mid_riemann,
    right_riemann,
    simpsons,
    trapezoidal,
)

__all__ = [
    "InterpolateLookup",
    "get_rule",
    "integrate",
    "left_riemann",
    "mid_riemann",
    "right_riemann",
    "simpsons",
    "trapezoidal",
]
