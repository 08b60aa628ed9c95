"""Composite quadrature rules over a single interval.

Every rule splits ``[lower, upper]`` into ``iterations`` equal subintervals of
width ``step = (upper - lower) / iterations`` and approximates the integral of
``fn`` with a weighted sum of samples:

  left_riemann:   step * sum(f(lower + i*step))              i = 0..n-1
  mid_riemann:    step * sum(f(lower + i*step + step/2))     i = 0..n-1
  right_riemann:  step * sum(f(lower + (i+1)*step))          i = 0..n-1
  trapezoidal:    step * ((f(lower) + f(upper))/2 + sum(f(lower + i*step)))  i = 1..n-1
  simpsons:       step/3 * (f(lower) + f(upper) + 4*sum(odd i) + 2*sum(even i))

Simpson's composite rule is only exact for cubics when ``iterations`` is even.
An odd count is accepted and gives a degraded approximation rather than an
error.
"""

from trainsim.core.config import SummationAlgo
from trainsim.core.types import Integrand, SummationRule


def _step_size(lower: float, upper: float, iterations: int) -> float:
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    return (upper - lower) / iterations


def left_riemann(lower: float, upper: float, iterations: int, fn: Integrand) -> float:
    """Left Riemann sum of ``fn`` over ``[lower, upper]``."""
    step = _step_size(lower, upper, iterations)
    total = 0.0

    for i in range(iterations):
        total += fn(lower + i * step)

    return step * total


def mid_riemann(lower: float, upper: float, iterations: int, fn: Integrand) -> float:
    """Midpoint Riemann sum of ``fn`` over ``[lower, upper]``."""
    step = _step_size(lower, upper, iterations)
    half_step = step / 2.0
    total = 0.0

    for i in range(iterations):
        total += fn((lower + i * step) + half_step)

    return step * total


def right_riemann(lower: float, upper: float, iterations: int, fn: Integrand) -> float:
    """Right Riemann sum of ``fn`` over ``[lower, upper]``."""
    step = _step_size(lower, upper, iterations)
    total = 0.0

    for i in range(iterations):
        total += fn(lower + (i + 1) * step)

    return step * total


def trapezoidal(lower: float, upper: float, iterations: int, fn: Integrand) -> float:
    """Composite trapezoidal rule for ``fn`` over ``[lower, upper]``."""
    step = _step_size(lower, upper, iterations)
    total = (fn(lower) + fn(upper)) / 2.0

    # Interior points only; the endpoints carry half weight above
    for i in range(1, iterations):
        total += fn(lower + i * step)

    return step * total


def simpsons(lower: float, upper: float, iterations: int, fn: Integrand) -> float:
    """Composite Simpson's rule for ``fn`` over ``[lower, upper]``."""
    step = _step_size(lower, upper, iterations)
    total = 0.0

    for i in range(iterations + 1):
        value = fn(lower + i * step)

        if i == 0 or i == iterations:
            total += value
        elif i % 2 == 1:
            total += 4.0 * value
        else:
            total += 2.0 * value

    return step * total / 3.0


RULES: dict[SummationAlgo, SummationRule] = {
    SummationAlgo.LEFT_RIEMANN: left_riemann,
    SummationAlgo.MID_RIEMANN: mid_riemann,
    SummationAlgo.RIGHT_RIEMANN: right_riemann,
    SummationAlgo.TRAPEZOIDAL: trapezoidal,
    SummationAlgo.SIMPSONS: simpsons,
}


def get_rule(algo: SummationAlgo | str) -> SummationRule:
    """Resolve an algorithm selector to its quadrature function."""
    return RULES[SummationAlgo(algo)]


def integrate(
    algo: SummationAlgo | str,
    lower: float,
    upper: float,
    iterations: int,
    fn: Integrand,
) -> float:
    """Integrate ``fn`` over ``[lower, upper]`` with the selected rule."""
    return get_rule(algo)(lower, upper, iterations, fn)
