"""Type definitions for the integration engine."""

from collections.abc import Callable
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

# Array types
FloatArray: TypeAlias = NDArray[np.float64]

# A function of a single real variable, sampled by every quadrature rule
Integrand: TypeAlias = Callable[[float], float]

# (lower, upper, subdivisions, integrand) -> approximate integral
SummationRule: TypeAlias = Callable[[float, float, int, Integrand], float]
