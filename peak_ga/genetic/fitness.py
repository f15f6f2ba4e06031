"""
Objective functions for the two-variable search

All functions here are maximized: a higher value means a fitter point.
"""

import math
from typing import Callable, Dict

from ..exceptions import ConfigurationError

FitnessFunction = Callable[[float, float], float]


def peak_fitness(x: float, y: float) -> float:
    """Smooth peak at the origin, 1 / (1 + x^2 + y^2), always in (0, 1]"""
    # Denominator is at least 1, so this is total over the reals
    return 1.0 / (1.0 + x * x + y * y)


def gaussian_peak_fitness(x: float, y: float) -> float:
    """Gaussian bump exp(-(x^2 + y^2)), maximum 1 at the origin"""
    return math.exp(-(x * x + y * y))


FITNESS_FUNCTIONS: Dict[str, FitnessFunction] = {
    'peak': peak_fitness,
    'gaussian': gaussian_peak_fitness,
}


def get_fitness_function(name: str) -> FitnessFunction:
    """
    Look up a fitness function by its registered name

    Args:
        name: One of the keys of FITNESS_FUNCTIONS

    Returns:
        The fitness function
    """
    try:
        return FITNESS_FUNCTIONS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown fitness function '{name}'. Available: {', '.join(FITNESS_FUNCTIONS)}"
        ) from None
