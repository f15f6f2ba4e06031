"""
Genetic Algorithm Configuration

This module contains the configuration parameters for the Genetic Algorithm.
"""

import numbers
from dataclasses import dataclass, asdict
from typing import Optional

from ..exceptions import ConfigurationError
from ..genetic.fitness import FITNESS_FUNCTIONS


def _is_integer(value) -> bool:
    # bool is an Integral too, but never a valid count or seed
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass
class GAConfig:
    """Configuration parameters for the Genetic Algorithm"""

    # Population parameters
    population_size: int = 100
    generations: int = 1000

    # Genetic operator parameters
    mutation_rate: float = 0.1
    mutation_sigma: float = 0.1

    # Search space for the initial population
    init_lower: float = -5.0
    init_upper: float = 5.0

    # Objective
    fitness_function: str = 'peak'

    # Reproducibility
    random_seed: Optional[int] = None

    # Progress logging
    log_interval: int = 100

    def validate(self) -> None:
        """Validate configuration parameters"""
        # Population parameters
        if not _is_integer(self.population_size) or self.population_size <= 0:
            raise ConfigurationError("Population size must be a positive integer")
        if not _is_integer(self.generations) or self.generations <= 0:
            raise ConfigurationError("Generations must be a positive integer")

        # Genetic operator parameters
        if not 0 <= self.mutation_rate <= 1:
            raise ConfigurationError("Mutation rate must be between 0 and 1")
        if self.mutation_sigma < 0:
            raise ConfigurationError("Mutation sigma must be non-negative")

        if self.init_lower >= self.init_upper:
            raise ConfigurationError("Initial lower bound must be below the upper bound")

        if self.fitness_function not in FITNESS_FUNCTIONS:
            raise ConfigurationError(
                f"Fitness function must be one of: {', '.join(FITNESS_FUNCTIONS)}"
            )

        # Reproducibility parameters
        if self.random_seed is not None and not _is_integer(self.random_seed):
            raise ConfigurationError("Random seed must be an integer")

        if not _is_integer(self.log_interval) or self.log_interval <= 0:
            raise ConfigurationError("Log interval must be a positive integer")

    def to_dict(self) -> dict:
        """Convert configuration to dictionary"""
        return asdict(self)
