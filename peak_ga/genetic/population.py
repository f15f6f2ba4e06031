"""
Population management for genetic algorithm

This module contains the population management for the genetic algorithm.
"""

import numpy as np
from typing import Any, Dict, Iterator, List, Sequence

from .fitness import FitnessFunction, peak_fitness
from .individual import Individual


class Population:
    """Manages the fixed-size, ordered collection of individuals of one run"""

    def __init__(self, individuals: Sequence[Individual]):
        """
        Wrap an existing set of individuals

        Args:
            individuals: Non-empty sequence of individuals, kept in order
        """
        if not individuals:
            raise ValueError("Population must contain at least one individual")
        self.individuals: List[Individual] = list(individuals)
        self.size = len(self.individuals)
        self.generation = 0

    @classmethod
    def random(cls,
               size: int,
               rng: np.random.Generator,
               fitness_function: FitnessFunction = peak_fitness,
               lower: float = -5.0,
               upper: float = 5.0) -> 'Population':
        """
        Create an initial population with points drawn uniformly from [lower, upper)

        Args:
            size: Number of individuals in population
            rng: Random generator
            fitness_function: Objective for every individual
            lower: Lower bound for both coordinates
            upper: Upper bound for both coordinates

        Returns:
            New Population
        """
        if size <= 0:
            raise ValueError("Population size must be positive")
        points = rng.uniform(lower, upper, size=(size, 2))
        return cls([Individual(x, y, fitness_function) for x, y in points])

    def clone(self) -> 'Population':
        """Copy every individual so the clone shares no storage with this population"""
        cloned = Population([ind.copy() for ind in self.individuals])
        cloned.generation = self.generation
        return cloned

    def best(self) -> Individual:
        """Return the highest-fitness individual (first one on ties)"""
        return max(self.individuals, key=lambda ind: ind.fitness)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Calculate population statistics

        Returns:
            Dictionary with population statistics
        """
        fitness_values = np.array([ind.fitness for ind in self.individuals])

        return {
            'best_fitness': float(fitness_values.max()),
            'worst_fitness': float(fitness_values.min()),
            'avg_fitness': float(fitness_values.mean()),
            'std_fitness': float(fitness_values.std()),
            'diversity': self._calculate_diversity(),
        }

    def _calculate_diversity(self) -> float:
        """Calculate population diversity as mean pairwise Euclidean distance"""
        if self.size < 2:
            return 0.0

        points = np.array([(ind.x, ind.y) for ind in self.individuals])
        deltas = points[:, None, :] - points[None, :, :]
        distances = np.sqrt((deltas ** 2).sum(axis=-1))
        upper = np.triu_indices(self.size, k=1)
        return float(distances[upper].mean())

    def replace_individuals(self, new_individuals: List[Individual]) -> None:
        """
        Replace current population with new individuals

        Args:
            new_individuals: List of new individuals for next generation
        """
        if len(new_individuals) != self.size:
            raise ValueError(
                f"Replacement must keep population size {self.size}, got {len(new_individuals)}"
            )
        self.individuals = list(new_individuals)
        self.generation += 1

    def __len__(self) -> int:
        """Return population size"""
        return len(self.individuals)

    def __iter__(self) -> Iterator[Individual]:
        """Make population iterable"""
        return iter(self.individuals)

    def __getitem__(self, index: int) -> Individual:
        return self.individuals[index]
