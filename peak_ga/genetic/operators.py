"""
Genetic operators for two-variable optimization

This module contains the selection strategies, crossover and mutation
operators for the genetic algorithm.
"""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from ..exceptions import ConfigurationError
from .individual import Individual


def _require_individuals(population: Sequence[Individual]) -> None:
    if len(population) == 0:
        raise ValueError("Cannot select from an empty population")


class SelectionStrategy(ABC):
    """Picks one parent from a population without modifying it"""

    name = 'selection'

    @abstractmethod
    def select(self, population: Sequence[Individual]) -> Individual:
        """Select a single individual from the population"""


class RouletteSelection(SelectionStrategy):
    """Fitness-proportional selection"""

    name = 'roulette'

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def select(self, population: Sequence[Individual]) -> Individual:
        """Select individual with probability proportional to its fitness share"""
        _require_individuals(population)

        total_fitness = sum(ind.fitness for ind in population)
        # Degenerate wheel: nothing to be proportional to
        if total_fitness <= 0:
            return population[-1]

        selection_point = self.rng.random() * total_fitness

        cumulative_fitness = 0.0
        for ind in population:
            cumulative_fitness += ind.fitness
            if cumulative_fitness >= selection_point:
                return ind

        # Rounding can leave the running sum just short of the draw
        return population[-1]


class EliteSelection(SelectionStrategy):
    """Greedy selection of the single fittest individual"""

    name = 'elite'

    def select(self, population: Sequence[Individual]) -> Individual:
        """Return the fittest individual, first occurrence on ties"""
        _require_individuals(population)
        return max(population, key=lambda ind: ind.fitness)


class TournamentSelection(SelectionStrategy):
    """Tournament selection with tournament size k (default 3)"""

    name = 'tournament'

    def __init__(self, rng: np.random.Generator, tournament_size: int = 3):
        if tournament_size <= 0:
            raise ConfigurationError("Tournament size must be positive")
        self.rng = rng
        self.tournament_size = tournament_size

    def select(self, population: Sequence[Individual]) -> Individual:
        """Select individual using tournament selection"""
        _require_individuals(population)

        # Handle edge case where tournament size > population size
        actual_tournament_size = min(self.tournament_size, len(population))
        indices = self.rng.choice(len(population), size=actual_tournament_size, replace=False)

        # Keep population order so ties go to the earlier individual
        tournament = [population[i] for i in sorted(indices)]
        return max(tournament, key=lambda ind: ind.fitness)


class MidpointCrossover:
    """Arithmetic-mean blend of two parents"""

    def crossover(self, parent1: Individual, parent2: Individual) -> Individual:
        """Create one offspring at the midpoint of the parents"""
        x = (parent1.x + parent2.x) / 2
        y = (parent1.y + parent2.y) / 2
        return Individual(x, y, parent1.fitness_function)


class GaussianMutation:
    """Gaussian perturbation of both coordinates, applied all-or-nothing"""

    def __init__(self, mutation_rate: float, rng: np.random.Generator, sigma: float = 0.1):
        if not 0 <= mutation_rate <= 1:
            raise ConfigurationError("Mutation rate must be between 0 and 1")
        if sigma < 0:
            raise ConfigurationError("Mutation sigma must be non-negative")
        self.mutation_rate = mutation_rate
        self.sigma = sigma
        self.rng = rng

    def mutate(self, individual: Individual) -> Individual:
        """Apply mutation to a copy of the individual"""
        mutated = individual.copy()

        # One trial for the whole point: either both coordinates move or neither does
        if self.rng.random() < self.mutation_rate:
            dx, dy = self.rng.normal(0.0, self.sigma, size=2)
            mutated.move_by(dx, dy)

        return mutated
