"""Genetic algorithm components module"""

from .fitness import FitnessFunction, peak_fitness, gaussian_peak_fitness, get_fitness_function
from .individual import Individual
from .population import Population
from .operators import (
    SelectionStrategy,
    RouletteSelection,
    EliteSelection,
    TournamentSelection,
    MidpointCrossover,
    GaussianMutation,
)

__all__ = [
    'FitnessFunction',
    'peak_fitness',
    'gaussian_peak_fitness',
    'get_fitness_function',
    'Individual',
    'Population',
    'SelectionStrategy',
    'RouletteSelection',
    'EliteSelection',
    'TournamentSelection',
    'MidpointCrossover',
    'GaussianMutation',
]
