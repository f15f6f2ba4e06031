"""
Side-by-side runs of several selection strategies

Every strategy evolves its own copy of one shared initial population, so the
runs start from identical points but never share individuals.
"""

import logging
from typing import Dict, Optional

import numpy as np

from ..config import GAConfig
from ..genetic import (
    EliteSelection,
    FitnessFunction,
    GaussianMutation,
    MidpointCrossover,
    Population,
    RouletteSelection,
    SelectionStrategy,
    get_fitness_function,
)
from ..utils import make_rng
from .genetic_algorithm import GeneticAlgorithm

logger = logging.getLogger(__name__)


def default_strategies(rng: np.random.Generator) -> Dict[str, SelectionStrategy]:
    """Roulette first, then elite"""
    return {
        'roulette': RouletteSelection(rng),
        'elite': EliteSelection(),
    }


def compare_selection_strategies(config: GAConfig,
                                 fitness_function: Optional[FitnessFunction] = None,
                                 strategies: Optional[Dict[str, SelectionStrategy]] = None,
                                 rng: Optional[np.random.Generator] = None) -> Dict[str, Dict]:
    """
    Run one independent evolution per selection strategy

    Args:
        config: GA configuration shared by all runs
        fitness_function: Objective to maximize. Defaults to the one named in config
        strategies: Ordered mapping of name to selection strategy.
            Defaults to roulette and elite selection
        rng: Random generator shared by all runs. Defaults to one seeded from config

    Returns:
        Ordered mapping of strategy name to the run's result dictionary
    """
    config.validate()

    if rng is None:
        rng = make_rng(config.random_seed)
    if fitness_function is None:
        fitness_function = get_fitness_function(config.fitness_function)
    if strategies is None:
        strategies = default_strategies(rng)

    initial_population = Population.random(
        config.population_size,
        rng,
        fitness_function,
        lower=config.init_lower,
        upper=config.init_upper,
    )
    logger.info(f"Initial population best fitness: {initial_population.best().fitness:.6f}")

    crossover_operator = MidpointCrossover()
    mutation_operator = GaussianMutation(config.mutation_rate, rng, sigma=config.mutation_sigma)

    results = {}
    for name, selection_operator in strategies.items():
        ga = GeneticAlgorithm(
            config=config,
            selection_operator=selection_operator,
            crossover_operator=crossover_operator,
            mutation_operator=mutation_operator,
            fitness_function=fitness_function,
            rng=rng,
        )
        result = ga.run(initial_population)
        result['strategy'] = name
        results[name] = result

    return results
