"""
Main Genetic Algorithm controller
"""

import time
import logging
from typing import Dict, List, Optional

import numpy as np

from ..config import GAConfig
from ..exceptions import ConfigurationError
from ..genetic import (
    FitnessFunction,
    GaussianMutation,
    Individual,
    MidpointCrossover,
    Population,
    SelectionStrategy,
    get_fitness_function,
)
from ..utils import make_rng


class GeneticAlgorithm:
    """
    Main controller for the generational evolution process
    """

    def __init__(self,
                 config: GAConfig,
                 selection_operator: SelectionStrategy,
                 crossover_operator: MidpointCrossover,
                 mutation_operator: GaussianMutation,
                 fitness_function: Optional[FitnessFunction] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize genetic algorithm

        Args:
            config: GA configuration parameters
            selection_operator: Parent selection strategy
            crossover_operator: Crossover strategy
            mutation_operator: Mutation strategy
            fitness_function: Objective to maximize. Defaults to the one named in config
            rng: Random generator for the initial population
        """
        # Validation
        config.validate()
        operator_rate = getattr(mutation_operator, 'mutation_rate', config.mutation_rate)
        if operator_rate != config.mutation_rate:
            raise ConfigurationError(
                f"Mutation operator rate {operator_rate} does not match "
                f"configured mutation rate {config.mutation_rate}"
            )

        self.config = config
        self.selection_operator = selection_operator
        self.crossover_operator = crossover_operator
        self.mutation_operator = mutation_operator
        self.fitness_function = fitness_function or get_fitness_function(config.fitness_function)
        self.rng = rng if rng is not None else make_rng(config.random_seed)

        # Evolution state
        self.population: Optional[Population] = None
        self.generation = 0
        self.best_fitness_history: List[float] = []
        self.mean_fitness_history: List[float] = []
        self.diversity_history: List[float] = []

        # Timing
        self.start_time: Optional[float] = None

        # Logging
        self.logger = logging.getLogger(__name__)

    @property
    def strategy_name(self) -> str:
        return getattr(self.selection_operator, 'name', type(self.selection_operator).__name__)

    def run(self, initial_population: Optional[Population] = None) -> Dict:
        """
        Run the complete genetic algorithm evolution

        Args:
            initial_population: Starting population. It is cloned, never modified.
                If None, a random population is sampled

        Returns:
            Dictionary with evolution results
        """
        self.logger.info(f"Starting evolution with {self.strategy_name} selection")
        self.logger.info(f"Configuration: Population={self.config.population_size}, "
                         f"Generations={self.config.generations}, "
                         f"Mutation rate={self.config.mutation_rate}")

        self._initialize_population(initial_population)
        self.start_time = time.time()

        try:
            for self.generation in range(1, self.config.generations + 1):
                self._evolve_population()
                self._update_statistics()
                self._log_generation_progress()

            return self._compile_results()

        except Exception as e:
            self.logger.error(f"Error during evolution: {e}")
            raise
        finally:
            total_time = time.time() - self.start_time
            self.logger.info(f"{self.strategy_name} evolution completed in {total_time:.2f} seconds")

    def _initialize_population(self, initial_population: Optional[Population]) -> None:
        """Clone the given population or sample a fresh one"""
        if initial_population is not None:
            if len(initial_population) != self.config.population_size:
                raise ValueError(
                    f"Initial population has {len(initial_population)} individuals, "
                    f"expected {self.config.population_size}"
                )
            self.population = initial_population.clone()
        else:
            self.logger.info("Initializing population...")
            self.population = Population.random(
                self.config.population_size,
                self.rng,
                self.fitness_function,
                lower=self.config.init_lower,
                upper=self.config.init_upper,
            )

        self.generation = 0
        self.best_fitness_history = []
        self.mean_fitness_history = []
        self.diversity_history = []
        self._update_statistics()

    def _update_statistics(self) -> None:
        """Record best/mean fitness and diversity of the current population"""
        stats = self.population.get_statistics()
        self.best_fitness_history.append(stats['best_fitness'])
        self.mean_fitness_history.append(stats['avg_fitness'])
        self.diversity_history.append(stats['diversity'])

    def _evolve_population(self) -> None:
        """Create the next generation through selection, crossover, and mutation"""
        if not self.population:
            raise RuntimeError("Population not initialized")

        # Parents always come from the previous generation, never from new offspring
        parents = self.population.individuals
        new_individuals = []

        for _ in range(self.config.population_size):
            parent1 = self._select_parent(parents)
            parent2 = self._select_parent(parents)
            offspring = self.crossover_operator.crossover(parent1, parent2)
            new_individuals.append(self.mutation_operator.mutate(offspring))

        self.population.replace_individuals(new_individuals)

    def _select_parent(self, parents: List[Individual]) -> Individual:
        """Select a parent using the configured selection strategy"""
        return self.selection_operator.select(parents)

    def _log_generation_progress(self) -> None:
        """Log progress for current generation"""
        if self.generation % self.config.log_interval == 0 or self.generation <= 5:
            self.logger.info(
                f"[{self.strategy_name}] Generation {self.generation:4d}: "
                f"Best={self.best_fitness_history[-1]:.6f}, "
                f"Avg={self.mean_fitness_history[-1]:.6f}, "
                f"Diversity={self.diversity_history[-1]:.4f}"
            )

    def _compile_results(self) -> Dict:
        """Compile final evolution results"""
        best = self.population.best()
        total_time = time.time() - self.start_time

        results = {
            'strategy': self.strategy_name,
            'best_individual': best.to_dict(),
            'best_fitness': best.fitness,
            'initial_best_fitness': self.best_fitness_history[0],
            'generations_run': self.generation,

            # Evolution history (index 0 is the initial population)
            'fitness_history': self.best_fitness_history.copy(),
            'mean_fitness_history': self.mean_fitness_history.copy(),
            'diversity_history': self.diversity_history.copy(),

            'final_population_stats': self.population.get_statistics(),
            'total_time': total_time,
            'config': self.config.to_dict(),
        }

        self.logger.info(f"[{self.strategy_name}] Best individual: x={best.x:.6f}, "
                         f"y={best.y:.6f}, fitness={best.fitness:.6f}")

        return results
