import pytest

from peak_ga.config import GAConfig
from peak_ga.genetic import Individual, Population
from peak_ga.utils import make_rng

from .helpers import x_fitness


@pytest.fixture
def rng():
    return make_rng(12345)


@pytest.fixture
def small_config():
    return GAConfig(population_size=10, generations=5, mutation_rate=0.0, random_seed=42)


@pytest.fixture
def population(rng):
    return Population.random(20, rng)


@pytest.fixture
def weighted_individuals():
    """Three individuals whose fitness equals their x coordinate: 1, 1, 2"""
    return [Individual(1.0, 0.0, x_fitness),
            Individual(1.0, 5.0, x_fitness),
            Individual(2.0, 0.0, x_fitness)]
