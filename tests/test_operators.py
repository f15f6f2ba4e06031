import numpy as np
import pytest
from hypothesis import given, strategies as st

from peak_ga.exceptions import ConfigurationError
from peak_ga.genetic import (
    EliteSelection,
    GaussianMutation,
    Individual,
    MidpointCrossover,
    RouletteSelection,
    SelectionStrategy,
    TournamentSelection,
    peak_fitness,
)
from peak_ga.utils import make_rng

from .helpers import FixedRandom, constant_fitness, x_fitness

coordinates = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


# =============================================================================
# Crossover
# =============================================================================

@given(coordinates, coordinates, coordinates, coordinates)
def test_crossover_midpoint(x1, y1, x2, y2):
    parent1 = Individual(x1, y1)
    parent2 = Individual(x2, y2)
    child = MidpointCrossover().crossover(parent1, parent2)
    assert child.x == (x1 + x2) / 2
    assert child.y == (y1 + y2) / 2
    assert child.fitness == peak_fitness(child.x, child.y)


@given(coordinates, coordinates)
def test_self_crossover_reproduces_parent(x, y):
    parent = Individual(x, y)
    child = MidpointCrossover().crossover(parent, parent)
    assert (child.x, child.y, child.fitness) == (parent.x, parent.y, parent.fitness)
    assert child is not parent


def test_crossover_leaves_parents_untouched():
    parent1 = Individual(1.0, 2.0)
    parent2 = Individual(3.0, -2.0)
    MidpointCrossover().crossover(parent1, parent2)
    assert parent1.to_dict() == {'x': 1.0, 'y': 2.0, 'fitness': peak_fitness(1.0, 2.0)}
    assert parent2.to_dict() == {'x': 3.0, 'y': -2.0, 'fitness': peak_fitness(3.0, -2.0)}


def test_crossover_keeps_fitness_function():
    child = MidpointCrossover().crossover(Individual(2.0, 0.0, x_fitness), Individual(4.0, 0.0, x_fitness))
    assert child.fitness == 3.0


# =============================================================================
# Mutation
# =============================================================================

def test_zero_rate_never_mutates(rng):
    mutation = GaussianMutation(0.0, rng)
    original = Individual(1.5, -2.5)
    for _ in range(200):
        mutated = mutation.mutate(original)
        assert (mutated.x, mutated.y, mutated.fitness) == (original.x, original.y, original.fitness)


def test_full_rate_always_mutates_and_recomputes_fitness(rng):
    mutation = GaussianMutation(1.0, rng)
    original = Individual(1.5, -2.5)
    for _ in range(200):
        mutated = mutation.mutate(original)
        assert mutated.x != original.x
        assert mutated.y != original.y
        assert mutated.fitness == peak_fitness(mutated.x, mutated.y)


def test_mutation_does_not_modify_input(rng):
    original = Individual(0.5, 0.5)
    GaussianMutation(1.0, rng).mutate(original)
    assert (original.x, original.y) == (0.5, 0.5)


def test_both_coordinates_mutate_together(rng):
    mutation = GaussianMutation(0.5, rng)
    original = Individual(0.0, 0.0)
    outcomes = []
    for _ in range(500):
        mutated = mutation.mutate(original)
        x_changed = mutated.x != original.x
        assert x_changed == (mutated.y != original.y)
        outcomes.append(x_changed)
    assert 0.4 < np.mean(outcomes) < 0.6


def test_mutation_noise_distribution(rng):
    mutation = GaussianMutation(1.0, rng, sigma=0.1)
    original = Individual(0.0, 0.0)
    steps = np.array([(m.x, m.y) for m in (mutation.mutate(original) for _ in range(4000))])
    assert np.abs(steps.mean(axis=0)).max() < 0.01
    assert steps.std(axis=0) == pytest.approx([0.1, 0.1], abs=0.01)


@pytest.mark.parametrize("rate", [-0.1, 1.01])
def test_mutation_rate_out_of_range(rng, rate):
    with pytest.raises(ConfigurationError):
        GaussianMutation(rate, rng)


def test_negative_sigma_rejected(rng):
    with pytest.raises(ConfigurationError):
        GaussianMutation(0.1, rng, sigma=-1.0)


# =============================================================================
# Roulette selection
# =============================================================================

def test_roulette_returns_first_reaching_the_draw(weighted_individuals):
    # Total 4, draw 0.5 * 4 = 2, running sums 1, 2, 4
    selection = RouletteSelection(FixedRandom(0.5))
    assert selection.select(weighted_individuals) is weighted_individuals[1]


def test_roulette_zero_draw_picks_first(weighted_individuals):
    selection = RouletteSelection(FixedRandom(0.0))
    assert selection.select(weighted_individuals) is weighted_individuals[0]


def test_roulette_falls_back_to_last_when_sum_falls_short(weighted_individuals):
    selection = RouletteSelection(FixedRandom(1.0 + 1e-9))
    assert selection.select(weighted_individuals) is weighted_individuals[-1]


def test_roulette_all_zero_fitness_returns_last(rng):
    population = [Individual(float(i), 0.0, constant_fitness(0.0)) for i in range(5)]
    selection = RouletteSelection(rng)
    for _ in range(20):
        assert selection.select(population) is population[-1]


def test_roulette_negative_total_returns_last(rng):
    population = [Individual(-1.0, 0.0, x_fitness), Individual(-2.0, 0.0, x_fitness)]
    assert RouletteSelection(rng).select(population) is population[-1]


def test_roulette_is_fitness_proportional(rng):
    low = Individual(1.0, 0.0, x_fitness)
    high = Individual(3.0, 0.0, x_fitness)
    selection = RouletteSelection(rng)
    picks = [selection.select([low, high]) is high for _ in range(4000)]
    assert np.mean(picks) == pytest.approx(0.75, abs=0.03)


def test_roulette_does_not_reorder(rng, population):
    before = list(population.individuals)
    RouletteSelection(rng).select(population.individuals)
    assert population.individuals == before


# =============================================================================
# Elite selection
# =============================================================================

def test_elite_picks_fittest(population):
    chosen = EliteSelection().select(population.individuals)
    assert chosen.fitness == max(ind.fitness for ind in population)


def test_elite_is_deterministic(population):
    selection = EliteSelection()
    first = selection.select(population.individuals)
    second = selection.select(population.individuals)
    assert first is second
    assert (first.x, first.y, first.fitness) == (second.x, second.y, second.fitness)


def test_elite_ties_go_to_first_occurrence():
    population = [Individual(2.0, 2.0), Individual(0.0, 1.0), Individual(1.0, 0.0)]
    assert EliteSelection().select(population) is population[1]


def test_elite_does_not_reorder(population):
    before = list(population.individuals)
    EliteSelection().select(population.individuals)
    assert population.individuals == before


def test_elite_crossover_degenerates_to_the_best_point(population):
    selection = EliteSelection()
    parent1 = selection.select(population.individuals)
    parent2 = selection.select(population.individuals)
    child = MidpointCrossover().crossover(parent1, parent2)
    assert (child.x, child.y) == (parent1.x, parent1.y)


# =============================================================================
# Tournament selection and the shared contract
# =============================================================================

def test_tournament_of_whole_population_picks_best(rng, population):
    selection = TournamentSelection(rng, tournament_size=50)
    assert selection.select(population.individuals) is population.best()


def test_tournament_picks_member_of_population(rng, population):
    selection = TournamentSelection(rng, tournament_size=3)
    for _ in range(20):
        assert selection.select(population.individuals) in population.individuals


def test_tournament_size_must_be_positive(rng):
    with pytest.raises(ConfigurationError):
        TournamentSelection(rng, tournament_size=0)


@pytest.mark.parametrize("selection", [
    RouletteSelection(make_rng(0)),
    EliteSelection(),
    TournamentSelection(make_rng(0)),
])
def test_selection_rejects_empty_population(selection):
    assert isinstance(selection, SelectionStrategy)
    with pytest.raises(ValueError, match="empty population"):
        selection.select([])
