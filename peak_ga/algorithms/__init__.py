"""Evolution drivers"""

from .genetic_algorithm import GeneticAlgorithm
from .comparison import compare_selection_strategies, default_strategies

__all__ = ['GeneticAlgorithm', 'compare_selection_strategies', 'default_strategies']
