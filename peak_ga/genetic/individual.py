"""
Individual representation for genetic algorithm

This module contains the individual representation for the genetic algorithm.
"""

from typing import Dict

from .fitness import FitnessFunction, peak_fitness


class Individual:
    """A candidate point (x, y) with its cached fitness"""

    def __init__(self, x: float, y: float, fitness_function: FitnessFunction = peak_fitness):
        """
        Initialize individual and evaluate it

        Args:
            x: First coordinate
            y: Second coordinate
            fitness_function: Objective used to score the point
        """
        self.fitness_function = fitness_function
        self._x = float(x)
        self._y = float(y)
        self._evaluate()

    def _evaluate(self) -> None:
        self._fitness = float(self.fitness_function(self._x, self._y))

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = float(value)
        self._evaluate()

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = float(value)
        self._evaluate()

    @property
    def fitness(self) -> float:
        """Fitness of the current point (read-only, always up to date)"""
        return self._fitness

    def move_by(self, dx: float, dy: float) -> None:
        """Shift both coordinates and re-evaluate fitness once"""
        self._x += float(dx)
        self._y += float(dy)
        self._evaluate()

    def copy(self) -> 'Individual':
        """
        Create an independent copy of the individual

        Returns:
            New Individual with the same point and fitness function
        """
        return Individual(self._x, self._y, self.fitness_function)

    def to_dict(self) -> Dict[str, float]:
        """Serializable view used by the reporters"""
        return {'x': self._x, 'y': self._y, 'fitness': self._fitness}

    def __repr__(self) -> str:
        return f"Individual(x={self._x!r}, y={self._y!r}, fitness={self._fitness!r})"

    def __str__(self) -> str:
        return f"Individual(x={self._x:.6f}, y={self._y:.6f}, fitness={self._fitness:.6f})"
