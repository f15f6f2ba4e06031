"""Genetic algorithm for maximizing a two-variable objective"""

__version__ = '0.1.0'
