"""Configuration for genetic algorithm runs"""

from .ga_config import GAConfig

__all__ = ['GAConfig']
