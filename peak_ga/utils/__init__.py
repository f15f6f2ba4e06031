"""Utility modules for common functionality"""

from .random_utils import make_rng
from .logging_utils import setup_logger

__all__ = ['make_rng', 'setup_logger']
