"""
Reporting package for selection strategy comparisons
"""

from .base_reporter import BaseReporter
from .comparison_reporter import ComparisonReporter

__all__ = ['BaseReporter', 'ComparisonReporter']
