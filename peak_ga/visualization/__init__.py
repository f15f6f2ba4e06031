"""
Visualization package for selection strategy comparisons
"""

from .base_visualizer import BaseVisualizer
from .comparison_visualizer import ComparisonVisualizer

__all__ = ['BaseVisualizer', 'ComparisonVisualizer']
