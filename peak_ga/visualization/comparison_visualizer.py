#!/usr/bin/env python3
"""
Comparison Visualizer Module

Evolution curves for each selection strategy of a comparison run.
"""

import matplotlib.pyplot as plt
from pathlib import Path
from typing import Any, Dict, List
from .base_visualizer import BaseVisualizer


class ComparisonVisualizer(BaseVisualizer):
    """
    Visualizer for selection strategy comparison results
    """

    def generate_all_plots(self, results: Dict[str, Dict[str, Any]]) -> List[Path]:
        """
        Generate all comparison visualizations

        Args:
            results: Mapping of strategy name to run result

        Returns:
            Paths of the saved images
        """
        return [
            self.plot_fitness_histories(results),
            self.plot_diversity_histories(results),
        ]

    def plot_fitness_histories(self, results: Dict[str, Dict[str, Any]]) -> Path:
        """Plot best and mean fitness per generation, one panel per strategy"""
        fig, axes = self.create_subplot_grid(1, len(results),
                                             suptitle='Fitness per Generation (Higher is Better)')
        colors = self.get_color_palette(2)

        for ax, (name, result) in zip(axes[0], results.items()):
            generations = list(range(len(result['fitness_history'])))
            ax.plot(generations, result['fitness_history'], linewidth=2,
                    color=colors[0], label='Best Fitness')
            ax.plot(generations, result['mean_fitness_history'], linewidth=1.5,
                    color=colors[1], label='Mean Fitness')
            ax.set_title(f"{name.capitalize()} selection")
            ax.set_xlabel('Generation')
            ax.set_ylabel('Fitness')
            self.setup_grid(ax)
            ax.legend()

        plt.tight_layout()
        return self.save_plot('fitness_histories.png')

    def plot_diversity_histories(self, results: Dict[str, Dict[str, Any]]) -> Path:
        """Overlay population diversity of every strategy"""
        plt.figure()
        colors = self.get_color_palette(len(results))

        for color, (name, result) in zip(colors, results.items()):
            history = result['diversity_history']
            plt.plot(range(len(history)), history, linewidth=2, color=color, label=name)

        plt.title('Population Diversity (Mean Pairwise Distance)')
        plt.xlabel('Generation')
        plt.ylabel('Diversity')
        plt.yscale('symlog', linthresh=1e-3)
        plt.grid(True, alpha=0.3)
        plt.legend()

        plt.tight_layout()
        return self.save_plot('diversity_histories.png')
