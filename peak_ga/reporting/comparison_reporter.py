#!/usr/bin/env python3
"""
Comparison Reporter Module

Reports the best individual found by each selection strategy.
"""

import pandas as pd
from pathlib import Path
from typing import Any, Dict, List
from .base_reporter import BaseReporter


class ComparisonReporter(BaseReporter):
    """
    Reporter for selection strategy comparison results
    """

    def format_best(self, result: Dict[str, Any]) -> str:
        """One-line description of a strategy's best individual"""
        best = result['best_individual']
        return (f"x = {self.format_number(best['x'])}, "
                f"y = {self.format_number(best['y'])}, "
                f"fitness = {self.format_number(best['fitness'])}")

    def summary_frame(self, results: Dict[str, Dict[str, Any]]) -> pd.DataFrame:
        """Build one summary row per strategy, in run order"""
        rows = []
        for name, result in results.items():
            best = result['best_individual']
            rows.append({
                'strategy': name,
                'best_x': best['x'],
                'best_y': best['y'],
                'best_fitness': best['fitness'],
                'initial_best_fitness': result['initial_best_fitness'],
                'final_mean_fitness': result['mean_fitness_history'][-1],
                'final_diversity': result['diversity_history'][-1],
                'generations': result['generations_run'],
                'total_time': result['total_time'],
            })
        return pd.DataFrame(rows)

    def print_summary(self, results: Dict[str, Dict[str, Any]]):
        """Print the best individual of every strategy to the console"""
        print("\n" + "=" * 80)
        print("SELECTION STRATEGY COMPARISON")
        print("=" * 80)

        if not results:
            print("No results to display.")
            return

        for name, result in results.items():
            print(f"\nBest individual with {name} selection:")
            print(self.format_best(result))

        print("=" * 80)

    def generate_report(self, results: Dict[str, Dict[str, Any]]) -> Path:
        """
        Write a plain text report of a comparison

        Args:
            results: Mapping of strategy name to run result

        Returns:
            Path to generated report
        """
        report_path = self.results_dir / 'comparison_report.txt'

        with open(report_path, 'w', encoding='utf-8') as f:
            f.write("GENETIC ALGORITHM SELECTION STRATEGY REPORT\n")
            f.write("=" * 80 + "\n")

            if results:
                config = next(iter(results.values()))['config']
                self.write_section_header(f, "CONFIGURATION", level=2)
                for key, value in config.items():
                    self.write_bullet_point(f, f"{key}: {value}")

            for name, result in results.items():
                self.write_section_header(f, f"{name.upper()} SELECTION", level=2)
                self.write_bullet_point(f, f"Best individual: {self.format_best(result)}")
                self.write_bullet_point(
                    f, f"Initial best fitness: {self.format_number(result['initial_best_fitness'])}")
                self.write_bullet_point(
                    f, f"Final mean fitness: {self.format_number(result['mean_fitness_history'][-1])}")
                self.write_bullet_point(
                    f, f"Final diversity: {self.format_number(result['diversity_history'][-1])}")
                self.write_bullet_point(f, f"Generations: {result['generations_run']}")
                self.write_bullet_point(f, f"Time: {result['total_time']:.2f}s")

        return report_path

    def save_results(self, results: Dict[str, Dict[str, Any]], timestamp: bool = True) -> List[Path]:
        """
        Save comparison results as JSON and a CSV summary table

        Args:
            results: Mapping of strategy name to run result
            timestamp: Whether to add timestamp to filenames

        Returns:
            List of paths to saved files
        """
        saved_files = [self.save_json_results(results, "comparison_results", timestamp)]

        if results:
            saved_files.append(
                self.save_csv_summary(self.summary_frame(results), "comparison_summary", timestamp))

        return saved_files
