#!/usr/bin/env python3
"""
Selection Strategy Comparison Runner

Evolves one shared initial population twice, once with roulette selection and
once with elite selection, and reports the best individual of each run.
"""

import argparse
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from peak_ga.algorithms import compare_selection_strategies
from peak_ga.config import GAConfig
from peak_ga.exceptions import ConfigurationError
from peak_ga.genetic.fitness import FITNESS_FUNCTIONS
from peak_ga.reporting import ComparisonReporter
from peak_ga.utils import setup_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = GAConfig()
    parser = argparse.ArgumentParser(description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('--population-size', type=int, default=defaults.population_size,
                        help='Individuals per generation (default: %(default)s)')
    parser.add_argument('--generations', type=int, default=defaults.generations,
                        help='Number of generations (default: %(default)s)')
    parser.add_argument('--mutation-rate', type=float, default=defaults.mutation_rate,
                        help='Probability of mutating an offspring (default: %(default)s)')
    parser.add_argument('--fitness', choices=sorted(FITNESS_FUNCTIONS), default=defaults.fitness_function,
                        help='Objective to maximize (default: %(default)s)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for a reproducible run')
    parser.add_argument('--results-dir', default='experiment_results',
                        help='Where reports are written (default: %(default)s)')
    parser.add_argument('--no-save', action='store_true',
                        help='Only print the results, do not write report files')
    parser.add_argument('--plot', action='store_true',
                        help='Save fitness and diversity plots')
    parser.add_argument('--log-level', default='INFO', type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level (default: %(default)s)')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the selection strategy comparison"""
    args = parse_args(argv)

    # Setup logging
    os.makedirs("logs", exist_ok=True)
    log_file = f"logs/comparison_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    logger = setup_logger('peak_ga', log_file, level=args.log_level)

    config = GAConfig(
        population_size=args.population_size,
        generations=args.generations,
        mutation_rate=args.mutation_rate,
        fitness_function=args.fitness,
        random_seed=args.seed,
    )

    try:
        results: Dict[str, Dict] = compare_selection_strategies(config)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    results_dir = Path(args.results_dir)
    reporter = ComparisonReporter(results_dir)
    reporter.print_summary(results)

    if not args.no_save:
        saved_files = reporter.save_results(results)
        saved_files.append(reporter.generate_report(results))
        for path in saved_files:
            logger.info(f"Saved {path}")

    if args.plot:
        from peak_ga.visualization import ComparisonVisualizer
        visualizer = ComparisonVisualizer(results_dir / 'plots')
        for path in visualizer.generate_all_plots(results):
            logger.info(f"Saved plot {path}")

    logger.info(f"Log file: {log_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
