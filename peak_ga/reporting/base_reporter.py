#!/usr/bin/env python3
"""
Base Reporter Module

Common utilities and base class for all reporting modules.
Provides shared report formatting, file handling, and utility functions.
"""

import json
import numpy as np
import pandas as pd
from pathlib import Path
from datetime import datetime
from typing import Dict, Any
from abc import ABC, abstractmethod


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder for numpy types"""
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


class BaseReporter(ABC):
    """
    Base class for all reporters with common reporting utilities
    """

    def __init__(self, results_dir: Path):
        """
        Initialize base reporter

        Args:
            results_dir: Directory to save reports and results
        """
        self.results_dir = Path(results_dir)
        self.results_dir.mkdir(parents=True, exist_ok=True)

    def write_section_header(self, f, title: str, level: int = 1):
        """
        Write a formatted section header

        Args:
            f: File handle
            title: Section title
            level: Header level (1 for main, 2 for subsection)
        """
        if level == 1:
            f.write(f"\n{title}\n")
            f.write("=" * len(title) + "\n\n")
        elif level == 2:
            f.write(f"\n{title}\n")
            f.write("-" * len(title) + "\n")
        else:
            f.write(f"\n{title}:\n")

    def write_bullet_point(self, f, text: str, indent: int = 0):
        """Write a formatted bullet point"""
        f.write("  " * indent + f"- {text}\n")

    def format_number(self, value: float, decimals: int = 6) -> str:
        """Format a number with specified decimals"""
        return f"{value:.{decimals}f}"

    def _timestamped(self, filename: str, suffix: str, timestamp: bool) -> str:
        if timestamp:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            return f"{filename}_{ts}.{suffix}"
        return f"{filename}.{suffix}"

    def save_json_results(self, data: Dict[str, Any], filename: str,
                          timestamp: bool = True) -> Path:
        """
        Save results as JSON file

        Args:
            data: Data to save
            filename: Base filename (without extension)
            timestamp: Whether to add timestamp to filename

        Returns:
            Path to saved file
        """
        filepath = self.results_dir / self._timestamped(filename, 'json', timestamp)
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, cls=NumpyEncoder)

        return filepath

    def save_csv_summary(self, df: pd.DataFrame, filename: str,
                         timestamp: bool = True) -> Path:
        """
        Save DataFrame as CSV file

        Args:
            df: DataFrame to save
            filename: Base filename (without extension)
            timestamp: Whether to add timestamp to filename

        Returns:
            Path to saved file
        """
        filepath = self.results_dir / self._timestamped(filename, 'csv', timestamp)
        df.to_csv(filepath, index=False)

        return filepath

    @abstractmethod
    def generate_report(self, *args, **kwargs) -> Path:
        """Generate the main report (to be implemented by subclasses)"""
