"""
Random utilities for reproducibility

This module builds the single random generator shared by every stochastic
step of a run (population sampling, selection and mutation).
"""

from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the random generator for a run

    Args:
        seed: Random seed value. If None, fresh OS entropy is used

    Returns:
        numpy Generator instance
    """
    return np.random.default_rng(seed)
