"""
Definitions of all reported statistics.

Responsibility: report-facing quantities. Guarantees that the CSV columns
mean exactly what the code computes.
"""

import numpy as np
from typing import Dict, List, Optional

from .transform_search import DOUBLE, INCREMENT


def omega_histogram(omega_seq: np.ndarray) -> Dict[int, int]:
    """
    Count how many integers have each number of prime factors.

    Parameters
    ----------
    omega_seq : np.ndarray
        Output of prime_factor_sequence.

    Returns
    -------
    dict
        {m: number of i with omega_seq[i] == m}, for every m that occurs.
    """
    if len(omega_seq) == 0:
        return {}
    counts = np.bincount(omega_seq)
    return {m: int(c) for m, c in enumerate(counts) if c > 0}


def step_mix(path: str) -> Dict[str, int]:
    """Number of 0-steps and 1-steps in a path."""
    return {
        'doubles': path.count(DOUBLE),
        'increments': path.count(INCREMENT)
    }


def path_lengths(paths: List[Optional[str]]) -> np.ndarray:
    """Lengths of the reachable paths, unreachable entries dropped."""
    return np.array([len(p) for p in paths if p is not None], dtype=int)


def unreachable_fraction(paths: List[Optional[str]]) -> float:
    """
    Fraction of start values with no path to a prime.

    Returns nan for an empty list.
    """
    if len(paths) == 0:
        return np.nan
    return sum(p is None for p in paths) / len(paths)


def summarize_path_lengths(lengths: np.ndarray) -> Dict[str, float]:
    """
    Compute summary statistics for path lengths.

    Parameters
    ----------
    lengths : np.ndarray
        Array of path lengths.

    Returns
    -------
    dict
        Dictionary with mean, median, max, std, count.
    """
    if len(lengths) == 0:
        return {
            'mean': np.nan,
            'median': np.nan,
            'max': np.nan,
            'std': np.nan,
            'count': 0
        }

    return {
        'mean': np.mean(lengths),
        'median': np.median(lengths),
        'max': np.max(lengths),
        'std': np.std(lengths),
        'count': len(lengths)
    }
