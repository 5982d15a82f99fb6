"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_omega_histogram(df: pd.DataFrame,
                         output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot how many integers have each prime factor count.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from exp_factor_counts with columns m, count, close_pairs.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    x = np.arange(len(df))
    width = 0.35

    ax.bar(x - width/2, df['count'], width, label='Integers', alpha=0.8)
    ax.bar(x + width/2, df['close_pairs'], width, label='Close pairs', alpha=0.8)

    ax.set_xlabel('m (prime factors with multiplicity)')
    ax.set_ylabel('Count')
    ax.set_title('Integers with exactly m prime factors')
    ax.set_xticks(x)
    ax.set_xticklabels(df['m'])
    ax.legend()
    ax.grid(True, alpha=0.3, axis='y')

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_path_lengths(df: pd.DataFrame,
                      output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot path length against start value, plus the length distribution.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from exp_change_to_prime with columns n, steps, reachable.
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    reachable = df[df['reachable']]
    steps = reachable['steps'].to_numpy(dtype=int)

    ax = axes[0]
    ax.scatter(reachable['n'], steps, s=4, alpha=0.5)
    ax.set_xlabel('n')
    ax.set_ylabel('Steps to prime')
    ax.set_title('Shortest path length by start value')
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    if len(steps) > 0:
        bins = np.arange(steps.min(), steps.max() + 2) - 0.5
        ax.hist(steps, bins=bins, density=True, alpha=0.7, edgecolor='black')
        ax.axvline(np.mean(steps), color='red', linestyle='--',
                   label=f'Mean = {np.mean(steps):.3f}')
        ax.legend()
    ax.set_xlabel('Steps to prime')
    ax.set_ylabel('Density')
    ax.set_title('Path length distribution')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
