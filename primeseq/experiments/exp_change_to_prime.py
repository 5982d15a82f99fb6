"""
Experiment: Shortest Step Sequences to a Prime

For every n <= N, finds the shortest sequence of 0-steps (2n+1) and
1-steps (n+1) reaching a prime without exceeding N.
Outputs per-n table and summary CSVs.

In change_to_prime.csv an already-prime n has an empty path cell, while an
unreachable n is written as NA in path and every per-path column.
"""

import numpy as np
import pandas as pd
from pathlib import Path
from typing import Optional

from ..prime_factor_sequence import PrimeFactorSequence
from ..transform_search import apply_path
from ..metrics import (
    step_mix,
    path_lengths,
    unreachable_fraction,
    summarize_path_lengths,
)

CHANGE_TO_PRIME_CSV = 'change_to_prime.csv'

# Written in place of missing values so they differ from the empty path
UNREACHABLE_CSV = 'NA'


def run_change_to_prime_experiment(N: int, output_dir: Path,
                                   max_steps: Optional[int] = None) -> pd.DataFrame:
    """
    Run the change-to-prime experiment.

    Parameters
    ----------
    N : int
        Upper bound.
    output_dir : Path
        Directory for output files.
    max_steps : int, optional
        Step budget per search. None uses the memo table for all n at once.

    Returns
    -------
    pd.DataFrame
        One row per n: path, steps, doubles, increments, target, reachable.
    """
    print(f"Running change-to-prime experiment with N={N:,}")

    pfs = PrimeFactorSequence(N)

    if max_steps is None:
        paths = pfs.change_to_prime_table()
    else:
        print(f"  Searching each n with a budget of {max_steps} steps")
        paths = [pfs.change_to_prime(n, max_steps=max_steps) for n in range(N + 1)]

    rows = []
    for n, path in enumerate(paths):
        if path is None:
            rows.append({
                'n': n,
                'path': None,
                'steps': np.nan,
                'doubles': np.nan,
                'increments': np.nan,
                'target': np.nan,
                'reachable': False
            })
            continue

        mix = step_mix(path)
        rows.append({
            'n': n,
            'path': path,
            'steps': len(path),
            'doubles': mix['doubles'],
            'increments': mix['increments'],
            'target': apply_path(n, path)[-1],
            'reachable': True
        })

    df = pd.DataFrame(rows)

    summary = summarize_path_lengths(path_lengths(paths))
    summary['unreachable_fraction'] = unreachable_fraction(paths)
    df_summary = pd.DataFrame([summary])

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / CHANGE_TO_PRIME_CSV, index=False, na_rep=UNREACHABLE_CSV)
    df_summary.to_csv(output_dir / 'change_to_prime_summary.csv', index=False)

    print(f"  Reachable: {summary['count']:,} of {N + 1:,}")
    print(f"  Results saved to {output_dir}")

    return df


if __name__ == '__main__':
    import yaml

    with open('config/default.yaml') as f:
        config = yaml.safe_load(f)

    output_dir = Path('data/results')
    df = run_change_to_prime_experiment(
        config['upper_bound'],
        output_dir,
        config.get('max_steps')
    )
    print("\nLongest paths:")
    print(df.sort_values('steps', ascending=False).head(10).to_string(index=False))
