"""
Experiment: Integers with Exactly m Prime Factors

Computes the Omega sequence up to N, filters it by exact factor count and
finds close adjacent pairs inside each filtered sequence.
Outputs tables and CSVs.
"""

import numpy as np
import pandas as pd
from pathlib import Path
from typing import List

from ..prime_factor_sequence import PrimeFactorSequence
from ..sequences import numbers_with_m_prime_factors, close_pairs
from ..metrics import omega_histogram


def run_factor_count_experiment(N: int, m_grid: List[int], gap: int,
                                output_dir: Path) -> pd.DataFrame:
    """
    Run the factor count experiment.

    Parameters
    ----------
    N : int
        Upper bound.
    m_grid : list
        Factor counts to filter on.
    gap : int
        Largest difference for a close pair.
    output_dir : Path
        Directory for output files.

    Returns
    -------
    pd.DataFrame
        One row per m: count, density, close_pairs, min, max.
    """
    print(f"Running factor count experiment with N={N:,}")

    pfs = PrimeFactorSequence(N)
    omega_seq = pfs.prime_factor_sequence()
    hist = omega_histogram(omega_seq)
    print(f"  Omega ranges over {sorted(hist)}")

    output_dir.mkdir(parents=True, exist_ok=True)

    rows = []
    for m in m_grid:
        members = numbers_with_m_prime_factors(omega_seq, m)
        pairs = close_pairs(members, gap)
        count = len(members)

        rows.append({
            'm': m,
            'count': count,
            'density': count / (N + 1),
            'close_pairs': len(pairs),
            'min': members[0] if count > 0 else np.nan,
            'max': members[-1] if count > 0 else np.nan
        })

        df_pairs = pd.DataFrame(pairs, columns=['larger', 'smaller'])
        df_pairs['difference'] = df_pairs['larger'] - df_pairs['smaller']
        df_pairs.to_csv(output_dir / f'close_pairs_m{m}.csv', index=False)

    df = pd.DataFrame(rows)
    df.to_csv(output_dir / 'factor_count_summary.csv', index=False)

    print(f"  Results saved to {output_dir}")

    return df


if __name__ == '__main__':
    import yaml

    with open('config/default.yaml') as f:
        config = yaml.safe_load(f)

    output_dir = Path('data/results')
    df = run_factor_count_experiment(
        config['upper_bound'],
        config['m_grid'],
        config['gap'],
        output_dir
    )
    print("\nSummary:")
    print(df.to_string(index=False))
