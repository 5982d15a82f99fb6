#!/usr/bin/env python3
"""
Full reproducibility script.

Running this file regenerates every table and figure.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
    python run_all.py --upper-bound 500
"""

import argparse
import yaml
from pathlib import Path
import time

from primeseq.experiments.exp_factor_counts import run_factor_count_experiment
from primeseq.experiments.exp_change_to_prime import run_change_to_prime_experiment
from primeseq.plotting import plot_omega_histogram, plot_path_lengths


def main():
    parser = argparse.ArgumentParser(description='Run all prime factor sequence experiments')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--upper-bound', type=int, default=None,
                        help='Override upper_bound from the config file')
    parser.add_argument('--output-dir', type=str, default='data/results',
                        help='Directory for CSVs and figures')
    args = parser.parse_args()

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f)

    if args.upper_bound is not None:
        config['upper_bound'] = args.upper_bound

    print("=" * 60)
    print("Prime Factor Sequences - Full Experiment Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  upper_bound = {config['upper_bound']:,}")
    print(f"  m_grid = {config['m_grid']}")
    print(f"  gap = {config['gap']}")
    print(f"  max_steps = {config.get('max_steps')}")
    print()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Factor counts and close pairs
    print("-" * 60)
    print("1. Factor Count Experiment")
    print("-" * 60)
    start = time.time()
    df_counts = run_factor_count_experiment(
        config['upper_bound'],
        config['m_grid'],
        config['gap'],
        output_dir
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 2. Shortest step sequences to a prime
    print("-" * 60)
    print("2. Change-to-Prime Experiment")
    print("-" * 60)
    start = time.time()
    df_paths = run_change_to_prime_experiment(
        config['upper_bound'],
        output_dir,
        config.get('max_steps')
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Generate Figures
    print("-" * 60)
    print("3. Generating Figures")
    print("-" * 60)

    figures_dir = output_dir / 'figures'
    figures_dir.mkdir(exist_ok=True)

    print("  - Factor count histogram...")
    plot_omega_histogram(df_counts, figures_dir / 'omega_histogram.png')

    print("  - Path lengths...")
    plot_path_lengths(df_paths, figures_dir / 'path_lengths.png')

    print()

    # Summary
    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")
    print(f"\nGenerated files:")

    for f in sorted(output_dir.glob('*.csv')):
        print(f"  - {f.name}")

    print(f"\nFigures:")
    for f in sorted(figures_dir.glob('*.png')):
        print(f"  - figures/{f.name}")

    # Print key results
    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)

    print("\nIntegers by exact factor count:")
    print(df_counts.to_string(index=False))

    reachable = df_paths[df_paths['reachable']]
    print(f"\nReachable start values: {len(reachable):,} of {len(df_paths):,}")
    if len(reachable) > 0:
        longest = reachable.sort_values('steps', ascending=False).head(5)
        print("\nLongest shortest paths:")
        print(longest[['n', 'path', 'steps', 'target']].to_string(index=False))


if __name__ == '__main__':
    main()
