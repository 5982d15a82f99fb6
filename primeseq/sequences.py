"""
Sequences derived from prime factor counts.

Responsibility: definition of the objects of study, i.e. the Omega sequence
over [0, N], its exact-count subsequences, and close pairs inside those.
"""

import numpy as np
from typing import List, NamedTuple

from .factorization import Omega


class IntPair(NamedTuple):
    """Adjacent members of a filtered sequence, larger first."""
    larger: int
    smaller: int


def prime_factor_sequence(spf: np.ndarray) -> np.ndarray:
    """
    Return L[0 .. N] where L[i] = Omega(i).

    Parameters
    ----------
    spf : np.ndarray
        Smallest prime factor array from spf_sieve, length N+1.

    Returns
    -------
    np.ndarray
        Integer array of length N+1. L[0] = L[1] = 0.
    """
    seq = np.zeros(len(spf), dtype=np.int64)
    for i in range(len(spf)):
        seq[i] = Omega(i, spf)
    return seq


def numbers_with_m_prime_factors(omega_seq: np.ndarray, m: int) -> np.ndarray:
    """
    Return the ascending i with omega_seq[i] == m.

    Parameters
    ----------
    omega_seq : np.ndarray
        Output of prime_factor_sequence.
    m : int
        Required number of prime factors (with multiplicity).

    Returns
    -------
    np.ndarray
        Indices in ascending order. m = 0 gives [0, 1].
    """
    return np.nonzero(omega_seq == m)[0]


def close_pairs(seq: np.ndarray, gap: int) -> List[IntPair]:
    """
    Return adjacent members of seq whose difference is <= gap.

    Parameters
    ----------
    seq : np.ndarray
        Ascending sequence, e.g. from numbers_with_m_prime_factors.
    gap : int
        Largest admissible difference.

    Returns
    -------
    list of IntPair
        (seq[i+1], seq[i]) for every i with seq[i+1] - seq[i] <= gap,
        in ascending order of i.
    """
    if len(seq) < 2:
        return []

    idx = np.nonzero(np.diff(seq) <= gap)[0]
    return [IntPair(int(seq[i + 1]), int(seq[i])) for i in idx]
