"""
Prime generation utilities.

Responsibility: prime generation only. No factorization, no search logic.
"""

import numpy as np

from .errors import InvalidBoundError


def check_bound(N: int) -> int:
    """
    Validate an upper bound.

    Parameters
    ----------
    N : int
        Candidate upper bound.

    Returns
    -------
    int
        N as a plain Python int.

    Raises
    ------
    InvalidBoundError
        If N is not an integer or is negative.
    """
    if isinstance(N, bool) or not isinstance(N, (int, np.integer)):
        raise InvalidBoundError(f"upper bound must be an integer, got {N!r}")
    if N < 0:
        raise InvalidBoundError(f"upper bound must be >= 0, got {N}")
    return int(N)


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive), N >= 0.

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    N = check_bound(N)
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False  # N may be 0
    for p in range(2, int(N**0.5) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_from_flags(flags: np.ndarray) -> np.ndarray:
    """Return the ascending primes marked in a flag array."""
    return np.nonzero(flags)[0]


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive). N = 0 or 1 gives an empty array.

    Returns
    -------
    np.ndarray
        Array of primes in ascending order.
    """
    return primes_from_flags(prime_flags_upto(N))
