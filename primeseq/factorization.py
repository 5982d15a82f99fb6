"""
Factorization utilities.

Responsibility: factor information, cleanly separated.
This file must not know about sequences, pairs or transformation paths.
"""

import numpy as np

from .errors import OutOfDomainError


def spf_sieve(N: int) -> np.ndarray:
    """
    Compute smallest prime factor for all integers up to N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array where spf[i] is the smallest prime factor of i.
        spf[0] = 0, spf[1] = 1, and spf[p] = p for primes.
    """
    spf = np.arange(N + 1, dtype=np.int64)

    for p in range(2, int(N**0.5) + 1):
        if spf[p] == p:  # p is prime
            multiples = spf[p*p::p]
            unmarked = multiples == np.arange(p * p, N + 1, p)
            multiples[unmarked] = p
    return spf


def Omega(n: int, spf: np.ndarray) -> int:
    """
    Count prime factors of n with multiplicity (big Omega).

    Parameters
    ----------
    n : int
        Integer to factor, 0 <= n < len(spf).
    spf : np.ndarray
        Smallest prime factor array from spf_sieve.

    Returns
    -------
    int
        Total count of prime factors with multiplicity.
        Omega(0) = Omega(1) = 0.
    """
    if n <= 1:
        return 0

    count = 0
    while n > 1:
        n //= int(spf[n])
        count += 1
    return count


def factor_count(n: int, primes: np.ndarray) -> int:
    """
    Count prime factors of n with multiplicity by trial division.

    Divides by each prime in ascending order while divisible and while the
    running quotient exceeds 1. Because of that guard, 0 and 1 have no
    factors.

    Parameters
    ----------
    n : int
        Integer to factor. Exact only while every prime factor of n
        appears in `primes` (always true for n <= max(primes)).
    primes : np.ndarray
        Ascending primes, e.g. from primes_upto.

    Returns
    -------
    int
        Number of divisions performed.
    """
    count = 0
    for p in primes:
        if n <= 1:
            break
        p = int(p)
        while n % p == 0 and n > 1:
            n //= p
            count += 1
    return count


def is_prime(n: int, prime_flags: np.ndarray) -> bool:
    """
    Membership test against a sieve.

    Parameters
    ----------
    n : int
        Value to test, 0 <= n < len(prime_flags).
    prime_flags : np.ndarray
        Boolean array from prime_flags_upto.

    Raises
    ------
    OutOfDomainError
        If n lies outside the sieved range.
    """
    if not 0 <= n < len(prime_flags):
        raise OutOfDomainError(f"{n} is outside [0, {len(prime_flags) - 1}]")
    return bool(prime_flags[n])
