"""
Bounded prime factor sequences.

Responsibility: owns the sieve for one upper bound and answers every query
over [0, upper_bound] against it. The sieve is built once in the
constructor and never modified.
"""

import numpy as np
from typing import List, Optional

from .errors import OutOfDomainError
from .primes import check_bound, prime_flags_upto, primes_from_flags
from .factorization import spf_sieve, factor_count, is_prime
from .sequences import (
    IntPair,
    prime_factor_sequence,
    numbers_with_m_prime_factors,
    close_pairs,
)
from .transform_search import shortest_path, shortest_paths_table


class PrimeFactorSequence:
    """
    Prime factor queries for all integers in [0, upper_bound].

    Parameters
    ----------
    upper_bound : int
        Inclusive bound for sequences, primes and transformation paths.

    Raises
    ------
    InvalidBoundError
        If upper_bound is negative or not an integer. Nothing is sieved.
    """

    def __init__(self, upper_bound: int):
        self._upper_bound = check_bound(upper_bound)
        self._prime_flags = prime_flags_upto(self._upper_bound)
        self._primes = primes_from_flags(self._prime_flags)
        self._spf = spf_sieve(self._upper_bound)
        self._omega_seq = prime_factor_sequence(self._spf)

        for arr in (self._prime_flags, self._primes, self._spf, self._omega_seq):
            arr.setflags(write=False)

    def __repr__(self) -> str:
        return f"PrimeFactorSequence(upper_bound={self._upper_bound})"

    @property
    def upper_bound(self) -> int:
        return self._upper_bound

    @property
    def primes(self) -> np.ndarray:
        """Ascending primes <= upper_bound (read-only)."""
        return self._primes

    def _check_domain(self, n: int):
        if not 0 <= n <= self._upper_bound:
            raise OutOfDomainError(
                f"{n} is outside [0, {self._upper_bound}]"
            )

    def is_prime(self, n: int) -> bool:
        """Return True iff n is prime. n must lie in [0, upper_bound]."""
        self._check_domain(n)
        return is_prime(n, self._prime_flags)

    def factor_count(self, n: int) -> int:
        """
        Number of prime factors of n, with multiplicity.

        0 and 1 have no prime factors. n must lie in [0, upper_bound].
        """
        self._check_domain(n)
        return factor_count(n, self._primes)

    def prime_factor_sequence(self) -> np.ndarray:
        """
        Sequence L[0 .. upper_bound] where L[i] counts the prime factors of i.

        Computed once at construction; the returned array is read-only.
        """
        return self._omega_seq

    def numbers_with_m_prime_factors(self, m: int) -> np.ndarray:
        """
        Ascending integers <= upper_bound with exactly m prime factors
        (including repeated factors).
        """
        return numbers_with_m_prime_factors(self._omega_seq, m)

    def numbers_with_m_prime_factors_and_small_gap(self, m: int,
                                                   gap: int) -> List[IntPair]:
        """
        Pairs (Sa, Sb) of adjacent entries of numbers_with_m_prime_factors(m)
        with Sa - Sb <= gap, larger entry first.
        """
        return close_pairs(self.numbers_with_m_prime_factors(m), gap)

    def change_to_prime(self, n: int,
                        max_steps: Optional[int] = None) -> Optional[str]:
        """
        Shortest sequence of 0-steps (2n+1) and 1-steps (n+1) taking n to a
        prime without exceeding upper_bound.

        Returns '' if n is already prime and None if no such sequence exists.
        On equal length the sequence using the 0-step earliest wins.
        """
        return shortest_path(n, self._upper_bound, self._prime_flags,
                             max_steps=max_steps)

    def change_to_prime_table(self) -> List[Optional[str]]:
        """change_to_prime(n) for every n in [0, upper_bound]."""
        return shortest_paths_table(self._upper_bound, self._prime_flags)
