"""
Tests for PrimeFactorSequence and the sequence enumerators behind it.
"""

import numpy as np
import pytest

from primeseq.errors import InvalidBoundError, OutOfDomainError
from primeseq.prime_factor_sequence import PrimeFactorSequence
from primeseq.sequences import (
    IntPair,
    prime_factor_sequence,
    numbers_with_m_prime_factors,
    close_pairs,
)
from primeseq.factorization import spf_sieve, Omega


class TestConstruction:
    """The bound is validated before anything is sieved."""

    @pytest.mark.parametrize("bound", [-1, -10])
    def test_negative_bound(self, bound):
        with pytest.raises(InvalidBoundError):
            PrimeFactorSequence(bound)

    @pytest.mark.parametrize("bound", [3.0, "20", None])
    def test_non_integer_bound(self, bound):
        with pytest.raises(InvalidBoundError):
            PrimeFactorSequence(bound)

    def test_invalid_bound_is_value_error(self):
        with pytest.raises(ValueError):
            PrimeFactorSequence(-5)

    @pytest.mark.parametrize("bound", [0, 1])
    def test_tiny_bounds(self, bound):
        pfs = PrimeFactorSequence(bound)
        assert pfs.upper_bound == bound
        assert len(pfs.primes) == 0
        assert list(pfs.prime_factor_sequence()) == [0] * (bound + 1)

    def test_primes(self):
        pfs = PrimeFactorSequence(30)
        assert list(pfs.primes) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    def test_primes_are_read_only(self):
        pfs = PrimeFactorSequence(30)
        with pytest.raises(ValueError):
            pfs.primes[0] = 4

    def test_repr(self):
        assert repr(PrimeFactorSequence(12)) == "PrimeFactorSequence(upper_bound=12)"


class TestQueries:
    """is_prime and factor_count are defined on [0, upper_bound] only."""

    def test_is_prime(self):
        pfs = PrimeFactorSequence(20)
        assert [n for n in range(21) if pfs.is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]

    def test_factor_count(self):
        pfs = PrimeFactorSequence(100)
        assert pfs.factor_count(0) == 0
        assert pfs.factor_count(1) == 0
        assert pfs.factor_count(97) == 1
        assert pfs.factor_count(64) == 6
        assert pfs.factor_count(60) == 4

    @pytest.mark.parametrize("n", [-1, 11, 1000])
    def test_out_of_domain(self, n):
        pfs = PrimeFactorSequence(10)
        with pytest.raises(OutOfDomainError):
            pfs.is_prime(n)
        with pytest.raises(OutOfDomainError):
            pfs.factor_count(n)

    def test_bound_itself_is_in_domain(self):
        pfs = PrimeFactorSequence(11)
        assert pfs.is_prime(11)
        assert pfs.factor_count(11) == 1


class TestSequences:
    """Omega sequence, exact-count filter and close pairs."""

    def test_prime_factor_sequence(self):
        pfs = PrimeFactorSequence(12)
        expected = [0, 0, 1, 1, 2, 1, 2, 1, 3, 2, 2, 1, 3]
        assert list(pfs.prime_factor_sequence()) == expected

    def test_sequence_agrees_with_factor_count(self):
        pfs = PrimeFactorSequence(1000)
        seq = pfs.prime_factor_sequence()
        assert len(seq) == 1001
        for n in range(1001):
            assert seq[n] == pfs.factor_count(n), f"mismatch at {n}"

    def test_enumerator_on_raw_spf(self):
        assert list(prime_factor_sequence(spf_sieve(8))) == [0, 0, 1, 1, 2, 1, 2, 1, 3]

    def test_sequence_is_built_from_omega(self):
        spf = spf_sieve(500)
        seq = prime_factor_sequence(spf)
        for n in range(501):
            assert seq[n] == Omega(n, spf), f"mismatch at {n}"

    def test_sequence_computed_once_and_read_only(self):
        pfs = PrimeFactorSequence(50)
        seq = pfs.prime_factor_sequence()
        assert pfs.prime_factor_sequence() is seq
        assert not seq.flags.writeable
        with pytest.raises(ValueError):
            seq[4] = 0

    def test_zero_factors(self):
        pfs = PrimeFactorSequence(10)
        assert list(pfs.numbers_with_m_prime_factors(0)) == [0, 1]

    def test_one_factor_is_primes(self):
        pfs = PrimeFactorSequence(100)
        assert np.array_equal(pfs.numbers_with_m_prime_factors(1), pfs.primes)

    def test_two_factors(self):
        pfs = PrimeFactorSequence(20)
        assert list(pfs.numbers_with_m_prime_factors(2)) == [4, 6, 9, 10, 14, 15]

    def test_unused_count(self):
        pfs = PrimeFactorSequence(20)
        assert len(pfs.numbers_with_m_prime_factors(9)) == 0
        assert len(pfs.numbers_with_m_prime_factors(-1)) == 0

    def test_close_pairs(self):
        pfs = PrimeFactorSequence(20)
        pairs = pfs.numbers_with_m_prime_factors_and_small_gap(2, 1)
        assert pairs == [IntPair(10, 9), IntPair(15, 14)]

    def test_close_pairs_wider_gap(self):
        pfs = PrimeFactorSequence(20)
        pairs = pfs.numbers_with_m_prime_factors_and_small_gap(2, 2)
        assert pairs == [(6, 4), (10, 9), (15, 14)]

    def test_twin_primes(self):
        pfs = PrimeFactorSequence(20)
        pairs = pfs.numbers_with_m_prime_factors_and_small_gap(1, 2)
        assert pairs == [(3, 2), (5, 3), (7, 5), (13, 11), (19, 17)]

    def test_pair_fields(self):
        pair = close_pairs(np.array([4, 6]), 2)[0]
        assert pair.larger == 6
        assert pair.smaller == 4
        assert isinstance(pair.larger, int)

    def test_close_pairs_short_input(self):
        assert close_pairs(np.array([], dtype=int), 5) == []
        assert close_pairs(np.array([7]), 5) == []

    def test_filter_on_raw_sequence(self):
        seq = np.array([0, 0, 1, 1, 2])
        assert list(numbers_with_m_prime_factors(seq, 1)) == [2, 3]


class TestChangeToPrime:
    """Facade over the search."""

    def test_examples(self):
        assert PrimeFactorSequence(20).change_to_prime(8) == '0'
        assert PrimeFactorSequence(10).change_to_prime(8) is None
        assert PrimeFactorSequence(3).change_to_prime(4) is None
        assert PrimeFactorSequence(20).change_to_prime(13) == ''

    def test_above_bound_is_unreachable_not_error(self):
        assert PrimeFactorSequence(10).change_to_prime(1000) is None

    def test_negative_start(self):
        with pytest.raises(OutOfDomainError):
            PrimeFactorSequence(10).change_to_prime(-2)

    def test_table(self):
        pfs = PrimeFactorSequence(60)
        table = pfs.change_to_prime_table()
        assert table == [pfs.change_to_prime(n) for n in range(61)]

    def test_repeated_queries_are_independent(self):
        pfs = PrimeFactorSequence(100)
        first = [pfs.change_to_prime(n) for n in range(101)]
        second = [pfs.change_to_prime(n) for n in reversed(range(101))]
        assert first == list(reversed(second))
