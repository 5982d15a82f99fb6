"""
Error types.

Responsibility: the three ways a query can be refused. Unreachable search
outcomes are NOT errors; they are returned as None.
"""


class InvalidBoundError(ValueError):
    """Upper bound is negative or not an integer."""


class OutOfDomainError(ValueError):
    """Query value lies outside [0, upper_bound]."""


class SearchBudgetExceeded(RuntimeError):
    """Shortest-path search needed more steps than its budget allows."""
