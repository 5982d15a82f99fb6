"""
Shortest transformation of an integer into a prime.

Responsibility: the search over the step graph only. Prime knowledge comes
in as a flag array; nothing here sieves or factors.

Two steps are available from a value v:
    - 0-step (DOUBLE):    v -> 2v + 1
    - 1-step (INCREMENT): v -> v + 1

A path is the string of step symbols, first applied step first. Among all
step sequences that reach a prime without any value exceeding the bound N,
the result is the shortest one, and on equal length the one that takes the
0-step earliest, i.e. the minimum under (length, string) ordering. The empty
string means the start value is already prime; None means no such sequence
exists (unreachable).

Both steps strictly increase v, so the step graph restricted to [0, N] is a
finite DAG and no cycle detection is needed.
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from .errors import OutOfDomainError, SearchBudgetExceeded

# Step symbols
DOUBLE = '0'
INCREMENT = '1'

# Expansion order decides ties: DOUBLE must come first
STEPS = [DOUBLE, INCREMENT]


def apply_step(v: int, symbol: str) -> int:
    """Apply one step symbol to v."""
    if symbol == DOUBLE:
        return 2 * v + 1
    elif symbol == INCREMENT:
        return v + 1
    else:
        raise ValueError(f"unknown step symbol {symbol!r}")


def apply_path(n: int, path: str) -> List[int]:
    """
    Replay a path from n.

    Parameters
    ----------
    n : int
        Start value.
    path : str
        Step symbols, first applied first.

    Returns
    -------
    list
        Every visited value, starting with n and ending with the final value.
    """
    values = [n]
    for symbol in path:
        values.append(apply_step(values[-1], symbol))
    return values


def _trace(parent: Dict[int, Optional[Tuple[int, str]]], v: int) -> str:
    symbols = []
    while parent[v] is not None:
        v, symbol = parent[v]
        symbols.append(symbol)
    return ''.join(reversed(symbols))


def _has_new_successor(frontier: List[int], N: int, parent: Dict) -> bool:
    """True if expanding frontier would discover any state <= N."""
    for v in frontier:
        for symbol in STEPS:
            w = apply_step(v, symbol)
            if w <= N and w not in parent:
                return True
    return False


def shortest_path(n: int, N: int, prime_flags: np.ndarray,
                  max_steps: Optional[int] = None) -> Optional[str]:
    """
    Find the shortest step sequence turning n into a prime <= N.

    Breadth-first search over the step graph. Within a layer, states are
    expanded in the order they were discovered and each state tries DOUBLE
    before INCREMENT, so discovery order matches string order of the paths
    and the first prime discovered carries the tie-broken shortest path.

    Parameters
    ----------
    n : int
        Start value, n >= 0.
    N : int
        Upper bound; no value on the path may exceed it.
    prime_flags : np.ndarray
        Boolean array of length N+1 from prime_flags_upto(N).
    max_steps : int, optional
        Step budget. If the search has to look past this many steps and
        some unvisited state <= N is still reachable, it raises
        SearchBudgetExceeded instead of continuing.

    Returns
    -------
    str or None
        Path string ('' if n is already prime), or None if unreachable.
        n > N is always unreachable.

    Raises
    ------
    OutOfDomainError
        If n is negative.
    SearchBudgetExceeded
        If max_steps is exhausted before the search resolves.
    """
    if n < 0:
        raise OutOfDomainError(f"start value must be >= 0, got {n}")
    if n > N:
        return None
    if prime_flags[n]:
        return ''

    # parent[w] = (v, symbol) of the first discovery of w
    parent: Dict[int, Optional[Tuple[int, str]]] = {n: None}
    frontier = [n]
    depth = 0

    while frontier:
        if max_steps is not None and depth >= max_steps:
            if not _has_new_successor(frontier, N, parent):
                return None
            raise SearchBudgetExceeded(
                f"no prime within {max_steps} steps of {n} (bound {N})"
            )
        depth += 1

        next_frontier = []
        for v in frontier:
            for symbol in STEPS:
                w = apply_step(v, symbol)
                if w > N or w in parent:
                    continue
                parent[w] = (v, symbol)
                if prime_flags[w]:
                    return _trace(parent, w)
                next_frontier.append(w)
        frontier = next_frontier

    return None


def shortest_paths_table(N: int, prime_flags: np.ndarray) -> List[Optional[str]]:
    """
    Compute the shortest path for every start value in [0, N].

    Memo table filled from N down to 0: both steps lead to larger values,
    so each entry only reads entries that are already final.

    Parameters
    ----------
    N : int
        Upper bound.
    prime_flags : np.ndarray
        Boolean array of length N+1.

    Returns
    -------
    list
        table[v] is shortest_path(v, N, prime_flags).
    """
    table: List[Optional[str]] = [None] * (N + 1)

    for v in range(N, -1, -1):
        if prime_flags[v]:
            table[v] = ''
            continue

        best = None
        for symbol in STEPS:
            w = apply_step(v, symbol)
            if w > N or table[w] is None:
                continue
            candidate = symbol + table[w]
            # strict: an equal-length later step never replaces DOUBLE
            if best is None or len(candidate) < len(best):
                best = candidate
        table[v] = best

    return table
