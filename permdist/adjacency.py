"""
Distances which count the adjacencies of p1 which are broken in p2. An adjacency is a pair of elements next to
each other; it may be directed (a immediately before b) or undirected, and the permutation may be read as a
line or as a cycle where the last element is followed by the first.
"""
from __future__ import annotations

from .measurer import HasMax, check_lengths
from .permutations import Permutation


def successors(perm: Permutation, cyclic: bool) -> list[int]:
    """
    succ[x] is the element following x, or -1 after the last element if not cyclic.

    >>> successors(Permutation([2, 0, 1]), cyclic=False)
    [1, -1, 0]
    >>> successors(Permutation([2, 0, 1]), cyclic=True)
    [1, 2, 0]
    """
    n = len(perm)
    succ = [-1] * n
    for i in range(n - 1):
        succ[perm[i]] = perm[i + 1]

    if cyclic and n > 0:
        succ[perm[n - 1]] = perm[0]

    return succ


def _broken_adjacencies(p1: Permutation, p2: Permutation, cyclic: bool, directed: bool) -> int:
    check_lengths(p1, p2)
    n = len(p1)
    succ = successors(p2, cyclic)
    edges = [(p1[i], p1[i + 1]) for i in range(n - 1)]
    if cyclic and n > 0:
        edges.append((p1[n - 1], p1[0]))

    if directed:
        return sum(1 for a, b in edges if succ[a] != b)

    return sum(1 for a, b in edges if succ[a] != b and succ[b] != a)


class RTypeDistance(HasMax):
    """The number of directed adjacencies of p1 which do not occur in p2."""

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        return _broken_adjacencies(p1, p2, cyclic=False, directed=True)

    def max(self, length: int) -> int:
        return max(length - 1, 0)


class CyclicRTypeDistance(HasMax):
    """
    RTypeDistance with each permutation read as a cycle, so it is unchanged by rotating either permutation.

    >>> CyclicRTypeDistance().distance(Permutation([0, 1, 2, 3, 4, 5]), Permutation([0, 2, 4, 1, 5, 3]))
    6
    """

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        return _broken_adjacencies(p1, p2, cyclic=True, directed=True)

    def max(self, length: int) -> int:
        # With two elements, a -> b -> a is the same cycle both ways round.
        return length if length >= 3 else 0


class AcyclicEdgeDistance(HasMax):
    """The number of undirected adjacencies of p1 which do not occur in p2."""

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        return _broken_adjacencies(p1, p2, cyclic=False, directed=False)

    def max(self, length: int) -> int:
        if length <= 2:
            return 0

        # The only edge missing from a path on three elements cannot make a path by itself.
        return 1 if length == 3 else length - 1


class CyclicEdgeDistance(HasMax):
    """The number of undirected adjacencies of p1, read as a cycle, which do not occur in the cycle of p2."""

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        return _broken_adjacencies(p1, p2, cyclic=True, directed=False)

    def max(self, length: int) -> int:
        if length <= 3:
            return 0

        # The complement of a 4-cycle is two disjoint edges; from 5 on it contains a Hamiltonian cycle.
        return 2 if length == 4 else length
