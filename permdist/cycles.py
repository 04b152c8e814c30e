"""
Distances computed from the cycle structure of the relative permutation r of p1 and p2, where r[i] is the
position in p2 of the element at position i of p1. Its cycles are the orbits which have to be rotated into
place to turn p1 into p2; the fixed points of r are the elements which are already in the right place.
"""
from __future__ import annotations

import collections
import functools
import itertools

from .errors import InvalidParameterError
from .measurer import HasMax, check_lengths
from .permutations import Permutation, cycle_type


def relative_cycle_type(p1: Permutation, p2: Permutation) -> tuple[int, ...]:
    """
    The cycle lengths of the relative permutation, in decreasing order.

    >>> relative_cycle_type(Permutation([0, 1, 2, 3]), Permutation([1, 0, 2, 3]))
    (2, 1, 1)
    >>> relative_cycle_type(Permutation([3, 0, 1, 2]), Permutation([0, 1, 2, 3]))
    (4,)
    """
    check_lengths(p1, p2)
    inv2 = p2.inverse()
    return cycle_type([inv2[x] for x in p1])


class CycleDistance(HasMax):
    """
    The number of transpositions needed to turn one permutation into the other: n minus the number of
    cycles of the relative permutation (also called the Cayley, or interchange, distance).
    """

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        return len(p1) - len(relative_cycle_type(p1, p2))

    def max(self, length: int) -> int:
        # A single n-cycle.
        return max(length - 1, 0)


class CycleEditDistance(HasMax):
    """
    The number of elements which lie on non-singleton cycles of the relative permutation. Each cycle of
    length L > 1 costs L, and fixed points cost nothing.
    """

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        return sum(length for length in relative_cycle_type(p1, p2) if length > 1)

    def max(self, length: int) -> int:
        # Any derangement moves every element.
        return length if length >= 2 else 0


class KCycleDistance(HasMax):
    """
    The least number of k-cycle operations (rotations of at most k elements) that turn p1 into p2, and with
    k = 2 this is the CycleDistance.

    An operation on j elements does at most j - 1 units of work. An L-cycle of the relative permutation
    needs L - 1 units, and a group of c cycles sorted out by the same connected set of operations needs the
    sum of their L - 1 plus 2(c - 1) units, and never fewer than two operations. For k <= 4 the cycles are
    cheapest taken one at a time, at ceil((L - 1) / (k - 1)) each. For larger k the pieces left over after
    whole operations can share operations, e.g. with k = 5 three 2-cycles take two operations and not three.
    """

    def __init__(self, k: int):
        if k < 2:
            raise InvalidParameterError(f"The k of a k-cycle distance must be at least 2, not {k}.")

        self.k = k

    def __repr__(self):
        return f'KCycleDistance(k={self.k})'

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        return _k_cycle_cost(self.k, tuple(length for length in relative_cycle_type(p1, p2) if length > 1))

    def max(self, length: int) -> int:
        if length <= 1:
            return 0

        if self.k == 2:
            return length - 1

        # For k = 3, 4 a cycle of length L costs at most L/2, which a product of disjoint 2-cycles attains.
        if self.k <= 4:
            return length // 2

        # Otherwise try every cycle type, whose number grows like the partitions of the length.
        return _k_cycle_max(self.k, length)


def _k_cycle_cost(k: int, lengths: tuple[int, ...]) -> int:
    step = k - 1
    if k <= 4:
        return sum(-(-(length - 1) // step) for length in lengths)

    # Each cycle keeps between one and two operations' worth of work for the grouping, and the rest is
    # charged to it alone.
    whole = 0
    pieces = []
    for length in lengths:
        spare = max((length - 1) // step - 1, 0)
        whole += spare
        pieces.append(length - 1 - spare * step)

    return whole + _cheapest_grouping(step, tuple(sorted(collections.Counter(pieces).items())))


@functools.cache
def _cheapest_grouping(step: int, counts: tuple[tuple[int, int], ...]) -> int:
    """
    The least number of operations doing at most step units each for pieces of work given as (units, count)
    pairs, where pieces handled together cost 2 more units per extra piece.
    """
    if not counts:
        return 0

    # The group holding one of the first pieces.
    _, first_count = counts[0]
    choices = [range(1, first_count + 1)] + [range(count + 1) for _, count in counts[1:]]
    best = None
    for taken in itertools.product(*choices):
        size = sum(taken)
        units = sum(t * value for t, (value, _) in zip(taken, counts)) + 2 * (size - 1)
        cost = -(-units // step)
        if size > 1:
            cost = max(cost, 2)

        rest = tuple((value, count - t) for t, (value, count) in zip(taken, counts) if count > t)
        cost += _cheapest_grouping(step, rest)
        if best is None or cost < best:
            best = cost

    return best


@functools.cache
def _k_cycle_max(k: int, length: int) -> int:
    # Lengthening a cycle never lowers the cost, so only cycle types without fixed points need to be tried.
    return max(_k_cycle_cost(k, lengths) for lengths in _cycle_types(length, 2) if sum(lengths) == length)


def _cycle_types(total: int, smallest: int):
    """Non-decreasing tuples of cycle lengths, each at least smallest, which sum to at most total."""
    yield ()
    for first in range(smallest, total + 1):
        for rest in _cycle_types(total - first, first):
            yield (first,) + rest


class BlockInterchangeDistance(HasMax):
    """
    The least number of block interchanges (swapping two non-overlapping, not necessarily adjacent, runs of
    elements) needed to turn p1 into p2. By Christie's theorem this is (n + 1 - c) / 2, where c is the number
    of alternating cycles in the cycle graph of p2 written in the labels of p1.
    """

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        check_lengths(p1, p2)
        n = len(p1)
        inv1 = p1.inverse()

        # Frame the relabelled permutation by 0 and n + 1.
        framed = [0] + [inv1[x] + 1 for x in p2] + [n + 1]
        pos = [0] * (n + 2)
        for i, x in enumerate(framed):
            pos[x] = i

        # Following a black edge back to the predecessor and a grey edge up by one gives the map
        # x -> framed[pos[x] - 1] + 1 on [1, n + 1], whose cycles are the alternating cycles.
        visited = [False] * (n + 2)
        cycles = 0
        for start in range(1, n + 2):
            if visited[start]:
                continue

            cycles += 1
            x = start
            while not visited[x]:
                visited[x] = True
                x = framed[pos[x] - 1] + 1

        assert (n + 1 - cycles) % 2 == 0
        return (n + 1 - cycles) // 2

    def max(self, length: int) -> int:
        return length // 2
