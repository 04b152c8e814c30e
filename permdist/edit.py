"""
Edit distances: the cheapest way to turn one sequence into another by inserting, deleting and changing
elements, and the reinsertion distance, which is the special case where the only operation is to remove an
element and put it back somewhere else.
"""
from __future__ import annotations

import bisect
from typing import Sequence

import numpy as np

from .errors import InvalidParameterError
from .inversions import positions_in
from .measurer import HasBound, HasMax, check_lengths
from .permutations import Permutation


def longest_increasing_subsequence(seq: Sequence[int]) -> int:
    """
    The length of a longest strictly increasing subsequence, by patience sorting.

    >>> longest_increasing_subsequence([3, 0, 1, 4, 2, 5])
    4
    >>> longest_increasing_subsequence([])
    0
    """
    # tails[i] is the least possible last entry of an increasing subsequence of length i + 1.
    tails: list[int] = []
    for x in seq:
        i = bisect.bisect_left(tails, x)
        if i == len(tails):
            tails.append(x)
        else:
            tails[i] = x

    return len(tails)


class EditDistance(HasBound):
    """
    Weighted Levenshtein distance. Turning s1 into s2 costs insert_cost per element inserted, delete_cost per
    element deleted and change_cost per element replaced by a different one; the distance is the least total
    cost. The defaults of 0.5, 0.5 and 1.0 make a change no cheaper than a deletion and an insertion, and give
    exactly the ReinsertionDistance on permutations.

    >>> EditDistance(1, 1, 1).sequence_distancef("kitten", "sitting")
    3.0
    """

    def __init__(self, insert_cost: float = 0.5, delete_cost: float = 0.5, change_cost: float = 1.0):
        for name, cost in [('insert', insert_cost), ('delete', delete_cost), ('change', change_cost)]:
            if not cost >= 0:
                raise InvalidParameterError(f"The {name} cost must be non-negative, not {cost}.")

        self.insert_cost = insert_cost
        self.delete_cost = delete_cost
        self.change_cost = change_cost

    def __repr__(self):
        return f'EditDistance(insert_cost={self.insert_cost}, delete_cost={self.delete_cost}, change_cost={self.change_cost})'

    def sequence_distancef(self, s1: Sequence, s2: Sequence) -> float:
        """The edit distance between two sequences of any (possibly different) lengths."""
        n, m = len(s1), len(s2)

        # table[i, j] is the cost of turning s1[:i] into s2[:j].
        table = np.zeros((n + 1, m + 1), dtype=np.float64)
        table[:, 0] = np.arange(n + 1) * self.delete_cost
        table[0, :] = np.arange(m + 1) * self.insert_cost

        for i in range(1, n + 1):
            for j in range(1, m + 1):
                table[i, j] = min(
                    table[i-1, j] + self.delete_cost,
                    table[i, j-1] + self.insert_cost,
                    table[i-1, j-1] + (0.0 if s1[i-1] == s2[j-1] else self.change_cost),
                )

        return float(table[n, m])

    def distancef(self, p1: Permutation, p2: Permutation) -> float:
        check_lengths(p1, p2)
        return self.sequence_distancef(p1.word, p2.word)

    def bound(self, length: int) -> float:
        # Replace everything, or delete everything and insert it back, whichever is cheaper.
        return length * min(self.change_cost, self.insert_cost + self.delete_cost)


class ReinsertionDistance(HasMax):
    """
    The least number of remove-and-reinsert moves turning p1 into p2. Elements on a longest common
    subsequence never need to move, and everything else moves exactly once, so this is n - LCS(p1, p2). For
    permutations the LCS is a longest increasing subsequence of p2 written in the positions of p1.
    """

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        check_lengths(p1, p2)
        return len(p1) - longest_increasing_subsequence(positions_in(p1, p2))

    def max(self, length: int) -> int:
        # Against its reversal only one element can stay put.
        return max(length - 1, 0)
