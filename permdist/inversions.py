"""
Concordance (inversion) distances. Two permutations disagree on a pair of elements when the pair appears
in opposite orders, and the Kendall tau distance counts such discordant pairs. Writing p2 in terms of the
positions of p1 turns the discordant pairs into the inversions of a single sequence, which are counted in
O(n log n) by merge sort instead of testing all n(n-1)/2 pairs.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np
import numpy.typing as npt

from .errors import InvalidParameterError, LengthMismatchError
from .measurer import HasMax, HasMaxF, check_lengths
from .permutations import Permutation


def count_inversions(seq: Sequence[int]) -> int:
    """
    The number of pairs i < j with seq[i] > seq[j], by merge sort. Agrees with permutations.inversions().

    >>> count_inversions([3, 1, 2, 0])
    5
    >>> count_inversions([])
    0
    """
    work = list(seq)
    return _merge_count(work, 0, len(work))


def _merge_count(a: list, lo: int, hi: int) -> int:
    """Sort a[lo:hi] in place, returning the number of inversions it had."""
    if hi - lo < 2:
        return 0

    mid = (lo + hi) // 2
    count = _merge_count(a, lo, mid) + _merge_count(a, mid, hi)

    merged = []
    i, j = lo, mid
    while i < mid and j < hi:
        if a[j] < a[i]:
            # a[j] jumps ahead of everything left in the lower half.
            count += mid - i
            merged.append(a[j])
            j += 1
        else:
            merged.append(a[i])
            i += 1

    merged.extend(a[i:mid])
    merged.extend(a[j:hi])
    a[lo:hi] = merged
    return count


def count_weighted_inversions(seq: Sequence[int], weights: Sequence[float]) -> float:
    """
    The sum of weights[i] * weights[j] over the inverted pairs i < j of seq, by merge sort.

    >>> count_weighted_inversions([1, 0, 2], [2.0, 3.0, 5.0])
    6.0
    >>> count_weighted_inversions([2, 1, 0], [1.0, 2.0, 3.0])
    11.0
    """
    work = [(x, float(w)) for x, w in zip(seq, weights)]
    return _merge_count_weighted(work, 0, len(work))


def _merge_count_weighted(a: list, lo: int, hi: int) -> float:
    if hi - lo < 2:
        return 0.0

    mid = (lo + hi) // 2
    total = _merge_count_weighted(a, lo, mid) + _merge_count_weighted(a, mid, hi)

    # Weight still waiting in the lower half.
    remaining = sum(w for _, w in a[lo:mid])

    merged = []
    i, j = lo, mid
    while i < mid and j < hi:
        if a[j][0] < a[i][0]:
            total += a[j][1] * remaining
            merged.append(a[j])
            j += 1
        else:
            remaining -= a[i][1]
            merged.append(a[i])
            i += 1

    merged.extend(a[i:mid])
    merged.extend(a[j:hi])
    a[lo:hi] = merged
    return total


def positions_in(p1: Permutation, p2: Permutation) -> list[int]:
    """p2 rewritten as the positions its elements have in p1, so that p1 itself becomes the identity."""
    inv1 = p1.inverse()
    return [inv1[x] for x in p2]


class KendallTauDistance(HasMax):
    """
    The number of pairs of elements which the two permutations put in opposite orders, equivalently the
    least number of adjacent swaps turning one into the other.
    """

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        check_lengths(p1, p2)
        return count_inversions(positions_in(p1, p2))

    def max(self, length: int) -> int:
        # Every pair is discordant between a permutation and its reversal.
        return length * (length - 1) // 2 if length > 1 else 0


class WeightedKendallTauDistance(HasMaxF):
    """
    Kendall tau distance where each element carries a non-negative weight, and a discordant pair of
    elements u, v contributes weights[u] * weights[v] rather than 1. The permutations must have the same
    length as the weight vector.
    """

    def __init__(self, weights: Sequence[float]):
        self.weights: npt.NDArray[np.float64] = np.array(weights, dtype=np.float64)
        if self.weights.ndim != 1:
            raise InvalidParameterError(f"Weights should be a flat vector, not of shape {self.weights.shape}.")
        if not np.all(self.weights >= 0):
            raise InvalidParameterError(f"Weights must be non-negative: {self.weights.tolist()}")

    def __repr__(self):
        return f'WeightedKendallTauDistance({self.weights.tolist()})'

    def supported_length(self) -> int:
        return len(self.weights)

    def _check_supported(self, length: int):
        if length != len(self.weights):
            raise LengthMismatchError(f"Expected permutations of length {len(self.weights)}, not {length}.")

    def distancef(self, p1: Permutation, p2: Permutation) -> float:
        check_lengths(p1, p2)
        self._check_supported(len(p1))
        return count_weighted_inversions(positions_in(p1, p2), [self.weights[x] for x in p2])

    def maxf(self, length: int) -> float:
        self._check_supported(length)

        # Reversal makes every pair discordant, and with non-negative weights nothing can do better.
        total = 0.0
        seen = 0.0
        for w in self.weights:
            total += float(w) * seen
            seen += float(w)

        return total
