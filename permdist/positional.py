"""
Distances which only look at where each element sits in the two permutations.
"""
from __future__ import annotations

import numpy as np
import numpy.typing as npt

from .measurer import HasMax, HasMaxF, check_lengths
from .permutations import Permutation


def displacements(p1: Permutation, p2: Permutation) -> npt.NDArray[np.int64]:
    """
    For each element, its position in p2 minus its position in p1.

    >>> displacements(Permutation([0, 1, 2]), Permutation([2, 0, 1])).tolist()
    [1, 1, -2]
    """
    check_lengths(p1, p2)
    return np.array(p2.inverse(), dtype=np.int64) - np.array(p1.inverse(), dtype=np.int64)


class ExactMatchDistance(HasMax):
    """The number of positions holding different elements (the Hamming distance)."""

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        check_lengths(p1, p2)
        return int(np.count_nonzero(np.array(p1.word, dtype=np.int64) != np.array(p2.word, dtype=np.int64)))

    def max(self, length: int) -> int:
        return length if length >= 2 else 0


class DeviationDistance(HasMax):
    """The total distance the elements move, also known as Spearman's footrule."""

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        return int(np.abs(displacements(p1, p2)).sum())

    def max(self, length: int) -> int:
        return length * length // 2


class DeviationDistanceNormalized(HasMaxF):
    """The deviation distance divided by n - 1, i.e. the average displacement scaled by n / (n - 1)."""

    def __init__(self):
        self.deviation = DeviationDistance()

    def distancef(self, p1: Permutation, p2: Permutation) -> float:
        d = self.deviation.distance(p1, p2)
        return d / (len(p1) - 1) if len(p1) > 1 else 0.0

    def maxf(self, length: int) -> float:
        return self.deviation.max(length) / (length - 1) if length > 1 else 0.0


class SquaredDeviationDistance(HasMax):
    """The sum of squared displacements, which is Spearman's rho up to scaling."""

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        d = displacements(p1, p2)
        return int((d * d).sum())

    def max(self, length: int) -> int:
        # Attained by reversal: the sum of (n - 1 - 2i)^2.
        return (length**3 - length) // 3


class LeeDistance(HasMax):
    """The deviation distance with positions taken around a circle, so no element moves more than n // 2."""

    def distance(self, p1: Permutation, p2: Permutation) -> int:
        d = np.abs(displacements(p1, p2))
        return int(np.minimum(d, len(p1) - d).sum())

    def max(self, length: int) -> int:
        # Rotation by n // 2 moves every element the furthest possible.
        return length * (length // 2)
