"""
Relabeling of general sequences, so that the permutation algorithms can be used on sequences of any
comparable elements, repeats included.
"""
from __future__ import annotations

import bisect
import dataclasses
from typing import Sequence

from .errors import ElementNotFoundError
from .inversions import count_inversions
from .measurer import HasMax, check_lengths


@dataclasses.dataclass(frozen=True)
class Relabeling:
    labels1: tuple[int, ...]
    labels2: tuple[int, ...]
    distinct: int


def relabel(s1: Sequence, s2: Sequence) -> Relabeling:
    """
    Replace the elements of two sequences of the same length by dense integer labels 0, 1, ..., distinct - 1,
    numbered in increasing order of the values in s1. Equal elements get equal labels. The labels come from s1
    alone, and an element of s2 which does not appear in s1 raises an ElementNotFoundError.

    >>> relabel("banana", "ananab")
    Relabeling(labels1=(1, 0, 2, 0, 2, 0), labels2=(0, 2, 0, 2, 0, 1), distinct=3)
    """
    check_lengths(s1, s2)
    ordered = sorted(s1)

    labels = []
    current = -1
    for i, x in enumerate(ordered):
        if i == 0 or x != ordered[i - 1]:
            current += 1
        labels.append(current)

    def label_of(x) -> int:
        i = bisect.bisect_left(ordered, x)
        if i == len(ordered) or ordered[i] != x:
            raise ElementNotFoundError(f"Element {x!r} of the second sequence does not appear in the first.")
        return labels[i]

    return Relabeling(
        labels1=tuple(label_of(x) for x in s1),
        labels2=tuple(label_of(x) for x in s2),
        distinct=current + 1,
    )


class KendallTauSequenceDistance(HasMax):
    """
    Kendall tau distance between sequences which may contain repeats: the least number of adjacent swaps that
    turn s1 into s2. The sequences must contain the same elements the same number of times. Copies of an
    element are matched up in order, since swapping two equal elements never helps.
    The maximum is that of KendallTauDistance, attained by a sequence of distinct elements and its reversal.

    >>> KendallTauSequenceDistance().distance("abcab", "abacb")
    1
    """

    def distance(self, s1: Sequence, s2: Sequence) -> int:
        relabeling = relabel(s1, s2)
        labels1, labels2, distinct = relabeling.labels1, relabeling.labels2, relabeling.distinct

        # Queue up the positions in s1 holding each label.
        positions: list[list[int]] = [[] for _ in range(distinct)]
        for i, label in enumerate(labels1):
            positions[label].append(i)

        used = [0] * distinct
        mapped = []
        for i, label in enumerate(labels2):
            if used[label] == len(positions[label]):
                raise ElementNotFoundError(f"Element {s2[i]!r} occurs more often in the second sequence than the first.")

            mapped.append(positions[label][used[label]])
            used[label] += 1

        return count_inversions(mapped)

    def max(self, length: int) -> int:
        return length * (length - 1) // 2 if length > 1 else 0
