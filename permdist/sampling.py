"""
Uniform random sampling without replacement. Every sampler returns k elements of source as a list, with all
C(n, k) subsets equally likely, and draws its randomness from rand (a fresh random.Random when None).

The three basic methods suit different regimes, and sample() picks between them:
- Reservoir sampling: one pass, no extra space, n - k random numbers.
- Pool sampling (SELECT of Goodman and Hedetniemi): k random numbers, but a copy of the source.
- Insertion sampling (after Floyd): k random numbers and O(k^2) time, independent of n.
"""
from __future__ import annotations

import bisect
import random
from typing import Sequence, TypeVar

from .errors import InvalidParameterError

T = TypeVar('T')


def _check_k(k: int, n: int):
    if not 0 <= k <= n:
        raise InvalidParameterError(f"Cannot sample {k} elements from a source of {n}.")


def sample_reservoir(source: Sequence[T], k: int, rand: random.Random | None = None) -> list[T]:
    """
    >>> sorted(sample_reservoir(range(5), 5))
    [0, 1, 2, 3, 4]
    """
    _check_k(k, len(source))
    rand = rand if rand is not None else random.Random()

    reservoir = list(source[:k])
    for i in range(k, len(source)):
        j = rand.randrange(0, i + 1)
        if j < k:
            reservoir[j] = source[i]

    return reservoir


def sample_pool(source: Sequence[T], k: int, rand: random.Random | None = None) -> list[T]:
    _check_k(k, len(source))
    rand = rand if rand is not None else random.Random()

    pool = list(source)
    remaining = len(pool)
    chosen = []
    for _ in range(k):
        j = rand.randrange(0, remaining)
        chosen.append(pool[j])
        remaining -= 1
        pool[j] = pool[remaining]

    return chosen


def sample_insertion(source: Sequence[T], k: int, rand: random.Random | None = None) -> list[T]:
    """The sample is returned in the order the elements have in source."""
    _check_k(k, len(source))
    rand = rand if rand is not None else random.Random()

    # For each i in [n - k, n), pick j in [0, i]; take j unless already taken, in which case take i (which
    # cannot have been). The chosen indices are kept sorted so membership is a binary search.
    n = len(source)
    indices: list[int] = []
    for i in range(n - k, n):
        j = rand.randrange(0, i + 1)
        at = bisect.bisect_left(indices, j)
        if at < len(indices) and indices[at] == j:
            bisect.insort(indices, i)
        else:
            indices.insert(at, j)

    return [source[i] for i in indices]


def sample(source: Sequence[T], k: int, rand: random.Random | None = None) -> list[T]:
    """Sample k elements with whichever of the three methods is cheapest for these n and k."""
    n = len(source)
    if k + k < n:
        if k * k < n:
            return sample_insertion(source, k, rand)

        return sample_pool(source, k, rand)

    return sample_reservoir(source, k, rand)


def sample_with_probability(source: Sequence[T], p: float, rand: random.Random | None = None) -> list[T]:
    """
    A sample in which each element is included with probability p, i.e. one whose size is binomially
    distributed, and which is uniform given its size.
    """
    if not 0.0 <= p <= 1.0:
        raise InvalidParameterError(f"Inclusion probability must lie in [0, 1], not {p}.")

    rand = rand if rand is not None else random.Random()
    return sample(source, rand.binomialvariate(len(source), p), rand)
