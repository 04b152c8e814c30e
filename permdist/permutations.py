"""
Functions for working with permutations of the integers [0, n), and the mutable Permutation type.

The standard format for a permutation is "word" notation, where the permutation x is represented
by the array [x(0), ..., x(n-1)]. Most functions expect to be given a permutation in word form (where
the exact type of the object may be any sequence), and will return permutations in word form as a tuple.

The Permutation class wraps a word which it keeps valid: it is created from a checked word, and
every in-place operation either leaves it a permutation of the same length or raises before
changing anything.
"""
from __future__ import annotations

import functools
import math
import numbers
import operator
import random
from typing import Callable, Iterator, Sequence

from .errors import InvalidParameterError, InvalidPermutationError, LengthMismatchError


def is_permutation(word: Sequence[int]) -> bool:
    """
    Check that word is a permutation of the integers [0, n) where n = len(word).

    >>> words = [(), (0, 1), (0, 2), (0, 0, 2), (2, 1, 0), (0.0, 1), (True, False)]
    >>> [is_permutation(word) for word in words]
    [True, True, False, False, True, False, False]
    """

    if len(word) == 0:
        return True

    if not all(isinstance(x, numbers.Integral) and not isinstance(x, bool) for x in word):
        return False

    # To try to avoid allocating when checking short permutations, first check that all entries lie in [0, n), and then
    # bitwise-or them into a bitmask of their union. This should be equal to 2^n - 1 (all 1's), and any duplicate will
    # cause a zero to appear somewhere.

    if min(word) != 0 or max(word) != len(word) - 1:
        return False

    mask = functools.reduce(operator.or_, (1 << int(x) for x in word), 0)
    return mask == 2**len(word) - 1


def identity(n: int) -> tuple[int, ...]:
    """
    The identity permutation of length n.

    >>> [identity(n) for n in [0, 1, 2, 3]]
    [(), (0,), (0, 1), (0, 1, 2)]
    """
    return tuple(range(n))


def longest_element(n: int) -> tuple[int, ...]:
    """
    The reversing permutation, which is the furthest from the identity in most metrics.

    >>> longest_element(3)
    (2, 1, 0)
    """
    return tuple(n-i-1 for i in range(n))


def disjoint_cycles(perm: Sequence[int]) -> list[tuple[int, ...]]:
    """
    Return a list of disjoint cycles which make up the permutation. Cycles are ordered so that the
    cycles containing the lowest elements come first, and the order within a circle is then
    traversal order starting from the lowest element.

    >>> disjoint_cycles([2, 3, 1, 0])
    [(0, 2, 1, 3)]
    >>> disjoint_cycles([2, 1, 0, 3, 4, 6, 5])
    [(0, 2), (1,), (3,), (4,), (5, 6)]
    """
    cycles = []
    visited = [False] * len(perm)
    for i in range(len(perm)):
        if visited[i]:
            continue

        cycle = []
        pos = i
        while True:
            cycle.append(pos)
            visited[pos] = True
            pos = perm[pos]
            if pos == i:
                break

        cycles.append(tuple(cycle))

    return cycles


def cycle_type(perm: Sequence[int]) -> tuple[int, ...]:
    """
    Return the cycle type of a permutation, the lengths of the disjoint cycles in decreasing order.

    >>> cycle_type(())
    ()
    >>> cycle_type((0, 1, 2))
    (1, 1, 1)
    >>> cycle_type((1, 0, 2))
    (2, 1)
    >>> cycle_type((2, 0, 1))
    (3,)
    """
    return tuple(sorted((len(cycle) for cycle in disjoint_cycles(perm)), reverse=True))


def inversions(perm: Sequence[int]) -> int:
    """
    Count the pairs i < j with perm[i] > perm[j]. This is the O(n^2) straightforward method, kept as the
    reference for the merge sort count in `inversions.count_inversions`.

    >>> inversions(())
    0
    >>> inversions((0, 1, 2))
    0
    >>> inversions((2, 1, 0))
    3
    >>> inversions((1, 0, 3, 2))
    2
    """

    return sum(1 for i in range(len(perm)) for j in range(i+1, len(perm)) if perm[i] > perm[j])


def inverse(perm: Sequence[int]) -> tuple[int, ...]:
    """
    The inverse of a permutation. Read as a lookup table, it gives the position of each element.

    >>> inverse((2, 0, 1))
    (1, 2, 0)
    >>> inverse(())
    ()
    """
    inv = [0] * len(perm)
    for i, pi in enumerate(perm):
        inv[pi] = i

    return tuple(inv)


def compose(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    """
    Compose two permutations (x, y) -> xy. This composition is right-to-left, i.e. the result applies y, then x.

    >>> compose((1, 2, 0), (1, 0, 2))
    (2, 1, 0)
    """
    if len(x) != len(y):
        raise LengthMismatchError(f"Cannot compose permutations of different lengths {len(x)} and {len(y)}")

    return tuple(x[j] for j in y)


def plain_changes(n: int) -> Iterator[int]:
    """
    Yield the n! - 1 adjacent transpositions of the plain changes (Steinhaus-Johnson-Trotter) order. Each
    yielded i means "swap positions i and i+1", and applying them in turn to any arrangement of n items visits
    every arrangement exactly once. The last arrangement is one swap (of positions 0 and 1) away from the first.

    >>> list(plain_changes(3))
    [1, 0, 1, 0, 1]
    >>> sum(1 for _ in plain_changes(5))
    119
    """
    if n <= 1:
        return

    # Knuth's Algorithm P (TAOCP 7.2.1.2), 1-indexed: c[j] counts how far element j has travelled in its
    # current sweep, and o[j] is its direction. Amortized O(1) per swap.
    c = [0] * (n + 1)
    o = [1] * (n + 1)
    while True:
        j, s = n, 0
        q = c[j] + o[j]
        while q < 0 or q == j:
            if q == j:
                if j == 1:
                    return
                s += 1

            o[j] = -o[j]
            j -= 1
            q = c[j] + o[j]

        yield min(j - c[j] + s, j - q + s) - 1
        c[j] = q


class Permutation:
    """
    A mutable permutation of [0, n), compared and hashed by value.

    >>> p = Permutation([2, 0, 1])
    >>> p
    Permutation([2, 0, 1])
    >>> p[0], len(p), p.inverse()
    (2, 3, (1, 2, 0))
    >>> p.rotate(1)
    >>> p
    Permutation([0, 1, 2])
    >>> p == Permutation.identity(3)
    True

    Instances are not safe to mutate from several threads at once.
    """
    __slots__ = ('_word',)

    def __init__(self, word: Sequence[int]):
        word = list(word)
        if not is_permutation(word):
            raise InvalidPermutationError(f"{word} is not a permutation of [0, {len(word)}).")

        self._word: list[int] = word

    @classmethod
    def _trusted(cls, word: Sequence[int]) -> Permutation:
        """Wrap a copy of a word already known to be a permutation, skipping the check."""
        perm = cls.__new__(cls)
        perm._word = list(word)
        return perm

    @classmethod
    def identity(cls, n: int) -> Permutation:
        if n < 0:
            raise InvalidParameterError(f"Permutation length must be non-negative, not {n}.")

        return cls._trusted(range(n))

    @classmethod
    def random(cls, n: int, rand: random.Random | None = None) -> Permutation:
        """A uniformly random permutation of length n, drawn from rand (a fresh random.Random if None)."""
        if n < 0:
            raise InvalidParameterError(f"Permutation length must be non-negative, not {n}.")

        rand = rand if rand is not None else random.Random()
        word = list(range(n))
        rand.shuffle(word)
        return cls._trusted(word)

    def copy(self) -> Permutation:
        return Permutation._trusted(self._word)

    __copy__ = copy

    @property
    def word(self) -> tuple[int, ...]:
        """A snapshot of the underlying word."""
        return tuple(self._word)

    def get(self, i: int) -> int:
        return self._word[i]

    def __getitem__(self, i: int) -> int:
        return self._word[i]

    def length(self) -> int:
        return len(self._word)

    def __len__(self) -> int:
        return len(self._word)

    def __iter__(self) -> Iterator[int]:
        return iter(self._word)

    def __eq__(self, other):
        if isinstance(other, Permutation):
            return self._word == other._word

        return NotImplemented

    def __hash__(self):
        return hash(tuple(self._word))

    def __repr__(self):
        return f'Permutation({self._word!r})'

    def inverse(self) -> tuple[int, ...]:
        return inverse(self._word)

    def inv(self) -> Permutation:
        return Permutation._trusted(inverse(self._word))

    def __mul__(self, other):
        if isinstance(other, Permutation):
            return Permutation._trusted(compose(self._word, other._word))

        return NotImplemented

    def reverse(self, i: int | None = None, j: int | None = None):
        """
        Reverse the whole permutation, or only the entries between positions i and j inclusive (in either order).

        >>> p = Permutation.identity(6)
        >>> p.reverse(4, 1)
        >>> p
        Permutation([0, 4, 3, 2, 1, 5])
        """
        if i is None and j is None:
            self._word.reverse()
            return

        if i is None or j is None:
            raise InvalidParameterError("Both ends of the range to reverse must be given.")

        n = len(self._word)
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(f"Range ({i}, {j}) is out of bounds for a permutation of length {n}.")

        if i > j:
            i, j = j, i

        self._word[i:j+1] = self._word[i:j+1][::-1]

    def rotate(self, offset: int):
        """
        Cyclically shift the entries left by offset positions, so the entry at position offset moves to position 0.
        Negative offsets shift right.

        >>> p = Permutation.identity(5)
        >>> p.rotate(2)
        >>> p
        Permutation([2, 3, 4, 0, 1])
        """
        if len(self._word) == 0:
            return

        k = offset % len(self._word)
        self._word = self._word[k:] + self._word[:k]

    def apply(self, op: Callable[[list[int], list[int]], tuple[Sequence[int], Sequence[int]]], other: Permutation):
        """
        Replace the words of self and other by op(self word, other word), which must return the two new words.
        Both results are checked before either permutation changes, so a failing op leaves both untouched.

        >>> p, q = Permutation([0, 1, 2]), Permutation([2, 1, 0])
        >>> p.apply(lambda x, y: (y, x), q)
        >>> p, q
        (Permutation([2, 1, 0]), Permutation([0, 1, 2]))
        """
        if other is self:
            raise InvalidParameterError("Cannot apply a binary operator to a permutation and itself.")

        first, second = op(list(self._word), list(other._word))
        first, second = list(first), list(second)
        for before, after in [(self._word, first), (other._word, second)]:
            if len(after) != len(before) or not is_permutation(after):
                raise InvalidPermutationError(
                    f"Operator produced {after}, which is not a permutation of [0, {len(before)})."
                )

        self._word = first
        other._word = second

    def all_permutations(self) -> PermutationEnumeration:
        """All permutations of the same length, in plain changes order starting from (a snapshot of) this one."""
        return PermutationEnumeration(self)


class PermutationEnumeration:
    """
    A restartable, finite enumeration of all n! permutations of length n. The first item is a copy of the
    starting permutation, and each further item differs from the one before by a single adjacent swap.
    Every call to iter() starts over, and every item is a fresh Permutation.

    >>> [p.word for p in Permutation([0, 1, 2]).all_permutations()]
    [(0, 1, 2), (0, 2, 1), (2, 0, 1), (2, 1, 0), (1, 2, 0), (1, 0, 2)]
    """

    def __init__(self, start: Permutation):
        self.start = start.word

    def __len__(self):
        return math.factorial(len(self.start))

    def __iter__(self) -> Iterator[Permutation]:
        work = list(self.start)
        yield Permutation._trusted(work)
        for i in plain_changes(len(work)):
            work[i], work[i+1] = work[i+1], work[i]
            yield Permutation._trusted(work)
