"""
The capabilities a distance measurer may have. Each capability is an abstract base class, and a metric
inherits exactly the ones it supports, so that callers can ask with isinstance() rather than calling a
method which might not be implemented:

- DistanceMeasurerF: a real-valued distance, distancef().
- DistanceMeasurer: an integer-valued distance(), which also serves as distancef().
- HasMaxF / HasMax: the exact maximum distance for a length, and so normalized_distance() in [0, 1].
- HasBound: only an upper bound on the maximum, and normalized_by_bound().
"""
from __future__ import annotations

import abc
from typing import Sized

from .errors import LengthMismatchError, UnsupportedOperationError
from .permutations import Permutation


def check_lengths(p1: Sized, p2: Sized):
    """Raise a LengthMismatchError unless both operands have the same length."""
    if len(p1) != len(p2):
        raise LengthMismatchError(f"Operands must have the same length, not {len(p1)} and {len(p2)}.")


class DistanceMeasurerF(abc.ABC):
    @abc.abstractmethod
    def distancef(self, p1: Permutation, p2: Permutation) -> float:
        """The distance between p1 and p2 as a float."""


class DistanceMeasurer(DistanceMeasurerF):
    @abc.abstractmethod
    def distance(self, p1: Permutation, p2: Permutation) -> int:
        """The distance between p1 and p2."""

    def distancef(self, p1: Permutation, p2: Permutation) -> float:
        return float(self.distance(p1, p2))


class HasMaxF(DistanceMeasurerF):
    @abc.abstractmethod
    def maxf(self, length: int) -> float:
        """The largest distance between two permutations of the given length."""

    def normalized_distance(self, p1: Permutation, p2: Permutation) -> float:
        """
        The distance scaled into [0, 1] by the maximum for this length. When the maximum is zero all
        permutations of this length are at distance zero (e.g. lengths 0 and 1), and this returns 0.0.
        """
        d = self.distancef(p1, p2)
        m = self.maxf(len(p1))
        return 0.0 if m == 0 else d / m


class HasMax(DistanceMeasurer, HasMaxF):
    @abc.abstractmethod
    def max(self, length: int) -> int:
        """The largest distance between two permutations of the given length."""

    def maxf(self, length: int) -> float:
        return float(self.max(length))


class HasBound(DistanceMeasurerF):
    @abc.abstractmethod
    def bound(self, length: int) -> float:
        """An upper bound (not necessarily attained) on the distance between permutations of the given length."""

    def normalized_by_bound(self, p1: Permutation, p2: Permutation) -> float:
        d = self.distancef(p1, p2)
        b = self.bound(len(p1))
        return 0.0 if b == 0 else d / b


def normalized(measurer: DistanceMeasurerF, p1: Permutation, p2: Permutation) -> float:
    """Normalize by the exact maximum if the measurer knows it, and otherwise by its bound."""
    if isinstance(measurer, HasMaxF):
        return measurer.normalized_distance(p1, p2)

    if isinstance(measurer, HasBound):
        return measurer.normalized_by_bound(p1, p2)

    raise UnsupportedOperationError(f"{type(measurer).__name__} has neither a maximum nor a bound.")


def maximum(measurer: DistanceMeasurerF, length: int) -> float:
    """The exact maximum distance for a length, as an int where the measurer is integer valued."""
    if isinstance(measurer, HasMax):
        return measurer.max(length)

    if isinstance(measurer, HasMaxF):
        return measurer.maxf(length)

    raise UnsupportedOperationError(f"{type(measurer).__name__} does not know its maximum distance.")
