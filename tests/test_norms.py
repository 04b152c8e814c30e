"""
Check every metric's maximum against a brute-force search over all permutations of small lengths, and the
properties every metric shares: zero self-distance, symmetry, and rejecting operands of different lengths.
"""
import itertools
import random
import unittest

import pytest

import permdist
from permdist import LengthMismatchError, Permutation
from permdist.permutations import longest_element
from permdist.tabulate import exhaustive_max


def all_metrics():
    return [
        permdist.ExactMatchDistance(),
        permdist.DeviationDistance(),
        permdist.DeviationDistanceNormalized(),
        permdist.SquaredDeviationDistance(),
        permdist.LeeDistance(),
        permdist.RTypeDistance(),
        permdist.CyclicRTypeDistance(),
        permdist.AcyclicEdgeDistance(),
        permdist.CyclicEdgeDistance(),
        permdist.CycleDistance(),
        permdist.CycleEditDistance(),
        *[permdist.KCycleDistance(k) for k in range(2, 6)],
        permdist.BlockInterchangeDistance(),
        permdist.KendallTauDistance(),
        permdist.ReinsertionDistance(),
        permdist.EditDistance(),
    ]


def weighted_kendall_tau(n: int, rand: random.Random):
    return permdist.WeightedKendallTauDistance([5 + 15 * rand.random() for _ in range(n)])


class TestMaximum(unittest.TestCase):
    def test_max_is_attained(self):
        for d in all_metrics():
            if not isinstance(d, permdist.HasMax):
                continue

            for n in range(8):
                with self.subTest(metric=type(d).__name__, k=getattr(d, 'k', None), n=n):
                    self.assertEqual(exhaustive_max(d, n), d.max(n))
                    self.assertEqual(d.maxf(n), float(d.max(n)))

    def test_maxf_is_attained(self):
        rand = random.Random(42)
        for n in range(8):
            for d in [permdist.DeviationDistanceNormalized(), weighted_kendall_tau(n, rand)]:
                with self.subTest(metric=type(d).__name__, n=n):
                    self.assertAlmostEqual(exhaustive_max(d, n), d.maxf(n))

    def test_normalized_reaches_one(self):
        rand = random.Random(42)
        for n in range(8):
            metrics = [d for d in all_metrics() if isinstance(d, permdist.HasMaxF)] + [weighted_kendall_tau(n, rand)]
            for d in metrics:
                with self.subTest(metric=type(d).__name__, n=n):
                    start = Permutation.identity(n)
                    largest = max(d.normalized_distance(start, p) for p in start.all_permutations())
                    expected = 1.0 if permdist.maximum(d, n) > 0 else 0.0
                    self.assertAlmostEqual(largest, expected)

                    if n <= 1:
                        self.assertEqual(largest, 0.0)

    def test_bound_is_an_upper_bound(self):
        for costs in [(0.5, 0.5, 1.0), (1, 1, 1), (1, 2, 5), (2, 1, 0.5)]:
            d = permdist.EditDistance(*costs)
            for n in range(7):
                with self.subTest(costs=costs, n=n):
                    self.assertLessEqual(exhaustive_max(d, n), d.bound(n))

                    start = Permutation.identity(n)
                    assert all(0.0 <= d.normalized_by_bound(start, p) <= 1.0 for p in start.all_permutations())


def test_identical_permutations():
    rand = random.Random(7)
    for n in range(10):
        metrics = all_metrics() + [weighted_kendall_tau(n, rand)]
        for _ in range(5):
            p = Permutation.random(n, rand)
            for d in metrics:
                assert d.distancef(p, p.copy()) == 0.0
                if isinstance(d, permdist.DistanceMeasurer):
                    assert d.distance(p, p) == 0


def test_symmetry():
    rand = random.Random(11)
    metrics = all_metrics() + [weighted_kendall_tau(4, rand)]
    perms = list(Permutation.identity(4).all_permutations())
    for d in metrics:
        for p, q in itertools.product(perms, perms):
            assert d.distancef(p, q) == pytest.approx(d.distancef(q, p)), f"{d} on {p}, {q}"


def test_length_mismatch():
    metrics = all_metrics() + [permdist.WeightedKendallTauDistance([1.0])]
    for d in metrics:
        with pytest.raises(LengthMismatchError):
            d.distancef(Permutation.identity(1), Permutation.identity(2))

        if isinstance(d, permdist.DistanceMeasurer):
            with pytest.raises(LengthMismatchError):
                d.distance(Permutation.identity(2), Permutation.identity(1))

        if isinstance(d, permdist.HasMaxF):
            with pytest.raises(LengthMismatchError):
                d.normalized_distance(Permutation.identity(1), Permutation.identity(2))


def test_reversal_scenario():
    p = Permutation([0, 1, 2, 3, 4, 5])
    r = p.copy()
    r.reverse()
    assert r == Permutation(longest_element(6))

    assert permdist.ReinsertionDistance().distance(p, r) == 5
    assert permdist.KendallTauDistance().distance(p, r) == 15

    # The reversal scenario is often quoted with a CycleDistance of 5, which disagrees with n minus the number
    # of cycles. Reversal is a product of three disjoint transpositions, so the distance is 3; 5 belongs to a
    # rotation, which is a single 6-cycle.
    assert permdist.CycleDistance().distance(p, r) == 3
    rotated = p.copy()
    rotated.rotate(1)
    assert permdist.CycleDistance().distance(p, rotated) == 5
