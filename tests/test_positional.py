import unittest

from permdist import (
    DeviationDistance,
    DeviationDistanceNormalized,
    ExactMatchDistance,
    LeeDistance,
    Permutation,
    SquaredDeviationDistance,
)


class TestPositionalDistances(unittest.TestCase):
    def setUp(self):
        self.p = Permutation([0, 1, 2, 3, 4])
        self.rotated = Permutation([1, 2, 3, 4, 0])
        self.reversed = Permutation([4, 3, 2, 1, 0])

    def test_exact_match(self):
        d = ExactMatchDistance()
        self.assertEqual(d.distance(self.p, self.rotated), 5)
        self.assertEqual(d.distance(self.p, self.reversed), 4)
        self.assertEqual(d.distance(self.p, Permutation([0, 1, 3, 2, 4])), 2)

    def test_deviation(self):
        d = DeviationDistance()
        # Four elements move one place left, and one moves four places right.
        self.assertEqual(d.distance(self.p, self.rotated), 8)
        self.assertEqual(d.distance(self.p, self.reversed), 12)
        self.assertEqual(d.max(5), 12)

    def test_deviation_normalized(self):
        d = DeviationDistanceNormalized()
        self.assertEqual(d.distancef(self.p, self.rotated), 2.0)
        self.assertEqual(d.maxf(5), 3.0)
        self.assertEqual(d.normalized_distance(self.p, self.reversed), 1.0)
        self.assertEqual(d.distancef(Permutation([0]), Permutation([0])), 0.0)

    def test_squared_deviation(self):
        d = SquaredDeviationDistance()
        self.assertEqual(d.distance(self.p, self.rotated), 4 + 16)
        self.assertEqual(d.distance(self.p, self.reversed), 16 + 4 + 0 + 4 + 16)
        self.assertEqual(d.max(5), 40)

    def test_lee(self):
        d = LeeDistance()
        # Around a circle of five, a rotation moves everything by one.
        self.assertEqual(d.distance(self.p, self.rotated), 5)
        self.assertEqual(d.distance(self.p, self.reversed), 1 + 2 + 0 + 2 + 1)
        self.assertEqual(d.max(5), 10)
