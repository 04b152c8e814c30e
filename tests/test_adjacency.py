import pytest

from permdist import (
    AcyclicEdgeDistance,
    CyclicEdgeDistance,
    CyclicRTypeDistance,
    LengthMismatchError,
    Permutation,
    RTypeDistance,
)


def rotation_invariance(d, n):
    for p in Permutation.identity(n).all_permutations():
        q = Permutation.random(n)
        expected = d.distance(p, q)
        for _ in range(n):
            q.rotate(1)
            assert d.distance(p, q) == expected
            p.rotate(1)
            assert d.distance(p, q) == expected


def test_cyclic_r_type_distance():
    d = CyclicRTypeDistance()
    p1 = Permutation([0, 1, 2, 3, 4, 5])
    p2 = Permutation([0, 2, 4, 1, 5, 3])
    p3 = Permutation([0, 1, 2, 4, 5, 3])

    assert d.distance(p1, p2) == 6
    for _ in range(1, 6):
        p2.rotate(1)
        assert d.distance(p1, p2) == 6

    assert d.distance(p1, p3) == 3
    for _ in range(1, 6):
        p3.rotate(1)
        assert d.distance(p1, p3) == 3

    r = p1.copy()
    r.reverse()
    assert d.distance(p1, r) == 6


def test_cyclic_distances_ignore_rotation():
    for n in range(5):
        rotation_invariance(CyclicRTypeDistance(), n)
        rotation_invariance(CyclicEdgeDistance(), n)


def test_r_type_distance():
    d = RTypeDistance()
    p = Permutation([0, 1, 2, 3, 4, 5])
    assert d.distance(p, Permutation([0, 2, 4, 1, 5, 3])) == 5
    assert d.distance(p, Permutation([0, 1, 2, 4, 5, 3])) == 2
    assert d.distance(p, Permutation([5, 4, 3, 2, 1, 0])) == 5


def test_edge_distances_ignore_direction():
    p = Permutation([0, 1, 2, 3, 4, 5])
    r = Permutation([5, 4, 3, 2, 1, 0])
    assert AcyclicEdgeDistance().distance(p, r) == 0
    assert CyclicEdgeDistance().distance(p, r) == 0

    assert AcyclicEdgeDistance().distance(p, Permutation([0, 1, 2, 4, 5, 3])) == 2
    assert CyclicEdgeDistance().distance(p, Permutation([0, 1, 2, 4, 5, 3])) == 3


def test_length_mismatch():
    for d in [RTypeDistance(), CyclicRTypeDistance(), AcyclicEdgeDistance(), CyclicEdgeDistance()]:
        with pytest.raises(LengthMismatchError):
            d.distance(Permutation([0]), Permutation([1, 0]))
