import random

import pytest

from permdist import (
    ElementNotFoundError,
    HasMax,
    KendallTauDistance,
    KendallTauSequenceDistance,
    LengthMismatchError,
    Permutation,
    Relabeling,
    normalized,
    relabel,
)


def test_relabel_self():
    for s in ["banana", [3.5, -1.0, 3.5, 2.0], ("x",), []]:
        r = relabel(s, s)
        assert r.labels1 == r.labels2
        assert r.distinct == len(set(s))
        assert sorted(set(r.labels1)) == list(range(r.distinct))


def test_relabel_keeps_order():
    assert relabel([30, 10, 20], [10, 20, 30]) == Relabeling((2, 0, 1), (0, 1, 2), 3)


def test_relabel_errors():
    with pytest.raises(ElementNotFoundError):
        relabel("abc", "abd")

    with pytest.raises(LengthMismatchError):
        relabel("abc", "ab")


def test_sequence_distance_matches_permutations():
    seq, perm = KendallTauSequenceDistance(), KendallTauDistance()
    rand = random.Random(3)
    for n in range(10):
        for _ in range(10):
            p1, p2 = Permutation.random(n, rand), Permutation.random(n, rand)
            assert seq.distance(p1.word, p2.word) == perm.distance(p1, p2)


def test_sequence_distance_with_repeats():
    d = KendallTauSequenceDistance()
    assert d.distance("", "") == 0
    assert d.distance("aaa", "aaa") == 0
    assert d.distance("aab", "baa") == 2
    assert d.distance("abab", "baba") == 2
    assert d.distance("abcab", "abacb") == 1


def test_sequence_distance_needs_same_elements():
    d = KendallTauSequenceDistance()
    with pytest.raises(ElementNotFoundError):
        d.distance("aab", "abb")

    with pytest.raises(ElementNotFoundError):
        d.distance("abc", "abz")

    with pytest.raises(LengthMismatchError):
        d.distance("abc", "abca")


def test_sequence_distance_normalizes():
    d = KendallTauSequenceDistance()
    assert isinstance(d, HasMax)
    assert [d.max(n) for n in range(5)] == [0, 0, 1, 3, 6]
    assert normalized(d, "abc", "cba") == 1.0
    assert normalized(d, "abca", "aabc") == 2 / 6
    assert normalized(d, "x", "x") == 0.0
