"""
Tabulating distances over collections of permutations: distance matrices as numpy arrays, and tables
comparing several metrics on the same pairs as pandas DataFrames.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

import numpy as np
import numpy.typing as npt
import pandas as pd

from .measurer import DistanceMeasurerF, normalized
from .permutations import Permutation


def distance_matrix(measurer: DistanceMeasurerF, perms: Sequence[Permutation]) -> npt.NDArray[np.float64]:
    """
    The matrix of distancef(perms[i], perms[j]) over all ordered pairs. Both triangles are computed, so
    this is also correct for measurers which are not symmetric. The diagonal is left at zero.
    """
    matrix = np.zeros((len(perms), len(perms)), dtype=np.float64)
    for i, p in enumerate(perms):
        for j, q in enumerate(perms):
            if i != j:
                matrix[i, j] = measurer.distancef(p, q)

    return matrix


def compare(measurers: Mapping[str, DistanceMeasurerF], pairs: Iterable[tuple[Permutation, Permutation]]) -> pd.DataFrame:
    """One row per pair of permutations, in order, with a column of normalized distances for each named measurer."""
    pairs = list(pairs)
    return pd.DataFrame.from_dict({
        name: [normalized(measurer, p1, p2) for p1, p2 in pairs]
        for name, measurer in measurers.items()
    })


def exhaustive_max(measurer: DistanceMeasurerF, n: int) -> float:
    """
    The largest distancef from the identity to any permutation of length n, by enumerating all n! of them.
    For metrics unchanged by relabeling both operands, this is the maximum over all pairs.
    """
    start = Permutation.identity(n)
    return max(measurer.distancef(start, p) for p in start.all_permutations())
