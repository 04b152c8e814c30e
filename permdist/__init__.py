from .adjacency import AcyclicEdgeDistance, CyclicEdgeDistance, CyclicRTypeDistance, RTypeDistance
from .cycles import BlockInterchangeDistance, CycleDistance, CycleEditDistance, KCycleDistance
from .edit import EditDistance, ReinsertionDistance
from .errors import (
    ElementNotFoundError,
    InvalidParameterError,
    InvalidPermutationError,
    LengthMismatchError,
    UnsupportedOperationError,
)
from .inversions import KendallTauDistance, WeightedKendallTauDistance
from .measurer import DistanceMeasurer, DistanceMeasurerF, HasBound, HasMax, HasMaxF, maximum, normalized
from .permutations import Permutation, PermutationEnumeration
from .positional import (
    DeviationDistance,
    DeviationDistanceNormalized,
    ExactMatchDistance,
    LeeDistance,
    SquaredDeviationDistance,
)
from .sequences import KendallTauSequenceDistance, Relabeling, relabel

__all__ = [
    "AcyclicEdgeDistance",
    "BlockInterchangeDistance",
    "CycleDistance",
    "CycleEditDistance",
    "CyclicEdgeDistance",
    "CyclicRTypeDistance",
    "DeviationDistance",
    "DeviationDistanceNormalized",
    "DistanceMeasurer",
    "DistanceMeasurerF",
    "EditDistance",
    "ElementNotFoundError",
    "ExactMatchDistance",
    "HasBound",
    "HasMax",
    "HasMaxF",
    "InvalidParameterError",
    "InvalidPermutationError",
    "KCycleDistance",
    "KendallTauDistance",
    "KendallTauSequenceDistance",
    "LeeDistance",
    "LengthMismatchError",
    "Permutation",
    "PermutationEnumeration",
    "RTypeDistance",
    "ReinsertionDistance",
    "Relabeling",
    "SquaredDeviationDistance",
    "UnsupportedOperationError",
    "WeightedKendallTauDistance",
    "maximum",
    "normalized",
    "relabel",
]
