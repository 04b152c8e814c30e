"""
Exceptions raised by permdist. All of them signal a mistake by the caller, and are raised before
anything is mutated.
"""


class InvalidPermutationError(ValueError):
    """A word is not a permutation of [0, n)."""


class LengthMismatchError(ValueError):
    """Two operands (or an operand and a weight vector) have different lengths."""


class InvalidParameterError(ValueError):
    """A constructor or sampling parameter is out of range."""


class ElementNotFoundError(ValueError):
    """An element of the second sequence does not occur (often enough) in the first."""


class UnsupportedOperationError(NotImplementedError):
    """A measurer was asked for a capability it does not have."""
