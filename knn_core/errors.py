"""
Exception types for the KNN classifier.

All errors derive from ValueError so existing callers that guard
classification with ``except ValueError`` keep working.
"""


class KNNError(ValueError):
    """Base class for classifier faults."""


class InvalidNeighborCountError(KNNError):
    """Raised when k is not an odd integer between 1 and 15."""


class DimensionMismatchError(KNNError):
    """Raised when the query point and training points differ in dimension."""


class UnknownDatasetError(KNNError):
    """Raised when a dataset name is not in the registry."""


class InsufficientNeighborsError(KNNError):
    """Raised when fewer labels are available than neighbors requested."""
