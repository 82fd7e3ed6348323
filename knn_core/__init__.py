"""
KNN core: distance computation, rank resolution and majority voting for
binary classification over a closed registry of toy datasets.
"""

from .classifier import KNNClassifier, validate_k
from .datasets import Dataset, DATASETS, get_dataset, list_datasets
from .distance import euclidean_distances
from .errors import (
    KNNError,
    InvalidNeighborCountError,
    DimensionMismatchError,
    UnknownDatasetError,
    InsufficientNeighborsError,
)
from .evaluation import evaluate_dataset
from .ranking import sort_and_argsort
from .voting import majority_vote

__all__ = [
    'KNNClassifier',
    'validate_k',
    'Dataset',
    'DATASETS',
    'get_dataset',
    'list_datasets',
    'euclidean_distances',
    'KNNError',
    'InvalidNeighborCountError',
    'DimensionMismatchError',
    'UnknownDatasetError',
    'InsufficientNeighborsError',
    'evaluate_dataset',
    'sort_and_argsort',
    'majority_vote',
]
