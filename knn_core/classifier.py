"""
K-Nearest Neighbors Classifier

This module defines the orchestrator that owns the neighbor count k, selects
a registered dataset by name, and chains distance computation, rank
resolution and majority voting to produce a binary class label.
"""

import logging
from typing import Dict, Optional, Sequence

import numpy as np

from knn_core.datasets import get_dataset, list_datasets
from knn_core.distance import euclidean_distances
from knn_core.errors import InvalidNeighborCountError
from knn_core.ranking import sort_and_argsort
from knn_core.voting import majority_vote


logger = logging.getLogger("knn_service")

MIN_K = 1
MAX_K = 15
DEFAULT_K = 5


def validate_k(k) -> int:
    """
    Check that k is an odd integer in [MIN_K, MAX_K].

    Args:
        k: Candidate neighbor count

    Returns:
        int: The validated k

    Raises:
        InvalidNeighborCountError: If k is not an int, is even, or is out of range
    """
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise InvalidNeighborCountError(f"k must be an integer, got {k!r}")

    if not (MIN_K <= k <= MAX_K) or k % 2 == 0:
        raise InvalidNeighborCountError(
            f"k must be a positive odd number between {MIN_K} and {MAX_K}, got {k}"
        )

    return int(k)


def unknown_dataset_message() -> str:
    names = " or ".join(f"'{name}'" for name in list_datasets())
    return f"Data can either be: {names} data. Re-specify."


class KNNClassifier:
    """
    Binary KNN classifier over the closed dataset registry.

    k is fixed at construction and never changes afterwards. Every call is
    independent of previous calls.

    Args:
        k (int): Number of nearest neighbors, odd and between 1 and 15 (default: 5)
    """

    def __init__(self, k: int = DEFAULT_K):
        self._k = validate_k(k)

    @property
    def k(self) -> int:
        return self._k

    def __repr__(self) -> str:
        return f"KNNClassifier(k={self._k})"

    def classify_point(
        self,
        features: Sequence,
        labels: Sequence[int],
        query: Sequence[float]
    ) -> int:
        """
        Classify a query point against an explicit training set.

        Args:
            features: Training points of shape (n_samples, n_features)
            labels: Binary labels of shape (n_samples,)
            query: Query point of shape (n_features,)

        Returns:
            int: Predicted label, 0 or 1

        Raises:
            DimensionMismatchError: If query and training dimensions differ
            InsufficientNeighborsError: If the training set has fewer than k points
        """
        distances = euclidean_distances(features, query)
        indices, _sorted_distances = sort_and_argsort(distances)

        # keep labels aligned with the sorted distances
        sorted_labels = np.asarray(labels)[indices]

        return majority_vote(sorted_labels, self._k)

    def classify(self, dataset_name: str, query: Sequence[float]) -> Optional[int]:
        """
        Classify a query point against a registered dataset.

        Args:
            dataset_name: Registry name, e.g. 'cancer' or 'customer'
            query: Query point with the dataset's dimension

        Returns:
            Predicted label (0 or 1), or None if the dataset is not registered
        """
        return self.run_analysis(dataset_name, query)['label']

    def run_analysis(self, dataset_name: str, query: Sequence[float]) -> Dict:
        """
        Classify a query point and report the outcome with its diagnostic line.

        An unknown dataset name is not a fault: it is logged and reported
        with status 'unknown_dataset' and no label.

        Args:
            dataset_name: Registry name
            query: Query point with the dataset's dimension

        Returns:
            dict: Outcome containing:
                - status: 'success' or 'unknown_dataset'
                - dataset: The requested dataset name
                - label: Predicted label, or None
                - message: Human-readable diagnostic line
                - k: Neighbor count used
        """
        dataset = get_dataset(dataset_name)

        if dataset is None:
            message = unknown_dataset_message()
            logger.warning(message)
            return {
                'status': 'unknown_dataset',
                'dataset': dataset_name,
                'label': None,
                'message': message,
                'k': self._k
            }

        message = f"Working with {dataset.name} dataset."
        logger.info(message)

        label = self.classify_point(dataset.features, dataset.labels, query)
        logger.debug(f"The test point class is: {label}")

        return {
            'status': 'success',
            'dataset': dataset.name,
            'label': label,
            'message': message,
            'k': self._k
        }
