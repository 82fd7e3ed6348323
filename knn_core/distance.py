"""
Euclidean distance computation.
"""

import numpy as np
from typing import Sequence

from knn_core.errors import DimensionMismatchError


def euclidean_distances(train: Sequence, query: Sequence) -> np.ndarray:
    """
    Compute the L2 distance from a query point to every training point.

    Args:
        train: Training points of shape (n_samples, n_features)
        query: Query point of shape (n_features,)

    Returns:
        np.ndarray: Distances of shape (n_samples,), index-aligned with train

    Raises:
        DimensionMismatchError: If train is not 2-D or the query dimension
            differs from the training dimension
    """
    train = np.asarray(train, dtype=np.float64)
    query = np.asarray(query, dtype=np.float64)

    if train.ndim != 2:
        raise DimensionMismatchError(
            f"Training set must be 2-D (n_samples, n_features), got shape {train.shape}"
        )

    if query.ndim != 1 or query.shape[0] != train.shape[1]:
        raise DimensionMismatchError(
            f"Query point has shape {query.shape}, expected ({train.shape[1]},)"
        )

    sq_diff = (train - query) ** 2
    return np.sqrt(sq_diff.sum(axis=1))
