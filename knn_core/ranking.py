"""
Rank resolution for distance lists.

Sorts a sequence ascending and returns the permutation that produced the
ordering. Equal values keep their original relative order, so a tie always
resolves to the earliest unused index.
"""

import numpy as np
from typing import Sequence, Tuple


def sort_and_argsort(values: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sort values ascending and return the sorting permutation.

    Args:
        values: Sequence of real numbers (typically distances)

    Returns:
        Tuple of (indices, sorted_values) where
        values[indices[i]] == sorted_values[i] for every i
    """
    values = np.asarray(values, dtype=np.float64).ravel()

    # stable sort: duplicates come out in original index order
    indices = np.argsort(values, kind="stable")
    sorted_values = values[indices]

    return indices, sorted_values
