"""
Majority vote over binary neighbor labels.
"""

import numpy as np
from typing import Sequence

from knn_core.errors import InsufficientNeighborsError


def majority_vote(labels: Sequence[int], k: int) -> int:
    """
    Return the majority label among the first k labels.

    Labels must already be ordered by ascending distance. With binary labels
    and an odd k a tie cannot occur.

    Args:
        labels: Binary labels (0 or 1) in distance order
        k: Number of nearest neighbors to consider

    Returns:
        int: 1 if label 1 outnumbers label 0 among the first k, else 0

    Raises:
        InsufficientNeighborsError: If fewer than k labels are available
    """
    labels = np.asarray(labels)

    if len(labels) < k:
        raise InsufficientNeighborsError(
            f"Need at least {k} labels for voting, got {len(labels)}"
        )

    first_k = labels[:k]
    n_1 = int(np.count_nonzero(first_k == 1))
    n_0 = int(np.count_nonzero(first_k == 0))

    return 1 if n_1 > n_0 else 0
