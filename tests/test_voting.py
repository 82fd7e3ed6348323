"""
Unit tests for majority voting.
"""

import itertools

import pytest

from knn_core.errors import InsufficientNeighborsError
from knn_core.voting import majority_vote


def test_majority_of_first_k():
    assert majority_vote([1, 0, 1], 3) == 1
    assert majority_vote([0, 0, 1], 3) == 0


def test_only_first_k_labels_count():
    # labels beyond k would flip the result if counted
    assert majority_vote([1, 0, 1, 0, 0, 0, 0], 3) == 1


def test_k_of_one_returns_nearest_label():
    assert majority_vote([0, 1, 1, 1], 1) == 0


def test_insufficient_labels_raises():
    with pytest.raises(InsufficientNeighborsError):
        majority_vote([1, 0], 3)


def test_insufficient_labels_is_a_value_error():
    with pytest.raises(ValueError):
        majority_vote([], 1)


@pytest.mark.parametrize("k", [1, 3, 5, 7])
def test_result_is_binary_for_every_label_combination(k):
    for labels in itertools.product([0, 1], repeat=k):
        result = majority_vote(list(labels), k)
        assert result in (0, 1)
        assert result == (1 if sum(labels) > k // 2 else 0)


def test_returns_python_int():
    assert type(majority_vote([1, 1, 0], 3)) is int
