"""
Unit tests for the dataset registry.
"""

import pytest
import numpy as np

from knn_core.datasets import (
    CANCER,
    CUSTOMER,
    DATASETS,
    Dataset,
    get_dataset,
    list_datasets,
)


def test_registry_contains_exactly_two_datasets():
    assert list_datasets() == ["cancer", "customer"]


def test_get_dataset_known_and_unknown():
    assert get_dataset("cancer") is CANCER
    assert get_dataset("customer") is CUSTOMER
    assert get_dataset("Cancer") is None
    assert get_dataset("") is None


@pytest.mark.parametrize("dataset", [CANCER, CUSTOMER], ids=lambda d: d.name)
def test_shapes_and_binary_labels(dataset):
    assert dataset.n_samples == 10
    assert dataset.n_features == 2
    assert len(dataset.labels) == dataset.n_samples
    assert set(np.unique(dataset.labels)) <= {0, 1}


def test_cancer_labels():
    assert CANCER.labels.tolist() == [0, 1, 1, 1, 0, 0, 1, 0, 1, 0]


def test_customer_labels():
    assert CUSTOMER.labels.tolist() == [1, 0, 0, 1, 1, 0, 1, 1, 1, 0]


def test_arrays_are_read_only():
    with pytest.raises(ValueError):
        CANCER.features[0, 0] = 99.0

    with pytest.raises(ValueError):
        CANCER.labels[0] = 1


def test_registry_cannot_be_modified():
    with pytest.raises(TypeError):
        DATASETS["extra"] = CANCER


def test_dataset_fields_are_frozen():
    with pytest.raises(AttributeError):
        CANCER.name = "other"


def test_dataset_rejects_length_mismatch():
    with pytest.raises(ValueError, match="labels"):
        Dataset(name="bad", features=[[0.0, 0.0], [1.0, 1.0]], labels=[0])


def test_dataset_rejects_non_binary_labels():
    with pytest.raises(ValueError, match="binary"):
        Dataset(name="bad", features=[[0.0, 0.0], [1.0, 1.0]], labels=[0, 2])


def test_dataset_rejects_one_dimensional_features():
    with pytest.raises(ValueError, match="2-D"):
        Dataset(name="bad", features=[0.0, 1.0], labels=[0, 1])


def test_dataset_copies_its_input():
    source = [[0.0, 0.0], [1.0, 1.0]]
    dataset = Dataset(name="copy", features=source, labels=[0, 1])

    source[0][0] = 5.0

    assert dataset.features[0, 0] == 0.0
