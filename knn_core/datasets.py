"""
Dataset Registry

Closed, read-only registry of the toy datasets the classifier can work with.
Each entry pairs a 10x2 training set with its binary class labels. Arrays are
marked non-writeable so the shared data cannot be altered after import.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

import numpy as np


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    A named training set and its labels, aligned by position.

    Args:
        name (str): Registry key for the dataset
        features (np.ndarray): Training points of shape (n_samples, n_features)
        labels (np.ndarray): Binary labels of shape (n_samples,)
    """

    name: str
    features: np.ndarray
    labels: np.ndarray

    def __post_init__(self):
        features = np.array(self.features, dtype=np.float64)
        labels = np.array(self.labels, dtype=np.int64)

        if features.ndim != 2:
            raise ValueError(f"Dataset '{self.name}' features must be 2-D, got shape {features.shape}")

        if labels.ndim != 1:
            raise ValueError(f"Dataset '{self.name}' labels must be 1-D, got shape {labels.shape}")

        if len(features) != len(labels):
            raise ValueError(
                f"Dataset '{self.name}' has {len(features)} points but {len(labels)} labels"
            )

        if not np.isin(labels, (0, 1)).all():
            raise ValueError(f"Dataset '{self.name}' labels must be binary (0 or 1)")

        features.setflags(write=False)
        labels.setflags(write=False)
        object.__setattr__(self, 'features', features)
        object.__setattr__(self, 'labels', labels)

    @property
    def n_samples(self) -> int:
        return self.features.shape[0]

    @property
    def n_features(self) -> int:
        return self.features.shape[1]


CANCER = Dataset(
    name="cancer",
    features=[
        [1.4, 14.2], [7.3, 3.6], [15.8, 2.0], [7.0, 9.1], [13.9, 5.7],
        [16.6, 2.1], [18.1, 4.5], [8.1, 11.1], [11.9, 1.9], [12.8, 15.7],
    ],
    labels=[0, 1, 1, 1, 0, 0, 1, 0, 1, 0],
)

CUSTOMER = Dataset(
    name="customer",
    features=[
        [11.4, 4.2], [17.3, 13.6], [5.8, 22.0], [7.0, 1.1], [13.9, 5.7],
        [16.6, 9.1], [8.1, 1.5], [1.1, 11.1], [2.9, 19.9], [22.8, 15.7],
    ],
    labels=[1, 0, 0, 1, 1, 0, 1, 1, 1, 0],
)

DATASETS: Mapping[str, Dataset] = MappingProxyType({
    CANCER.name: CANCER,
    CUSTOMER.name: CUSTOMER,
})


def get_dataset(name: str) -> Optional[Dataset]:
    """
    Look up a dataset by name.

    Args:
        name: Dataset selector

    Returns:
        Dataset if the name is registered, None otherwise
    """
    return DATASETS.get(name)


def list_datasets() -> List[str]:
    """Return registered dataset names in registry order."""
    return list(DATASETS.keys())
