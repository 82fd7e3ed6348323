"""
Resubstitution Evaluation

Scores a classifier on the training points of a registered dataset. Each
training point is classified against the full dataset (itself included) and
compared with its own label.
"""

import logging
from typing import Dict

import numpy as np
from sklearn.metrics import accuracy_score, confusion_matrix

from knn_core.classifier import KNNClassifier
from knn_core.datasets import get_dataset
from knn_core.errors import UnknownDatasetError


logger = logging.getLogger("knn_service")


def evaluate_dataset(classifier: KNNClassifier, dataset_name: str) -> Dict:
    """
    Evaluate a classifier on every training point of a dataset.

    Args:
        classifier: Configured KNNClassifier
        dataset_name: Registry name of the dataset to evaluate

    Returns:
        dict: Evaluation metrics containing:
            - dataset: Dataset name
            - k: Neighbor count used
            - n_samples: Number of points evaluated
            - predictions: Predicted label per training point
            - accuracy: Fraction of points classified as their own label
            - confusion_matrix: 2x2 nested list, rows true / columns predicted

    Raises:
        UnknownDatasetError: If the dataset is not registered
    """
    dataset = get_dataset(dataset_name)
    if dataset is None:
        raise UnknownDatasetError(f"Unknown dataset: {dataset_name!r}")

    logger.info(f"Evaluating k={classifier.k} on {dataset.n_samples} points of {dataset.name}")

    predictions = np.array([
        classifier.classify_point(dataset.features, dataset.labels, point)
        for point in dataset.features
    ])

    accuracy = accuracy_score(dataset.labels, predictions)
    conf_matrix = confusion_matrix(dataset.labels, predictions, labels=[0, 1])

    logger.info(f"Resubstitution accuracy on {dataset.name}: {accuracy:.4f}")

    return {
        'dataset': dataset.name,
        'k': classifier.k,
        'n_samples': dataset.n_samples,
        'predictions': predictions.tolist(),
        'accuracy': float(accuracy),
        'confusion_matrix': conf_matrix.tolist()
    }
