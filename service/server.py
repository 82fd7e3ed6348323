"""
FastAPI Server for the KNN Classification Service

This module provides REST API endpoints for classifying query points against
the registered toy datasets, evaluating the classifier, and querying service
status.
"""

import json

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Dict, List, Optional

from knn_core.classifier import KNNClassifier
from knn_core.datasets import DATASETS, list_datasets
from knn_core.errors import DimensionMismatchError, UnknownDatasetError
from knn_core.evaluation import evaluate_dataset
from service.state import (
    DEFAULT_CONFIG,
    load_config,
    record_request,
    get_request_stats
)
from service.utils import setup_logging


# Initialize FastAPI app
app = FastAPI(
    title="KNN Classification Service",
    description="REST API for binary k-nearest-neighbors classification over toy datasets",
    version="1.0.0"
)

# Global variables
logger = None
config = None
classifier: Optional[KNNClassifier] = None


class ClassifyRequest(BaseModel):
    """Request body for POST /classify."""
    dataset: str = Field(..., description="Registered dataset name, e.g. 'cancer'")
    point: List[float] = Field(..., description="Query point with the dataset's dimension")


def initialize_server(config_override: Optional[Dict] = None) -> None:
    """
    Initialize server configuration, logging and the classifier.

    Without an override, initialization runs once and later calls are no-ops.

    Args:
        config_override: Configuration to use instead of the config file

    Raises:
        ValueError: If the configured k is invalid
    """
    global logger, config, classifier

    if config_override is None and classifier is not None:
        return  # Already initialized

    if config_override is not None:
        new_config = {**DEFAULT_CONFIG, **config_override}
    else:
        # a missing or unreadable file falls back to defaults; invalid values raise
        try:
            new_config = load_config()
        except (FileNotFoundError, json.JSONDecodeError) as e:
            print(f"Warning: Could not load config, using defaults: {e}")
            new_config = dict(DEFAULT_CONFIG)

    # Setup logging
    logger = setup_logging(new_config.get("log_level", "INFO"))
    logger.info("Classification service starting up")
    logger.info(f"Configuration: {new_config}")

    # The running classifier is only replaced once the new one is valid
    try:
        new_classifier = KNNClassifier(new_config["k"])
    except ValueError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise

    config = new_config
    classifier = new_classifier
    logger.info(f"Classifier ready: {classifier}, datasets: {list_datasets()}")


@app.on_event("startup")
async def startup_event():
    """Initialize server on startup."""
    initialize_server()


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "KNN Classification Service",
        "version": "1.0.0",
        "endpoints": {
            "classify": "POST /classify",
            "datasets": "GET /datasets",
            "evaluate": "GET /evaluate/{dataset}",
            "status": "GET /status",
            "health": "GET /health"
        }
    }


@app.get("/datasets")
async def get_datasets():
    """
    List the registered datasets.

    Returns:
        JSON response with dataset names and shapes
    """
    initialize_server()

    return {
        "datasets": [
            {
                "name": dataset.name,
                "n_samples": dataset.n_samples,
                "n_features": dataset.n_features
            }
            for dataset in DATASETS.values()
        ]
    }


@app.post("/classify")
async def classify(request: ClassifyRequest):
    """
    Classify a query point against a registered dataset.

    Args:
        request: Dataset name and query point

    Returns:
        JSON response with the predicted label and diagnostic message
    """
    initialize_server()

    try:
        result = classifier.run_analysis(request.dataset, request.point)

    except DimensionMismatchError as e:
        record_request('rejected')
        logger.warning(f"Rejected query for {request.dataset}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        record_request('rejected')
        logger.error(f"Error classifying point for {request.dataset}: {e}")
        raise HTTPException(status_code=500, detail=f"Classification failed: {str(e)}")

    record_request(result['status'], result['dataset'])

    if result['status'] != 'success':
        raise HTTPException(status_code=404, detail=result['message'])

    logger.info(f"The test point class is: {result['label']}")

    return JSONResponse(
        status_code=200,
        content={
            "status": "success",
            "dataset": result['dataset'],
            "label": result['label'],
            "message": result['message'],
            "k": result['k'],
            "timestamp": datetime.now().isoformat()
        }
    )


@app.get("/evaluate/{dataset}")
async def evaluate(dataset: str):
    """
    Evaluate the classifier on the training points of a dataset.

    Args:
        dataset: Registered dataset name

    Returns:
        JSON response with accuracy, confusion matrix and predictions
    """
    initialize_server()

    try:
        metrics = evaluate_dataset(classifier, dataset)

    except UnknownDatasetError as e:
        raise HTTPException(status_code=404, detail=str(e))

    except Exception as e:
        logger.error(f"Error evaluating {dataset}: {e}")
        raise HTTPException(status_code=500, detail=f"Evaluation failed: {str(e)}")

    return JSONResponse(
        status_code=200,
        content={
            "status": "success",
            "result": metrics,
            "timestamp": datetime.now().isoformat()
        }
    )


@app.get("/status")
async def get_status():
    """
    Get service status and request counters.

    Returns:
        JSON response with service health, configuration and request stats
    """
    initialize_server()

    try:
        stats = get_request_stats()

        return JSONResponse(
            status_code=200,
            content={
                "server_status": "running",
                "timestamp": datetime.now().isoformat(),
                "k": classifier.k,
                "datasets": list_datasets(),
                "requests": stats
            }
        )

    except Exception as e:
        logger.error(f"Error getting status: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to get status: {str(e)}")


# Health check endpoint
@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}
