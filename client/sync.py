"""
Client Communication Module

This module handles communication with the classification service including:
- Checking server status
- Listing registered datasets
- Requesting classifications
- Retry logic with exponential backoff
"""

import requests
import time
import logging
from typing import Dict, List, Optional, Sequence



logger = logging.getLogger(__name__)


def check_server_status(server_url: str, timeout: int = 5) -> Dict:
    """
    Query server health and status.

    Args:
        server_url: Base URL of the classification service (e.g., "http://localhost:8000")
        timeout: Request timeout in seconds

    Returns:
        Dictionary containing server status information

    Raises:
        requests.exceptions.RequestException: If connection fails
    """
    try:

        server_url = server_url.rstrip('/')
        response = requests.get(
            f"{server_url}/status",
            timeout=timeout
        )
        response.raise_for_status()

        status_data = response.json()
        logger.info(f"Server status retrieved: {status_data.get('server_status', 'unknown')}")

        return status_data

    except requests.exceptions.Timeout:
        logger.error(f"Server status check timed out after {timeout}s")
        raise
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Failed to connect to server at {server_url}: {e}")
        raise
    except requests.exceptions.RequestException as e:
        logger.error(f"Error checking server status: {e}")
        raise


def list_remote_datasets(server_url: str, timeout: int = 5) -> List[str]:
    """
    Fetch the names of the datasets registered on the server.

    Args:
        server_url: Base URL of the classification service
        timeout: Request timeout in seconds

    Returns:
        List of dataset names

    Raises:
        requests.exceptions.RequestException: If the request fails
    """
    server_url = server_url.rstrip('/')
    response = requests.get(f"{server_url}/datasets", timeout=timeout)
    response.raise_for_status()

    return [entry['name'] for entry in response.json().get('datasets', [])]


def classify_remote(
    server_url: str,
    dataset: str,
    point: Sequence[float],
    max_retries: int = 3,
    timeout: int = 30
) -> Optional[int]:
    """
    Ask the classification service for the class of a query point.

    Timeouts, connection errors and server errors are retried with
    exponential backoff. Client errors (unknown dataset, bad point) are not.

    Args:
        server_url: Base URL of the classification service
        dataset: Registered dataset name
        point: Query point coordinates
        max_retries: Maximum number of attempts
        timeout: Request timeout in seconds

    Returns:
        Predicted label (0 or 1), or None if the request was rejected or failed

    Raises:
        ValueError: If parameters are invalid
    """

    if not dataset or len(dataset.strip()) == 0:
        raise ValueError("dataset cannot be empty")

    if max_retries <= 0:
        raise ValueError("max_retries must be positive")

    server_url = server_url.rstrip('/')
    payload = {"dataset": dataset, "point": [float(x) for x in point]}

    for attempt in range(max_retries):
        try:
            logger.info(f"Requesting classification (attempt {attempt + 1}/{max_retries}): {dataset} {payload['point']}")

            response = requests.post(
                f"{server_url}/classify",
                json=payload,
                timeout=timeout
            )

            response.raise_for_status()

            result = response.json()
            logger.info(f"Classification successful: {result.get('message', 'OK')} label={result.get('label')}")
            return result.get('label')

        except requests.exceptions.Timeout:
            logger.warning(f"Classification timed out (attempt {attempt + 1}/{max_retries})")
            if attempt < max_retries - 1:
                wait_time = 2 ** attempt
                logger.info(f"Retrying in {wait_time} seconds...")
                time.sleep(wait_time)
            else:
                logger.error("Classification failed: Maximum retries exceeded (timeout)")
                return None

        except requests.exceptions.ConnectionError as e:
            logger.warning(f"Connection error during classification (attempt {attempt + 1}/{max_retries}): {e}")
            if attempt < max_retries - 1:
                wait_time = 2 ** attempt
                logger.info(f"Retrying in {wait_time} seconds...")
                time.sleep(wait_time)
            else:
                logger.error("Classification failed: Maximum retries exceeded (connection error)")
                return None

        except requests.exceptions.HTTPError as e:

            if e.response.status_code >= 400 and e.response.status_code < 500:
                logger.error(f"Classification rejected: {e.response.status_code} - {e.response.text}")
                return None

            logger.warning(f"Server error during classification (attempt {attempt + 1}/{max_retries}): {e}")
            if attempt < max_retries - 1:
                wait_time = 2 ** attempt
                logger.info(f"Retrying in {wait_time} seconds...")
                time.sleep(wait_time)
            else:
                logger.error("Classification failed: Maximum retries exceeded (server error)")
                return None

        except requests.exceptions.RequestException as e:
            logger.error(f"Unexpected error during classification: {e}")
            return None

    return None
