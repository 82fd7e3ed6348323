"""
State Management for the Classification Service

This module handles configuration management and request bookkeeping for the
KNN classification service. It provides functions to load/save/validate
configuration and track how many classification requests were served.
"""

import json
import os
from datetime import datetime
from typing import Dict, Optional
from threading import Lock

from knn_core.classifier import DEFAULT_K, validate_k
from knn_core.errors import InvalidNeighborCountError


DEFAULT_CONFIG_PATH = "./service/config.json"

DEFAULT_CONFIG: Dict = {
    "k": DEFAULT_K,
    "host": "127.0.0.1",
    "port": 8000,
    "log_level": "INFO"
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# In-memory request counters with thread-safe access
_request_stats: Dict = {
    'total_requests': 0,
    'successful': 0,
    'unknown_dataset': 0,
    'rejected': 0,
    'per_dataset': {},
    'last_request': None
}
_stats_lock = Lock()


def get_config_path() -> str:
    """Return the config path, honoring the KNN_CONFIG_PATH override."""
    return os.environ.get("KNN_CONFIG_PATH", DEFAULT_CONFIG_PATH)


def load_config(config_path: Optional[str] = None) -> Dict:
    """
    Load configuration from a JSON file.
    
    Missing optional fields are filled from DEFAULT_CONFIG.
    
    Args:
        config_path (str): Path to the configuration file (default: KNN_CONFIG_PATH
            or ./service/config.json)
    
    Returns:
        dict: Validated configuration dictionary
    
    Raises:
        FileNotFoundError: If config file does not exist
        json.JSONDecodeError: If config file is not valid JSON
        ValueError: If a configuration field is invalid
    """
    config_path = config_path or get_config_path()
    
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    
    with open(config_path, 'r') as f:
        loaded = json.load(f)
    
    config = {**DEFAULT_CONFIG, **loaded}
    validate_config(config)
    
    return config


def save_config(config: Dict, config_path: Optional[str] = None) -> None:
    """
    Save configuration to a JSON file.
    
    Args:
        config (dict): Configuration dictionary to save
        config_path (str): Path to the configuration file
    
    Raises:
        IOError: If the file cannot be written
        ValueError: If a configuration field is invalid
    """
    validate_config(config)
    
    config_path = config_path or get_config_path()
    
    config_dir = os.path.dirname(config_path)
    if config_dir:
        os.makedirs(config_dir, exist_ok=True)
    
    with open(config_path, 'w') as f:
        json.dump(config, f, indent=2)


def validate_config(config: Dict) -> Dict:
    """
    Validate service configuration values.
    
    Args:
        config (dict): Configuration dictionary
    
    Returns:
        dict: The same configuration, if valid
    
    Raises:
        ValueError: If any field has an invalid type or value
    """
    if not isinstance(config, dict):
        raise ValueError("Configuration must be a dictionary")
    
    try:
        validate_k(config.get('k'))
    except InvalidNeighborCountError as e:
        raise ValueError(f"Invalid 'k' in configuration: {e}") from e
    
    host = config.get('host')
    if not isinstance(host, str) or not host.strip():
        raise ValueError("Configuration field 'host' must be a non-empty string")
    
    port = config.get('port')
    if isinstance(port, bool) or not isinstance(port, int) or not (1 <= port <= 65535):
        raise ValueError(f"Configuration field 'port' must be an integer between 1 and 65535, got {port!r}")
    
    log_level = config.get('log_level')
    if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
        raise ValueError(f"Configuration field 'log_level' must be one of {VALID_LOG_LEVELS}")
    
    return config


def record_request(status: str, dataset: Optional[str] = None) -> None:
    """
    Record the outcome of one classification request.
    
    Args:
        status (str): 'success', 'unknown_dataset' or 'rejected'
        dataset (str): Dataset name, counted per dataset on success only
    """
    with _stats_lock:
        _request_stats['total_requests'] += 1
        if status == 'success':
            _request_stats['successful'] += 1
            per_dataset = _request_stats['per_dataset']
            per_dataset[dataset] = per_dataset.get(dataset, 0) + 1
        elif status == 'unknown_dataset':
            _request_stats['unknown_dataset'] += 1
        else:
            _request_stats['rejected'] += 1
        _request_stats['last_request'] = datetime.now().isoformat()


def get_request_stats() -> Dict:
    """
    Get a snapshot of request counters.
    
    Returns:
        dict: Copy of the counters
    """
    with _stats_lock:
        snapshot = dict(_request_stats)
        snapshot['per_dataset'] = dict(_request_stats['per_dataset'])
    return snapshot


def clear_request_stats() -> None:
    """Reset all request counters (useful for testing)."""
    with _stats_lock:
        _request_stats['total_requests'] = 0
        _request_stats['successful'] = 0
        _request_stats['unknown_dataset'] = 0
        _request_stats['rejected'] = 0
        _request_stats['per_dataset'] = {}
        _request_stats['last_request'] = None
