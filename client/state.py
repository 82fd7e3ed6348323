"""
State Management for the Client

Reads the classification client's JSON configuration: the service URL, the
default dataset and request retry settings. Nested values are looked up with
dot paths such as "request.timeout".
"""

import json
import os
from typing import Dict, Any


def load_config(config_path: str = "./client/config.json") -> Dict:
    """
    Load configuration from config.json file.

    Args:
        config_path (str): Path to the configuration file

    Returns:
        dict: Configuration dictionary with client settings

    Raises:
        FileNotFoundError: If config file does not exist
        json.JSONDecodeError: If config file is not valid JSON
        ValueError: If required configuration fields are missing
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        config = json.load(f)

    _validate_config(config)

    return config


def _validate_config(config: Dict) -> None:
    """
    Validate that required configuration fields are present.

    Args:
        config (dict): Configuration dictionary to validate

    Raises:
        ValueError: If required fields are missing or invalid
    """
    required_fields = ['server_url']

    for field in required_fields:
        if field not in config:
            raise ValueError(f"Required configuration field missing: {field}")

        if not isinstance(config[field], str):
            raise ValueError(f"Configuration field '{field}' must be a string")

        if not config[field].strip():
            raise ValueError(f"Configuration field '{field}' cannot be empty")


    if 'default_dataset' in config and not isinstance(config['default_dataset'], str):
        raise ValueError("Configuration field 'default_dataset' must be a string")

    if 'request' in config:
        request = config['request']

        if not isinstance(request, dict):
            raise ValueError("'request' configuration must be a dictionary")

        for field in ('max_retries', 'timeout'):
            if field in request:
                if not isinstance(request[field], int) or request[field] <= 0:
                    raise ValueError(f"Request parameter '{field}' must be a positive integer")


def get_config_value(config: Dict, key: str, default: Any = None) -> Any:
    """
    Get a configuration value with optional default.

    Args:
        config (dict): Configuration dictionary
        key (str): Configuration key (supports nested keys with dot notation)
        default: Default value if key is not found

    Returns:
        Configuration value or default

    Example:
        get_config_value(config, 'request.max_retries', 3)
    """
    keys = key.split('.')
    value = config

    for k in keys:
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value
