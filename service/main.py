"""
KNN Classification Service Launcher

This module loads the service configuration, checks that the configured port
is free, and runs the FastAPI app under uvicorn.
"""

import json
import uvicorn
import logging
import os
import sys
import socket

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from service.state import DEFAULT_CONFIG, load_config
from service.server import app, initialize_server
from service.utils import setup_logging


logger = logging.getLogger("knn_service")


def is_port_available(host: str, port: int) -> bool:
    """
    Check if a port is available for binding.

    Args:
        host: Host address to check
        port: Port number to check

    Returns:
        True if port is available, False otherwise
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind((host, port))
            return True
    except OSError:
        return False


def main():
    """
    Main entry point for the classification service.

    Loads configuration (falling back to defaults only when the file is
    missing or unreadable), builds the classifier, and serves the API until
    interrupted. An invalid configuration value stops startup.
    """
    try:
        config = load_config()
    except (FileNotFoundError, json.JSONDecodeError) as e:
        setup_logging("INFO").warning(f"Could not load config, using defaults: {e}")
        config = dict(DEFAULT_CONFIG)
    except ValueError as e:
        setup_logging("INFO").error(f"Invalid configuration: {e}")
        sys.exit(1)

    try:
        initialize_server(config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    host = config["host"]
    port = config["port"]

    if not is_port_available(host, port):
        logger.error(f"Port {port} is already in use. Please choose a different port or stop the conflicting service.")
        sys.exit(1)

    logger.info("=" * 60)
    logger.info(f"KNN Classification Service: http://{host}:{port}")
    logger.info(f"  - API Documentation: http://{host}:{port}/docs")
    logger.info(f"  - Health Check: http://{host}:{port}/health")
    logger.info("=" * 60)

    try:
        uvicorn.run(app, host=host, port=int(port), log_level=config["log_level"].lower())
    except KeyboardInterrupt:
        logger.info("Shutdown requested by user")


if __name__ == "__main__":
    main()
