"""
Command-Line Client for the KNN Classification Service

Classifies query points either through a running service or in-process with
a local classifier, and reports server status and registered datasets.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import requests

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from client.state import load_config, get_config_value
from client.sync import check_server_status, classify_remote, list_remote_datasets
from knn_core.classifier import DEFAULT_K, KNNClassifier
from knn_core.errors import KNNError


logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://localhost:8000"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Classify points with the KNN classification service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify a point through the running service
  python client/main.py classify --dataset cancer --point 13.9 1.9

  # Classify in-process with k=3, no server needed
  python client/main.py classify --dataset cancer --point 13.9 1.9 --local --k 3

  # Show server status and registered datasets
  python client/main.py status
  python client/main.py datasets
        """
    )

    parser.add_argument(
        '--server',
        type=str,
        default=None,
        help='Service URL (default: server_url from client/config.json, else http://localhost:8000)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default='./client/config.json',
        help='Path to client configuration file'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    classify_parser = subparsers.add_parser('classify', help='Classify a query point')
    classify_parser.add_argument(
        '--dataset',
        type=str,
        default=None,
        help='Dataset name (default: default_dataset from config)'
    )
    classify_parser.add_argument(
        '--point',
        type=float,
        nargs='+',
        required=True,
        help='Query point coordinates'
    )
    classify_parser.add_argument(
        '--local',
        action='store_true',
        help='Run the classifier in-process instead of calling the service'
    )
    classify_parser.add_argument(
        '--k',
        type=int,
        default=DEFAULT_K,
        help=f'Neighbor count for --local mode (default: {DEFAULT_K})'
    )

    subparsers.add_parser('datasets', help='List registered datasets')
    subparsers.add_parser('status', help='Show service status')

    return parser


def _load_client_config(config_path: str) -> dict:
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        logger.debug(f"Client config not used: {e}")
        return {}


def run_classify(args, config: dict, server_url: str) -> int:
    dataset = args.dataset or get_config_value(config, 'default_dataset', 'cancer')

    if args.local:
        try:
            classifier = KNNClassifier(args.k)
            result = classifier.run_analysis(dataset, args.point)
        except KNNError as e:
            print(f"✗ ERROR: {e}", file=sys.stderr)
            return 1

        print(result['message'])
        if result['label'] is None:
            return 2
        print(f"The test point class is: {result['label']}")
        return 0

    try:
        label = classify_remote(
            server_url,
            dataset,
            args.point,
            max_retries=get_config_value(config, 'request.max_retries', 3),
            timeout=get_config_value(config, 'request.timeout', 30)
        )
    except ValueError as e:
        print(f"✗ ERROR: {e}", file=sys.stderr)
        return 1

    if label is None:
        print(f"✗ No result for dataset '{dataset}'", file=sys.stderr)
        return 2

    print(f"The test point class is: {label}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the command-line client.

    Returns:
        Process exit code: 0 on success, 1 on error, 2 when no result was produced
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = _load_client_config(args.config)
    server_url = args.server or get_config_value(config, 'server_url', DEFAULT_SERVER_URL)

    try:
        if args.command == 'classify':
            return run_classify(args, config, server_url)

        if args.command == 'datasets':
            names = list_remote_datasets(server_url)
            for name in names:
                print(name)
            return 0

        if args.command == 'status':
            status = check_server_status(server_url)
            print(f"Server Status: {status.get('server_status')}")
            print(f"k: {status.get('k')}")
            print(f"Datasets: {', '.join(status.get('datasets', []))}")
            requests_info = status.get('requests', {})
            print(f"Requests served: {requests_info.get('total_requests', 0)}")
            return 0

    except requests.exceptions.RequestException as e:
        print(f"✗ ERROR: Cannot reach service at {server_url}: {e}", file=sys.stderr)
        return 1

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == '__main__':
    sys.exit(main())
