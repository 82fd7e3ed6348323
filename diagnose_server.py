"""
Server Diagnostic Script

This script checks a running classification service and runs the reference
classifications to confirm the classifier answers as expected.
"""

import requests
import sys

SERVER_URL = "http://localhost:8000"

# (dataset, point, expected label); expected labels hold for any k in {3, 5}
REFERENCE_QUERIES = [
    ("cancer", [15.8, 2.0], 1),
    ("cancer", [13.9, 1.9], 1),
]


def print_header(text):
    print("\n" + "="*70)
    print(text.center(70))
    print("="*70 + "\n")


def check_server_health():
    """Check if server is running."""
    print_header("Step 1: Check Server Health")

    try:
        response = requests.get(f"{SERVER_URL}/health", timeout=5)
        if response.status_code == 200:
            print("✓ Server is running")
            data = response.json()
            print(f"  Status: {data.get('status')}")
            print(f"  Timestamp: {data.get('timestamp')}")
            return True
        else:
            print(f"✗ Server returned status code: {response.status_code}")
            return False
    except requests.exceptions.ConnectionError:
        print(f"✗ Cannot connect to server at {SERVER_URL}")
        print("  Please start the server: python service/main.py")
        return False
    except requests.exceptions.RequestException as e:
        print(f"✗ Error: {str(e)}")
        return False


def check_server_status():
    """Check server configuration and request counters."""
    print_header("Step 2: Check Server Status")

    try:
        response = requests.get(f"{SERVER_URL}/status", timeout=5)
        if response.status_code != 200:
            print(f"✗ Server returned status code: {response.status_code}")
            return None

        data = response.json()
        counters = data.get('requests', {})

        print(f"Server Status: {data.get('server_status')}")
        print(f"Neighbor count k: {data.get('k')}")
        print(f"Datasets: {', '.join(data.get('datasets', []))}")
        print(f"Requests served: {counters.get('total_requests', 0)}")
        print(f"  Successful: {counters.get('successful', 0)}")
        print(f"  Unknown dataset: {counters.get('unknown_dataset', 0)}")
        print(f"  Rejected: {counters.get('rejected', 0)}")
        return data

    except requests.exceptions.RequestException as e:
        print(f"✗ Error: {str(e)}")
        return None


def check_reference_classifications():
    """Run reference queries and an unknown-dataset query."""
    print_header("Step 3: Reference Classifications")

    all_passed = True

    for dataset, point, expected in REFERENCE_QUERIES:
        try:
            response = requests.post(
                f"{SERVER_URL}/classify",
                json={"dataset": dataset, "point": point},
                timeout=5
            )
        except requests.exceptions.RequestException as e:
            print(f"✗ {dataset} {point}: {str(e)}")
            all_passed = False
            continue

        if response.status_code != 200:
            print(f"✗ {dataset} {point}: status code {response.status_code}")
            all_passed = False
            continue

        label = response.json().get('label')
        if label == expected:
            print(f"✓ {dataset} {point} -> {label}")
        else:
            print(f"✗ {dataset} {point} -> {label} (expected {expected})")
            all_passed = False

    try:
        response = requests.post(
            f"{SERVER_URL}/classify",
            json={"dataset": "not-a-dataset", "point": [0.0, 0.0]},
            timeout=5
        )
        if response.status_code == 404:
            print(f"✓ Unknown dataset rejected: {response.json().get('detail')}")
        else:
            print(f"✗ Unknown dataset returned status code {response.status_code}, expected 404")
            all_passed = False
    except requests.exceptions.RequestException as e:
        print(f"✗ Unknown dataset check failed: {str(e)}")
        all_passed = False

    return all_passed


def main():
    """Run all diagnostic checks."""
    print("\n" + "="*70)
    print("KNN CLASSIFICATION SERVICE DIAGNOSTICS".center(70))
    print("="*70)

    if not check_server_health():
        sys.exit(1)

    if check_server_status() is None:
        sys.exit(1)

    if not check_reference_classifications():
        print("\n✗ Some checks failed")
        sys.exit(1)

    print("\n✓ All checks passed")


if __name__ == "__main__":
    main()
