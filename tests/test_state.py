"""
Unit tests for service configuration and request bookkeeping.
"""

import json
import os
import threading

import pytest

from service.state import (
    DEFAULT_CONFIG,
    clear_request_stats,
    get_config_path,
    get_request_stats,
    load_config,
    record_request,
    save_config,
    validate_config,
)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"k": 7, "host": "0.0.0.0", "port": 9000, "log_level": "DEBUG"}))
    return str(path)


@pytest.fixture(autouse=True)
def reset_stats():
    clear_request_stats()
    yield
    clear_request_stats()


def test_load_config(config_file):
    config = load_config(config_file)

    assert config["k"] == 7
    assert config["port"] == 9000
    assert config["log_level"] == "DEBUG"


def test_load_config_fills_defaults(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"k": 9}))

    config = load_config(str(path))

    assert config["k"] == 9
    assert config["host"] == DEFAULT_CONFIG["host"]
    assert config["port"] == DEFAULT_CONFIG["port"]


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with pytest.raises(json.JSONDecodeError):
        load_config(str(path))


def test_load_config_rejects_even_k(tmp_path):
    path = tmp_path / "even.json"
    path.write_text(json.dumps({"k": 4}))

    with pytest.raises(ValueError, match="'k'"):
        load_config(str(path))


def test_save_then_load(tmp_path):
    path = str(tmp_path / "nested" / "config.json")
    config = {**DEFAULT_CONFIG, "k": 11}

    save_config(config, path)

    assert os.path.exists(path)
    assert load_config(path) == config


def test_save_config_validates_first(tmp_path):
    path = str(tmp_path / "config.json")

    with pytest.raises(ValueError):
        save_config({**DEFAULT_CONFIG, "k": 17}, path)

    assert not os.path.exists(path)


def test_config_path_env_override(monkeypatch, config_file):
    monkeypatch.setenv("KNN_CONFIG_PATH", config_file)

    assert get_config_path() == config_file
    assert load_config()["k"] == 7


def test_shipped_config_is_valid():
    repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    config = load_config(os.path.join(repo_root, "service", "config.json"))

    assert config["k"] == 3


@pytest.mark.parametrize("override", [
    {"port": 0},
    {"port": "8000"},
    {"port": True},
    {"host": ""},
    {"log_level": "VERBOSE"},
    {"k": None},
])
def test_validate_config_rejects_bad_fields(override):
    with pytest.raises(ValueError):
        validate_config({**DEFAULT_CONFIG, **override})


def test_validate_config_accepts_defaults():
    assert validate_config(dict(DEFAULT_CONFIG)) == DEFAULT_CONFIG


def test_record_request_counters():
    record_request('success', 'cancer')
    record_request('success', 'cancer')
    record_request('success', 'customer')
    record_request('unknown_dataset', 'iris')
    record_request('rejected')

    stats = get_request_stats()

    assert stats['total_requests'] == 5
    assert stats['successful'] == 3
    assert stats['unknown_dataset'] == 1
    assert stats['rejected'] == 1
    assert stats['per_dataset'] == {'cancer': 2, 'customer': 1}
    assert stats['last_request'] is not None


def test_request_stats_snapshot_is_a_copy():
    record_request('success', 'cancer')

    stats = get_request_stats()
    stats['per_dataset']['cancer'] = 100

    assert get_request_stats()['per_dataset'] == {'cancer': 1}


def test_record_request_is_thread_safe():
    def worker():
        for _ in range(200):
            record_request('success', 'cancer')

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    stats = get_request_stats()
    assert stats['total_requests'] == 1600
    assert stats['per_dataset']['cancer'] == 1600
