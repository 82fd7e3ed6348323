"""
Tests for the client configuration module.
"""

import json

import pytest

from client.state import get_config_value, load_config


def _write(tmp_path, config):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config))
    return str(path)


def test_load_config(tmp_path):
    path = _write(tmp_path, {
        "server_url": "http://localhost:8000",
        "default_dataset": "customer",
        "request": {"max_retries": 2, "timeout": 10}
    })

    config = load_config(path)

    assert config["server_url"] == "http://localhost:8000"
    assert get_config_value(config, "default_dataset") == "customer"
    assert get_config_value(config, "request.max_retries") == 2


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))


@pytest.mark.parametrize("config", [
    {},
    {"server_url": "   "},
    {"server_url": 8000},
    {"server_url": "http://localhost:8000", "default_dataset": 1},
    {"server_url": "http://localhost:8000", "request": []},
    {"server_url": "http://localhost:8000", "request": {"max_retries": 0}},
    {"server_url": "http://localhost:8000", "request": {"timeout": "30"}},
])
def test_load_config_rejects_invalid(tmp_path, config):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, config))


def test_get_config_value_defaults():
    config = {"request": {"timeout": 5}}

    assert get_config_value(config, "request.timeout", 30) == 5
    assert get_config_value(config, "request.max_retries", 3) == 3
    assert get_config_value(config, "server_url.host", "x") == "x"
