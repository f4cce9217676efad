import logging

import pytest

from config.rental_config import get_data_dir, get_database_url, get_log_dir, get_log_level
from exceptions import ConfigurationError


def test_database_url_from_environment(monkeypatch):
    monkeypatch.setenv("CAR_RENTAL_DB_URL", "postgresql://rental@localhost/rental")

    assert get_database_url() == "postgresql://rental@localhost/rental"


def test_log_dir_is_created(monkeypatch, tmp_path):
    target = tmp_path / "logs" / "nested"
    monkeypatch.setenv("CAR_RENTAL_LOG_DIR", str(target))

    assert get_log_dir() == target
    assert target.is_dir()


def test_log_level_default(monkeypatch):
    monkeypatch.delenv("CAR_RENTAL_LOG_LEVEL", raising=False)

    assert get_log_level() == logging.INFO


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("CAR_RENTAL_LOG_LEVEL", "debug")

    assert get_log_level() == logging.DEBUG


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("CAR_RENTAL_LOG_LEVEL", "CHATTY")

    with pytest.raises(ConfigurationError) as exc_info:
        get_log_level()
    assert exc_info.value.details["missing_keys"] == ["CAR_RENTAL_LOG_LEVEL"]


def test_data_dir_defaults_to_shipped_fleets(monkeypatch):
    monkeypatch.delenv("CAR_RENTAL_DATA_DIR", raising=False)

    assert (get_data_dir() / "hertz.csv").is_file()
