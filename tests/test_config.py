"""Tests for configuration and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from tasktrack.config import DEFAULT_DATA_FILE, Settings, build_storage, load_settings
from tasktrack.logging_setup import setup_logging
from tasktrack.storage.backends import JsonFileKeyValueStore, MemoryKeyValueStore
from tasktrack.storage.database import SqlKeyValueStore


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("TASKTRACK_STORAGE", "TASKTRACK_DATA_FILE", "DATABASE_URL", "TASKTRACK_LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = load_settings()
    assert settings.storage_backend == "file"
    assert settings.data_file == DEFAULT_DATA_FILE
    assert settings.log_level == "INFO"
    assert settings.debug is False


def test_env_overrides(clean_env, tmp_path):
    clean_env.setenv("TASKTRACK_STORAGE", "SQL")
    clean_env.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'x.db'}")
    clean_env.setenv("TASKTRACK_LOG_LEVEL", "warning")

    settings = load_settings()
    assert settings.storage_backend == "sql"
    assert settings.database_url.endswith("x.db")
    assert settings.log_level == "WARNING"


def test_debug_forces_debug_logging(clean_env):
    clean_env.setenv("DEBUG", "true")
    clean_env.setenv("TASKTRACK_LOG_LEVEL", "ERROR")
    settings = load_settings()
    assert settings.debug is True
    assert settings.log_level == "DEBUG"


def test_unknown_backend_rejected(clean_env):
    clean_env.setenv("TASKTRACK_STORAGE", "redis")
    with pytest.raises(ValidationError):
        load_settings()


def test_build_storage_per_backend(tmp_path):
    assert isinstance(build_storage(Settings(storage_backend="memory")), MemoryKeyValueStore)

    file_storage = build_storage(Settings(storage_backend="file", data_file=str(tmp_path / "d.json")))
    assert isinstance(file_storage, JsonFileKeyValueStore)

    sql_storage = build_storage(Settings(storage_backend="sql", database_url="sqlite:///:memory:"))
    assert isinstance(sql_storage, SqlKeyValueStore)
    sql_storage.close()


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("INFO")
    count = len(root.handlers)
    setup_logging("DEBUG")
    assert len(root.handlers) == count
    assert root.level == logging.DEBUG
