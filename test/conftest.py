"""
Shared pytest configuration and fixtures for the nettag tests.
"""

import logging

import pytest

from nettag.config import InMemorySettingStore
from nettag.config import service as service_module
from nettag.constants import (
    ENV_CONFIG_DIR, ENV_ENABLE_THUMBNAIL_CACHE, ENV_ENFORCE_WINDOWS_FILENAMES,
    ENV_INSTANCE_NAME, ENV_TRACKED_DIRECTORIES, ENV_TRACKED_EXTENSIONS, ENV_TRACKED_FILENAMES
)
from nettag.logger import find_structlog_handler

SETTING_ENV_VARS = (
    ENV_TRACKED_EXTENSIONS,
    ENV_TRACKED_FILENAMES,
    ENV_TRACKED_DIRECTORIES,
    ENV_ENABLE_THUMBNAIL_CACHE,
    ENV_ENFORCE_WINDOWS_FILENAMES,
    ENV_INSTANCE_NAME,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """
    Isolate every test: no setting defaults in the environment, stores under
    a temporary directory and no config service left over from other tests.
    """
    for name in SETTING_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(ENV_CONFIG_DIR, str(tmp_path / "config"))
    service_module._instances.clear()
    yield
    service_module._instances.clear()


@pytest.fixture
def memory_store_factory():
    """Store factory recording the in-memory stores it creates."""
    created = []

    def factory(app_name, instance_name):
        store = InMemorySettingStore()
        created.append((app_name, instance_name, store))
        return store

    factory.created = created
    return factory


@pytest.fixture
def extension_blacklist():
    return {
        "whitelist": False,
        "pathFragments": [
            {"data": "mpv", "caseSensitive": True, "interchangeableSlashes": True},
        ],
    }


@pytest.fixture
def directory_whitelist():
    return {
        "whitelist": True,
        "pathFragments": [
            {"data": "media/videos", "caseSensitive": False, "interchangeableSlashes": True},
            {"data": "photos", "caseSensitive": True, "interchangeableSlashes": False},
        ],
    }


@pytest.fixture
def restore_logging():
    """Put the root level and renderer back after a test reconfigures logging."""
    root_logger = logging.getLogger()
    level = root_logger.level
    handler = find_structlog_handler(root_logger)
    formatter = handler.formatter if handler is not None else None
    yield
    root_logger.setLevel(level)
    if handler is not None:
        handler.setFormatter(formatter)
