"""
Setting store base class and implementations.

A store is a durable string-keyed map. Every read or write is a single
operation under the store's own lock; callers never read-modify-write a key
across two calls.
"""

import copy
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from nettag.constants import ENV_CONFIG_DIR
from nettag.core.exceptions import ConfigurationError
from nettag.logger import get_nettag_logger


def config_root() -> Path:
    """Directory holding per-application config folders."""
    override = os.environ.get(ENV_CONFIG_DIR)
    if override:
        return Path(override)
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home)
    return Path.home() / ".config"


def store_path(app_name: str, instance_name: str) -> Path:
    """Location of the store file for one application instance."""
    return config_root() / app_name / f"{instance_name}.yaml"


class SettingStore(ABC):
    """
    Abstract base class for setting stores.

    Defines the interface that all store backends must implement.
    """

    def __init__(self):
        self.logger = get_nettag_logger().bind(component=type(self).__name__)
        self._lock = threading.RLock()

    @property
    @abstractmethod
    def path(self) -> str:
        """Human-readable location, used in diagnostics."""
        pass

    @abstractmethod
    def read(self, key: str) -> Optional[Any]:
        """Return the stored value for `key`, or None if absent."""
        pass

    @abstractmethod
    def write(self, key: str, value: Any) -> None:
        """Persist `value` under `key`."""
        pass


class FileSettingStore(SettingStore):
    """
    File-based store that keeps all keys in one YAML document.
    """

    def __init__(self, file_path: Path):
        super().__init__()
        self.file_path = Path(file_path)
        self._cache: Optional[Dict[str, Any]] = None
        self._last_modified: Optional[float] = None

    @property
    def path(self) -> str:
        return str(self.file_path)

    def read(self, key: str) -> Optional[Any]:
        with self._lock:
            self._refresh_cache()
            if not self._cache or key not in self._cache:
                return None
            return copy.deepcopy(self._cache[key])

    def write(self, key: str, value: Any) -> None:
        with self._lock:
            self._refresh_cache()
            document = dict(self._cache or {})
            document[key] = copy.deepcopy(value)
            self._save(document)
            self._cache = document
            self._last_modified = self.file_path.stat().st_mtime
            self.logger.debug("Store written", path=self.path, key=key)

    def _refresh_cache(self):
        """Reload the document if the file changed since the last read."""
        if not self.file_path.exists():
            self._cache = None
            self._last_modified = None
            return

        current_mtime = self.file_path.stat().st_mtime
        if self._last_modified is None or current_mtime != self._last_modified:
            try:
                with open(self.file_path, 'r', encoding='utf-8') as f:
                    document = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                self.logger.error("Failed to load store", path=self.path, error=str(e))
                raise ConfigurationError(config_key=self.path, reason=f"unreadable store file: {e}") from e
            if not isinstance(document, dict):
                raise ConfigurationError(config_key=self.path, reason="store file does not contain a mapping")
            self._cache = document
            self._last_modified = current_mtime

    def _save(self, document: Dict[str, Any]):
        """Replace the file atomically with `document`."""
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_name = tempfile.mkstemp(dir=self.file_path.parent, prefix=f".{self.file_path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                yaml.safe_dump(document, f, default_flow_style=False, indent=2, sort_keys=False)
            os.replace(temp_name, self.file_path)
        except yaml.YAMLError as e:
            Path(temp_name).unlink(missing_ok=True)
            raise ConfigurationError(config_key=self.path, reason=f"value cannot be stored: {e}") from e
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise


class InMemorySettingStore(SettingStore):
    """
    Store that keeps values in memory. Values are copied on the way in and
    out so callers cannot mutate stored state.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        super().__init__()
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    @property
    def path(self) -> str:
        return f"memory:{id(self):x}"

    def read(self, key: str) -> Optional[Any]:
        with self._lock:
            if key not in self._data:
                return None
            return copy.deepcopy(self._data[key])

    def write(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    def keys(self):
        """Stored keys, for inspection in tests and diagnostics."""
        with self._lock:
            return list(self._data.keys())
