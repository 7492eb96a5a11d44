"""
Config service.

Process-wide facade over the setting registry and one persistent store per
instance name. Reads fall back to the setting's environment variable when
nothing is persisted, and every value read or written passes validation.
"""

import threading
from typing import Any, Callable, Dict, Literal, Optional, overload

from nettag.config.core.registry import SettingRegistry
from nettag.config.core.schema import PathFragmentList
from nettag.config.core.setting import Setting
from nettag.config.core.store import FileSettingStore, SettingStore, store_path
from nettag.config.core.validation import is_valid_filename
from nettag.config.settings import SETTING_REGISTRY
from nettag.constants import APP_NAME
from nettag.core.exceptions import (
    ConfigurationError, InvalidInstanceNameError, NetTagError,
    ShapeMismatchError, UnknownSettingKeyError
)
from nettag.logger import NetTagStructLogger, get_nettag_logger
from nettag.outils.helpers import parse_env, stringify, stringify_error

StoreFactory = Callable[[str, str], SettingStore]

PathFragmentKey = Literal["trackedExtensions", "trackedFilenames", "trackedDirectories"]
BooleanKey = Literal["enableThumbnailCache"]

# Only instantiate() holds this, so direct construction is rejected
_CONSTRUCTION_TOKEN = object()

_instances: Dict[str, "ConfigService"] = {}
_instances_lock = threading.Lock()

logger = get_nettag_logger("nettag.config.service")


def default_store_factory(app_name: str, instance_name: str) -> SettingStore:
    """File store at the per-instance path under the config root."""
    return FileSettingStore(store_path(app_name, instance_name))


class ConfigService:
    """
    Validated get/set access to server settings.

    Use ConfigService.instantiate(name); there is at most one live instance
    per instance name, and each owns its store exclusively.
    """

    def __init__(
        self,
        instance_name: str,
        store: SettingStore,
        registry: SettingRegistry = SETTING_REGISTRY,
        *,
        _token: object = None
    ):
        if _token is not _CONSTRUCTION_TOKEN:
            raise ConfigurationError(
                config_key="ConfigService",
                reason="not externally constructable, call ConfigService.instantiate() instead"
            )
        self._instance_name = instance_name
        self._store = store
        self._registry = registry
        self._getter_log = logger.bind(component="ConfigService", operation="get", instance=instance_name)
        self._setter_log = logger.bind(component="ConfigService", operation="set", instance=instance_name)

    @classmethod
    def instantiate(cls, instance_name: str, store_factory: Optional[StoreFactory] = None) -> "ConfigService":
        """
        Return the service for `instance_name`, creating it on first use.

        The store is created by `store_factory(APP_NAME, instance_name)`, by
        default a YAML file at `<config root>/<APP_NAME>/<instance_name>.yaml`.
        The factory is ignored when the instance already exists.

        Args:
            instance_name: Unique name for this server instance; must be a legal filename
            store_factory: Optional store constructor

        Raises:
            InvalidInstanceNameError: If `instance_name` is not a legal filename
            ConfigurationError: If APP_NAME is not a legal directory name
        """
        with _instances_lock:
            if isinstance(instance_name, str) and instance_name in _instances:
                cls._emit(logger.debug, "ConfigService already initialized, returning existing instance",
                          instance=instance_name)
                return _instances[instance_name]

            if not is_valid_filename(APP_NAME):
                raise ConfigurationError(config_key="APP_NAME", config_value=APP_NAME,
                                         reason="must be a legal directory name")
            if not is_valid_filename(instance_name):
                error = InvalidInstanceNameError(instance_name)
                cls._emit(logger.error, "Invalid instance name", error=str(error))
                raise error

            store = (store_factory or default_store_factory)(APP_NAME, instance_name)
            instance = cls(instance_name, store, _token=_CONSTRUCTION_TOKEN)
            _instances[instance_name] = instance
            cls._emit(logger.info, "ConfigService created", instance=instance_name, store=store.path)
            return instance

    @property
    def instance_name(self) -> str:
        return self._instance_name

    @property
    def store(self) -> SettingStore:
        return self._store

    @property
    def registry(self) -> SettingRegistry:
        return self._registry

    @overload
    def get(self, key: PathFragmentKey) -> PathFragmentList: ...

    @overload
    def get(self, key: BooleanKey) -> bool: ...

    @overload
    def get(self, key: str) -> Any: ...

    def get(self, key):
        """
        Resolve a setting's value.

        The persisted value wins; otherwise the setting's environment variable
        is parsed as JSON (unset or unparsable reads as None). Whichever value
        is found is cast, so a missing default raises instead of falling back.

        Raises:
            UnknownSettingKeyError: If `key` is not a registered setting
            ShapeMismatchError: If the resolved value has the wrong shape
            ConfigurationError: If the store file cannot be read
        """
        setting = self._lookup(key, self._getter_log)

        value = self._store.read(key)
        if value is None:
            value = parse_env(setting.env_var)
            source = f"environment variable {setting.env_var}"
        else:
            source = f"{self._store.path}:{key}"
        self._trace(self._getter_log, "Reading setting", setting=key, source=source)

        try:
            result = setting.cast(value)
        except ShapeMismatchError as e:
            self._trace(self._getter_log, "Validation failed", setting=key, error=stringify_error(e))
            raise

        self._trace(self._getter_log, "Validation complete", setting=key, value=stringify(result))
        return result

    @overload
    def set(self, key: PathFragmentKey, value: PathFragmentList) -> None: ...

    @overload
    def set(self, key: BooleanKey, value: bool) -> None: ...

    @overload
    def set(self, key: str, value: Any) -> None: ...

    def set(self, key, value):
        """
        Validate and persist a setting's value verbatim.

        Nothing is written unless the whole value validates.

        Raises:
            UnknownSettingKeyError: If `key` is not a registered setting
            ShapeMismatchError: If `value` has the wrong shape
            ConfigurationError: If the store file cannot be written
        """
        setting = self._lookup(key, self._setter_log)

        if not setting.validate(value):
            error = ShapeMismatchError(
                value=value,
                representation=stringify(value),
                shape_description=setting.shape_description,
                key=key
            )
            self._trace(self._setter_log, "Rejected value", setting=key, error=stringify_error(error))
            raise error

        self._store.write(key, value)
        self._trace(self._setter_log, "Setting updated", setting=key, value=stringify(value),
                    store=self._store.path)

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        """
        Resolve every setting without raising on bad values.

        Unreadable store files surface as ConfigurationError and are reported
        per key like any other error.

        Returns:
            Mapping of setting name to {"value": ...} or {"error": message}
        """
        result = {}
        for key in self._registry.get_keys():
            try:
                result[key] = {"value": self.get(key)}
            except NetTagError as e:
                result[key] = {"error": str(e)}
        return result

    def _lookup(self, key: Any, log: NetTagStructLogger) -> Setting:
        try:
            return self._registry.get_setting(key)
        except UnknownSettingKeyError as e:
            self._trace(log, "Unknown setting", setting=stringify(key), error=stringify_error(e))
            raise

    @staticmethod
    def _emit(method: Callable[..., None], event: str, **kw: Any):
        # A failing log handler must not change the outcome of a service call
        try:
            method(event, **kw)
        except Exception:
            pass

    @classmethod
    def _trace(cls, log: NetTagStructLogger, event: str, **kw: Any):
        cls._emit(log.debug, event, **kw)

    def __repr__(self) -> str:
        return f"ConfigService(instance_name={self._instance_name!r}, store={self._store.path!r})"
