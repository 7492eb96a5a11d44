"""
Setting registry.

An immutable, ordered table mapping setting names to their Setting
definitions. The table is fixed at construction and shared read-only by
every config service instance.
"""

from types import MappingProxyType
from typing import Any, Iterator, List, Mapping

from nettag.config.core.setting import Setting
from nettag.core.exceptions import UnknownSettingKeyError


class SettingRegistry:
    """
    Read-only lookup over a static table of settings.

    Each stored Setting is tagged with its key so cast failures name the
    setting they came from.
    """

    def __init__(self, table: Mapping[str, Setting]):
        self._table: Mapping[str, Setting] = MappingProxyType(
            {key: setting.named(key) for key, setting in table.items()}
        )

    def has_key(self, name: Any) -> bool:
        """Whether the registry contains a setting called `name`."""
        return isinstance(name, str) and name in self._table

    def get_setting(self, name: str) -> Setting:
        """
        Get the setting registered under `name`.

        Raises:
            UnknownSettingKeyError: If no such setting exists
        """
        if not self.has_key(name):
            raise UnknownSettingKeyError(name)
        return self._table[name]

    def get_keys(self) -> List[str]:
        """Setting names in table order."""
        return list(self._table.keys())

    def get_table(self) -> Mapping[str, Setting]:
        """Read-only view of the whole table."""
        return self._table

    def __contains__(self, name: Any) -> bool:
        return self.has_key(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)
