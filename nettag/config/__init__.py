"""
Configuration management for the NetTag server.

This module provides a validated setting system with:
- Filename validation for tracked path fragments
- An immutable registry of server settings
- Persistent stores with environment variable defaults
- The ConfigService facade used by the server
"""

# Core infrastructure
from .core import (
    is_valid_filename, has_traversal_sequences, windows_rules_enforced,
    PathFragment, PathFragmentList,
    Setting, build_setting, build_path_fragment_setting, build_boolean_setting,
    SettingRegistry,
    SettingStore, FileSettingStore, InMemorySettingStore, config_root, store_path
)

# Server settings
from .settings import SETTING_TABLE, SETTING_REGISTRY

# Service
from .service import ConfigService, default_store_factory


def get_config_service(instance_name: str) -> ConfigService:
    """Get or create the config service for an instance."""
    return ConfigService.instantiate(instance_name)


__all__ = [
    # Core infrastructure
    'is_valid_filename',
    'has_traversal_sequences',
    'windows_rules_enforced',
    'PathFragment',
    'PathFragmentList',
    'Setting',
    'build_setting',
    'build_path_fragment_setting',
    'build_boolean_setting',
    'SettingRegistry',
    'SettingStore',
    'FileSettingStore',
    'InMemorySettingStore',
    'config_root',
    'store_path',

    # Server settings
    'SETTING_TABLE',
    'SETTING_REGISTRY',

    # Service
    'ConfigService',
    'default_store_factory',
    'get_config_service'
]
