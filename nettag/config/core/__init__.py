"""
Core configuration management components.

This module provides the foundational components for configuration management:
- Filename validation for path fragments and instance names
- Setting: a validated value definition with an environment default
- SettingRegistry: immutable table of settings
- SettingStore: persistent key-value store interface and implementations
"""

from .validation import is_valid_filename, has_traversal_sequences, windows_rules_enforced
from .schema import PathFragment, PathFragmentList
from .setting import Setting, build_setting, build_path_fragment_setting, build_boolean_setting
from .registry import SettingRegistry
from .store import SettingStore, FileSettingStore, InMemorySettingStore, config_root, store_path

__all__ = [
    # Validation
    'is_valid_filename',
    'has_traversal_sequences',
    'windows_rules_enforced',

    # Settings
    'PathFragment',
    'PathFragmentList',
    'Setting',
    'build_setting',
    'build_path_fragment_setting',
    'build_boolean_setting',

    # Registry
    'SettingRegistry',

    # Stores
    'SettingStore',
    'FileSettingStore',
    'InMemorySettingStore',
    'config_root',
    'store_path'
]
