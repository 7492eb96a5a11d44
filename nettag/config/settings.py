"""
Server settings table.

The registry built here is the single, process-wide source of setting
definitions.
"""

from nettag.config.core.registry import SettingRegistry
from nettag.config.core.setting import build_boolean_setting, build_path_fragment_setting
from nettag.constants import (
    ENV_ENABLE_THUMBNAIL_CACHE, ENV_TRACKED_DIRECTORIES,
    ENV_TRACKED_EXTENSIONS, ENV_TRACKED_FILENAMES
)

SETTING_TABLE = {
    # File extensions to track or ignore. "" denotes a file without an extension.
    'trackedExtensions': build_path_fragment_setting(
        ENV_TRACKED_EXTENSIONS, allow_subdirectory=False, allow_empty_fragment=True
    ),
    # Filenames, not including extensions, to track or ignore.
    'trackedFilenames': build_path_fragment_setting(
        ENV_TRACKED_FILENAMES, allow_subdirectory=False, allow_empty_fragment=False
    ),
    # Directories, including nested ones such as "foo/bar", to track or ignore.
    'trackedDirectories': build_path_fragment_setting(
        ENV_TRACKED_DIRECTORIES, allow_subdirectory=True, allow_empty_fragment=False
    ),
    'enableThumbnailCache': build_boolean_setting(ENV_ENABLE_THUMBNAIL_CACHE),
}

SETTING_REGISTRY = SettingRegistry(SETTING_TABLE)
