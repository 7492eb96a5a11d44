"""
Application-wide constants and environment variable names.
"""

APP_NAME = "nettag"
DEFAULT_PORT = 3000
DEFAULT_INSTANCE_NAME = "DevInstance"

# Setting defaults (JSON text or unset)
ENV_TRACKED_EXTENSIONS = "TRACKED_EXTENSIONS"
ENV_TRACKED_FILENAMES = "TRACKED_FILENAMES"
ENV_TRACKED_DIRECTORIES = "TRACKED_DIRECTORIES"
ENV_ENABLE_THUMBNAIL_CACHE = "ENABLE_THUMBNAIL_CACHE"

# Filename rules
ENV_ENFORCE_WINDOWS_FILENAMES = "ENFORCE_WINDOWS_FILENAMES"

# Runtime
ENV_CONFIG_DIR = "NETTAG_CONFIG_DIR"
ENV_LOG_LEVEL = "NETTAG_LOG_LEVEL"
ENV_JSON_LOGS = "NETTAG_JSON_LOGS"
ENV_INSTANCE_NAME = "INSTANCE_NAME"
