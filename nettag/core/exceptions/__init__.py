"""
Core exceptions for the NetTag server.

This module provides all exception classes used by the configuration core,
organized with a single base class and a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    NetTagError,
    ValidationError,
    ConfigurationError,
    NotFoundError
)

# Setting exceptions
from .settings import (
    InvalidInstanceNameError,
    UnknownSettingKeyError,
    ShapeMismatchError
)

__all__ = [
    # Base exceptions
    'NetTagError',
    'ValidationError',
    'ConfigurationError',
    'NotFoundError',

    # Setting exceptions
    'InvalidInstanceNameError',
    'UnknownSettingKeyError',
    'ShapeMismatchError'
]
