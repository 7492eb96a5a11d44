"""
Base exception classes for the NetTag server.
"""


class NetTagError(Exception):
    """Base exception for all NetTag errors."""
    pass


class ValidationError(NetTagError):
    """Base exception for validation errors."""

    def __init__(self, field: str = None, value: str = None, message: str = None):
        self.field = field
        self.value = value
        error_msg = "Validation error"
        if field:
            error_msg += f" for field '{field}'"
        if value:
            error_msg += f" with value '{value}'"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)


class ConfigurationError(NetTagError):
    """Base exception for configuration errors."""

    def __init__(self, config_key: str = None, config_value: str = None, reason: str = None):
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if config_value:
            message += f" with value '{config_value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NotFoundError(NetTagError):
    """Base exception for entity not found errors."""

    def __init__(self, entity_type: str, identifier: str = None):
        self.entity_type = entity_type
        self.identifier = identifier
        message = f"{entity_type} not found"
        if identifier:
            message += f" with identifier '{identifier}'"
        super().__init__(message)
