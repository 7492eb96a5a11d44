"""
Setting-specific exceptions.

These errors describe programmer or configuration mistakes rather than
transient faults, so callers should not retry on them.
"""

from typing import Any, Optional

from .base import ConfigurationError, NotFoundError, ValidationError


class InvalidInstanceNameError(ConfigurationError):
    """Raised when a config service is requested under an illegal instance name."""

    def __init__(self, instance_name: Any, reason: str = "instance name must be a legal filename"):
        self.instance_name = instance_name
        super().__init__(config_key="instance_name", config_value=repr(instance_name), reason=reason)


class UnknownSettingKeyError(NotFoundError):
    """Raised when a key is not present in the setting registry."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__("Setting", identifier=str(key))


class ShapeMismatchError(ValidationError):
    """
    Raised when a value does not match the shape a setting expects.

    Carries the value's diagnostic representation and the setting's shape
    description so the message is useful without the original value.
    """

    def __init__(self, value: Any, representation: str, shape_description: str, key: Optional[str] = None):
        self.representation = representation
        self.shape_description = shape_description
        self.key = key
        super().__init__(
            field=key,
            message=f"value {representation} does not match expected shape {shape_description}"
        )
        # Keep the raw value after the base class stores its string form.
        self.value = value
