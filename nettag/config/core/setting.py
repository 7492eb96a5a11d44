"""
Setting definitions.

A Setting pairs a validation predicate with the environment variable that
supplies its default and a shape description used in error messages. The
cast function is always derived from the predicate, so casting can never
accept a value that validation rejects.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar

from nettag.config.core.validation import is_valid_filename
from nettag.config.core.schema import BOOLEAN_SHAPE, PATH_FRAGMENT_LIST_SHAPE, PathFragmentList
from nettag.core.exceptions import ShapeMismatchError
from nettag.outils.helpers import is_object, stringify

T = TypeVar('T')


@dataclass(frozen=True)
class Setting(Generic[T]):
    """
    A named configuration value's validation rules and default source.

    Attributes:
        validate: Predicate telling whether a value has the expected shape
        env_var: Environment variable holding the JSON default
        shape_description: Human-readable shape, used only in diagnostics
    """
    validate: Callable[[Any], bool]
    env_var: str
    shape_description: str
    key: Optional[str] = field(default=None, compare=False)

    def cast(self, value: Any) -> T:
        """
        Return `value` unchanged if it validates.

        Raises:
            ShapeMismatchError: If `value` does not match the expected shape
        """
        if self.validate(value):
            return value
        raise ShapeMismatchError(
            value=value,
            representation=stringify(value),
            shape_description=self.shape_description,
            key=self.key
        )

    def named(self, key: str) -> "Setting[T]":
        """Copy of this setting tagged with its registry key for error messages."""
        return Setting(self.validate, self.env_var, self.shape_description, key)


def build_setting(validate: Callable[[Any], bool], env_var: str, shape_description: str) -> Setting:
    """
    Build a Setting whose cast() is generated from `validate`.

    Args:
        validate: Predicate verifying a value is the correct shape
        env_var: Name of the setting's environment variable
        shape_description: String describing the intended shape

    Returns:
        A Setting instance
    """
    return Setting(validate=validate, env_var=env_var, shape_description=shape_description)


def build_path_fragment_setting(
    env_var: str,
    allow_subdirectory: bool,
    allow_empty_fragment: bool,
) -> Setting[PathFragmentList]:
    """
    Build a whitelist/blacklist setting for extensions, filenames or directories.

    Args:
        env_var: Name of the environment variable for the setting
        allow_subdirectory: Whether fragments may contain slashes
        allow_empty_fragment: Whether "" is a valid fragment

    Returns:
        A Setting validating PathFragmentList values
    """

    # Containers and strings must be the exact JSON types so the store can persist them verbatim
    def is_valid_fragment(fragment: Any) -> bool:
        if not is_object(fragment):
            return False
        data = fragment.get("data")
        case_sensitive = fragment.get("caseSensitive")
        interchangeable_slashes = fragment.get("interchangeableSlashes")
        if not (isinstance(case_sensitive, bool) and isinstance(interchangeable_slashes, bool)):
            return False
        if type(data) is not str:
            return False
        if data == "":
            return allow_empty_fragment
        return is_valid_filename(data, allow_subdirectory, interchangeable_slashes)

    def validate(value: Any) -> bool:
        if not is_object(value):
            return False
        whitelist = value.get("whitelist")
        fragments = value.get("pathFragments")
        if not isinstance(whitelist, bool) or type(fragments) is not list:
            return False
        # An empty whitelist would track nothing
        if whitelist and not fragments:
            return False
        # Duplicates are not checked
        return all(is_valid_fragment(fragment) for fragment in fragments)

    return build_setting(validate, env_var, PATH_FRAGMENT_LIST_SHAPE)


def build_boolean_setting(env_var: str) -> Setting[bool]:
    """Build a plain on/off setting."""
    return build_setting(lambda value: isinstance(value, bool), env_var, BOOLEAN_SHAPE)
