import json
import os
import traceback
from typing import Any, Mapping, Optional


def parse_env(key: str, environ: Optional[Mapping[str, str]] = None) -> Any:
    """
    Parse an environment variable as JSON.

    Args:
        key: Name of the environment variable
        environ: Mapping to read from, defaults to os.environ

    Returns:
        The parsed value, or None if the variable is unset or not valid JSON
    """
    if environ is None:
        environ = os.environ
    raw = environ.get(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None


def stringify(value: Any) -> str:
    """Render a value as single-line JSON for diagnostics, falling back to repr()."""
    try:
        return json.dumps(value, default=repr)
    except (TypeError, ValueError):
        # Circular references or non-string keys
        return repr(value)


def stringify_error(error: BaseException) -> str:
    """Format an exception with its traceback when it has one."""
    if error.__traceback__ is not None:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip()
    return f"{type(error).__name__}: {error}"


def is_object(value: Any) -> bool:
    """True for plain JSON objects; lists, None and dict subclasses are not objects."""
    return type(value) is dict
