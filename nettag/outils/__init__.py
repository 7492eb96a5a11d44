from .helpers import parse_env, stringify, stringify_error, is_object

__all__ = ['parse_env', 'stringify', 'stringify_error', 'is_object']
