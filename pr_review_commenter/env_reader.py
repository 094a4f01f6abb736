"""
Environment variable reading utilities for the PR Review Commenter.

GitHub Actions passes action inputs to the process as ``INPUT_<NAME>``
environment variables, where ``<NAME>`` is the input name upper-cased with
spaces replaced by underscores (hyphens are kept). This module reads those
inputs and plain environment variables with type conversion and fallbacks.
"""

import os
from enum import Enum


def get_env_str(key: str, default: str = "", *fallback_keys: str) -> str:
    """Get string value from environment with fallback keys.

    Args:
        key: Primary environment variable key
        default: Default value if not found
        *fallback_keys: Additional keys to try if primary is not found

    Returns:
        The environment variable value or default
    """
    value = os.environ.get(key, "")
    if value:
        return value

    for fallback_key in fallback_keys:
        value = os.environ.get(fallback_key, "")
        if value:
            return value

    return default


def get_env_int(key: str, default: int, *fallback_keys: str) -> int:
    """Get integer value from environment with fallback keys.

    Args:
        key: Primary environment variable key
        default: Default value if not found or conversion fails
        *fallback_keys: Additional keys to try if primary is not found

    Returns:
        The environment variable value as integer or default
    """
    value = get_env_str(key, "", *fallback_keys)
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def get_env_bool(key: str, default: bool, *fallback_keys: str) -> bool:
    """Get boolean value from environment with fallback keys.

    Recognizes 'true', 'yes', '1' as True (case-insensitive).
    """
    value = get_env_str(key, "", *fallback_keys)
    if value:
        return value.strip().lower() in ('true', 'yes', '1')
    return default


def get_env_enum(key: str, enum_class: type[Enum], default: Enum, *fallback_keys: str) -> Enum:
    """Get enum value from environment with fallback keys.

    Args:
        key: Primary environment variable key
        enum_class: The enum class to convert to
        default: Default enum value if not found or conversion fails
        *fallback_keys: Additional keys to try if primary is not found

    Returns:
        The environment variable value as enum or default
    """
    value = get_env_str(key, "", *fallback_keys)
    if value:
        try:
            return enum_class(value.strip().upper())
        except (ValueError, AttributeError):
            pass
    return default


def input_env_key(name: str) -> str:
    """Map an action input name to the environment variable holding it."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, default: str = "", *fallback_keys: str) -> str:
    """Get an action input value, trimmed, with environment fallbacks.

    Args:
        name: Input name as declared in action.yml (e.g. ``repo-token``)
        default: Default value if the input and all fallbacks are empty
        *fallback_keys: Plain environment keys to try if the input is empty

    Returns:
        The input value or default
    """
    for key in (input_env_key(name),) + fallback_keys:
        value = os.environ.get(key, "").strip()
        if value:
            return value
    return default


def get_input_bool(name: str) -> bool:
    """Get a boolean action input.

    Only the exact string 'true' enables the flag; anything else, including
    'True' or an unset input, is False.
    """
    return get_input(name) == "true"
