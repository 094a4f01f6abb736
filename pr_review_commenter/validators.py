"""
Validation utilities for the PR Review Commenter.

This module provides the reusable checks applied by the configuration
dataclasses.
"""

from typing import Any


def validate_required_string(value: str, field_name: str) -> None:
    """Validate that a required string field is not empty.

    Args:
        value: The string value to validate
        field_name: Name of the field for error messages

    Raises:
        ValueError: If the value is empty
    """
    if not value:
        raise ValueError(f"{field_name} is required")


def validate_positive_int(value: int, field_name: str) -> None:
    """Validate that an integer value is positive.

    Args:
        value: The integer value to validate
        field_name: Name of the field for error messages

    Raises:
        ValueError: If the value is not positive
    """
    if value <= 0:
        raise ValueError(f"{field_name} must be positive")


def validate_api_base_url(url: str) -> None:
    """Validate that the GitHub API base URL is an http(s) URL.

    Raises:
        ValueError: If the URL has no http or https scheme
    """
    if not url or not url.startswith(("http://", "https://")):
        raise ValueError(f"GitHub API URL must start with http:// or https://, got {url!r}")


def validate_list_of(value: Any, item_type: type, field_name: str) -> None:
    """Validate that a value is a list whose items all have the given type.

    Raises:
        ValueError: If the value is not a list or an item has the wrong type
    """
    if not isinstance(value, list):
        raise ValueError(f"{field_name} must be a list")
    for index, item in enumerate(value):
        if not isinstance(item, item_type):
            raise ValueError(
                f"{field_name}[{index}] must be {item_type.__name__}, got {type(item).__name__}"
            )
