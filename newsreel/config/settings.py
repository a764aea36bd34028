"""Configuration utilities for newsreel."""

import os
from typing import Dict, List, Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import ENV_VAR_DEFINITIONS


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    definition = ENV_VAR_DEFINITIONS[name]
    valid_values = definition.get("valid_values")

    if value is None:
        return True, None

    if valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all NEWSREEL environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        value = os.environ.get(name)
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Args:
        name: The environment variable name.
        validate: Whether to validate the value against known definitions.

    Returns:
        The environment variable value, or its default if not set.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_api_key(override: Optional[str] = None) -> str:
    """Resolve the NewsAPI key from an explicit value or the environment."""
    api_key = override or get_env_var("NEWSREEL_API_KEY")
    if not api_key:
        raise ConfigurationError(
            "No NewsAPI key configured. Set NEWSREEL_API_KEY or pass --api-key.",
            setting="NEWSREEL_API_KEY",
        )
    return api_key


def get_env_info() -> Dict[str, Dict]:
    """Get information about all NEWSREEL environment variables.

    Sensitive values are masked to their first four characters.
    """
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)

        display_value = value
        if value and definition.get("sensitive"):
            display_value = value[:4] + "..." if len(value) > 4 else "***"

        info[name] = {
            "description": definition.get("description", ""),
            "value": display_value,
            "is_set": value is not None,
            "valid": is_valid,
            "default": definition.get("default"),
            "sensitive": definition.get("sensitive", False),
        }
    return info
