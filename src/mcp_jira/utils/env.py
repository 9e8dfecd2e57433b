"""Environment variable utility functions for MCP Jira."""

import os

from ..exceptions import ConfigurationError


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def get_required_env(env_var_name: str) -> str:
    """Return a required environment variable.

    Args:
        env_var_name: Name of the environment variable

    Returns:
        The stripped, non-empty value

    Raises:
        ConfigurationError: If the variable is unset or blank
    """
    value = os.getenv(env_var_name, "").strip()
    if not value:
        raise ConfigurationError(f"{env_var_name} environment variable is required")
    return value


def get_env_int(env_var_name: str, default: int | None = None) -> int | None:
    """Return an integer environment variable.

    Args:
        env_var_name: Name of the environment variable
        default: Value used when the variable is unset or blank

    Returns:
        The parsed integer or the default

    Raises:
        ConfigurationError: If the value is not an integer
    """
    raw = os.getenv(env_var_name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        msg = f"{env_var_name} must be an integer, got '{raw}'"
        raise ConfigurationError(msg) from e


def get_env_list(env_var_name: str) -> list[str] | None:
    """Return a comma-separated environment variable as a list.

    Returns:
        The non-empty, stripped items, or None when the variable is unset/blank
    """
    raw = os.getenv(env_var_name, "")
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return items or None
