"""Environment variable utility functions for the Backlog bridge."""

import os


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to a standard truthy value.

    Considers 'true', '1', 'yes' as truthy values (case-insensitive).

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes")


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


def get_env_float(env_var_name: str, default: float) -> float:
    """Read a positive number of seconds (or similar) from the environment.

    Raises:
        ValueError: If the variable is set but is not a positive number
    """
    raw = os.getenv(env_var_name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        error_msg = f"{env_var_name} must be a number, got {raw!r}"
        raise ValueError(error_msg) from None
    if value <= 0:
        error_msg = f"{env_var_name} must be greater than zero, got {raw!r}"
        raise ValueError(error_msg)
    return value
