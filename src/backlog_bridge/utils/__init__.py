"""
Utility functions for the Backlog bridge.
"""

from .env import get_env_float, is_env_ssl_verify, is_env_truthy
from .logging import mask_sensitive

__all__ = [
    "get_env_float",
    "is_env_ssl_verify",
    "is_env_truthy",
    "mask_sensitive",
]
