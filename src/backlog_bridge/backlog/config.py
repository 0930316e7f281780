"""Configuration module for Backlog XML-RPC interactions."""

import os
from dataclasses import dataclass

from ..models.backlog.request import is_valid_space_name
from ..utils.env import get_env_float, is_env_ssl_verify

DEFAULT_HOST = "backlog.jp"
DEFAULT_TIMEOUT = 30.0
XMLRPC_PATH = "/XML-RPC"


@dataclass
class BacklogConfig:
    """Backlog XML-RPC configuration.

    Credentials are not part of the configuration: every call carries its
    own space, login id and password.
    """

    host: str = DEFAULT_HOST  # Suffix after the space name
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float = DEFAULT_TIMEOUT  # Request timeout in seconds

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.host = self.host.strip().strip("/")
        if not self.host:
            error_msg = "Backlog host must not be empty"
            raise ValueError(error_msg)
        if self.timeout <= 0:
            error_msg = "Backlog timeout must be greater than zero"
            raise ValueError(error_msg)

    @classmethod
    def from_env(cls) -> "BacklogConfig":
        """Create configuration from environment variables.

        Environment variables:
            BACKLOG_HOST: Host suffix of the spaces (default: backlog.jp)
            BACKLOG_SSL_VERIFY: SSL verification setting (default: true)
            BACKLOG_TIMEOUT: Request timeout in seconds (default: 30)

        Returns:
            BacklogConfig instance

        Raises:
            ValueError: If a variable holds an invalid value
        """
        return cls(
            host=os.getenv("BACKLOG_HOST", DEFAULT_HOST),
            ssl_verify=is_env_ssl_verify("BACKLOG_SSL_VERIFY"),
            timeout=get_env_float("BACKLOG_TIMEOUT", DEFAULT_TIMEOUT),
        )

    def endpoint_url(self, space: str) -> str:
        """XML-RPC endpoint of a space, e.g. ``https://demo.backlog.jp/XML-RPC``."""
        if not is_valid_space_name(space):
            error_msg = f"Invalid Backlog space name: {space!r}"
            raise ValueError(error_msg)
        return f"https://{space}.{self.host}{XMLRPC_PATH}"
