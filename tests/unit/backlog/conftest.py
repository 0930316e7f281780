"""Pytest fixtures for Backlog client tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from backlog_bridge.backlog import BacklogFetcher
from backlog_bridge.backlog.config import BacklogConfig
from backlog_bridge.models.backlog import BacklogCredentials


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for the Backlog configuration."""
    with patch.dict(
        os.environ,
        {
            "BACKLOG_HOST": "backlog.com",
            "BACKLOG_SSL_VERIFY": "false",
            "BACKLOG_TIMEOUT": "12.5",
        },
    ):
        yield


@pytest.fixture
def backlog_config():
    """Create a BacklogConfig instance for tests."""
    return BacklogConfig(host="backlog.jp", ssl_verify=True, timeout=30.0)


@pytest.fixture
def backlog_credentials():
    """Credentials for the demo space."""
    return BacklogCredentials(space="demo", id="taro", password="secret")


@pytest.fixture
def backlog_fetcher(backlog_credentials, backlog_config):
    """Create a BacklogFetcher with a mocked session."""
    fetcher = BacklogFetcher(backlog_credentials, backlog_config)
    fetcher.session = MagicMock()
    return fetcher
