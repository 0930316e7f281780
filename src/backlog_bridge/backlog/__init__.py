"""Backlog XML-RPC module for backlog_bridge.

This module provides the Backlog client and the table of supported calls.
"""

from .calls import REMOTE_CALLS, RemoteCall, get_remote_call
from .client import BacklogClient
from .config import BacklogConfig
from .issues import IssuesMixin
from .metadata import MetadataMixin
from .projects import ProjectsMixin
from .users import UsersMixin


class BacklogFetcher(
    ProjectsMixin,
    IssuesMixin,
    MetadataMixin,
    UsersMixin,
):
    """
    The main Backlog client class providing access to all Backlog operations.

    This class inherits from multiple mixins that provide specific functionality:
    - ProjectsMixin: Project listing
    - IssuesMixin: Issue search
    - MetadataMixin: Issue types, components and statuses
    - UsersMixin: Project members
    """

    pass


__all__ = [
    "BacklogClient",
    "BacklogConfig",
    "BacklogFetcher",
    "REMOTE_CALLS",
    "RemoteCall",
    "get_remote_call",
]
