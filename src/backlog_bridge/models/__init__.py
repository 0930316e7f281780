"""
Data models for the Backlog bridge.
"""

from .backlog import (
    BacklogComponent,
    BacklogCredentials,
    BacklogIssue,
    BacklogIssueFilter,
    BacklogIssueType,
    BacklogProject,
    BacklogStatus,
    BacklogUser,
)
from .base import ApiModel

__all__ = [
    "ApiModel",
    "BacklogComponent",
    "BacklogCredentials",
    "BacklogIssue",
    "BacklogIssueFilter",
    "BacklogIssueType",
    "BacklogProject",
    "BacklogStatus",
    "BacklogUser",
]
