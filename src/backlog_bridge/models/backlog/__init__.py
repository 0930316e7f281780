"""
Backlog data models.

Pydantic models for the records decoded from Backlog XML-RPC responses and
for the inbound request fields.
"""

from .common import (
    BacklogComponent,
    BacklogIssueType,
    BacklogNamedEntity,
    BacklogStatus,
    BacklogUser,
)
from .issue import BacklogIssue
from .project import BacklogProject
from .request import BacklogCredentials, BacklogIssueFilter, is_valid_space_name

__all__ = [
    "BacklogComponent",
    "BacklogCredentials",
    "BacklogIssue",
    "BacklogIssueFilter",
    "BacklogIssueType",
    "BacklogNamedEntity",
    "BacklogProject",
    "BacklogStatus",
    "BacklogUser",
    "is_valid_space_name",
]
