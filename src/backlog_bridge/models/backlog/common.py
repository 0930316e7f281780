"""
Backlog project metadata models.

Issue types, components, statuses and users share the same ``{id, name}``
record shape.
"""

from typing import ClassVar

from ..base import ApiModel, MemberProjection, as_int, as_text


class BacklogNamedEntity(ApiModel):
    """Record made of an integer ``id`` and a ``name``."""

    id: str | None = None
    name: str | None = None

    member_projections: ClassVar[dict[str, MemberProjection]] = {
        "id": as_int,
        "name": as_text,
    }


class BacklogIssueType(BacklogNamedEntity):
    """An issue type returned by ``backlog.getIssueTypes``."""


class BacklogComponent(BacklogNamedEntity):
    """A component (category) returned by ``backlog.getComponents``."""


class BacklogStatus(BacklogNamedEntity):
    """An issue status returned by ``backlog.getStatuses``."""


class BacklogUser(BacklogNamedEntity):
    """A project member returned by ``backlog.getUsers``."""
