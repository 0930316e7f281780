"""
Backlog issue model.

``backlog.findIssue`` answers with structs whose ``status`` and ``assigner``
members are nested structs and whose ``components`` member is an array of
structs. Each is flattened into the ``name`` it carries; for ``components``
only the last component's name is kept.
"""

from typing import ClassVar

from ..base import ApiModel, MemberProjection, as_text, last_nested_name, nested_name


class BacklogIssue(ApiModel):
    """An issue returned by ``backlog.findIssue``."""

    key: str | None = None
    url: str | None = None
    summary: str | None = None
    created_on: str | None = None
    components: str | None = None
    status: str | None = None
    assigner: str | None = None
    description: str | None = None

    member_projections: ClassVar[dict[str, MemberProjection]] = {
        "key": as_text,
        "url": as_text,
        "summary": as_text,
        "created_on": as_text,
        "components": last_nested_name,
        "status": nested_name,
        "assigner": nested_name,
        "description": as_text,
    }
