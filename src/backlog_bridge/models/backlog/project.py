"""
Backlog project model.
"""

from typing import ClassVar

from ..base import ApiModel, MemberProjection, as_int, as_text


class BacklogProject(ApiModel):
    """A project returned by ``backlog.getProjects``."""

    id: str | None = None
    name: str | None = None
    key: str | None = None
    url: str | None = None

    member_projections: ClassVar[dict[str, MemberProjection]] = {
        "id": as_int,
        "name": as_text,
        "key": as_text,
        "url": as_text,
    }
