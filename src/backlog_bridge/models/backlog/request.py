"""
Inbound request models: credentials and ``findIssue`` filters.

Both are built from the named string fields of an inbound request
(``space``, ``id``, ``pass``, ``project``, ``issue_type``, ``component``,
``status``, ``assigner``).
"""

import re
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ...utils.logging import mask_sensitive

# One DNS label: letters, digits and inner hyphens, at most 63 characters.
SPACE_NAME_PATTERN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?")


def is_valid_space_name(space: str) -> bool:
    """True when ``space`` can stand as the first label of the space host."""
    return SPACE_NAME_PATTERN.fullmatch(space) is not None


class BacklogCredentials(BaseModel):
    """Space name and login for one Backlog call."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    space: str = ""
    id: str = ""
    password: str = Field(default="", alias="pass", repr=False)

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "BacklogCredentials":
        return cls(
            space=params.get("space", ""),
            id=params.get("id", ""),
            password=params.get("pass", ""),
        )

    @property
    def is_complete(self) -> bool:
        """True when login id and password are set and space is a host label."""
        return bool(self.id and self.password) and is_valid_space_name(self.space)

    def describe(self) -> str:
        return f"{self.id}@{self.space} (password: {mask_sensitive(self.password)})"


class BacklogIssueFilter(BaseModel):
    """Filters for ``backlog.findIssue``.

    The optional filters hold comma-separated identifier lists exactly as
    received; an empty string means the filter is not sent.
    """

    model_config = ConfigDict(frozen=True)

    project_id: str = ""
    issue_type: str = ""
    component_id: str = ""
    status_id: str = ""
    assigner_id: str = ""

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "BacklogIssueFilter":
        return cls(
            project_id=params.get("project", ""),
            issue_type=params.get("issue_type", ""),
            component_id=params.get("component", ""),
            status_id=params.get("status", ""),
            assigner_id=params.get("assigner", ""),
        )

    def optional_members(self) -> list[tuple[str, str]]:
        """Optional struct members in the order they are sent."""
        return [
            ("issueType", self.issue_type),
            ("componentId", self.component_id),
            ("statusId", self.status_id),
            ("assignerId", self.assigner_id),
        ]
