"""Module for Backlog project metadata: issue types, components, statuses."""

from ..models.backlog import BacklogComponent, BacklogIssueType, BacklogStatus
from .calls import GET_COMPONENTS, GET_ISSUE_TYPES, GET_STATUSES
from .client import BacklogClient


class MetadataMixin(BacklogClient):
    """Mixin for the lookup lists used to build issue filters."""

    def get_issue_types(self, project_id: str) -> list[BacklogIssueType]:
        """Issue types defined in a project."""
        body = self.send(GET_ISSUE_TYPES.compose({"project": project_id}))
        return GET_ISSUE_TYPES.decode_models(body)

    def get_components(self, project_id: str) -> list[BacklogComponent]:
        """Components (categories) defined in a project."""
        body = self.send(GET_COMPONENTS.compose({"project": project_id}))
        return GET_COMPONENTS.decode_models(body)

    def get_statuses(self) -> list[BacklogStatus]:
        """Issue statuses; these are shared by every project of a space."""
        body = self.send(GET_STATUSES.compose({}))
        return GET_STATUSES.decode_models(body)
