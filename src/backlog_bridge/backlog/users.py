"""Module for Backlog user operations."""

from ..models.backlog import BacklogUser
from .calls import GET_USERS
from .client import BacklogClient


class UsersMixin(BacklogClient):
    """Mixin for Backlog user operations."""

    def get_users(self, project_id: str) -> list[BacklogUser]:
        """
        List the members of a project.

        Args:
            project_id: Numeric project id, as text

        Returns:
            List of BacklogUser objects
        """
        body = self.send(GET_USERS.compose({"project": project_id}))
        return GET_USERS.decode_models(body)
