"""Module for Backlog project operations."""

from ..logging_config import get_logger
from ..models.backlog import BacklogProject
from .calls import GET_PROJECTS
from .client import BacklogClient

logger = get_logger("backlog-bridge.backlog")


class ProjectsMixin(BacklogClient):
    """Mixin for Backlog project operations."""

    def get_projects(self) -> list[BacklogProject]:
        """
        List the projects the login can see.

        Returns:
            List of BacklogProject objects, in response order

        Raises:
            BacklogTransportError: If the HTTP round-trip fails
            BacklogMalformedResponseError: If the response cannot be decoded
        """
        body = self.send(GET_PROJECTS.compose({}))
        projects = GET_PROJECTS.decode_models(body)
        logger.debug(f"Decoded {len(projects)} projects")
        return projects
