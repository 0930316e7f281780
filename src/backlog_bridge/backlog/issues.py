"""Module for Backlog issue operations."""

from ..logging_config import get_logger
from ..models.backlog import BacklogIssue, BacklogIssueFilter
from .calls import FIND_ISSUE
from .client import BacklogClient

logger = get_logger("backlog-bridge.backlog")


class IssuesMixin(BacklogClient):
    """Mixin for Backlog issue operations."""

    def find_issue(self, issue_filter: BacklogIssueFilter) -> list[BacklogIssue]:
        """
        Search the issues of a project.

        Args:
            issue_filter: Project id plus optional comma-separated issue type,
                component, status and assigner id lists

        Returns:
            List of BacklogIssue objects. ``components`` holds the name of the
            last component of each issue.
        """
        params = {
            "project": issue_filter.project_id,
            "issue_type": issue_filter.issue_type,
            "component": issue_filter.component_id,
            "status": issue_filter.status_id,
            "assigner": issue_filter.assigner_id,
        }
        body = self.send(FIND_ISSUE.compose(params))
        issues = FIND_ISSUE.decode_models(body)
        logger.debug(
            f"Decoded {len(issues)} issues for project {issue_filter.project_id}"
        )
        return issues
