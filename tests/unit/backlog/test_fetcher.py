"""Tests for the BacklogFetcher operations."""

from backlog_bridge.models.backlog import (
    BacklogIssue,
    BacklogIssueFilter,
    BacklogProject,
    BacklogStatus,
)
from tests.fixtures.backlog_mocks import (
    MOCK_ISSUES_RECORDS,
    MOCK_ISSUES_RESPONSE,
    MOCK_PROJECTS_RESPONSE,
    MOCK_STATUSES_RESPONSE,
)
from tests.utils.assertions import parse_filter_member
from tests.utils.factories import XmlRpcResponseFactory, make_response


def _sent_body(fetcher) -> bytes:
    return fetcher.session.post.call_args.kwargs["data"]


def test_get_projects(backlog_fetcher):
    backlog_fetcher.session.post.return_value = make_response(MOCK_PROJECTS_RESPONSE)

    projects = backlog_fetcher.get_projects()

    assert all(isinstance(project, BacklogProject) for project in projects)
    assert [project.key for project in projects] == ["AL", "BE"]
    assert b"<methodName>backlog.getProjects</methodName>" in _sent_body(
        backlog_fetcher
    )


def test_find_issue(backlog_fetcher):
    backlog_fetcher.session.post.return_value = make_response(MOCK_ISSUES_RESPONSE)

    issues = backlog_fetcher.find_issue(
        BacklogIssueFilter(project_id="10", status_id="1,2", assigner_id="7")
    )

    assert all(isinstance(issue, BacklogIssue) for issue in issues)
    assert [issue.to_simplified_dict() for issue in issues] == MOCK_ISSUES_RECORDS
    body = _sent_body(backlog_fetcher)
    assert parse_filter_member(body, "statusId") == ["1", "2"]
    assert parse_filter_member(body, "assignerId") == ["7"]
    assert parse_filter_member(body, "issueType") is None


def test_get_issue_types(backlog_fetcher):
    backlog_fetcher.session.post.return_value = make_response(
        XmlRpcResponseFactory.create([{"id": 1, "name": "Bug"}, {"id": 2, "name": "Task"}])
    )

    issue_types = backlog_fetcher.get_issue_types("10")

    assert [t.name for t in issue_types] == ["Bug", "Task"]
    assert b"<int>10</int>" in _sent_body(backlog_fetcher)


def test_get_components(backlog_fetcher):
    backlog_fetcher.session.post.return_value = make_response(
        XmlRpcResponseFactory.create([{"id": 11, "name": "Frontend"}])
    )

    components = backlog_fetcher.get_components("10")

    assert components[0].to_simplified_dict() == {"id": "11", "name": "Frontend"}


def test_get_statuses(backlog_fetcher):
    backlog_fetcher.session.post.return_value = make_response(MOCK_STATUSES_RESPONSE)

    statuses = backlog_fetcher.get_statuses()

    assert all(isinstance(status, BacklogStatus) for status in statuses)
    assert [status.id for status in statuses] == ["1", "2", "3", "4"]


def test_get_users(backlog_fetcher):
    backlog_fetcher.session.post.return_value = make_response(
        XmlRpcResponseFactory.create([{"id": 7, "name": "Hanako Sato", "lang": "ja"}])
    )

    users = backlog_fetcher.get_users("10")

    assert [user.to_simplified_dict() for user in users] == [
        {"id": "7", "name": "Hanako Sato"}
    ]
    assert b"<methodName>backlog.getUsers</methodName>" in _sent_body(backlog_fetcher)
