"""Tests for the remote call table."""

import pytest

from backlog_bridge.backlog.calls import (
    FIND_ISSUE,
    GET_PROJECTS,
    REMOTE_CALLS,
    get_remote_call,
)
from backlog_bridge.exceptions import BacklogMalformedResponseError
from backlog_bridge.models.backlog import BacklogProject
from tests.fixtures.backlog_mocks import (
    MOCK_MALFORMED_RESPONSE,
    MOCK_PROJECTS_RECORDS,
    MOCK_PROJECTS_RESPONSE,
)
from tests.utils.assertions import parse_filter_member

EXPECTED_METHODS = {
    "get_projects": "backlog.getProjects",
    "find_issue": "backlog.findIssue",
    "get_issue_types": "backlog.getIssueTypes",
    "get_components": "backlog.getComponents",
    "get_statuses": "backlog.getStatuses",
    "get_users": "backlog.getUsers",
}


def test_table_covers_supported_calls():
    assert {name: call.xmlrpc_method for name, call in REMOTE_CALLS.items()} == (
        EXPECTED_METHODS
    )


@pytest.mark.parametrize("name", sorted(EXPECTED_METHODS))
def test_lookup_is_exact(name):
    assert get_remote_call(name) is REMOTE_CALLS[name]
    assert get_remote_call(name.upper()) is None
    assert get_remote_call(f" {name}") is None


@pytest.mark.parametrize("name", ["", "getProjects", "backlog.getProjects", "delete"])
def test_unknown_names(name):
    assert get_remote_call(name) is None


@pytest.mark.parametrize("name", sorted(EXPECTED_METHODS))
def test_compose_names_xmlrpc_method(name):
    call = REMOTE_CALLS[name]

    body = call.compose({"project": "10"})

    assert f"<methodName>{call.xmlrpc_method}</methodName>".encode() in body


@pytest.mark.parametrize("name", ["get_issue_types", "get_components", "get_users"])
def test_project_calls_send_project_id(name):
    body = REMOTE_CALLS[name].compose({"project": "1073"})

    assert b"<params><param><value><int>1073</int></value></param></params>" in body


@pytest.mark.parametrize("name", ["get_projects", "get_statuses"])
def test_calls_without_params_ignore_project(name):
    body = REMOTE_CALLS[name].compose({"project": "1073"})

    assert b"1073" not in body
    assert b"<params/>" in body


def test_find_issue_compose_from_inbound_fields():
    body = FIND_ISSUE.compose(
        {
            "project": "10",
            "issue_type": "1,2",
            "component": "",
            "status": "3",
            "assigner": "",
        }
    )

    assert parse_filter_member(body, "issueType") == ["1", "2"]
    assert parse_filter_member(body, "componentId") is None
    assert parse_filter_member(body, "statusId") == ["3"]
    assert parse_filter_member(body, "assignerId") is None


def test_decode_projects():
    assert GET_PROJECTS.decode(MOCK_PROJECTS_RESPONSE) == MOCK_PROJECTS_RECORDS


def test_decode_models_returns_the_call_model():
    projects = GET_PROJECTS.decode_models(MOCK_PROJECTS_RESPONSE)

    assert GET_PROJECTS.record_model is BacklogProject
    assert [type(project) for project in projects] == [BacklogProject, BacklogProject]
    assert projects[0].key == "AL"


def test_decode_is_repeatable():
    first = GET_PROJECTS.decode(MOCK_PROJECTS_RESPONSE)
    second = GET_PROJECTS.decode(MOCK_PROJECTS_RESPONSE)

    assert first == second


def test_decode_malformed_raises():
    with pytest.raises(BacklogMalformedResponseError):
        GET_PROJECTS.decode(MOCK_MALFORMED_RESPONSE)
