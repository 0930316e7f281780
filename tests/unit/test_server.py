"""Tests for the HTTP surface."""

from unittest.mock import MagicMock

import pytest
from starlette.testclient import TestClient

from backlog_bridge.backlog.config import BacklogConfig
from backlog_bridge.dispatcher import BacklogDispatcher
from backlog_bridge.server import INBOUND_FIELDS, create_app
from tests.fixtures.backlog_mocks import MOCK_PROJECTS_RECORDS


@pytest.fixture
def dispatcher():
    return MagicMock(spec=BacklogDispatcher)


@pytest.fixture
def client(dispatcher):
    return TestClient(create_app(dispatcher))


def test_health_check(client):
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_get_dispatches_query_fields(client, dispatcher):
    dispatcher.dispatch.return_value = MOCK_PROJECTS_RECORDS

    response = client.get(
        "/backlog",
        params={"space": "demo", "id": "taro", "pass": "secret", "method": "get_projects"},
    )

    assert response.status_code == 200
    assert response.json() == MOCK_PROJECTS_RECORDS
    credentials, method, fields = dispatcher.dispatch.call_args.args
    assert credentials.space == "demo"
    assert credentials.id == "taro"
    assert credentials.password == "secret"
    assert method == "get_projects"
    assert set(fields) == set(INBOUND_FIELDS)
    assert fields["project"] == ""


def test_post_form_fields(client, dispatcher):
    dispatcher.dispatch.return_value = []

    response = client.post(
        "/backlog",
        data={
            "space": "demo",
            "id": "taro",
            "pass": "secret",
            "method": "find_issue",
            "project": "10",
            "issue_type": "1,2",
        },
    )

    assert response.json() == []
    _, method, fields = dispatcher.dispatch.call_args.args
    assert method == "find_issue"
    assert fields["issue_type"] == "1,2"
    assert fields["status"] == ""


def test_invalid_request_writes_null(client, dispatcher):
    dispatcher.dispatch.return_value = None

    response = client.get("/backlog", params={"method": "get_projects"})

    assert response.status_code == 200
    assert response.text == "null"


def test_unrecognized_fields_are_dropped(client, dispatcher):
    dispatcher.dispatch.return_value = None

    client.get("/backlog", params={"method": "get_projects", "debug": "1"})

    _, _, fields = dispatcher.dispatch.call_args.args
    assert "debug" not in fields


def test_space_outside_host_label_writes_null():
    fetcher_factory = MagicMock()
    app = create_app(
        BacklogDispatcher(config=BacklogConfig(), fetcher_factory=fetcher_factory)
    )

    response = TestClient(app).get(
        "/backlog",
        params={"space": "a..b", "id": "a", "pass": "b", "method": "get_statuses"},
    )

    assert response.status_code == 200
    assert response.text == "null"
    fetcher_factory.assert_not_called()
