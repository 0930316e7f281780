"""
Table of the supported Backlog remote calls.

Each entry pairs the request composer of one XML-RPC method with the record
model its response decodes into. Supporting another remote call means adding
an entry here.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..models.backlog import (
    BacklogComponent,
    BacklogIssue,
    BacklogIssueFilter,
    BacklogIssueType,
    BacklogProject,
    BacklogStatus,
    BacklogUser,
)
from ..models.base import ApiModel
from ..xmlrpc.composer import (
    compose_find_issue,
    compose_no_params,
    compose_project_param,
)
from ..xmlrpc.decoder import decode_struct_array

Params = Mapping[str, str]
Record = dict[str, str]
Composer = Callable[[str, Params], bytes]
ModelT = TypeVar("ModelT", bound=ApiModel)


def _compose_without_params(xmlrpc_method: str, params: Params) -> bytes:
    return compose_no_params(xmlrpc_method)


def _compose_with_project(xmlrpc_method: str, params: Params) -> bytes:
    return compose_project_param(xmlrpc_method, params.get("project", ""))


def _compose_issue_search(xmlrpc_method: str, params: Params) -> bytes:
    issue_filter = BacklogIssueFilter.from_params(params)
    return compose_find_issue(
        xmlrpc_method, issue_filter.project_id, issue_filter.optional_members()
    )


@dataclass(frozen=True)
class RemoteCall(Generic[ModelT]):
    """One supported remote call: its composer and its decoder.

    Generic over the record model, so typed callers get their model back.
    """

    name: str
    xmlrpc_method: str
    composer: Composer
    record_model: type[ModelT]

    def compose(self, params: Params) -> bytes:
        """Build the request body from the inbound named fields."""
        return self.composer(self.xmlrpc_method, params)

    def decode_models(self, body: bytes) -> list[ModelT]:
        """Decode a response body into record models, in response order."""
        return [
            self.record_model.from_xmlrpc(struct)
            for struct in decode_struct_array(body)
        ]

    def decode(self, body: bytes) -> list[Record]:
        """Decode a response body into flat records."""
        return [model.to_simplified_dict() for model in self.decode_models(body)]


GET_PROJECTS = RemoteCall(
    "get_projects", "backlog.getProjects", _compose_without_params, BacklogProject
)
FIND_ISSUE = RemoteCall(
    "find_issue", "backlog.findIssue", _compose_issue_search, BacklogIssue
)
GET_ISSUE_TYPES = RemoteCall(
    "get_issue_types", "backlog.getIssueTypes", _compose_with_project, BacklogIssueType
)
GET_COMPONENTS = RemoteCall(
    "get_components", "backlog.getComponents", _compose_with_project, BacklogComponent
)
GET_STATUSES = RemoteCall(
    "get_statuses", "backlog.getStatuses", _compose_without_params, BacklogStatus
)
GET_USERS = RemoteCall(
    "get_users", "backlog.getUsers", _compose_with_project, BacklogUser
)

REMOTE_CALLS: dict[str, RemoteCall[Any]] = {
    call.name: call
    for call in (
        GET_PROJECTS,
        FIND_ISSUE,
        GET_ISSUE_TYPES,
        GET_COMPONENTS,
        GET_STATUSES,
        GET_USERS,
    )
}


def get_remote_call(name: str) -> RemoteCall[Any] | None:
    """Look a call up by exact name; unknown names give None."""
    return REMOTE_CALLS.get(name)
