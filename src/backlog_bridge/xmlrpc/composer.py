"""
Request composer for the Backlog XML-RPC method calls.

Each supported call builds its ``methodCall`` as an element tree and
serializes it once. Optional ``findIssue`` filters are declared as
``(member name, source value)`` pairs and only appended when the source
value is non-empty.
"""

import re
from collections.abc import Iterable

from lxml.builder import E
from lxml.etree import _Element, tostring

from .values import int_array_element, int_element, struct_member_element

FILTER_SEPARATOR = ","

# Newlines and tabs are framing on the wire; they never survive into a body.
_FRAMING_WHITESPACE = re.compile(rb">[\n\t]+<")
_FRAMING_CHARACTERS = str.maketrans("", "", "\n\t")


def build_method_call(method_name: str, params: Iterable[_Element] = ()) -> bytes:
    """Serialize a ``methodCall`` for ``method_name``.

    Args:
        method_name: Fully qualified XML-RPC method, e.g. ``backlog.getProjects``
        params: ``<value>`` elements, one per positional parameter

    Returns:
        The UTF-8 request body with its XML declaration
    """
    tree = E(
        "methodCall",
        E("methodName", method_name),
        E("params", *(E("param", value) for value in params)),
    )
    body = tostring(tree, xml_declaration=True, encoding="utf-8")
    return normalize_framing(body)


def normalize_framing(body: bytes) -> bytes:
    """Strip newline and tab characters that sit between two tags."""
    return _FRAMING_WHITESPACE.sub(b"><", body)


def strip_framing(text: str) -> str:
    """Remove newline and tab characters from a parameter value."""
    return text.translate(_FRAMING_CHARACTERS)


def split_filter(source: str) -> list[str]:
    """Split a comma-separated identifier list.

    Tokens are passed on as given apart from newlines and tabs, which are
    dropped; spaces and empty tokens are kept.
    """
    return [strip_framing(token) for token in source.split(FILTER_SEPARATOR)]


def compose_no_params(method_name: str) -> bytes:
    """Compose a call without parameters (``getProjects``, ``getStatuses``)."""
    return build_method_call(method_name)


def compose_project_param(method_name: str, project_id: str) -> bytes:
    """Compose a call taking the project id as its single ``<int>`` parameter."""
    return build_method_call(method_name, [int_element(strip_framing(project_id))])


def compose_find_issue(
    method_name: str,
    project_id: str,
    optional_filters: Iterable[tuple[str, str]],
) -> bytes:
    """Compose ``backlog.findIssue``.

    Args:
        method_name: The XML-RPC method name
        project_id: Required ``projectId`` member value
        optional_filters: Ordered ``(member name, comma separated ids)`` pairs.
            Pairs with an empty source value are left out of the struct.

    Returns:
        The serialized request body
    """
    members = [
        struct_member_element("projectId", int_element(strip_framing(project_id)))
    ]
    for member_name, source in optional_filters:
        if not source:
            continue
        members.append(
            struct_member_element(member_name, int_array_element(split_filter(source)))
        )
    return build_method_call(method_name, [E("value", E("struct", *members))])
