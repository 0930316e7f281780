"""
XML-RPC response envelope decoding.

Turns a ``methodResponse`` body into the :class:`XmlRpcValue` of its single
parameter. Faults and bodies that are not a response envelope raise; shape
differences inside the parameter are left to the per-call projections.
"""

from lxml.etree import XMLParser, XMLSyntaxError, _Element, fromstring

from ..exceptions import BacklogFaultError, BacklogMalformedResponseError
from ..logging_config import get_logger
from .values import (
    ArrayValue,
    StructValue,
    XmlRpcValue,
    find_child,
    local_name,
    parse_value,
)

logger = get_logger("backlog-bridge.xmlrpc")


def _make_parser() -> XMLParser:
    # Responses come from a remote host: no entity expansion, no network.
    return XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def decode_envelope(body: bytes) -> XmlRpcValue:
    """Parse a ``methodResponse`` and return its parameter value.

    Args:
        body: The raw response body

    Returns:
        The value of the first ``params/param/value`` element

    Raises:
        BacklogMalformedResponseError: If the body is not well-formed XML or
            not a ``methodResponse`` with either ``params`` or ``fault``
        BacklogFaultError: If the server answered with a fault
    """
    if not body:
        error_msg = "Empty XML-RPC response body"
        raise BacklogMalformedResponseError(error_msg)

    try:
        root = fromstring(body, _make_parser())
    except XMLSyntaxError as e:
        error_msg = f"Response is not well-formed XML: {e}"
        raise BacklogMalformedResponseError(error_msg) from e

    if local_name(root) != "methodResponse":
        error_msg = f"Expected a methodResponse envelope, got <{local_name(root)}>"
        raise BacklogMalformedResponseError(error_msg)

    fault = find_child(root, "fault")
    if fault is not None:
        raise _fault_error(fault)

    params = find_child(root, "params")
    if params is None:
        error_msg = "methodResponse carries neither params nor fault"
        raise BacklogMalformedResponseError(error_msg)

    param = find_child(params, "param")
    value = find_child(param, "value") if param is not None else None
    if value is None:
        logger.debug("methodResponse has no parameter value, treating as empty")
        return ArrayValue()
    return parse_value(value)


def _fault_error(fault: _Element) -> BacklogFaultError:
    value_element = find_child(fault, "value")
    value = parse_value(value_element) if value_element is not None else StructValue()
    code = value.member("faultCode")
    message = value.member("faultString")
    return BacklogFaultError(
        code.int_text() if code is not None else "",
        message.text() if message is not None else "",
    )


def decode_struct_array(body: bytes) -> list[StructValue]:
    """Decode a response whose parameter is an array of structs.

    Array entries that are not structs are decoded as empty structs, so the
    caller still gets one (empty) record for them.
    """
    value = decode_envelope(body)
    if not isinstance(value, ArrayValue):
        logger.debug(
            f"Expected an array response, got {type(value).__name__}; "
            "decoding as empty list"
        )
        return []
    return [item if isinstance(item, StructValue) else StructValue() for item in value]
