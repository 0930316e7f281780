"""
XML-RPC value codec.

Parses ``<value>`` elements into a small recursive value type and builds the
scalar and array elements used in method calls. Only the types Backlog's
XML-RPC API returns for the supported calls are modelled: integers,
character data, structs and arrays. Any other scalar tag (``boolean``,
``double``, ``dateTime.iso8601``, ``base64``) is kept as its character data.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from lxml.builder import E
from lxml.etree import _Element

INT_TAGS = frozenset({"int", "i4"})
EMPTY_STRING = ""


@dataclass(frozen=True)
class XmlRpcValue:
    """Base of the XML-RPC value union.

    The accessors answer leniently: asking a value for a shape it does not
    have yields an empty result rather than an error.
    """

    def int_text(self) -> str:
        """Decimal text of an integer scalar, or "" for other shapes."""
        return EMPTY_STRING

    def text(self) -> str:
        """Character data of a text scalar, or "" for other shapes."""
        return EMPTY_STRING

    def member(self, name: str) -> "XmlRpcValue | None":
        """Last struct member called ``name``, or None."""
        return None

    def items(self) -> tuple["XmlRpcValue", ...]:
        """Entries of an array, or an empty tuple."""
        return ()


@dataclass(frozen=True)
class IntValue(XmlRpcValue):
    """``<int>`` / ``<i4>`` scalar, kept as its literal decimal text."""

    value: str = EMPTY_STRING

    def int_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class TextValue(XmlRpcValue):
    """Character-data scalar: ``<string>`` or bare text inside ``<value>``."""

    value: str = EMPTY_STRING

    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class StructValue(XmlRpcValue):
    """``<struct>``: ordered named members. Names may repeat."""

    members: tuple[tuple[str, XmlRpcValue], ...] = field(default_factory=tuple)

    def member(self, name: str) -> XmlRpcValue | None:
        found = None
        for member_name, value in self.members:
            if member_name == name:
                found = value
        return found

    def __iter__(self) -> Iterator[tuple[str, XmlRpcValue]]:
        return iter(self.members)


@dataclass(frozen=True)
class ArrayValue(XmlRpcValue):
    """``<array><data>``: ordered values."""

    values: tuple[XmlRpcValue, ...] = field(default_factory=tuple)

    def items(self) -> tuple[XmlRpcValue, ...]:
        return self.values

    def __iter__(self) -> Iterator[XmlRpcValue]:
        return iter(self.values)


def local_name(element: _Element) -> str:
    tag = element.tag
    if not isinstance(tag, str):
        # comments and processing instructions
        return EMPTY_STRING
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def child_elements(element: _Element) -> list[_Element]:
    return [child for child in element if local_name(child)]


def find_child(element: _Element, name: str) -> _Element | None:
    for child in child_elements(element):
        if local_name(child) == name:
            return child
    return None


def parse_value(element: _Element) -> XmlRpcValue:
    """Convert a ``<value>`` element into an :class:`XmlRpcValue`.

    Args:
        element: The ``<value>`` element

    Returns:
        The parsed value. A ``<value>`` without a type element is a string,
        as the XML-RPC grammar defines.
    """
    children = child_elements(element)
    if not children:
        return TextValue(element.text or EMPTY_STRING)

    typed = children[0]
    tag = local_name(typed)

    if tag in INT_TAGS:
        return IntValue((typed.text or EMPTY_STRING).strip())
    if tag == "struct":
        return _parse_struct(typed)
    if tag == "array":
        return _parse_array(typed)
    return TextValue(typed.text or EMPTY_STRING)


def _parse_struct(element: _Element) -> StructValue:
    members: list[tuple[str, XmlRpcValue]] = []
    for member in child_elements(element):
        if local_name(member) != "member":
            continue
        name_element = find_child(member, "name")
        value_element = find_child(member, "value")
        name = (name_element.text or EMPTY_STRING) if name_element is not None else ""
        value = (
            parse_value(value_element)
            if value_element is not None
            else TextValue(EMPTY_STRING)
        )
        members.append((name, value))
    return StructValue(tuple(members))


def _parse_array(element: _Element) -> ArrayValue:
    data = find_child(element, "data")
    if data is None:
        return ArrayValue()
    return ArrayValue(
        tuple(
            parse_value(child)
            for child in child_elements(data)
            if local_name(child) == "value"
        )
    )


def int_element(token: str) -> _Element:
    """Build ``<value><int>token</int></value>`` with the token passed verbatim."""
    return E("value", E("int", token))


def int_array_element(tokens: Iterable[str]) -> _Element:
    """Build ``<value><array><data>`` holding one ``<int>`` per token, in order."""
    return E("value", E("array", E("data", *(int_element(t) for t in tokens))))


def struct_member_element(name: str, value: _Element) -> _Element:
    """Build ``<member><name>name</name>value</member>``."""
    return E("member", E("name", name), value)
