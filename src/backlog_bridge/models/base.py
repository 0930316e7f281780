"""
Base model for Backlog XML-RPC records.

Records are decoded from an XML-RPC struct by a table of member projections
and exported as flat string maps. Fields that were not present in the struct
stay ``None`` and are left out of the exported record.
"""

from collections.abc import Callable, Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from ..xmlrpc.values import StructValue, XmlRpcValue

T = TypeVar("T", bound="ApiModel")

# A projection returns None when the member does not carry the nested field.
MemberProjection = Callable[[XmlRpcValue], str | None]


def as_int(value: XmlRpcValue) -> str:
    """Integer slot, kept as decimal text."""
    return value.int_text()


def as_text(value: XmlRpcValue) -> str:
    """Character-data slot."""
    return value.text()


def nested_name(value: XmlRpcValue) -> str | None:
    """``name`` of a nested struct (``status``, ``assigner``)."""
    name = value.member("name")
    if name is None:
        return None
    return name.text()


def last_nested_name(value: XmlRpcValue) -> str | None:
    """``name`` of the last struct inside an array (``components``)."""
    found = None
    for item in value.items():
        name = nested_name(item)
        if name is not None:
            found = name
    return found


def project_members(
    struct: XmlRpcValue, projections: Mapping[str, MemberProjection]
) -> dict[str, str]:
    """Apply member projections to a struct, in member order.

    Unknown member names are ignored. A member that appears twice keeps the
    value of the later occurrence.
    """
    record: dict[str, str] = {}
    if not isinstance(struct, StructValue):
        return record
    for member_name, member_value in struct:
        projection = projections.get(member_name)
        if projection is None:
            continue
        projected = projection(member_value)
        if projected is not None:
            record[member_name] = projected
    return record


class ApiModel(BaseModel):
    """Base class for records decoded from Backlog XML-RPC structs."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    member_projections: ClassVar[Mapping[str, MemberProjection]] = {}

    @classmethod
    def from_xmlrpc(cls: type[T], value: XmlRpcValue, **kwargs: Any) -> T:
        """
        Create a record from one XML-RPC struct.

        Args:
            value: The struct value from the response array
            **kwargs: Extra field values

        Returns:
            The record; fields absent from the struct stay None
        """
        return cls(**project_members(value, cls.member_projections), **kwargs)

    def to_simplified_dict(self) -> dict[str, str]:
        """
        Convert the record to the flat map written to the JSON output.

        Returns:
            Field name to string value, without the fields that were absent
        """
        return self.model_dump(exclude_none=True)
