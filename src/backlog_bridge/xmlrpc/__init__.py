"""XML-RPC value codec, request composer and response envelope decoder."""

from .composer import build_method_call, compose_find_issue, split_filter
from .decoder import decode_envelope, decode_struct_array
from .values import ArrayValue, IntValue, StructValue, TextValue, XmlRpcValue

__all__ = [
    "ArrayValue",
    "IntValue",
    "StructValue",
    "TextValue",
    "XmlRpcValue",
    "build_method_call",
    "compose_find_issue",
    "decode_envelope",
    "decode_struct_array",
    "split_filter",
]
