"""
Typed inputs accepted by span builders and helpers.

Builders also accept plain dicts with the same field names, which are
converted with the ``from_value`` constructors below.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union


@dataclass
class ToolCall:
    """A function call requested by the model in an output message."""

    function_name: Optional[str] = None
    function_arguments: Optional[Union[str, Dict[str, Any]]] = None
    id: Optional[str] = None

    @classmethod
    def from_value(cls, value: Union["ToolCall", Mapping[str, Any]]) -> "ToolCall":
        if isinstance(value, cls):
            return value
        return cls(
            function_name=_first_present(value, "function_name", "name"),
            function_arguments=_first_present(value, "function_arguments", "arguments"),
            id=value.get("id"),
        )


@dataclass
class Message:
    """A chat message sent to or received from the model."""

    role: str
    content: Optional[str] = None
    tool_calls: List[ToolCall] = field(default_factory=list)
    tool_call_id: Optional[str] = None  # Set on tool result messages
    images: List[str] = field(default_factory=list)  # URLs or data URIs

    @classmethod
    def from_value(cls, value: Union["Message", Mapping[str, Any]]) -> "Message":
        if isinstance(value, cls):
            return value
        return cls(
            role=value["role"],
            content=value.get("content"),
            tool_calls=[ToolCall.from_value(call) for call in value.get("tool_calls") or []],
            tool_call_id=value.get("tool_call_id"),
            images=list(value.get("images") or []),
        )


@dataclass
class Document:
    """A document returned by a retriever or scored by a reranker."""

    content: Optional[str] = None
    id: Optional[Union[str, int]] = None
    score: Optional[float] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def from_value(cls, value: Union["Document", Mapping[str, Any], str]) -> "Document":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(content=value)
        return cls(
            content=value.get("content"),
            id=value.get("id"),
            score=value.get("score"),
            metadata=value.get("metadata"),
        )


def _first_present(value: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first key present in ``value``, even if falsy."""
    for key in keys:
        if key in value:
            return value[key]
    return None


MessageLike = Union[Message, Mapping[str, Any]]
ToolCallLike = Union[ToolCall, Mapping[str, Any]]
DocumentLike = Union[Document, Mapping[str, Any], str]
