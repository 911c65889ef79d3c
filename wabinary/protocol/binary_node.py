from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union, runtime_checkable

from wabinary.core.errors import InvalidChildrenError, InvalidNodeError


@runtime_checkable
class SupportsSerializeToString(Protocol):
    def SerializeToString(self) -> bytes: ...


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class NodeList:
    nodes: tuple[Optional["BinaryNode"], ...]

    def present(self) -> tuple["BinaryNode", ...]:
        return tuple(node for node in self.nodes if node is not None)


@dataclass(frozen=True)
class OpaqueBinary:
    """Pre-structured payload embedded verbatim, e.g. a serialized protobuf message."""

    payload: Union[bytes, SupportsSerializeToString]

    def to_bytes(self) -> bytes:
        if isinstance(self.payload, (bytes, bytearray, memoryview)):
            return bytes(self.payload)
        return self.payload.SerializeToString()


Children = Optional[Union[Text, NodeList, OpaqueBinary]]


@dataclass
class BinaryNode:
    """One element of the binary tree.

    ``content`` may be given as a plain ``str``, a list of nodes (``None``
    entries allowed), ``bytes`` or any object with ``SerializeToString()``;
    it is converted to the matching ``Children`` variant on construction.
    """

    tag: str
    attrs: Optional[Mapping[str, Any]] = None
    content: Any = None

    def __post_init__(self):
        if not isinstance(self.tag, str):
            raise InvalidNodeError(f"invalid node given: tag must be a string, got {type(self.tag).__name__}")
        if self.attrs is not None and not isinstance(self.attrs, Mapping):
            raise InvalidNodeError(f"invalid node given: attrs must be a mapping, got {type(self.attrs).__name__}")
        if self.attrs:
            for key in self.attrs:
                if not isinstance(key, str):
                    raise InvalidNodeError(f"invalid node given: attribute key {key!r} is not a string")
        self.content = as_children(self.content)

    def valid_attr_keys(self) -> list[str]:
        if not self.attrs:
            return []
        return [key for key, value in self.attrs.items() if value is not None]


def as_node(value: Any) -> BinaryNode:
    """Coerces ``value`` into a ``BinaryNode``.

    Accepts an existing node or an exact ``(tag, attrs, content)`` tuple/list.
    """
    if isinstance(value, BinaryNode):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 3:
        tag, attrs, content = value
        return BinaryNode(tag=tag, attrs=attrs, content=content)
    raise InvalidNodeError(f"invalid node given: {value!r}")


def as_children(value: Any) -> Children:
    if value is None or isinstance(value, (Text, NodeList, OpaqueBinary)):
        return value
    if isinstance(value, str):
        # An empty string is treated like absent content.
        return Text(value) if value else None
    if isinstance(value, (list, tuple)):
        return NodeList(tuple(None if item is None else as_node(item) for item in value))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return OpaqueBinary(bytes(value))
    if isinstance(value, SupportsSerializeToString):
        return OpaqueBinary(value)
    raise InvalidChildrenError(f"invalid children: {value!r} ({type(value).__name__})")
