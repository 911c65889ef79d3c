"""Encoder for the legacy WhatsApp Web binary node format."""

from .core.errors import (
    DictionaryPageOutOfRangeError,
    EncodeError,
    InvalidChildrenError,
    InvalidNodeError,
    InvalidTokenError,
    LengthOverflowError,
    ListTooLargeError,
    WabinaryError,
)
from .core.jid import Jid, jid_decode, jid_encode
from .protocol.binary_codec import BinaryNodeEncoder, encode_binary_node
from .protocol.binary_node import BinaryNode, NodeList, OpaqueBinary, Text

__version__ = "0.1.0"

__all__ = [
    "BinaryNode",
    "BinaryNodeEncoder",
    "NodeList",
    "OpaqueBinary",
    "Text",
    "encode_binary_node",
    "Jid",
    "jid_decode",
    "jid_encode",
    "WabinaryError",
    "EncodeError",
    "LengthOverflowError",
    "InvalidTokenError",
    "DictionaryPageOutOfRangeError",
    "ListTooLargeError",
    "InvalidNodeError",
    "InvalidChildrenError",
]
