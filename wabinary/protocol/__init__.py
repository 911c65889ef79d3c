"""Protocol package public exports."""

from .binary_codec import BinaryNodeEncoder, encode_binary_node
from .binary_node import BinaryNode, NodeList, OpaqueBinary, Text, as_node
from .constants import SINGLE_BYTE_TOKENS, TOKEN_MAP, Tags

__all__ = [
    "BinaryNode",
    "BinaryNodeEncoder",
    "NodeList",
    "OpaqueBinary",
    "SINGLE_BYTE_TOKENS",
    "TOKEN_MAP",
    "Tags",
    "Text",
    "as_node",
    "encode_binary_node",
]
