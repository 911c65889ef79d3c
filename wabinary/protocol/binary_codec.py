from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from wabinary.core.errors import (
    DictionaryPageOutOfRangeError,
    InvalidChildrenError,
    InvalidTokenError,
    LengthOverflowError,
    ListTooLargeError,
)
from wabinary.core.jid import S_WHATSAPP_NET, jid_decode
from wabinary.defaults.config import DEFAULT_ENCODER_CONFIG, MAX_LIST_SIZE

from .binary_node import Children, NodeList, OpaqueBinary, Text, as_node
from .constants import (
    DICTIONARY_PAGES,
    MAX_SINGLE_TOKEN,
    SINGLE_BYTE_TOKENS,
    TOKEN_MAP,
    Tags,
    build_token_map,
)

logger = logging.getLogger(__name__)

INT20_LIMIT = 1 << 20
INT32_LIMIT = 1 << 32


def push_byte(value: int, buf: bytearray):
    buf.append(value & 0xFF)


def push_int(value: int, n: int, buf: bytearray, little_endian: bool = False):
    for i in range(n):
        shift = i if little_endian else n - 1 - i
        buf.append((value >> (shift * 8)) & 0xFF)


def push_int20(value: int, buf: bytearray):
    buf.extend(((value >> 16) & 0x0F, (value >> 8) & 0xFF, value & 0xFF))


def push_bytes(data: bytes | bytearray | Iterable[int], buf: bytearray):
    buf.extend(data)


def write_byte_length(length: int, buf: bytearray):
    if length >= INT32_LIMIT:
        raise LengthOverflowError(length)

    if length >= INT20_LIMIT:
        buf.append(Tags.BINARY_32)
        push_int(length, 4, buf)
    elif length >= 256:
        buf.append(Tags.BINARY_20)
        push_int20(length, buf)
    else:
        buf.append(Tags.BINARY_8)
        push_byte(length, buf)


def write_list_start(size: int, buf: bytearray, max_size: int = MAX_LIST_SIZE):
    if size == 0:
        buf.append(Tags.LIST_EMPTY)
    elif size < 256:
        buf.append(Tags.LIST_8)
        push_byte(size, buf)
    elif size <= max_size:
        buf.append(Tags.LIST_16)
        push_int(size, 2, buf)
    else:
        raise ListTooLargeError(size, max_size)


class BinaryNodeEncoder:
    """Encodes ``BinaryNode`` trees into the legacy WA Web binary format.

    The encoder only holds its configuration and token index; every call to
    :meth:`encode` writes into its own buffer, so one instance can be shared.
    """

    def __init__(self, tokens: Optional[Sequence[Optional[str]]] = None, **config_overrides: Any) -> None:
        self.config: dict[str, Any] = {**DEFAULT_ENCODER_CONFIG, **config_overrides}
        if tokens is None:
            self.tokens: Sequence[Optional[str]] = SINGLE_BYTE_TOKENS
            self.token_map: Mapping[str, int] = TOKEN_MAP
        else:
            self.tokens = tuple(tokens)
            self.token_map = build_token_map(self.tokens)
        self.aliases: Mapping[str, str] = dict(self.config["jid_aliases"])
        self.max_list_size = int(self.config["max_list_size"])
        self.drop_null_children = bool(self.config["drop_null_children"])

    def encode(self, node: Any) -> bytes:
        buf = bytearray()
        root = as_node(node)
        self.write_node(root, buf)
        logger.debug("encoded binary node", extra={"tag": root.tag, "size": len(buf)})
        return bytes(buf)

    def write_token(self, token: int, buf: bytearray):
        if not 0 <= token <= MAX_SINGLE_TOKEN:
            raise InvalidTokenError(token)
        buf.append(token)

    def write_string_raw(self, s: str, buf: bytearray):
        data = s.encode("utf-8")
        write_byte_length(len(data), buf)
        push_bytes(data, buf)

    def write_jid(self, user: str, server: str, buf: bytearray):
        buf.append(Tags.JID_PAIR)
        if user:
            self.write_string(user, buf)
        else:
            self.write_token(Tags.LIST_EMPTY, buf)
        self.write_string(server, buf)

    def write_string(self, s: Optional[str], buf: bytearray, raw: bool = False):
        """Write ``s`` as a token, a JID pair or raw UTF-8, in that order of preference.

        ``raw`` only disables the ``s.whatsapp.net`` shortcut; aliasing and
        dictionary lookup still apply. Empty strings produce no bytes.
        """
        if not s:
            return
        s = self.aliases.get(s, s)

        index = self.token_map.get(s)
        if not raw and s == S_WHATSAPP_NET and index is not None:
            self.write_token(index, buf)
            return

        if index is not None:
            if index < Tags.SINGLE_BYTE_MAX:
                self.write_token(index, buf)
                return
            overflow = index - Tags.SINGLE_BYTE_MAX
            page = overflow >> 8
            if not 0 <= page < DICTIONARY_PAGES:
                raise DictionaryPageOutOfRangeError(s, index)
            self.write_token(Tags.DICTIONARY_0 + page, buf)
            push_byte(overflow, buf)
            return

        jid = jid_decode(s)
        if jid is not None:
            self.write_jid(jid.user, jid.server, buf)
        else:
            self.write_string_raw(s, buf)

    def write_attributes(self, attrs: Optional[Mapping[str, Any]], keys: Iterable[str], buf: bytearray):
        if attrs is None:
            return
        for key in keys:
            value = attrs[key]
            self.write_string(key, buf)
            self.write_string(value if isinstance(value, str) else str(value), buf)

    def write_children(self, children: Children, buf: bytearray):
        if children is None:
            return

        if isinstance(children, Text):
            self.write_string(children.value, buf, raw=True)
        elif isinstance(children, NodeList):
            present = children.present()
            if self.drop_null_children:
                write_list_start(len(present), buf, self.max_list_size)
            else:
                if len(present) != len(children.nodes):
                    logger.warning(
                        "declared child count includes null entries",
                        extra={"declared": len(children.nodes), "written": len(present)},
                    )
                write_list_start(len(children.nodes), buf, self.max_list_size)
            for child in present:
                self.write_node(child, buf)
        elif isinstance(children, OpaqueBinary):
            payload = children.to_bytes()
            write_byte_length(len(payload), buf)
            push_bytes(payload, buf)
        else:
            raise InvalidChildrenError(f"invalid children: {children!r} ({type(children).__name__})")

    def write_node(self, node: Any, buf: bytearray):
        node = as_node(node)
        keys = node.valid_attr_keys()
        has_content = 1 if node.content is not None else 0

        write_list_start(2 * len(keys) + 1 + has_content, buf, self.max_list_size)
        self.write_string(node.tag, buf)
        self.write_attributes(node.attrs, keys, buf)
        self.write_children(node.content, buf)


_default_encoder = BinaryNodeEncoder()


def encode_binary_node(node: Any) -> bytes:
    return _default_encoder.encode(node)
