"""Tag bytes and the token dictionary of the legacy WhatsApp Web binary format."""

from __future__ import annotations

from typing import Iterable, Optional


class Tags:
    LIST_EMPTY = 0
    DICTIONARY_0 = 236
    DICTIONARY_1 = 237
    DICTIONARY_2 = 238
    DICTIONARY_3 = 239
    LIST_8 = 248
    LIST_16 = 249
    JID_PAIR = 250
    BINARY_8 = 252
    BINARY_20 = 253
    BINARY_32 = 254
    SINGLE_BYTE_MAX = 256


# Largest index write_token() accepts as a single byte.
MAX_SINGLE_TOKEN = 244
DICTIONARY_PAGES = 4

SINGLE_BYTE_TOKENS: tuple[Optional[str], ...] = (
    None, None, None, "200", "400", "404", "500", "501", "502", "action", "add",
    "after", "archive", "author", "available", "battery", "before", "body",
    "broadcast", "chat", "clear", "code", "composing", "contacts", "count",
    "create", "debug", "delete", "demote", "duplicate", "encoding", "error",
    "false", "filehash", "from", "g.us", "group", "groups_v2", "height", "id",
    "image", "in", "index", "invis", "item", "jid", "kind", "last", "leave",
    "live", "log", "media", "message", "mimetype", "missing", "modify", "name",
    "notification", "notify", "out", "owner", "participant", "paused",
    "picture", "played", "presence", "preview", "promote", "query", "raw",
    "read", "receipt", "received", "recipient", "recording", "relay",
    "remove", "response", "resume", "retry", "s.whatsapp.net", "seconds",
    "set", "size", "status", "subject", "subscribe", "t", "text", "to", "true",
    "type", "unarchive", "unavailable", "url", "user", "value", "web", "width",
    "mute", "read_only", "admin", "creator", "short", "update", "powersave",
    "checksum", "epoch", "block", "previous", "409", "replaced", "reason",
    "spam", "modify_tag", "message_info", "delivery", "emoji", "title",
    "description", "canonical-url", "matched-text", "star", "unstar",
    "media_key", "filename", "identity", "unread", "page", "page_count",
    "search", "media_message", "security", "call_log", "profile", "ciphertext",
    "invite", "gif", "vcard", "frequent", "privacy", "blacklist", "whitelist",
    "verify", "location", "document", "elapsed", "revoke_invite", "expiration",
    "unsubscribe", "disable", "vname", "old_jid", "new_jid", "announcement",
    "locked", "prop", "label", "color", "call", "offer", "call-id",
    "quick_reply", "sticker", "pay_t", "accept", "reject", "sticker_pack",
    "invalid", "canceled", "missed", "connected", "result", "audio",
    "video", "recent",
)


def build_token_map(tokens: Iterable[Optional[str]]) -> dict[str, int]:
    """Index a token sequence by string. The first occurrence of a string wins."""
    out: dict[str, int] = {}
    for index, token in enumerate(tokens):
        if token is not None and token not in out:
            out[token] = index
    return out


TOKEN_MAP = build_token_map(SINGLE_BYTE_TOKENS)
