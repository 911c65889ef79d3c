"""Default encoder configuration."""

from wabinary.core.jid import S_C_US, S_WHATSAPP_NET

# Servers rewritten before token lookup.
JID_ALIASES = {S_C_US: S_WHATSAPP_NET}

# LIST_16 carries a 16-bit big-endian count.
MAX_LIST_SIZE = 0xFFFF

DEFAULT_ENCODER_CONFIG = {
    "jid_aliases": JID_ALIASES,
    "drop_null_children": True,
    "max_list_size": MAX_LIST_SIZE,
}
