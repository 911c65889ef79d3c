from .jid import (
    Jid,
    jid_decode,
    jid_encode,
    S_C_US,
    S_WHATSAPP_NET,
)
from .errors import (
    DictionaryPageOutOfRangeError,
    EncodeError,
    InvalidChildrenError,
    InvalidNodeError,
    InvalidTokenError,
    LengthOverflowError,
    ListTooLargeError,
    WabinaryError,
)

__all__ = [
    "Jid",
    "jid_decode",
    "jid_encode",
    "S_C_US",
    "S_WHATSAPP_NET",
    "WabinaryError",
    "EncodeError",
    "LengthOverflowError",
    "InvalidTokenError",
    "DictionaryPageOutOfRangeError",
    "ListTooLargeError",
    "InvalidNodeError",
    "InvalidChildrenError",
]
