from dataclasses import dataclass
from typing import Optional

S_WHATSAPP_NET = "s.whatsapp.net"
S_C_US = "c.us"


@dataclass
class Jid:
    user: str
    server: str

    def __str__(self) -> str:
        return jid_encode(self.user, self.server)


def jid_decode(jid_str: str | None) -> Optional[Jid]:
    """Splits a JID string at its first ``@``.

    Returns None when there is no separator. A leading ``@`` gives an empty user.
    """
    if not jid_str:
        return None

    sep = jid_str.find("@")
    if sep == -1:
        return None
    return Jid(user=jid_str[:sep], server=jid_str[sep + 1 :])


def jid_encode(user: str, server: str) -> str:
    """Encodes a JID from its parts."""
    return f"{user}@{server}" if user else server
