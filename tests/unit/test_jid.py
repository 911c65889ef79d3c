from wabinary.core.jid import (
    Jid,
    jid_decode,
    jid_encode,
    S_WHATSAPP_NET,
)

def test_jid_decode_simple():
    jid = jid_decode("12345678@s.whatsapp.net")
    assert jid is not None
    assert jid.user == "12345678"
    assert jid.server == S_WHATSAPP_NET

def test_jid_decode_leading_separator_has_empty_user():
    jid = jid_decode("@s.whatsapp.net")
    assert jid == Jid(user="", server=S_WHATSAPP_NET)

def test_jid_decode_splits_at_first_separator():
    jid = jid_decode("a@b@c")
    assert jid == Jid(user="a", server="b@c")

def test_jid_decode_without_separator():
    assert jid_decode("s.whatsapp.net") is None
    assert jid_decode("") is None
    assert jid_decode(None) is None

def test_jid_encode():
    assert jid_encode("12345", S_WHATSAPP_NET) == f"12345@{S_WHATSAPP_NET}"
    assert jid_encode("", "broadcast") == "broadcast"

def test_jid_str_roundtrip():
    assert str(Jid(user="1-2", server="g.us")) == "1-2@g.us"
