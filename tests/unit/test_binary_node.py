import pytest

from wabinary.core.errors import InvalidChildrenError, InvalidNodeError
from wabinary.protocol.binary_node import (
    BinaryNode,
    NodeList,
    OpaqueBinary,
    Text,
    as_node,
)


class _SerializedMessage:
    def SerializeToString(self) -> bytes:
        return b"\x0a\x05hello"


def test_content_variant_is_decided_on_construction():
    assert BinaryNode(tag="a", content="hi").content == Text("hi")
    assert BinaryNode(tag="a", content=b"\x00").content == OpaqueBinary(b"\x00")
    assert BinaryNode(tag="a").content is None

    listed = BinaryNode(tag="a", content=[("b", None, None), None])
    assert isinstance(listed.content, NodeList)
    assert listed.content.nodes[0] == BinaryNode(tag="b")
    assert listed.content.nodes[1] is None
    assert listed.content.present() == (BinaryNode(tag="b"),)


def test_empty_text_counts_as_absent():
    assert BinaryNode(tag="a", content="").content is None


def test_serializable_content_is_opaque():
    msg = _SerializedMessage()
    node = BinaryNode(tag="message", content=msg)
    assert isinstance(node.content, OpaqueBinary)
    assert node.content.to_bytes() == msg.SerializeToString()


def test_valid_attr_keys_skip_none_and_keep_order():
    node = BinaryNode(tag="a", attrs={"z": "1", "y": None, "x": "2"})
    assert node.valid_attr_keys() == ["z", "x"]
    assert BinaryNode(tag="a").valid_attr_keys() == []


def test_as_node_accepts_exact_triples():
    node = BinaryNode(tag="a")
    assert as_node(node) is node
    assert as_node(["a", None, None]) == node
    assert as_node(("a", {"id": "1"}, "x")) == BinaryNode(tag="a", attrs={"id": "1"}, content="x")


@pytest.mark.parametrize("value", [("a",), ("a", None), ("a", None, None, None), "abc", {}, 1])
def test_as_node_rejects_other_shapes(value):
    with pytest.raises(InvalidNodeError):
        as_node(value)


def test_tag_and_attrs_types_are_checked():
    with pytest.raises(InvalidNodeError):
        BinaryNode(tag=1)
    with pytest.raises(InvalidNodeError):
        BinaryNode(tag="a", attrs=["id", "1"])
    with pytest.raises(InvalidNodeError):
        BinaryNode(tag="a", attrs={5: "x"})


def test_numeric_content_is_rejected():
    with pytest.raises(InvalidChildrenError):
        BinaryNode(tag="a", content=7)
