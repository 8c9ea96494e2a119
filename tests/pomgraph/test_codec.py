"""Tests for the declarative XML deserializer."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from pomgraph.codec import Nested, NestedList, Schema, Text, TextList, XMLDeserializer
from pomgraph.exceptions import DecodeError


@dataclass(frozen=True)
class Leaf:
    key: str


@dataclass(frozen=True)
class Root:
    title: str
    tags: tuple[str, ...]
    leaf: Leaf
    leaves: tuple[Leaf, ...]


LEAF = Schema(Leaf, {"key": Text("key")})
ROOT = Schema(
    Root,
    {
        "title": Text("title"),
        "tags": TextList("tags/tag"),
        "leaf": Nested("leaf", LEAF),
        "leaves": NestedList("leaves/leaf", LEAF),
    },
)


@pytest.fixture
def codec():
    return XMLDeserializer()


class TestXMLDeserializer:
    def test_all_descriptor_kinds(self, codec):
        data = (
            b"<root><title> Hello </title>"
            b"<tags><tag>a</tag><tag>b</tag></tags>"
            b"<leaf><key>k0</key></leaf>"
            b"<leaves><leaf><key>k1</key></leaf><leaf><key>k2</key></leaf></leaves>"
            b"</root>"
        )
        assert codec.decode(data, ROOT) == Root(
            title="Hello",
            tags=("a", "b"),
            leaf=Leaf("k0"),
            leaves=(Leaf("k1"), Leaf("k2")),
        )

    def test_missing_fields_default_empty(self, codec):
        assert codec.decode(b"<root/>", ROOT) == Root("", (), Leaf(""), ())

    def test_unknown_elements_ignored(self, codec):
        assert codec.decode(b"<root><other>x</other><title>t</title></root>", ROOT).title == "t"

    def test_repeated_scalar_takes_last(self, codec):
        assert codec.decode(b"<root><title>a</title><title>b</title></root>", ROOT).title == "b"

    def test_paths_are_relative_to_parent(self, codec):
        # A <key> nested deeper than the mapped path is not picked up.
        data = b"<root><leaf><inner><key>deep</key></inner></leaf></root>"
        assert codec.decode(data, ROOT).leaf == Leaf("")

    def test_namespaces_ignored(self, codec):
        data = b'<root xmlns="urn:x"><title>t</title><tags><tag>a</tag></tags></root>'
        result = codec.decode(data, ROOT)
        assert result.title == "t"
        assert result.tags == ("a",)

    def test_comments_skipped(self, codec):
        data = b"<root><!-- note --><title>t</title></root>"
        assert codec.decode(data, ROOT).title == "t"

    def test_lists_across_repeated_containers(self, codec):
        data = b"<root><tags><tag>a</tag></tags><tags><tag>b</tag></tags></root>"
        assert codec.decode(data, ROOT).tags == ("a", "b")

    @pytest.mark.parametrize("data", [b"", b"<root>", b"<a></b>", b"not xml"])
    def test_malformed_raises_decode_error(self, codec, data):
        with pytest.raises(DecodeError, match="malformed XML"):
            codec.decode(data, ROOT)
