"""Declarative field mapping and the deserializers that consume it.

A :class:`Schema` pairs a target type with a table of attribute -> field
descriptor.  Descriptors name ``/``-separated element paths relative to the
enclosing element, so entity classes never carry parsing logic and the
concrete markup decoder can be swapped behind the :class:`Deserializer`
protocol.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, Union

from pomgraph.exceptions import DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class Text:
    """A single string value; ``""`` when the element is absent."""

    path: str


@dataclass(frozen=True)
class TextList:
    """Every matching element's text, in document order."""

    path: str


@dataclass(frozen=True)
class Nested:
    """A single record decoded with *schema*; decoded from nothing when absent."""

    path: str
    schema: Schema[Any]


@dataclass(frozen=True)
class NestedList:
    """Every matching element decoded with *schema*, in document order."""

    path: str
    schema: Schema[Any]


FieldSpec = Union[Text, TextList, Nested, NestedList]


@dataclass(frozen=True)
class Schema(Generic[T]):
    """Target type plus its attribute -> descriptor table."""

    factory: Callable[..., T]
    fields: Mapping[str, FieldSpec]


class Deserializer(Protocol):
    """Decode raw bytes into a typed value according to a schema."""

    def decode(self, data: bytes, schema: Schema[T]) -> T: ...


def _local_name(tag: object) -> str:
    # Comments and processing instructions carry a callable, not a str, as tag.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _select(element: ET.Element, path: str) -> list[ET.Element]:
    nodes = [element]
    for step in path.split("/"):
        nodes = [child for node in nodes for child in node if _local_name(child.tag) == step]
    return nodes


def _text(element: ET.Element) -> str:
    return element.text.strip() if element.text else ""


class XMLDeserializer:
    """ElementTree-backed :class:`Deserializer`.

    Elements are matched on their local name, so a POM that declares the
    ``http://maven.apache.org/POM/4.0.0`` default namespace decodes the same
    as one that does not.  Unmapped elements are ignored.  A repeated scalar
    element takes the last value.
    """

    def decode(self, data: bytes, schema: Schema[T]) -> T:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise DecodeError(f"malformed XML: {exc}") from exc
        return self._build(root, schema)

    def _build(self, element: ET.Element, schema: Schema[T]) -> T:
        values: dict[str, Any] = {}
        for attr, spec in schema.fields.items():
            nodes = _select(element, spec.path)
            if isinstance(spec, Text):
                values[attr] = _text(nodes[-1]) if nodes else ""
            elif isinstance(spec, TextList):
                values[attr] = tuple(_text(node) for node in nodes)
            elif isinstance(spec, Nested):
                source = nodes[-1] if nodes else ET.Element(spec.path)
                values[attr] = self._build(source, spec.schema)
            else:
                values[attr] = tuple(self._build(node, spec.schema) for node in nodes)
        return schema.factory(**values)
