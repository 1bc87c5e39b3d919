"""Immutable HTML node variants and the element merge rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, TextIO, Tuple

from .attrs import AttrKind, HtmlAttr
from .flatten import Part, flatten
from .pool import BufferPool, ScratchBuffer, default_pool
from .serialize import Encoder, Node, encode_text, write_part


def _find_by_name(attrs: ScratchBuffer, name: str) -> int:
    wanted = name.lower()
    for index, existing in enumerate(attrs):
        if existing.name.lower() == wanted:
            return index
    return -1


@dataclass(frozen=True)
class Element(Node):
    name: str
    is_void: bool = False
    attributes: Tuple[HtmlAttr, ...] = ()
    children: Tuple[Any, ...] = ()

    @classmethod
    def create(
        cls,
        name: str,
        parts: Iterable[Part],
        *,
        is_void: bool = False,
        pool: Optional[BufferPool] = None,
    ) -> "Element":
        """Split parts into attributes and children.

        - Empty attributes and blank class attributes are dropped.
        - Class attributes merge onto the first ``class`` slot, space separated.
        - Other attributes overwrite an earlier one with the same name
          (case-insensitive) in place, so the first-seen position is kept.
        - Everything else becomes a child, in encounter order.
        """
        pool = pool or default_pool
        with pool.acquire() as attrs, pool.acquire() as children:
            class_index = -1
            for part in flatten(parts):
                if not isinstance(part, HtmlAttr):
                    children.append(part)
                    continue
                if part.is_empty:
                    continue

                if part.kind is AttrKind.CLASS:
                    if not part.value.strip():
                        continue
                    if class_index < 0:
                        class_index = _find_by_name(attrs, "class")
                    if class_index < 0:
                        class_index = len(attrs)
                        attrs.append(part)
                        continue
                    existing = attrs[class_index]
                    merged = (
                        f"{existing.value} {part.value}"
                        if existing.value.strip()
                        else part.value
                    )
                    attrs[class_index] = HtmlAttr("class", merged, AttrKind.CLASS)
                    continue

                index = _find_by_name(attrs, part.name)
                if index < 0:
                    attrs.append(part)
                else:
                    attrs[index] = part

            return cls(name, is_void, attrs.to_tuple(), children.to_tuple())

    def write_to(self, sink: TextIO, encode: Encoder = encode_text) -> None:
        sink.write("<")
        sink.write(self.name)
        for attribute in self.attributes:
            attribute.write_to(sink, encode)
        sink.write(">")
        if self.is_void:
            return
        for child in self.children:
            write_part(sink, child, encode)
        sink.write("</")
        sink.write(self.name)
        sink.write(">")


@dataclass(frozen=True)
class Fragment(Node):
    parts: Tuple[Any, ...] = ()

    @classmethod
    def create(cls, parts: Iterable[Part]) -> "Fragment":
        return cls(tuple(flatten(parts)))

    def write_to(self, sink: TextIO, encode: Encoder = encode_text) -> None:
        for part in self.parts:
            write_part(sink, part, encode)


@dataclass(frozen=True)
class Text(Node):
    value: str = ""

    def __post_init__(self) -> None:
        if self.value is None:
            object.__setattr__(self, "value", "")

    def write_to(self, sink: TextIO, encode: Encoder = encode_text) -> None:
        sink.write(encode(self.value))


@dataclass(frozen=True)
class Raw(Node):
    """Trusted markup written verbatim. Nothing here sanitizes it."""

    value: str = ""

    def __post_init__(self) -> None:
        if self.value is None:
            object.__setattr__(self, "value", "")

    def write_to(self, sink: TextIO, encode: Encoder = encode_text) -> None:
        sink.write(self.value)


def tag(name: str, *parts: Part, pool: Optional[BufferPool] = None) -> Element:
    return Element.create(name, parts, pool=pool)


def void_tag(name: str, *parts: Part, pool: Optional[BufferPool] = None) -> Element:
    """Build a void element; children are collected but never rendered."""
    return Element.create(name, parts, is_void=True, pool=pool)


def fragment(*parts: Part) -> Fragment:
    return Fragment.create(parts)


def text(value: Optional[str]) -> Text:
    return Text("" if value is None else value)


def raw(value: Optional[str]) -> Raw:
    return Raw("" if value is None else value)


__all__ = [
    "Element",
    "Fragment",
    "Raw",
    "Text",
    "fragment",
    "raw",
    "tag",
    "text",
    "void_tag",
]
