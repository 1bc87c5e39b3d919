"""Serialization of node trees into HTML text."""

from __future__ import annotations

import html
import io
from collections.abc import Iterable, Mapping
from typing import Any, Callable, TextIO

from .attrs import HtmlAttr

Encoder = Callable[[str], str]


def encode_text(value: str) -> str:
    """Escape ``& < > " '`` for use in text content and attribute values."""
    return html.escape(value, quote=True)


class Node:
    """Base for the immutable, write-only node variants."""

    __slots__ = ()

    def write_to(self, sink: TextIO, encode: Encoder = encode_text) -> None:
        raise NotImplementedError

    def render(self, encode: Encoder = encode_text) -> str:
        buffer = io.StringIO()
        self.write_to(buffer, encode)
        return buffer.getvalue()

    def __html__(self) -> str:
        # Lets Jinja2/markupsafe embed nodes without escaping them again.
        return self.render()

    def __str__(self) -> str:
        return self.render()


def write_part(sink: TextIO, part: Any, encode: Encoder = encode_text) -> None:
    """Write one child part; the recursive core of rendering."""
    if part is None or isinstance(part, HtmlAttr):
        # Attributes are consumed by Element.create; stragglers render nothing.
        return
    if isinstance(part, Node):
        part.write_to(sink, encode)
        return
    if hasattr(part, "__html__"):
        sink.write(part.__html__())
        return
    if isinstance(part, str):
        sink.write(encode(part))
        return
    if isinstance(part, (bytes, bytearray)):
        sink.write(encode(part.decode("utf-8", errors="replace")))
        return
    if isinstance(part, Iterable) and not isinstance(part, Mapping):
        for item in part:
            write_part(sink, item, encode)
        return
    sink.write(encode(str(part)))


def render_to(part: Any, sink: TextIO, encode: Encoder = encode_text) -> None:
    write_part(sink, part, encode)


def render(part: Any, encode: Encoder = encode_text) -> str:
    buffer = io.StringIO()
    write_part(buffer, part, encode)
    return buffer.getvalue()


__all__ = ["Encoder", "Node", "encode_text", "render", "render_to", "write_part"]
