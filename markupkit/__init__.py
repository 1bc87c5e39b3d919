"""Immutable HTML node construction and serialization."""

from .attrs import AttrKind, HtmlAttr, InputType, attr, bool_attr, class_attr
from .flatten import Part, flatten
from .nodes import Element, Fragment, Raw, Text, fragment, raw, tag, text, void_tag
from .pool import BufferPool, ScratchBuffer, default_pool
from .serialize import Node, encode_text, render, render_to, write_part

__all__ = [
    "AttrKind",
    "BufferPool",
    "Element",
    "Fragment",
    "HtmlAttr",
    "InputType",
    "Node",
    "Part",
    "Raw",
    "ScratchBuffer",
    "Text",
    "attr",
    "bool_attr",
    "class_attr",
    "default_pool",
    "encode_text",
    "flatten",
    "fragment",
    "raw",
    "render",
    "render_to",
    "tag",
    "text",
    "void_tag",
    "write_part",
]
