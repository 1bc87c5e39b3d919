"""Flattening of nested part lists passed to node constructors."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Iterator, Union

from .attrs import HtmlAttr
from .serialize import Node

# Loose values (numbers, arbitrary objects) are also accepted and stringified
# at render time.
Part = Union[HtmlAttr, Node, str, int, float, None, Iterable[Any]]

_ATOMIC = (str, bytes, bytearray, Node, HtmlAttr, Mapping)


def flatten(parts: Iterable[Part]) -> Iterator[Any]:
    """Yield parts depth-first, expanding nested iterables.

    Strings and nodes are leaves even though a string is itself iterable;
    ``None`` entries are skipped.
    """
    for part in parts:
        if part is None:
            continue
        if isinstance(part, _ATOMIC):
            yield part
            continue
        if isinstance(part, Iterable):
            yield from flatten(part)
            continue
        yield part


__all__ = ["Part", "flatten"]
