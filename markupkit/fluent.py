"""Block-style builders on top of the node constructors.

Builders collect parts with ordinary control flow (``if``/``for``/locals) and
hand them to ``Element.create`` or ``Fragment.create`` at the end, so the merge
rules are exactly those of the plain constructors::

    def card(b: ElementBuilder) -> None:
        b.class_("card")
        if user.is_admin:
            b.data("role", "admin")
        b.child("h2", lambda h: h.text(user.name))

    node = build("div", card)
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from . import attrs
from .flatten import Part
from .nodes import Element, Fragment, raw, text
from .pool import BufferPool, default_pool

_BUILDER_CAPACITY = 12

B = TypeVar("B", bound="_PartCollector")


class _PartCollector:
    def __init__(self, pool: Optional[BufferPool] = None) -> None:
        self._pool = pool or default_pool
        self._parts = self._pool.rent(_BUILDER_CAPACITY)

    def __enter__(self: B) -> B:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self._parts.release()
            return
        self.finish()

    def finish(self):
        raise NotImplementedError

    def _take_parts(self) -> tuple:
        parts = self._parts.to_tuple()
        self._parts.release()
        return parts

    def add(self: B, *parts: Part) -> B:
        for part in parts:
            self._parts.append(part)
        return self

    def text(self: B, value: Optional[str]) -> B:
        return self.add(text(value))

    def raw(self: B, value: Optional[str]) -> B:
        return self.add(raw(value))

    def attr(self: B, name: str, value: Optional[str]) -> B:
        return self.add(attrs.attr(name, value))

    def flag(self: B, name: str, on: bool = True) -> B:
        return self.add(attrs.bool_attr(name, on))

    def class_(self: B, *tokens: Optional[str]) -> B:
        return self.add(attrs.class_attr(*tokens))

    def id_(self: B, value: str) -> B:
        return self.add(attrs.id_(value))

    def href(self: B, value: str) -> B:
        return self.add(attrs.href(value))

    def style(self: B, css: str) -> B:
        return self.add(attrs.style(css))

    def data(self: B, key: str, value: str) -> B:
        return self.add(attrs.data(key, value))

    def aria(self: B, key: str, value: str) -> B:
        return self.add(attrs.aria(key, value))

    def child(self: B, name: str, fn: Optional[Callable[["ElementBuilder"], None]] = None) -> B:
        return self.add(build(name, fn, pool=self._pool))

    def void_child(self: B, name: str, fn: Optional[Callable[["ElementBuilder"], None]] = None) -> B:
        return self.add(build_void(name, fn, pool=self._pool))


class ElementBuilder(_PartCollector):
    def __init__(self, name: str, *, is_void: bool = False, pool: Optional[BufferPool] = None) -> None:
        super().__init__(pool)
        self.name = name
        self.is_void = is_void
        self._node: Optional[Element] = None

    def finish(self) -> Element:
        if self._node is None:
            self._node = Element.create(
                self.name, self._take_parts(), is_void=self.is_void, pool=self._pool
            )
        return self._node

    @property
    def node(self) -> Element:
        if self._node is None:
            raise RuntimeError(f"<{self.name}> builder has not finished")
        return self._node


class FragmentBuilder(_PartCollector):
    def __init__(self, pool: Optional[BufferPool] = None) -> None:
        super().__init__(pool)
        self._node: Optional[Fragment] = None

    def finish(self) -> Fragment:
        if self._node is None:
            self._node = Fragment.create(self._take_parts())
        return self._node

    @property
    def node(self) -> Fragment:
        if self._node is None:
            raise RuntimeError("fragment builder has not finished")
        return self._node


def build(
    name: str,
    fn: Optional[Callable[[ElementBuilder], None]] = None,
    *,
    pool: Optional[BufferPool] = None,
) -> Element:
    with ElementBuilder(name, pool=pool) as builder:
        if fn is not None:
            fn(builder)
    return builder.node


def build_void(
    name: str,
    fn: Optional[Callable[[ElementBuilder], None]] = None,
    *,
    pool: Optional[BufferPool] = None,
) -> Element:
    with ElementBuilder(name, is_void=True, pool=pool) as builder:
        if fn is not None:
            fn(builder)
    return builder.node


def build_fragment(
    fn: Callable[[FragmentBuilder], None], *, pool: Optional[BufferPool] = None
) -> Fragment:
    with FragmentBuilder(pool) as builder:
        fn(builder)
    return builder.node


__all__ = ["ElementBuilder", "FragmentBuilder", "build", "build_fragment", "build_void"]
