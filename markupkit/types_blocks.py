"""Content block type definitions."""

from __future__ import annotations

from typing import Literal, TypedDict


class InlineText(TypedDict):
    type: Literal["Text"]
    text: str


class InlineLink(TypedDict):
    type: Literal["InlineLink"]
    label: str
    href: str


Inline = InlineText | InlineLink


class BaseBlock(TypedDict, total=False):
    id: str
    type: str


class HeadingBlock(BaseBlock):
    level: int
    text: str


class ParagraphBlock(BaseBlock):
    inlines: list[Inline]


class ImageBlock(BaseBlock):
    src: str
    alt: str
    caption: str | None


class LinkBlock(BaseBlock):
    label: str
    href: str


class SectionBlock(BaseBlock):
    children: list[str]


class ListBlock(BaseBlock):
    ordered: bool
    items: list[str]


class CodeBlock(BaseBlock):
    language: str
    source: str


class RawHtmlBlock(BaseBlock):
    html: str


class MarkdownBlock(BaseBlock):
    source: str


Block = (
    HeadingBlock
    | ParagraphBlock
    | ImageBlock
    | LinkBlock
    | SectionBlock
    | ListBlock
    | CodeBlock
    | RawHtmlBlock
    | MarkdownBlock
)
