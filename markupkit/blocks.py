"""Compile content blocks into node trees."""

from __future__ import annotations

import html
import importlib.util
from typing import Any, Dict, List, Optional, Set

from .attrs import alt, class_attr, data, href, src
from .io_utils import warn
from .nodes import Element, raw, text
from .pool import BufferPool
from .tags import a, code_block, div, figcaption, figure, heading, img, li, ol, p, pre, ul
from .types_blocks import Block, Inline

BLOCK_TYPES = (
    "Heading",
    "Paragraph",
    "Link",
    "Image",
    "Section",
    "List",
    "Code",
    "RawHtml",
    "Markdown",
)


def _render_inlines(inlines: List[Inline], pool: Optional[BufferPool]) -> List[Any]:
    rendered: List[Any] = []
    for inline in inlines:
        if inline["type"] == "Text":
            rendered.append(text(inline["text"]))
        elif inline["type"] == "InlineLink":
            rendered.append(
                a(class_attr("mk-link"), href(inline["href"]), text(inline["label"]), pool=pool)
            )
    return rendered


def heading_level(value: Any) -> Optional[int]:
    """Clamp a heading level into 1..6; ``None`` when it is not an integer."""
    try:
        level = int(value)
    except (TypeError, ValueError):
        return None
    return min(max(level, 1), 6)


def _convert_block(
    block: Block,
    lookup: Dict[str, Block],
    pool: Optional[BufferPool],
    seen: Set[str],
) -> List[Element]:
    btype = block.get("type")
    if btype == "Heading":
        level = heading_level(block.get("level", 1))
        if level is None:
            warn(f"Heading block {block.get('id')!r}: invalid level {block.get('level')!r}, using 1")
            level = 1
        return [
            heading(
                level,
                class_attr("mk-heading", f"level-{level}"),
                text(block.get("text", "")),
                pool=pool,
            )
        ]
    if btype == "Paragraph":
        children = _render_inlines(block.get("inlines", []), pool)
        return [p(class_attr("mk-paragraph"), children, pool=pool)]
    if btype == "Link":
        return [
            a(
                class_attr("mk-link"),
                href(block.get("href", "")),
                text(block.get("label", "")),
                pool=pool,
            )
        ]
    if btype == "Image":
        image = img(
            class_attr("mk-image-img"),
            src(block.get("src", "")),
            alt(block.get("alt", "")),
            pool=pool,
        )
        caption = block.get("caption")
        return [
            figure(
                class_attr("mk-image"),
                image,
                figcaption(class_attr("mk-image-caption"), text(caption), pool=pool) if caption else None,
                pool=pool,
            )
        ]
    if btype == "Section":
        children: List[Any] = []
        for child_id in block.get("children", []):
            # Unknown ids and reference cycles are skipped.
            if child_id not in lookup or child_id in seen:
                continue
            children.extend(_convert_block(lookup[child_id], lookup, pool, seen | {child_id}))
        return [div(class_attr("mk-section"), children, pool=pool)]
    if btype == "List":
        items = [li(text(item), pool=pool) for item in block.get("items", [])]
        factory = ol if block.get("ordered") else ul
        return [factory(class_attr("mk-list"), items, pool=pool)]
    if btype == "Code":
        return [code_block(block.get("language", "text"), text(block.get("source", "")), pool=pool)]
    if btype == "RawHtml":
        return [
            div(
                class_attr("mk-raw"),
                data("kind", "rawHtml"),
                raw(block.get("html", "")),
                pool=pool,
            )
        ]
    if btype == "Markdown":
        html_text = None
        if importlib.util.find_spec("markdown"):
            from markdown import markdown

            html_text = markdown(block.get("source", ""))
        if html_text is not None:
            return [div(class_attr("mk-md"), raw(html_text), pool=pool)]
        escaped = html.escape(block.get("source", ""))
        return [pre(class_attr("mk-md"), raw(escaped), pool=pool)]
    warn(f"[blocks] skipping block with unknown type: {btype!r}")
    return []


def _referenced_ids(blocks: List[Block]) -> Set[str]:
    referenced: Set[str] = set()
    for block in blocks:
        if block.get("type") == "Section":
            referenced.update(block.get("children", []))
    return referenced


def blocks_to_nodes(blocks: List[Block], *, pool: Optional[BufferPool] = None) -> List[Element]:
    """Convert blocks in document order.

    Blocks referenced as a Section child render inside that section only.
    """
    lookup = {block["id"]: block for block in blocks if "id" in block}
    referenced = _referenced_ids(blocks)
    nodes: List[Element] = []
    for block in blocks:
        block_id = block.get("id")
        if block_id in referenced:
            continue
        seen = {block_id} if block_id else set()
        nodes.extend(_convert_block(block, lookup, pool, seen))
    return nodes


_UNSAFE_THEME_CHARS = frozenset("<{};")


def unsafe_theme_keys(theme: Optional[Dict[str, str]]) -> List[str]:
    """Theme entries whose name or value could break out of a declaration."""
    return [
        key
        for key, value in (theme or {}).items()
        if _UNSAFE_THEME_CHARS.intersection(f"{key}{value}")
    ]


def theme_css(theme: Optional[Dict[str, str]] = None) -> str:
    """Base stylesheet for block class names plus custom property overrides."""
    unsafe = unsafe_theme_keys(theme)
    if unsafe:
        raise ValueError(f"Theme entries contain characters not allowed in CSS values: {', '.join(unsafe)}")
    css_lines = [
        ":root {",
        "  --mk-font-size-base: 16px;",
        "  --mk-font-family: sans-serif;",
        "  --mk-text-color: #222;",
        "}",
        ".mk-heading { font-family: var(--mk-font-family); color: var(--mk-text-color); }",
        ".mk-paragraph { font-family: var(--mk-font-family); color: var(--mk-text-color); line-height: 1.6; }",
        ".mk-link { color: #0a6cff; text-decoration: underline; }",
        ".mk-image { margin: 1em 0; }",
        ".mk-image-img { max-width: 100%; height: auto; display: block; }",
        ".mk-image-caption { font-size: 0.9em; color: #555; }",
        ".mk-section { margin: 1.5em 0; }",
        ".mk-list { margin: 1em 0; padding-left: 1.5em; }",
        ".mk-raw { margin: 1em 0; }",
        ".mk-md { margin: 1em 0; }",
    ]
    for key, value in (theme or {}).items():
        css_lines.append(f":root {{ --{key}: {value}; }}")
    return "\n".join(css_lines) + "\n"


__all__ = ["BLOCK_TYPES", "blocks_to_nodes", "heading_level", "theme_css", "unsafe_theme_keys"]
