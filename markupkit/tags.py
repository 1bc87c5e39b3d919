"""Ergonomic wrappers for common HTML tags."""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from .attrs import InputType, class_attr, type_
from .flatten import Part
from .nodes import Element, Raw
from .pool import BufferPool

TagFactory = Callable[..., Element]


def _element(tag_name: str, *, void: bool = False) -> TagFactory:
    def factory(*parts: Part, pool: Optional[BufferPool] = None) -> Element:
        return Element.create(tag_name, parts, is_void=void, pool=pool)

    factory.__name__ = tag_name
    factory.__qualname__ = tag_name
    factory.__doc__ = f"Build a <{tag_name}> {'void ' if void else ''}element."
    return factory


# Document structure
html_tag = _element("html")
head = _element("head")
body = _element("body")
header = _element("header")
main = _element("main")
section = _element("section")
article = _element("article")
aside = _element("aside")
footer = _element("footer")
nav = _element("nav")

# Head
title = _element("title")
meta = _element("meta", void=True)
link = _element("link", void=True)
script = _element("script")
noscript = _element("noscript")
style_tag = _element("style")

# Text/content
div = _element("div")
span = _element("span")
strong = _element("strong")
em = _element("em")
small = _element("small")
i = _element("i")
p = _element("p")
h1 = _element("h1")
h2 = _element("h2")
h3 = _element("h3")
h4 = _element("h4")
h5 = _element("h5")
h6 = _element("h6")
a = _element("a")
button = _element("button")
code = _element("code")
pre = _element("pre")
blockquote = _element("blockquote")
template = _element("template")

# Lists
ul = _element("ul")
ol = _element("ol")
li = _element("li")

# Figure
figure = _element("figure")
figcaption = _element("figcaption")

# Forms
form = _element("form")
label = _element("label")
textarea = _element("textarea")
fieldset = _element("fieldset")
legend = _element("legend")
select = _element("select")
option = _element("option")
optgroup = _element("optgroup")
datalist = _element("datalist")

# Native disclosure / dialogs
details = _element("details")
summary = _element("summary")
dialog = _element("dialog")

# Tables
table = _element("table")
thead = _element("thead")
tbody = _element("tbody")
tfoot = _element("tfoot")
tr = _element("tr")
th = _element("th")
td = _element("td")
caption = _element("caption")

# Void tags
br = _element("br", void=True)
hr = _element("hr", void=True)
img = _element("img", void=True)
input_ = _element("input", void=True)

_HEADINGS = (h1, h2, h3, h4, h5, h6)


def heading(level: int, *parts: Part, pool: Optional[BufferPool] = None) -> Element:
    if not 1 <= level <= 6:
        raise ValueError(f"heading level must be 1..6, got {level}")
    return _HEADINGS[level - 1](*parts, pool=pool)


def input_of(input_type: InputType | str, *parts: Part, pool: Optional[BufferPool] = None) -> Element:
    """``<input type=...>``; a later ``type`` part still wins."""
    return input_(type_(input_type), parts, pool=pool)


def code_block(language: str, *parts: Part, pool: Optional[BufferPool] = None) -> Element:
    return pre(code(class_attr(f"language-{language}"), parts, pool=pool), pool=pool)


def when(condition: Any, *parts: Part) -> Tuple[Part, ...]:
    """Return ``parts`` when ``condition`` is truthy, otherwise nothing.

    The tuple is flattened by the receiving constructor.
    """
    return parts if condition else ()


def doctype() -> Raw:
    return Raw("<!doctype html>")


__all__ = [
    "a",
    "article",
    "aside",
    "blockquote",
    "body",
    "br",
    "button",
    "caption",
    "code",
    "code_block",
    "datalist",
    "details",
    "dialog",
    "div",
    "doctype",
    "em",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "heading",
    "hr",
    "html_tag",
    "i",
    "img",
    "input_",
    "input_of",
    "label",
    "legend",
    "li",
    "link",
    "main",
    "meta",
    "nav",
    "noscript",
    "ol",
    "optgroup",
    "option",
    "p",
    "pre",
    "script",
    "section",
    "select",
    "small",
    "span",
    "strong",
    "style_tag",
    "summary",
    "table",
    "tbody",
    "td",
    "template",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "title",
    "tr",
    "ul",
    "when",
]
