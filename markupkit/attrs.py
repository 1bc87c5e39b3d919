"""HTML attribute values and the factories that build them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Optional, TextIO


class AttrKind(Enum):
    NONE = "none"
    NORMAL = "normal"
    BOOLEAN = "boolean"
    CLASS = "class"


class InputType(Enum):
    """Values accepted by ``<input type=...>``.

    Member names use underscores where the HTML value uses a hyphen, so
    ``InputType.datetime_local`` renders as ``datetime-local``.
    """

    button = "button"
    checkbox = "checkbox"
    color = "color"
    date = "date"
    datetime_local = "datetime_local"
    email = "email"
    file = "file"
    hidden = "hidden"
    image = "image"
    month = "month"
    number = "number"
    password = "password"
    radio = "radio"
    range = "range"
    reset = "reset"
    search = "search"
    submit = "submit"
    tel = "tel"
    text = "text"
    time = "time"
    url = "url"
    week = "week"

    @property
    def html_value(self) -> str:
        return self.value.replace("_", "-")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class HtmlAttr:
    """A single HTML attribute.

    NORMAL and CLASS attributes render as ``name="value"`` with the value
    encoded at write time. BOOLEAN attributes render by presence only.
    """

    name: str
    value: str
    kind: AttrKind

    EMPTY: ClassVar["HtmlAttr"]

    @property
    def is_empty(self) -> bool:
        return self.kind is AttrKind.NONE or _is_blank(self.name)

    def write_to(self, sink: TextIO, encode: Callable[[str], str]) -> None:
        if self.is_empty:
            return
        sink.write(" ")
        sink.write(self.name)
        if self.kind is AttrKind.BOOLEAN:
            return
        sink.write('="')
        # Values sit inside double quotes whatever the encoder does with them.
        sink.write(encode(self.value).replace('"', "&quot;"))
        sink.write('"')


HtmlAttr.EMPTY = HtmlAttr("", "", AttrKind.NONE)


def css_join(tokens) -> str:
    """Join class tokens with single spaces, trimming and skipping blanks."""
    joined = []
    for token in tokens:
        if _is_blank(token):
            continue
        joined.append(token.strip())
    return " ".join(joined)


def attr(name: str, value: Optional[str]) -> HtmlAttr:
    if _is_blank(name):
        return HtmlAttr.EMPTY
    return HtmlAttr(name, "" if value is None else value, AttrKind.NORMAL)


def bool_attr(name: str, on: bool) -> HtmlAttr:
    if on and not _is_blank(name):
        return HtmlAttr(name, name, AttrKind.BOOLEAN)
    return HtmlAttr.EMPTY


def class_attr(*tokens: Optional[str]) -> HtmlAttr:
    # May carry an empty value; Element.create drops it.
    return HtmlAttr("class", css_join(tokens), AttrKind.CLASS)


def _ranged(name: str, value: int, low: int, high: Optional[int] = None) -> HtmlAttr:
    if value < low or (high is not None and value > high):
        bounds = f"{low}..{high}" if high is not None else f">= {low}"
        raise ValueError(f"{name} must be {bounds}, got {value}")
    return attr(name, str(value))


# ---- common attributes ----

def id_(value: str) -> HtmlAttr:
    return attr("id", value)


def href(value: str) -> HtmlAttr:
    return attr("href", value)


def src(value: str) -> HtmlAttr:
    return attr("src", value)


def alt(value: str) -> HtmlAttr:
    return attr("alt", value)


def type_(value: str | InputType) -> HtmlAttr:
    if isinstance(value, InputType):
        return attr("type", value.html_value)
    return attr("type", value)


def name(value: str) -> HtmlAttr:
    return attr("name", value)


def value(value: str) -> HtmlAttr:
    return attr("value", value)


def role(value: str) -> HtmlAttr:
    return attr("role", value)


def style(css: str) -> HtmlAttr:
    return attr("style", css)


def content(value: str) -> HtmlAttr:
    return attr("content", value)


def for_(value: str) -> HtmlAttr:
    """Label ``for``; should match the target element's id."""
    return attr("for", value)


def title_attr(value: str) -> HtmlAttr:
    return attr("title", value)


def data(key: str, value: str) -> HtmlAttr:
    return attr(f"data-{key}", value)


def aria(key: str, value: str) -> HtmlAttr:
    return attr(f"aria-{key}", value)


# ---- form/link helpers ----

def placeholder(value: str) -> HtmlAttr:
    return attr("placeholder", value)


def autocomplete(value: str) -> HtmlAttr:
    return attr("autocomplete", value)


def min_(value: str) -> HtmlAttr:
    return attr("min", value)


def max_(value: str) -> HtmlAttr:
    return attr("max", value)


def step(value: str) -> HtmlAttr:
    return attr("step", value)


def pattern(value: str) -> HtmlAttr:
    return attr("pattern", value)


def action(value: str) -> HtmlAttr:
    return attr("action", value)


def method(value: str) -> HtmlAttr:
    return attr("method", value)


def enctype(value: str) -> HtmlAttr:
    return attr("enctype", value)


def rel(value: str) -> HtmlAttr:
    return attr("rel", value)


def target(value: str) -> HtmlAttr:
    return attr("target", value)


# ---- numeric helpers (range checked) ----

def maxlength(value: int) -> HtmlAttr:
    return _ranged("maxlength", value, 0)


def minlength(value: int) -> HtmlAttr:
    return _ranged("minlength", value, 0)


def rows(value: int) -> HtmlAttr:
    return _ranged("rows", value, 1)


def cols(value: int) -> HtmlAttr:
    return _ranged("cols", value, 1)


def tabindex(value: int) -> HtmlAttr:
    return _ranged("tabindex", value, -1, 32767)


# ---- boolean attributes ----

def disabled(on: bool = True) -> HtmlAttr:
    return bool_attr("disabled", on)


def checked(on: bool = True) -> HtmlAttr:
    return bool_attr("checked", on)


def selected(on: bool = True) -> HtmlAttr:
    return bool_attr("selected", on)


def readonly(on: bool = True) -> HtmlAttr:
    return bool_attr("readonly", on)


def required(on: bool = True) -> HtmlAttr:
    return bool_attr("required", on)


def multiple(on: bool = True) -> HtmlAttr:
    return bool_attr("multiple", on)


def autofocus(on: bool = True) -> HtmlAttr:
    return bool_attr("autofocus", on)


__all__ = [
    "AttrKind",
    "HtmlAttr",
    "InputType",
    "action",
    "alt",
    "aria",
    "attr",
    "autocomplete",
    "autofocus",
    "bool_attr",
    "checked",
    "class_attr",
    "cols",
    "content",
    "css_join",
    "data",
    "disabled",
    "enctype",
    "for_",
    "href",
    "id_",
    "max_",
    "maxlength",
    "method",
    "min_",
    "minlength",
    "multiple",
    "name",
    "pattern",
    "placeholder",
    "readonly",
    "rel",
    "required",
    "role",
    "rows",
    "selected",
    "src",
    "step",
    "style",
    "tabindex",
    "target",
    "title_attr",
    "type_",
    "value",
]
