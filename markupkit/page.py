"""Page documents: a validated description rendered into a full HTML page."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .attrs import attr, bool_attr, class_attr, content, href, name, rel, src
from .blocks import blocks_to_nodes, theme_css
from .config import RenderSettings
from .nodes import Element, fragment, raw, text
from .pool import BufferPool
from .tags import body, doctype, head, html_tag, link, main, meta, script, style_tag, title, when


class MetaTag(BaseModel):
    """A ``<meta>`` entry keyed by ``name`` or ``property``."""

    name: Optional[str] = Field(None, description="Meta name (e.g., robots).")
    property: Optional[str] = Field(
        None, description="Meta property (e.g., og:title)."
    )
    content: str = Field(..., description="Meta content value.")


class PageSpec(BaseModel):
    """Schema for page documents (YAML or JSON)."""

    title: str = Field(..., description="Document title.")
    lang: Optional[str] = Field(
        None, description="lang attribute; falls back to the render settings."
    )
    description: Optional[str] = Field(
        None, description="Meta description for search engines."
    )
    stylesheets: List[str] = Field(
        default_factory=list, description="Stylesheet hrefs linked in <head>."
    )
    scripts: List[str] = Field(
        default_factory=list, description="Script srcs appended to <body> with defer."
    )
    meta: List[MetaTag] = Field(default_factory=list, description="Extra meta tags.")
    body_class: List[str] = Field(
        default_factory=list, alias="bodyClass", description="Classes for <body>."
    )
    theme: Dict[str, str] = Field(
        default_factory=dict,
        description="Custom property overrides; non-empty embeds the block stylesheet.",
    )
    blocks: List[Dict[str, Any]] = Field(
        default_factory=list, description="Content blocks rendered inside <main>."
    )

    model_config = ConfigDict(populate_by_name=True)


def _meta_tag(entry: MetaTag, pool: BufferPool) -> Element:
    return meta(
        attr("name", entry.name) if entry.name else None,
        attr("property", entry.property) if entry.property else None,
        content(entry.content),
        pool=pool,
    )


def build_page(spec: PageSpec, settings: Optional[RenderSettings] = None):
    settings = settings or RenderSettings()
    pool = settings.make_pool()
    return fragment(
        when(settings.doctype, doctype()),
        html_tag(
            attr("lang", spec.lang or settings.lang),
            head(
                meta(attr("charset", "utf-8"), pool=pool),
                meta(name("viewport"), content("width=device-width, initial-scale=1"), pool=pool),
                title(text(spec.title), pool=pool),
                when(
                    spec.description,
                    meta(name("description"), content(spec.description or ""), pool=pool),
                ),
                [_meta_tag(entry, pool) for entry in spec.meta],
                [link(rel("stylesheet"), href(sheet), pool=pool) for sheet in spec.stylesheets],
                when(spec.theme, style_tag(raw(theme_css(spec.theme)), pool=pool)),
                pool=pool,
            ),
            body(
                class_attr(*spec.body_class),
                main(class_attr("mk-main"), blocks_to_nodes(spec.blocks, pool=pool), pool=pool),
                [script(src(path), bool_attr("defer", True), pool=pool) for path in spec.scripts],
                pool=pool,
            ),
            pool=pool,
        ),
    )


def render_page(spec: PageSpec, settings: Optional[RenderSettings] = None) -> str:
    settings = settings or RenderSettings()
    return build_page(spec, settings).render(encode=settings.encoder()) + "\n"


__all__ = ["MetaTag", "PageSpec", "build_page", "render_page"]
