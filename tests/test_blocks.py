import importlib.util

import pytest
from bs4 import BeautifulSoup

from markupkit.blocks import blocks_to_nodes, theme_css
from markupkit.serialize import render


def _soup(blocks) -> BeautifulSoup:
    return BeautifulSoup(render(blocks_to_nodes(blocks)), "html.parser")


def test_heading_and_paragraph_blocks():
    html = render(
        blocks_to_nodes(
            [
                {"type": "Heading", "level": 2, "text": "Intro & Setup"},
                {
                    "type": "Paragraph",
                    "inlines": [
                        {"type": "Text", "text": "See "},
                        {"type": "InlineLink", "label": "docs", "href": "/docs?a=1&b=2"},
                    ],
                },
            ]
        )
    )
    assert html == (
        '<h2 class="mk-heading level-2">Intro &amp; Setup</h2>'
        '<p class="mk-paragraph">See <a class="mk-link" href="/docs?a=1&amp;b=2">docs</a></p>'
    )


def test_heading_level_is_clamped():
    soup = _soup([{"type": "Heading", "level": 9, "text": "Deep"}])
    assert soup.find("h6").get_text() == "Deep"


def test_image_with_and_without_caption():
    soup = _soup(
        [
            {"type": "Image", "src": "/a.png", "alt": "A", "caption": "First"},
            {"type": "Image", "src": "/b.png", "alt": "B"},
        ]
    )
    figures = soup.find_all("figure")
    assert len(figures) == 2
    assert figures[0].find("img")["src"] == "/a.png"
    assert figures[0].find("figcaption").get_text() == "First"
    assert figures[1].find("figcaption") is None


def test_section_renders_children_once():
    blocks = [
        {"id": "s1", "type": "Section", "children": ["p1", "missing"]},
        {"id": "p1", "type": "Paragraph", "inlines": [{"type": "Text", "text": "inside"}]},
        {"id": "p2", "type": "Paragraph", "inlines": [{"type": "Text", "text": "outside"}]},
    ]
    soup = _soup(blocks)
    section = soup.find("div", class_="mk-section")
    assert section.find("p").get_text() == "inside"
    assert [p.get_text() for p in soup.find_all("p")] == ["inside", "outside"]


def test_self_referencing_section_does_not_recurse():
    blocks = [{"id": "s1", "type": "Section", "children": ["s2"]}, {"id": "s2", "type": "Section", "children": ["s1"]}]
    # Both sections are referenced, so nothing renders at the top level.
    assert blocks_to_nodes(blocks) == []


def test_list_and_code_blocks():
    html = render(
        blocks_to_nodes(
            [
                {"type": "List", "ordered": True, "items": ["one", "<two>"]},
                {"type": "Code", "language": "js", "source": "a && b"},
            ]
        )
    )
    assert html == (
        '<ol class="mk-list"><li>one</li><li>&lt;two&gt;</li></ol>'
        '<pre><code class="language-js">a &amp;&amp; b</code></pre>'
    )


def test_raw_html_block_is_not_escaped():
    html = render(blocks_to_nodes([{"type": "RawHtml", "html": "<p>Hello</p>"}]))
    assert html == '<div class="mk-raw" data-kind="rawHtml"><p>Hello</p></div>'


def test_markdown_block_renders_or_falls_back():
    html = render(blocks_to_nodes([{"type": "Markdown", "source": "*hi* <x>"}]))
    if importlib.util.find_spec("markdown"):
        assert html.startswith('<div class="mk-md">')
        assert "<em>hi</em>" in html
    else:
        assert html == '<pre class="mk-md">*hi* &lt;x&gt;</pre>'


def test_unknown_block_is_skipped_with_warning(capsys: pytest.CaptureFixture[str]):
    assert blocks_to_nodes([{"type": "Carousel"}]) == []
    assert "Carousel" in capsys.readouterr().err


def test_theme_css_appends_overrides():
    css = theme_css({"mk-text-color": "#000"})
    assert ".mk-heading" in css
    assert css.rstrip().endswith(":root { --mk-text-color: #000; }")


def test_non_numeric_heading_level_falls_back_with_warning(capsys: pytest.CaptureFixture[str]):
    soup = _soup([{"id": "h", "type": "Heading", "level": "top", "text": "Title"}])
    assert soup.find("h1").get_text() == "Title"
    assert "invalid level 'top'" in capsys.readouterr().err


@pytest.mark.parametrize(
    "theme",
    [{"mk-text-color": "red}</style><script>"}, {"x;y": "1"}, {"mk-font": "a{b"}],
)
def test_theme_css_rejects_unsafe_entries(theme):
    with pytest.raises(ValueError):
        theme_css(theme)
