import pytest

from markupkit.attrs import attr, class_attr
from markupkit.fluent import ElementBuilder, FragmentBuilder, build, build_fragment, build_void
from markupkit.nodes import Element, Fragment, text
from markupkit.pool import BufferPool


def test_build_applies_same_merge_rules_as_constructor():
    def card(b: ElementBuilder) -> None:
        b.id_("x").class_("card")
        for n in range(2):
            b.child("p", lambda p, n=n: p.text(f"item {n}"))
        b.class_("wide").id_("y")

    node = build("div", card)
    assert isinstance(node, Element)
    assert node.render() == '<div id="y" class="card wide"><p>item 0</p><p>item 1</p></div>'


def test_build_void_ignores_children():
    node = build_void("input", lambda b: b.attr("type", "text").flag("required").text("x"))
    assert node.render() == '<input type="text" required>'


def test_nested_void_child():
    node = build("label", lambda b: b.text("Name").void_child("input", lambda i: i.attr("name", "n")))
    assert node.render() == '<label>Name<input name="n"></label>'


def test_build_fragment_sequences_parts():
    def items(f: FragmentBuilder) -> None:
        f.text("a & b")
        f.raw("<hr>")
        f.add(None, [text("c")])

    node = build_fragment(items)
    assert isinstance(node, Fragment)
    assert node.render() == "a &amp; b<hr>c"


def test_builder_as_context_manager():
    with ElementBuilder("section") as b:
        b.data("state", "open").aria("expanded", "true")
        b.add(class_attr("panel"), attr("role", "region"))
    assert b.node.render() == (
        '<section data-state="open" aria-expanded="true" class="panel" role="region"></section>'
    )


def test_node_before_finish_raises():
    builder = ElementBuilder("div")
    with pytest.raises(RuntimeError):
        builder.node
    builder.finish()
    assert builder.node.render() == "<div></div>"


def test_builder_releases_buffer_when_block_fails():
    pool = BufferPool()

    def broken(b: ElementBuilder) -> None:
        b.text("partial")
        raise ValueError("bad input")

    with pytest.raises(ValueError):
        build("div", broken, pool=pool)
    stats = pool.stats()
    assert stats.rented == stats.returned


def test_build_without_function():
    assert build("span").render() == "<span></span>"


def test_flag_off_drops_boolean_attribute():
    node = build_void("input", lambda b: b.flag("disabled", False).flag("checked"))
    assert node.render() == "<input checked>"
