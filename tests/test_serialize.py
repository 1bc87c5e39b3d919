import io
import threading

from markupkit import fragment, raw, render, render_to, tag, text, write_part
from markupkit.attrs import attr, class_attr
from markupkit.nodes import Element, Raw, Text


def test_text_is_encoded_and_raw_is_verbatim():
    assert text("<b>").render() == "&lt;b&gt;"
    assert raw("<b>").render() == "<b>"


def test_text_escapes_quotes_and_ampersands():
    assert text('Tom & "Jerry"').render() == "Tom &amp; &quot;Jerry&quot;"


def test_none_inputs_give_empty_nodes():
    assert text(None).render() == ""
    assert raw(None).render() == ""
    assert Text(None).render() == ""
    assert Raw(None).render() == ""
    assert Text(None) == Text("")


def test_fragment_renders_parts_without_wrapper():
    node = fragment(tag("b", "1"), "&", [raw("<i>2</i>")])
    assert node.render() == "<b>1</b>&amp;<i>2</i>"


def test_plain_strings_are_encoded_as_children():
    assert tag("p", "a < b").render() == "<p>a &lt; b</p>"


def test_nested_string_renders_as_single_run():
    node = tag("p", [["ab"]])
    assert node.children == ("ab",)
    assert node.render() == "<p>ab</p>"


def test_loose_values_are_stringified_and_encoded():
    class Thing:
        def __str__(self) -> str:
            return "<thing>"

    assert tag("td", 42, " ", 1.5, Thing()).render() == "<td>42 1.5&lt;thing&gt;</td>"


def test_lists_reaching_serializer_are_iterated():
    # Bypass Element.create so children keep their nesting.
    node = Element("ul", False, (), ([tag("li", "a"), ("b", None)],))
    assert node.render() == "<ul><li>a</li>b</ul>"


def test_attributes_among_children_render_nothing():
    node = Element("div", False, (), (attr("id", "x"), "t"))
    assert node.render() == "<div>t</div>"


def test_objects_with_html_method_are_not_escaped():
    class Markupish:
        def __html__(self) -> str:
            return "<em>ok</em>"

    assert tag("p", Markupish()).render() == "<p><em>ok</em></p>"


def test_render_to_writes_into_sink():
    sink = io.StringIO()
    sink.write("prefix:")
    render_to(tag("span", "x"), sink)
    assert sink.getvalue() == "prefix:<span>x</span>"


def test_render_accepts_loose_parts():
    assert render(["a", tag("b"), None, 3]) == "a<b></b>3"


def test_custom_encoder_is_used_for_text_and_attributes():
    node = tag("p", attr("title", "x"), text("y"), raw("z"))
    assert node.render(encode=str.upper) == '<p title="X">Yz</p>'


def test_str_and_html_protocol_return_markup():
    node = tag("div", class_attr("c"), "x")
    assert str(node) == '<div class="c">x</div>'
    assert node.__html__() == str(node)


def test_write_part_skips_none():
    sink = io.StringIO()
    write_part(sink, None)
    assert sink.getvalue() == ""


def test_shared_tree_renders_identically_across_threads():
    tree = tag("ul", [tag("li", text(str(n))) for n in range(50)])
    expected = tree.render()
    results: list[str] = []
    lock = threading.Lock()

    def worker() -> None:
        out = tree.render()
        with lock:
            results.append(out)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [expected] * 8


def test_text_equality_is_by_value():
    assert Text("a") == text("a")


def test_undecodable_bytes_render_with_replacement_characters():
    assert tag("p", b"\xff<").render() == "<p>\ufffd&lt;</p>"
    assert tag("p", b"caf\xc3\xa9").render() == "<p>café</p>"


def test_attribute_values_keep_quotes_escaped_under_any_encoder():
    node = tag("p", attr("title", 'a "b"'), 'say "hi"')
    assert node.render(encode=lambda value: value) == '<p title="a &quot;b&quot;">say "hi"</p>'
