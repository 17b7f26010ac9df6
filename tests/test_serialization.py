import pytest
from bs4 import BeautifulSoup

from htmlbuilder import Comment, Element, RawHtml, Text
from htmlbuilder.escaping import attribute_name, escape_attribute, escape_text


def test_void_tag_self_closes() -> None:
    assert Element("br").to_html() == "<br/>"


def test_void_tag_with_attributes() -> None:
    el = Element("input", {"type": "checkbox", "checked": True})
    assert el.to_html() == '<input type="checkbox" checked/>'


def test_void_tag_with_children_falls_back_to_paired_form() -> None:
    el = Element("br").append(Text("child"))
    assert el.to_html() == "<br>child</br>"

    el.remove_all_children()
    assert el.to_html() == "<br/>"


def test_non_void_empty_element_is_paired() -> None:
    assert Element("div").to_html() == "<div></div>"


def test_switching_to_void_tag_changes_form() -> None:
    el = Element("span", {"id": "x"}).switch_tag_name("hr")
    assert el.to_html() == '<hr id="x"/>'


@pytest.mark.parametrize(
    "name, expected",
    [
        ("dataFoo", "data-foo"),
        ("ariaLabelledBy", "aria-labelled-by"),
        ("class", "class"),
        ("data-bar", "data-bar"),
        ("ID", "i-d"),
        ("x1Y", "x1y"),
    ],
)
def test_attribute_name_kebab_case(name: str, expected: str) -> None:
    assert attribute_name(name) == expected


def test_attribute_serialization() -> None:
    el = Element("div", {"dataFoo": True, "dataBar": None, "title": 'a"b'})
    assert el.to_html() == '<div data-foo data-bar title="a&quot;b"></div>'


def test_attribute_value_escaping() -> None:
    el = Element("a", {"href": "/q?a=1&b=<2>", "title": "it's"})
    assert el.to_html() == '<a href="/q?a=1&amp;b=&lt;2&gt;" title="it&#x27;s"></a>'


def test_non_string_attribute_values_are_stringified() -> None:
    assert Element("td", {"colspan": 2}).to_html() == '<td colspan="2"></td>'


def test_false_attribute_value_renders_empty() -> None:
    # Only set_prop removes attributes; a stored False keeps the name with an empty value.
    el = Element("div", {"hidden": False})
    assert el.to_html() == '<div hidden=""></div>'
    assert el.attr("hidden") is False


def test_text_escaping_leaves_quotes() -> None:
    assert Text('<a href="x">&</a>').to_html() == '&lt;a href="x"&gt;&amp;&lt;/a&gt;'
    assert escape_text("'\"") == "'\""


def test_disallowed_code_points_are_substituted() -> None:
    assert escape_text("a\x00b") == "a\ufffdb"
    assert escape_attribute("\ud800") == "\ufffd"
    assert escape_text("tab\tnewline\n") == "tab\tnewline\n"


def test_supplementary_plane_noncharacters_are_substituted() -> None:
    assert escape_text("a\U0001fffeb") == "a\ufffdb"
    assert escape_attribute("\U0010ffff") == "\ufffd"
    assert escape_text("\U0001f600") == "\U0001f600"


def test_raw_html_is_verbatim() -> None:
    assert RawHtml("<b>&amp;</b>").to_html() == "<b>&amp;</b>"


def test_nested_document() -> None:
    page = Element("html").append(
        Element("body")
        .append(Comment(" main "))
        .append(Element("h1").set_text("Title & more"))
        .append(Element("img", {"src": "a.png", "alt": "An \"image\""}))
    )
    assert page.to_html() == (
        "<html><body><!-- main --><h1>Title &amp; more</h1>"
        '<img src="a.png" alt="An &quot;image&quot;"/></body></html>'
    )


def test_output_parses_back_to_the_same_structure() -> None:
    ul = Element("ul", {"class": "menu", "dataRole": "nav"})
    for label in ["Home", "R&D", "<Contact>"]:
        Element("li").append(Element("a", {"href": f"/{label}"}).set_text(label)).append_to(ul)
    Element("input", {"type": "checkbox", "checked": True}).append_to(ul)

    soup = BeautifulSoup(ul.to_html(), "html.parser")
    parsed = soup.find("ul")
    assert parsed["class"] == ["menu"]
    assert parsed["data-role"] == "nav"
    assert [a.get_text() for a in parsed.find_all("a")] == ["Home", "R&D", "<Contact>"]
    assert [a["href"] for a in parsed.find_all("a")] == ["/Home", "/R&D", "/<Contact>"]
    assert parsed.find("input").has_attr("checked")
