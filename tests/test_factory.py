import pytest

from htmlbuilder import Comment, Element, InvalidArgumentError, Text, VOID_TAGS, html


def test_comment() -> None:
    node = html.comment("hallo welt")
    assert isinstance(node, Comment)
    assert node.to_html() == "<!--hallo welt-->"
    assert str(node) == "<!--hallo welt-->"


def test_comment_content_is_not_escaped() -> None:
    node = Comment(str(html.element("p").set_text("Hello world")))
    assert node.to_html() == "<!--<p>Hello world</p>-->"


def test_comment_requires_str() -> None:
    with pytest.raises(InvalidArgumentError):
        Comment(html.element("p"))
    with pytest.raises(InvalidArgumentError):
        html.comment(3)


def test_text() -> None:
    node = html.text("hallo welt")
    assert isinstance(node, Text)
    assert node.to_html() == "hallo welt"


def test_element() -> None:
    node = html.element("p")
    assert isinstance(node, Element)
    assert node.to_html() == "<p></p>"
    assert node.attrs() == {}


def test_element_with_attributes() -> None:
    node = html.element("a", {"href": "/foo"})
    assert isinstance(node, Element)
    assert node.to_html() == '<a href="/foo"></a>'


def test_factory_does_not_share_attribute_maps() -> None:
    attrs = {"id": "one"}
    node = html.element("div", attrs)
    node.set_attr("id", "two")
    assert attrs == {"id": "one"}


def test_void_tags_are_immutable() -> None:
    assert isinstance(VOID_TAGS, frozenset)
    assert {"br", "img", "input", "meta", "wbr"} <= VOID_TAGS
    assert "p" not in VOID_TAGS
    assert len(VOID_TAGS) == 23
    with pytest.raises(AttributeError):
        VOID_TAGS.add("p")  # type: ignore[attr-defined]
