"""The example page used by ``htmlbuilder demo``."""

from __future__ import annotations

from .document import HTMLDocument
from .dom_model import DEFAULT_INDENT_UNIT, Element, Text

SAMPLE_TITLE = "Example Page | HTML Builder"


def build_head() -> Element:
    head = Element.block("head")
    head.add_child(Element.void("meta").add_attribute("charset", "utf-8"))
    head.add_child(Element.block("title").add_child(Text(SAMPLE_TITLE)))
    return head


def build_body() -> Element:
    body = Element.block("body")
    body.add_child(
        Element.block("h1")
        .add_attribute("id", "welcome-header")
        .add_child(Text("Welcome to the HTML Builder!"))
    )

    # Inline markup can be a child element...
    body.add_child(
        Element.block("p")
        .add_attribute("id", "welcome-paragraph")
        .add_attribute("style", "color: red")
        .add_child(Text("This is a paragraph. A "))
        .add_child(Element.inline("em").add_child(Text("RED")))
        .add_child(Text(" paragraph."))
    )

    # ...or written straight into the text, which is never escaped.
    body.add_child(
        Element.block("p")
        .add_attribute("id", "welcome-paragraph-2")
        .add_child(Text("The word strong is <strong>strong</strong>."))
    )

    items = Element.block("ul").add_attribute("id", "welcome-list")
    for number in range(1, 4):
        items.add_child(Element.block("li").add_child(Text(f"List item {number}")))
    body.add_child(items)
    return body


def build_sample_document(indent_unit: str = DEFAULT_INDENT_UNIT) -> HTMLDocument:
    return HTMLDocument(indent_unit).add_node(build_head()).add_node(build_body())


__all__ = ["SAMPLE_TITLE", "build_body", "build_head", "build_sample_document"]
