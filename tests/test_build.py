from pathlib import Path

import pytest
from pydantic import ValidationError

from htmlbuilder.build import build_document, load_page_spec, spec_to_node
from htmlbuilder.dom_model import Element, Text
from htmlbuilder.models import DocumentSettings, ElementSpec, PageSpec, TextSpec

PAGE_YAML = """\
settings:
  indent: tab
nodes:
  - tag: head
    children:
      - tag: meta
        closing: false
        attributes:
          - [charset, utf-8]
      - tag: title
        children: [Hello]
  - tag: body
    children:
      - tag: p
        attributes:
          id: intro
        children:
          - "A "
          - tag: em
            inline: true
            children: [big]
          - text: " deal."
"""


def _write_page(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "page.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_and_render_page(tmp_path: Path):
    spec = load_page_spec(_write_page(tmp_path, PAGE_YAML))
    assert spec.settings.indent_unit == "\t"

    rendered = build_document(spec).render()
    assert rendered == (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "\t<head>\n"
        '\t\t<meta charset="utf-8">\n'
        "\t\t<title>Hello</title>\n"
        "\t</head>\n"
        "\t<body>\n"
        '\t\t<p id="intro">A <em>big</em> deal.</p>\n'
        "\t</body>\n"
        "</html>\n"
    )


def test_indent_unit_override(tmp_path: Path):
    spec = load_page_spec(_write_page(tmp_path, PAGE_YAML))
    rendered = build_document(spec, indent_unit="    ").render()
    assert "\n    <head>\n" in rendered
    assert "\t" not in rendered


def test_void_element_with_children_is_rejected(tmp_path: Path):
    content = """\
nodes:
  - tag: br
    closing: false
    children: [oops]
"""
    with pytest.raises(ValidationError):
        load_page_spec(_write_page(tmp_path, content))


def test_missing_tag_is_rejected():
    with pytest.raises(ValidationError):
        PageSpec.model_validate({"nodes": [{"closing": True}]})


def test_empty_file_gives_empty_page(tmp_path: Path):
    spec = load_page_spec(_write_page(tmp_path, ""))
    assert spec.nodes == []
    assert build_document(spec).render() == "<!DOCTYPE html>\n<html>\n</html>\n"


def test_attribute_pairs_keep_duplicates():
    spec = ElementSpec.model_validate(
        {"tag": "div", "attributes": [["class", "a"], ["class", "b"]]}
    )
    node = spec_to_node(spec)
    assert isinstance(node, Element)
    assert node.attributes == [("class", "a"), ("class", "b")]


def test_spec_to_node_text_forms():
    assert spec_to_node("plain") == Text("plain")
    assert spec_to_node(TextSpec(text="  padded ")) == Text("  padded ")


def test_unexpected_top_level_tags_warn(capsys):
    spec = PageSpec.model_validate({"nodes": [{"tag": "body"}]})
    build_document(spec)
    assert "expected ['head', 'body']" in capsys.readouterr().err


def test_document_settings():
    assert DocumentSettings().indent_unit == "  "
    assert DocumentSettings(indentWidth=4).indent_unit == "    "
    assert DocumentSettings(indent_width=3).indent_unit == "   "
    assert DocumentSettings(indent="tab", indent_width=8).indent_unit == "\t"
    with pytest.raises(ValidationError):
        DocumentSettings(indent_width=0)
    with pytest.raises(ValidationError):
        DocumentSettings(indent="dots")


def test_bundled_welcome_page_matches_demo():
    from htmlbuilder.sample_page import build_sample_document

    page = Path(__file__).resolve().parents[1] / "config" / "welcome.yaml"
    spec = load_page_spec(page)
    assert build_document(spec).render() == build_sample_document().render()


def test_numeric_and_boolean_scalars_are_kept_as_text(tmp_path: Path):
    content = """\
nodes:
  - tag: body
    children:
      - tag: td
        attributes:
          colspan: 2
          tabindex: 0
        children: [42]
      - tag: p
        attributes:
          - [data-ratio, 1.5]
        children: [yes, text: 7]
"""
    spec = load_page_spec(_write_page(tmp_path, content))
    rendered = build_document(spec).render()
    assert '<td colspan="2" tabindex="0">42</td>' in rendered
    assert '<p data-ratio="1.5">true7</p>' in rendered


def test_unknown_keys_are_rejected():
    with pytest.raises(ValidationError):
        ElementSpec.model_validate({"tag": "ul", "childern": [{"tag": "li"}]})
    with pytest.raises(ValidationError):
        TextSpec.model_validate({"text": "hi", "txt": "typo"})
    with pytest.raises(ValidationError):
        PageSpec.model_validate({"node": []})
