"""Build HTML documents from YAML page descriptions."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .document import HTMLDocument
from .dom_model import Element, Node, Text
from .io_utils import read_yaml, warn
from .models import ElementSpec, NodeSpec, PageSpec, TextSpec

EXPECTED_TOP_LEVEL_TAGS = ["head", "body"]


def load_page_spec(path: Path) -> PageSpec:
    """Load and validate a page YAML file.

    Raises ``FileNotFoundError``, ``yaml.YAMLError`` or
    ``pydantic.ValidationError``; the CLI turns those into exit messages.
    """

    data = read_yaml(path) or {}
    return PageSpec.model_validate(data)


def spec_to_node(spec: NodeSpec) -> Node:
    if isinstance(spec, str):
        return Text(spec)
    if isinstance(spec, TextSpec):
        return Text(spec.text)

    element = Element(spec.closing, spec.inline, spec.tag)
    for name, value in spec.attributes:
        element.add_attribute(name, value)
    for child in spec.children:
        element.add_child(spec_to_node(child))
    return element


def _top_level_tags(spec: PageSpec) -> List[str]:
    return [node.tag for node in spec.nodes if isinstance(node, ElementSpec)]


def build_document(spec: PageSpec, indent_unit: Optional[str] = None) -> HTMLDocument:
    """Convert a page spec into an :class:`HTMLDocument`.

    ``indent_unit`` overrides the indentation from the page settings.
    """

    unit = indent_unit if indent_unit is not None else spec.settings.indent_unit
    document = HTMLDocument(unit)

    tags = _top_level_tags(spec)
    if tags != EXPECTED_TOP_LEVEL_TAGS:
        warn(
            f"Page top-level elements are {tags or 'empty'}; "
            f"expected {EXPECTED_TOP_LEVEL_TAGS}."
        )

    for node_spec in spec.nodes:
        document.add_node(spec_to_node(node_spec))
    return document


__all__ = ["build_document", "load_page_spec", "spec_to_node"]
