"""HTML document assembly on top of the DOM model."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import List

from .dom_model import DEFAULT_INDENT_UNIT, Node

DOCTYPE = "<!DOCTYPE html>"

# Characters that may appear on a line that is still considered blank.
BLANK_LINE_CHARS = " \t\r"


def strip_blank_lines(text: str) -> str:
    """Drop whitespace-only lines and terminate every kept line with a newline."""

    kept = [line for line in text.split("\n") if line.strip(BLANK_LINE_CHARS)]
    return "".join(f"{line}\n" for line in kept)


@dataclass
class HTMLDocument:
    """An HTML page made of top-level nodes wrapped in doctype and ``<html>``.

    The doctype and the ``html`` element are built in; callers supply their
    own ``head`` and ``body`` elements.
    """

    indent_unit: str = DEFAULT_INDENT_UNIT
    nodes: List[Node] = field(default_factory=list)

    def add_node(self, node: Node) -> HTMLDocument:
        self.nodes.append(copy.deepcopy(node))
        return self

    def render(self) -> str:
        parts: List[str] = [f"{DOCTYPE}\n", "<html>\n"]
        parts.extend(node.render(1, self.indent_unit) for node in self.nodes)
        parts.append("</html>")
        return strip_blank_lines("".join(parts))

    def __str__(self) -> str:
        return self.render()


__all__ = ["BLANK_LINE_CHARS", "DOCTYPE", "HTMLDocument", "strip_blank_lines"]
