"""Simple DOM model for building and serializing HTML."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

DEFAULT_INDENT_UNIT = "  "

Attribute = Tuple[str, str]


class StructureError(ValueError):
    """Raised when a child is attached to a node that cannot contain one."""


@dataclass
class Node(ABC):
    """Base class shared by :class:`Element` and :class:`Text`."""

    def add_attribute(self, name: str, value: str) -> Node:
        return self

    def add_child(self, child: Node) -> Node:
        raise StructureError(f"{type(self).__name__} nodes cannot contain children")

    @abstractmethod
    def render(self, indent_layer: int, indent_unit: str = DEFAULT_INDENT_UNIT) -> str:
        ...


@dataclass
class Text(Node):
    """Bare text placed between the tags of its parent, rendered verbatim."""

    text: str

    def render(self, indent_layer: int, indent_unit: str = DEFAULT_INDENT_UNIT) -> str:
        return self.text


@dataclass
class Element(Node):
    """A tag with ordered attributes and children.

    ``requires_closing_tag`` separates paired tags from void tags such as
    ``<meta>`` or ``<br>``. ``is_inline`` only affects formatting: inline
    elements render without the newline and indentation that surround block
    elements.
    """

    requires_closing_tag: bool
    is_inline: bool
    tag: str
    attributes: List[Attribute] = field(default_factory=list)
    children: List[Node] = field(default_factory=list)

    @classmethod
    def block(cls, tag: str) -> Element:
        return cls(True, False, tag)

    @classmethod
    def inline(cls, tag: str) -> Element:
        return cls(True, True, tag)

    @classmethod
    def void(cls, tag: str) -> Element:
        return cls(False, False, tag)

    def add_attribute(self, name: str, value: str) -> Element:
        self.attributes.append((name, value))
        return self

    def add_child(self, child: Node) -> Element:
        """Attach a copy of ``child`` so the caller's handle stays independent."""

        if not self.requires_closing_tag:
            raise StructureError(
                f"Cannot add a child to <{self.tag}>, it does not take a closing tag"
            )
        self.children.append(copy.deepcopy(child))
        return self

    def render(self, indent_layer: int, indent_unit: str = DEFAULT_INDENT_UNIT) -> str:
        parts: List[str] = []
        if not self.is_inline:
            parts.append("\n" + indent_unit * indent_layer)
        parts.append(f"<{self.tag}{_render_attrs(self.attributes)}>")

        if not self.requires_closing_tag:
            if not self.is_inline:
                parts.append("\n")
            return "".join(parts)

        parts.append(_render_children(self.children, indent_layer + 1, indent_unit))
        parts.append(f"</{self.tag}>")
        if not self.is_inline:
            # One layer shallower: lines up whatever the parent emits next.
            parts.append("\n" + indent_unit * (indent_layer - 1))
        return "".join(parts)


def _render_attrs(attributes: Sequence[Attribute]) -> str:
    if not attributes:
        return ""
    parts = [f'{name}="{value}"' for name, value in attributes]
    return " " + " ".join(parts)


def _render_children(children: Sequence[Node], indent_layer: int, indent_unit: str) -> str:
    return "".join(child.render(indent_layer, indent_unit) for child in children)


__all__ = ["DEFAULT_INDENT_UNIT", "Element", "Node", "StructureError", "Text"]
