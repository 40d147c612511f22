"""Pydantic models for YAML page descriptions."""

from typing import Any, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class DocumentSettings(BaseModel):
    """Formatting options applied when a page is rendered."""

    indent: Literal["spaces", "tab"] = Field(
        "spaces", description="Indent with spaces or with a single tab per level."
    )
    indent_width: int = Field(
        2,
        ge=1,
        alias="indentWidth",
        description="Number of spaces per level when indent is 'spaces'.",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def indent_unit(self) -> str:
        if self.indent == "tab":
            return "\t"
        return " " * self.indent_width


def _scalar_to_str(value: Any) -> Any:
    """YAML reads `2`, `1.5` or `yes` as numbers and booleans; keep them as text."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


def _scalars_to_str(values: Any) -> Any:
    if isinstance(values, list):
        return [_scalar_to_str(item) for item in values]
    return values


class TextSpec(BaseModel):
    """Verbatim text placed inside an element."""

    text: str = Field(..., description="Text emitted exactly as written.")

    model_config = ConfigDict(extra="forbid")

    @field_validator("text", mode="before")
    @classmethod
    def _text_from_scalar(cls, value: Any) -> Any:
        return _scalar_to_str(value)


class ElementSpec(BaseModel):
    """Declarative form of an element and its subtree."""

    tag: str = Field(..., description="Tag name, e.g. p, ul, meta.")
    closing: bool = Field(
        True, description="False for void tags (meta, br) that take no children."
    )
    inline: bool = Field(
        False, description="Render without surrounding newlines and indentation."
    )
    attributes: List[Tuple[str, str]] = Field(
        default_factory=list,
        description=(
            "Attributes in output order. Either a list of [name, value] pairs, "
            "which may repeat a name, or a mapping."
        ),
    )
    children: List[Union["ElementSpec", TextSpec, str]] = Field(
        default_factory=list,
        description="Child elements and text. Bare strings are text nodes.",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("attributes", mode="before")
    @classmethod
    def _attributes_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, dict):
            value = list(value.items())
        if isinstance(value, list):
            return [
                _scalars_to_str(list(pair)) if isinstance(pair, (list, tuple)) else pair
                for pair in value
            ]
        return value

    @field_validator("children", mode="before")
    @classmethod
    def _children_from_scalars(cls, value: Any) -> Any:
        return _scalars_to_str(value)

    @model_validator(mode="after")
    def _void_tags_have_no_children(self) -> "ElementSpec":
        if not self.closing and self.children:
            raise ValueError(f"<{self.tag}> does not take a closing tag and cannot have children")
        return self


ElementSpec.model_rebuild()

NodeSpec = Union[ElementSpec, TextSpec, str]


class PageSpec(BaseModel):
    """Entry point of a page YAML file."""

    settings: DocumentSettings = Field(
        default_factory=DocumentSettings, description="Formatting options."
    )
    nodes: List[NodeSpec] = Field(
        default_factory=list,
        description="Top-level nodes placed inside <html>, usually head and body.",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("nodes", mode="before")
    @classmethod
    def _nodes_from_scalars(cls, value: Any) -> Any:
        return _scalars_to_str(value)
