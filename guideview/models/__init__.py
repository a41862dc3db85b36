"""Data types shared by the guide pipeline."""

from .nodes import (
    BlockQuote,
    CodeBlock,
    Emphasis,
    HardBreak,
    Heading,
    InlineCode,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    RenderNode,
    SoftBreak,
    Strikethrough,
    Strong,
    Table,
    Text,
    ThematicBreak,
    Unknown,
    UnorderedList,
)
from .presentation import PresentationElement, StyleDirective, StyledToken
from .view_state import Content, DocumentRequest, Error, Loading, ViewState

__all__ = [
    "BlockQuote",
    "CodeBlock",
    "Content",
    "DocumentRequest",
    "Emphasis",
    "Error",
    "HardBreak",
    "Heading",
    "InlineCode",
    "Link",
    "ListItem",
    "Loading",
    "OrderedList",
    "Paragraph",
    "PresentationElement",
    "RenderNode",
    "SoftBreak",
    "Strikethrough",
    "Strong",
    "StyleDirective",
    "StyledToken",
    "Table",
    "Text",
    "ThematicBreak",
    "Unknown",
    "UnorderedList",
    "ViewState",
]
