"""
Parsed guide nodes.

The parser produces a tree of these frozen dataclasses. Block nodes hold
inline or block children as tuples, so a tree never changes once built and
two parses of the same text compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class SoftBreak:
    pass


@dataclass(frozen=True)
class HardBreak:
    pass


@dataclass(frozen=True)
class InlineCode:
    content: str


@dataclass(frozen=True)
class Emphasis:
    children: Tuple[RenderNode, ...] = ()


@dataclass(frozen=True)
class Strong:
    children: Tuple[RenderNode, ...] = ()


@dataclass(frozen=True)
class Strikethrough:
    children: Tuple[RenderNode, ...] = ()


@dataclass(frozen=True)
class Link:
    href: str
    children: Tuple[RenderNode, ...] = ()


@dataclass(frozen=True)
class Heading:
    level: int
    children: Tuple[RenderNode, ...] = ()


@dataclass(frozen=True)
class Paragraph:
    children: Tuple[RenderNode, ...] = ()


@dataclass(frozen=True)
class ListItem:
    children: Tuple[RenderNode, ...] = ()


@dataclass(frozen=True)
class OrderedList:
    items: Tuple[ListItem, ...] = ()
    start: int = 1


@dataclass(frozen=True)
class UnorderedList:
    items: Tuple[ListItem, ...] = ()


@dataclass(frozen=True)
class CodeBlock:
    """Fenced or indented code. ``content`` keeps the parser's trailing newline."""

    content: str
    language: Optional[str] = None


@dataclass(frozen=True)
class BlockQuote:
    children: Tuple[RenderNode, ...] = ()


@dataclass(frozen=True)
class Table:
    """GFM table; each cell is a tuple of inline nodes."""

    header: Tuple[Tuple[RenderNode, ...], ...] = ()
    rows: Tuple[Tuple[Tuple[RenderNode, ...], ...], ...] = ()


@dataclass(frozen=True)
class ThematicBreak:
    pass


@dataclass(frozen=True)
class Unknown:
    """Anything the parser emits that has no dedicated node type."""

    raw: str
    tag: str = field(default="")


RenderNode = Union[
    Text,
    SoftBreak,
    HardBreak,
    InlineCode,
    Emphasis,
    Strong,
    Strikethrough,
    Link,
    Heading,
    Paragraph,
    ListItem,
    OrderedList,
    UnorderedList,
    CodeBlock,
    BlockQuote,
    Table,
    ThematicBreak,
    Unknown,
]
