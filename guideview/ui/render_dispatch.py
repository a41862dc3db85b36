"""
Render dispatch: parsed guide nodes to presentation elements.

Each node type maps to a fixed `StyleDirective` from `STYLE_TABLE`. Code
blocks go through the syntax highlighter; everything the table does not
know about is rendered as inert plain text so a guide always shows
something.

`render` is pure: the same nodes (and theme) always produce equal elements.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from ..config.settings import get_code_theme
from ..models.nodes import (
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
    UnorderedList,
)
from ..models.presentation import PresentationElement, StyleDirective, StyledToken
from .highlight import highlight

HEADING_STYLES: Mapping[int, StyleDirective] = MappingProxyType(
    {
        1: StyleDirective(style="bold underline", margin=(1, 1)),
        2: StyleDirective(style="bold", margin=(1, 1)),
        3: StyleDirective(style="bold italic", margin=(1, 0)),
        4: StyleDirective(style="italic", margin=(1, 0)),
    }
)

STYLE_TABLE: Mapping[str, StyleDirective] = MappingProxyType(
    {
        "paragraph": StyleDirective(margin=(0, 1)),
        "unordered_list": StyleDirective(margin=(0, 1), marker="disc"),
        "ordered_list": StyleDirective(margin=(0, 1), marker="decimal"),
        "list_item": StyleDirective(),
        "code_block": StyleDirective(margin=(0, 1)),
        "inline_code": StyleDirective(style="bold cyan"),
        "emphasis": StyleDirective(style="italic"),
        "strong": StyleDirective(style="bold"),
        "strikethrough": StyleDirective(style="strike"),
        "link": StyleDirective(style="underline blue"),
        "blockquote": StyleDirective(style="italic dim", margin=(0, 1)),
        "table": StyleDirective(margin=(0, 1)),
        "table_header": StyleDirective(style="bold"),
        "table_row": StyleDirective(),
        "table_cell": StyleDirective(),
        "thematic_break": StyleDirective(style="dim", margin=(0, 1)),
        "text": StyleDirective(),
        "unknown": StyleDirective(),
    }
)

# Inline containers and the element kind they render as
_INLINE_CONTAINERS = (
    (Emphasis, "emphasis"),
    (Strong, "strong"),
    (Strikethrough, "strikethrough"),
)


def render(
    nodes: Iterable[RenderNode], code_theme: Optional[str] = None
) -> Tuple[PresentationElement, ...]:
    """Render a node sequence into presentation elements, one per node.

    Args:
        nodes: Parsed guide nodes
        code_theme: Theme for highlighted code; defaults to the configured one
    """
    theme = code_theme or get_code_theme()
    return tuple(render_node(node, theme) for node in nodes)


def _element(kind: str, **fields) -> PresentationElement:
    return PresentationElement(kind=kind, directive=STYLE_TABLE[kind], **fields)


def _render_all(nodes: Iterable[RenderNode], theme: str) -> Tuple[PresentationElement, ...]:
    return tuple(render_node(node, theme) for node in nodes)


def render_code_block(node: CodeBlock, theme: str) -> PresentationElement:
    """Render a code block, highlighted when its language is recognised."""
    code = node.content
    # Only the single newline that closes the fence is dropped
    if code.endswith("\n"):
        code = code[:-1]

    result = highlight(node.language, code, theme)
    return _element(
        "code_block",
        tokens=result.tokens,
        language=node.language,
        highlighted=result.highlighted,
    )


def render_node(node: RenderNode, theme: str) -> PresentationElement:
    """Render a single node. Unrecognised nodes become plain text."""
    if isinstance(node, Text):
        return _element("text", text=node.content)
    if isinstance(node, SoftBreak):
        return _element("text", text=" ")
    if isinstance(node, HardBreak):
        return _element("text", text="\n")
    if isinstance(node, InlineCode):
        return _element("inline_code", tokens=(StyledToken(node.content),))
    for node_type, kind in _INLINE_CONTAINERS:
        if isinstance(node, node_type):
            return _element(kind, children=_render_all(node.children, theme))
    if isinstance(node, Link):
        return _element("link", href=node.href, children=_render_all(node.children, theme))
    if isinstance(node, Heading):
        level = min(max(node.level, 1), len(HEADING_STYLES))
        return PresentationElement(
            kind="heading",
            directive=HEADING_STYLES[level],
            level=node.level,
            children=_render_all(node.children, theme),
        )
    if isinstance(node, Paragraph):
        return _element("paragraph", children=_render_all(node.children, theme))
    if isinstance(node, UnorderedList):
        return _element("unordered_list", children=_render_all(node.items, theme))
    if isinstance(node, OrderedList):
        return _element("ordered_list", start=node.start, children=_render_all(node.items, theme))
    if isinstance(node, ListItem):
        return _element("list_item", children=_render_all(node.children, theme))
    if isinstance(node, CodeBlock):
        return render_code_block(node, theme)
    if isinstance(node, BlockQuote):
        return _element("blockquote", children=_render_all(node.children, theme))
    if isinstance(node, Table):
        return _render_table(node, theme)
    if isinstance(node, ThematicBreak):
        return _element("thematic_break", text="─" * 3)

    return _element("unknown", text=_fallback_text(node))


def _fallback_text(node: object) -> str:
    raw = getattr(node, "raw", None)
    if isinstance(raw, str):
        return raw
    content = getattr(node, "content", None)
    if isinstance(content, str):
        return content
    return ""


def _render_table(node: Table, theme: str) -> PresentationElement:
    rows = []
    if node.header:
        cells = tuple(_element("table_cell", children=_render_all(cell, theme)) for cell in node.header)
        rows.append(_element("table_header", children=cells))
    for row in node.rows:
        cells = tuple(_element("table_cell", children=_render_all(cell, theme)) for cell in row)
        rows.append(_element("table_row", children=cells))
    return _element("table", children=tuple(rows))
