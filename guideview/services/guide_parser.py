"""
Guide parsing.

markdown-it-py turns guide source into tokens; this module folds them into
the immutable node tree from `guideview.models.nodes`. Tables and
strikethrough are enabled on top of CommonMark. Token types without a
dedicated node (raw HTML, images, plugins added later) become `Unknown`
instead of being dropped.
"""

from __future__ import annotations

import logging
from typing import Tuple

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

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
    Unknown,
    UnorderedList,
)

logger = logging.getLogger(__name__)


def create_parser() -> MarkdownIt:
    """Create the markdown parser used for guides."""
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


_parser = create_parser()


def parse_guide(source: str) -> Tuple[RenderNode, ...]:
    """Parse guide source into a tuple of top-level block nodes."""
    root = SyntaxTreeNode(_parser.parse(source))
    return _convert_children(root)


def _convert_children(node: SyntaxTreeNode) -> Tuple[RenderNode, ...]:
    converted = []
    for child in node.children:
        # Inline containers are transparent; their children belong to the parent
        if child.type == "inline":
            converted.extend(_convert_children(child))
        else:
            converted.append(_convert(child))
    return tuple(converted)


def _raw_text(node: SyntaxTreeNode) -> str:
    if node.children:
        return "".join(_raw_text(child) for child in node.children)
    return node.content or ""


def _convert(node: SyntaxTreeNode) -> RenderNode:
    kind = node.type

    if kind == "text":
        return Text(node.content)
    if kind == "softbreak":
        return SoftBreak()
    if kind == "hardbreak":
        return HardBreak()
    if kind == "code_inline":
        return InlineCode(node.content)
    if kind == "em":
        return Emphasis(_convert_children(node))
    if kind == "strong":
        return Strong(_convert_children(node))
    if kind == "s":
        return Strikethrough(_convert_children(node))
    if kind == "link":
        return Link(str(node.attrs.get("href", "")), _convert_children(node))
    if kind == "heading":
        return Heading(int(node.tag[1:]), _convert_children(node))
    if kind == "paragraph":
        return Paragraph(_convert_children(node))
    if kind == "bullet_list":
        return UnorderedList(tuple(_list_item(item) for item in node.children))
    if kind == "ordered_list":
        start = int(node.attrs.get("start", 1))
        return OrderedList(tuple(_list_item(item) for item in node.children), start=start)
    if kind == "list_item":
        return _list_item(node)
    if kind == "fence":
        info = node.info.strip()
        return CodeBlock(node.content, info.split()[0] if info else None)
    if kind == "code_block":
        return CodeBlock(node.content)
    if kind == "blockquote":
        return BlockQuote(_convert_children(node))
    if kind == "table":
        return _table(node)
    if kind == "hr":
        return ThematicBreak()

    logger.debug("No node type for markdown token %r, keeping it as text", kind)
    return Unknown(_raw_text(node), tag=kind)


def _list_item(node: SyntaxTreeNode) -> ListItem:
    return ListItem(_convert_children(node))


def _table(node: SyntaxTreeNode) -> Table:
    header: Tuple[Tuple[RenderNode, ...], ...] = ()
    rows = []
    for section in node.children:
        for row in section.children:
            cells = tuple(_convert_children(cell) for cell in row.children)
            if section.type == "thead":
                header = cells
            else:
                rows.append(cells)
    return Table(header=header, rows=tuple(rows))
