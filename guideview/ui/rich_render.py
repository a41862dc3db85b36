"""
Conversion of presentation elements into rich renderables.

Used by the Textual guide view and by ``guideview render`` alike. Block
elements become padded renderables; inline elements are flattened into a
single `rich.text.Text` with their directive styles layered.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from ..models.presentation import PresentationElement

BLOCK_KINDS = frozenset(
    {
        "heading",
        "paragraph",
        "unordered_list",
        "ordered_list",
        "list_item",
        "code_block",
        "blockquote",
        "table",
        "thematic_break",
    }
)

LIST_MARKERS = {"disc": "• "}
LIST_INDENT = 2


def to_renderables(elements: Iterable[PresentationElement]) -> List[RenderableType]:
    return [to_renderable(element) for element in elements]


def to_renderable(element: PresentationElement) -> RenderableType:
    """Build the rich renderable for one element, including its margins."""
    renderable = _block(element)
    top, bottom = element.directive.margin
    if top or bottom:
        return Padding(renderable, (top, 0, bottom, 0))
    return renderable


def inline_text(elements: Sequence[PresentationElement], style: str = "") -> Text:
    """Flatten inline elements into one Text."""
    text = Text()
    for element in elements:
        _append_inline(text, element, style)
    return text


def _join_styles(*styles: str) -> str:
    return " ".join(s for s in styles if s)


def _append_inline(text: Text, element: PresentationElement, style: str) -> None:
    combined = _join_styles(style, element.directive.style)
    if element.kind == "link" and element.href:
        combined = _join_styles(combined, f"link {element.href}")

    if element.children:
        for child in element.children:
            _append_inline(text, child, combined)
    elif element.tokens:
        for token in element.tokens:
            text.append(token.text, style=_join_styles(combined, token.style) or None)
    elif element.text:
        text.append(element.text, style=combined or None)


def _block(element: PresentationElement) -> RenderableType:
    kind = element.kind
    style = element.directive.style

    if kind in ("heading", "paragraph", "list_item"):
        return _flow(element.children, style)
    if kind in ("unordered_list", "ordered_list"):
        return _list(element)
    if kind == "code_block":
        return _code_block(element)
    if kind == "blockquote":
        return Padding(Group(*to_renderables(element.children)), (0, 0, 0, 2), style=style)
    if kind == "table":
        return _table(element)
    if kind == "thematic_break":
        return Rule(style=style)
    return inline_text([element])


def _flow(children: Sequence[PresentationElement], style: str) -> RenderableType:
    """Lay out a mix of inline runs and nested blocks."""
    parts: List[RenderableType] = []
    run: List[PresentationElement] = []
    for child in children:
        if child.kind in BLOCK_KINDS:
            if run:
                parts.append(inline_text(run, style))
                run = []
            parts.append(to_renderable(child))
        else:
            run.append(child)
    if run:
        parts.append(inline_text(run, style))

    if len(parts) == 1:
        return parts[0]
    return Group(*parts)


def _list_item_body(item: PresentationElement) -> List[RenderableType]:
    parts: List[RenderableType] = []
    for child in item.children:
        # Paragraphs inside list items are drawn without their margins
        if child.kind == "paragraph":
            parts.append(inline_text(child.children, child.directive.style))
        elif child.kind in BLOCK_KINDS:
            parts.append(to_renderable(child))
        else:
            parts.append(inline_text([child]))
    return parts


def _list(element: PresentationElement) -> RenderableType:
    rows = []
    for index, item in enumerate(element.children):
        if element.directive.marker == "decimal":
            marker = f"{element.start + index}. "
        else:
            marker = LIST_MARKERS.get(element.directive.marker or "", "• ")

        body = _list_item_body(item)
        grid = Table.grid(padding=0)
        grid.add_column(width=len(marker), no_wrap=True)
        grid.add_column()
        grid.add_row(Text(marker, style="dim"), Group(*body) if body else Text(""))
        rows.append(grid)
    return Group(*rows)


def _code_block(element: PresentationElement) -> RenderableType:
    code = Text(no_wrap=False)
    for token in element.tokens:
        code.append(token.text, style=token.style or None)
    return Panel(
        code,
        title=element.language if element.highlighted else None,
        title_align="left",
        box=box.ROUNDED,
        border_style="dim",
        expand=True,
    )


def _table(element: PresentationElement) -> RenderableType:
    table = Table(box=box.SIMPLE_HEAD, show_header=False)
    header = next((row for row in element.children if row.kind == "table_header"), None)
    width = max((len(row.children) for row in element.children), default=0)

    if header is not None:
        table.show_header = True
        for cell in header.children:
            table.add_column(inline_text(cell.children), header_style=header.directive.style)
    for _ in range(width - len(table.columns)):
        table.add_column()

    for row in element.children:
        if row.kind == "table_header":
            continue
        table.add_row(*(inline_text(cell.children) for cell in row.children))
    return table
