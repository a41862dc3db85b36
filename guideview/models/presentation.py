"""
Presentation elements produced by render dispatch.

These are the guide's equivalent of view models: everything the view needs
to draw a guide, with styles already resolved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StyleDirective:
    """How an element is drawn.

    Attributes:
        style: Rich style string (e.g. "bold underline")
        margin: Blank lines above and below the block
        marker: List marker kind ("disc", "decimal") or None
    """

    style: str = ""
    margin: Tuple[int, int] = (0, 0)
    marker: Optional[str] = None


@dataclass(frozen=True)
class StyledToken:
    """A run of code text with the rich style it should be drawn in."""

    text: str
    style: str = ""


@dataclass(frozen=True)
class PresentationElement:
    """One rendered node.

    Block elements carry ``children``; leaf inline elements carry ``text``.
    Code elements carry ``tokens`` and record whether their language was
    recognised by the highlighter.
    """

    kind: str
    directive: StyleDirective = StyleDirective()
    text: str = ""
    children: Tuple[PresentationElement, ...] = ()
    tokens: Tuple[StyledToken, ...] = ()
    level: int = 0
    start: int = 1
    language: Optional[str] = None
    highlighted: bool = False
    href: Optional[str] = None

    @property
    def plain_text(self) -> str:
        """Text of the element and its descendants, without styling."""
        if self.tokens:
            return "".join(token.text for token in self.tokens)
        if self.children:
            return "".join(child.plain_text for child in self.children)
        return self.text
