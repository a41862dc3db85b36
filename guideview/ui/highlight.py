"""
Syntax highlighting for code blocks.

Lexing is done by pygments and colors come from the rich syntax theme of
the configured code theme, so highlighted blocks look the same as rich's own
`Syntax` output. An unknown or missing language is not an error: the code
comes back as a single unstyled token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound
from rich.syntax import Syntax, SyntaxTheme

from ..config.settings import get_code_theme
from ..models.presentation import StyledToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HighlightResult:
    tokens: Tuple[StyledToken, ...]
    highlighted: bool
    language: Optional[str] = None


@lru_cache(maxsize=64)
def find_lexer(language: Optional[str]) -> Optional[Lexer]:
    """Look up a pygments lexer by alias, or None if there is no such lexer."""
    if not language:
        return None
    try:
        # Keep the text exactly as given: no stripping, no added newline
        return get_lexer_by_name(language, stripnl=False, stripall=False, ensurenl=False)
    except ClassNotFound:
        logger.debug("No lexer for language %r, using plain text", language)
        return None


@lru_cache(maxsize=16)
def _get_theme(name: str) -> SyntaxTheme:
    # Unknown pygments style names fall back to pygments' "default" style
    return Syntax.get_theme(name)


def highlight(language: Optional[str], code: str, theme: Optional[str] = None) -> HighlightResult:
    """Split code into styled tokens.

    Args:
        language: Language tag from the code fence, may be None
        code: Source text
        theme: Code theme name; defaults to the configured theme

    Returns:
        HighlightResult with ``highlighted`` False when the language was not
        recognised.
    """
    lexer = find_lexer(language)
    if lexer is None:
        tokens = (StyledToken(code),) if code else ()
        return HighlightResult(tokens=tokens, highlighted=False, language=language)

    syntax_theme = _get_theme(theme or get_code_theme())
    merged: List[StyledToken] = []
    for token_type, value in lexer.get_tokens(code):
        if not value:
            continue
        style = syntax_theme.get_style_for_token(token_type)
        style_str = str(style) if style else ""
        if merged and merged[-1].style == style_str:
            merged[-1] = StyledToken(merged[-1].text + value, style_str)
        else:
            merged.append(StyledToken(value, style_str))

    return HighlightResult(tokens=tuple(merged), highlighted=True, language=language)
