"""
View state for a guide view.

A view is always in exactly one of Loading, Error or Content. The union
below is closed; there is no stale-but-displayed state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .presentation import PresentationElement


@dataclass(frozen=True)
class DocumentRequest:
    """A request to show a guide.

    ``seq`` is the request's identity: two requests for the same guide are
    still different requests.
    """

    identifier: str
    seq: int

    def __post_init__(self) -> None:
        if not self.identifier or not self.identifier.strip():
            raise ValueError("Guide identifier must be a non-empty string")


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Error:
    message: str


@dataclass(frozen=True)
class Content:
    elements: Tuple[PresentationElement, ...]
    identifier: str = ""


ViewState = Union[Loading, Error, Content]
