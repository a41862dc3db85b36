"""
Presenter for a guide view.

Owns the view state of one guide view and runs the fetch, parse and render
pipeline for each request. Every request gets a fresh `DocumentRequest`
token; a pipeline only commits state while its token is still the active
one, so when requests overlap the latest one wins and earlier completions
are dropped. In-flight fetches are never cancelled, only ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Optional, Protocol

from ..config.constants import FETCH_ERROR_MESSAGE
from ..exceptions import FetchError
from ..models.view_state import Content, DocumentRequest, Error, Loading, ViewState
from ..services.guide_parser import parse_guide
from .render_dispatch import render

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def fetch(self, identifier: str) -> str: ...


class GuidePresenter:
    """Handles guide loading and the Loading/Error/Content lifecycle."""

    def __init__(
        self,
        fetcher: Fetcher,
        on_state_update: Callable[[ViewState], Awaitable[None]] | None = None,
        code_theme: Optional[str] = None,
    ):
        self.fetcher = fetcher
        self.on_state_update = on_state_update
        self.code_theme = code_theme
        self._state: ViewState = Loading()
        self._active: DocumentRequest | None = None
        self._seq = 0

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def active_request(self) -> DocumentRequest | None:
        return self._active

    @property
    def identifier(self) -> str | None:
        return self._active.identifier if self._active else None

    async def request(self, identifier: str) -> None:
        """Show a guide.

        Asking again for the guide that is already active does nothing; use
        `refresh` to fetch it again. Returns once this request's pipeline has
        finished, whether or not its result was committed.

        Raises:
            ValueError: If the identifier is empty
        """
        if self._active is not None and self._active.identifier == identifier:
            logger.debug("Guide %r already requested, ignoring", identifier)
            return
        await self._run(identifier)

    async def refresh(self) -> None:
        """Fetch the active guide again."""
        if self._active is None:
            return
        await self._run(self._active.identifier)

    async def _run(self, identifier: str) -> None:
        request = DocumentRequest(identifier, self._seq + 1)
        self._seq = request.seq
        self._active = request
        await self._commit(request, Loading())

        try:
            text = await self.fetcher.fetch(identifier)
        except FetchError as e:
            logger.warning("Failed to load guide %r: %s", identifier, e)
            await self._commit(request, Error(FETCH_ERROR_MESSAGE))
            return

        if not self._is_active(request):
            logger.debug("Discarding stale result for guide %r (request %d)", identifier, request.seq)
            return

        elements = render(parse_guide(text), self.code_theme)
        await self._commit(request, Content(elements, identifier))

    def _is_active(self, request: DocumentRequest) -> bool:
        return request is self._active

    async def _commit(self, request: DocumentRequest, state: ViewState) -> None:
        if not self._is_active(request):
            logger.debug(
                "Discarding stale %s for guide %r (request %d)",
                type(state).__name__,
                request.identifier,
                request.seq,
            )
            return
        logger.debug("Guide %r -> %s", request.identifier, type(state).__name__)
        self._state = state
        await self._notify_update()

    async def _notify_update(self) -> None:
        if self.on_state_update:
            await self.on_state_update(self._state)
