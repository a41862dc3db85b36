"""
GuideView - a widget that shows one remote guide at a time.

The widget draws whatever its `GuidePresenter` commits: a loading
indicator, an error banner, or the rendered guide. Switching guides while a
fetch is still running is allowed; the presenter drops the older result.

Example usage:
    class MyApp(App):
        def compose(self):
            yield GuideView("textguide", id="guide-view")

        def on_input_submitted(self, event):
            self.query_one("#guide-view", GuideView).show_guide(event.value)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widget import Widget
from textual.widgets import LoadingIndicator, Static

from ..models.view_state import Content, Error, Loading, ViewState
from ..services.guide_fetcher import GuideFetcher
from .guide_presenter import Fetcher, GuidePresenter
from .rich_render import to_renderables

logger = logging.getLogger(__name__)


class GuideView(Widget, can_focus=True):
    """Shows a guide and its loading/error state."""

    DEFAULT_CSS = """
    GuideView {
        height: 1fr;
    }

    GuideView #guide-loading {
        height: 16;
    }

    GuideView #guide-error {
        margin: 1 2;
        padding: 1 2;
        border: round $error;
        color: $error;
        background: $error 10%;
    }

    GuideView #guide-content {
        height: 1fr;
        padding: 1 2;
    }

    GuideView .guide-block {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("r", "reload", "Reload"),
    ]

    class StateChanged(Message):
        """Fired after the view state changes."""

        def __init__(self, state: ViewState, identifier: Optional[str]) -> None:
            self.state = state
            self.identifier = identifier
            super().__init__()

    def __init__(
        self,
        guide_name: Optional[str] = None,
        fetcher: Optional[Fetcher] = None,
        *,
        origin: Optional[str] = None,
        code_theme: Optional[str] = None,
        **kwargs,
    ) -> None:
        """Initialize the GuideView.

        Args:
            guide_name: Guide to show once mounted
            fetcher: Source of guide text; a `GuideFetcher` is created if omitted
            origin: Origin for the created fetcher (ignored with ``fetcher``)
            code_theme: Theme for highlighted code blocks
            **kwargs: Passed to Widget
        """
        super().__init__(**kwargs)
        self._initial_guide = guide_name
        self._owned_fetcher: Optional[GuideFetcher] = None
        self._swap_lock = asyncio.Lock()
        if fetcher is None:
            fetcher = self._owned_fetcher = GuideFetcher(origin)
        self.presenter = GuidePresenter(
            fetcher,
            on_state_update=self._on_state_update,
            code_theme=code_theme,
        )

    @property
    def state(self) -> ViewState:
        return self.presenter.state

    def compose(self) -> ComposeResult:
        yield LoadingIndicator(id="guide-loading")
        yield Static("", id="guide-error")
        yield VerticalScroll(id="guide-content")

    async def on_mount(self) -> None:
        await self._apply_state(self.presenter.state)
        if self._initial_guide:
            self.show_guide(self._initial_guide)

    async def on_unmount(self) -> None:
        if self._owned_fetcher is not None:
            await self._owned_fetcher.aclose()

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def show_guide(self, guide_name: str) -> None:
        """Start loading a guide. Blank names are ignored."""
        guide_name = guide_name.strip()
        if not guide_name:
            return
        # Not exclusive: an older fetch keeps running and is discarded on arrival
        self.run_worker(self.presenter.request(guide_name), group="guide-fetch")

    def action_reload(self) -> None:
        self.run_worker(self.presenter.refresh(), group="guide-fetch")

    # -------------------------------------------------------------------------
    # State rendering
    # -------------------------------------------------------------------------

    async def _on_state_update(self, state: ViewState) -> None:
        await self._apply_state(state)
        self.post_message(self.StateChanged(state, self.presenter.identifier))

    async def _apply_state(self, state: ViewState) -> None:
        loading = self.query_one("#guide-loading", LoadingIndicator)
        error = self.query_one("#guide-error", Static)
        content = self.query_one("#guide-content", VerticalScroll)

        loading.display = isinstance(state, Loading)
        error.display = isinstance(state, Error)
        content.display = isinstance(state, Content)

        if isinstance(state, Error):
            error.update(Text.assemble(("Error: ", "bold"), state.message))
        elif isinstance(state, Content):
            await self._swap_content(content, state)

    async def _swap_content(self, content: VerticalScroll, state: Content) -> None:
        """Replace the rendered blocks, one swap at a time.

        A swap that was overtaken by a newer state while waiting gives up, so
        blocks of two guides never end up mounted together.
        """
        async with self._swap_lock:
            if state is not self.presenter.state:
                return
            await content.remove_children()
            if state is not self.presenter.state:
                return
            blocks = [
                Static(renderable, classes="guide-block")
                for renderable in to_renderables(state.elements)
            ]
            if blocks:
                await content.mount_all(blocks)
            content.scroll_home(animate=False)
            logger.debug("Rendered guide %r (%d blocks)", state.identifier, len(blocks))
