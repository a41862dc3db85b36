"""
Textual application for browsing guides.

A guide-name input on top and a `GuideView` below. Submitting a name
switches guides; ``r`` in the view reloads the current one.
"""

from __future__ import annotations

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input

from ..models.view_state import Content, Error, Loading
from .guide_presenter import Fetcher
from .guide_view import GuideView


class GuideApp(App[None]):
    """Standalone guide viewer."""

    TITLE = "guideview"

    CSS = """
    #guide-input {
        dock: top;
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("slash", "focus_input", "Open guide"),
        Binding("escape", "focus_view", "Back", show=False),
    ]

    def __init__(
        self,
        guide_name: str,
        fetcher: Optional[Fetcher] = None,
        *,
        origin: Optional[str] = None,
        code_theme: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._guide_name = guide_name
        self._fetcher = fetcher
        self._origin = origin
        self._code_theme = code_theme

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(value=self._guide_name, placeholder="Guide name", id="guide-input")
        yield GuideView(
            self._guide_name,
            self._fetcher,
            origin=self._origin,
            code_theme=self._code_theme,
            id="guide-view",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#guide-view", GuideView).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "guide-input":
            return
        view = self.query_one("#guide-view", GuideView)
        view.show_guide(event.value)
        view.focus()

    def on_guide_view_state_changed(self, event: GuideView.StateChanged) -> None:
        name = event.identifier or ""
        if isinstance(event.state, Loading):
            self.sub_title = f"{name} (loading)"
        elif isinstance(event.state, Error):
            self.sub_title = f"{name} (error)"
        elif isinstance(event.state, Content):
            self.sub_title = name

    def action_focus_input(self) -> None:
        self.query_one("#guide-input", Input).focus()

    def action_focus_view(self) -> None:
        self.query_one("#guide-view", GuideView).focus()
