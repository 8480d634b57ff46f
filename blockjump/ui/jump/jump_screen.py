"""
Jump Screen - modal search overlay over the block/pattern catalog.

Layout:
- Search input
- Hint line (empty query / no results)
- Two panes: ranked results on the left, preview of the selection on the right
"""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, ListView, Static

from .jump_presenter import JumpPresenter, JumpStateVM, OverlayState
from .jump_views import JumpPreviewView, JumpResultItem, JumpResultsView

logger = logging.getLogger(__name__)

HINTS = {
    OverlayState.OPEN_EMPTY: (
        "[dim]Type to search blocks and patterns │ "
        "↑↓ Navigate │ Enter Select │ Esc Close[/dim]"
    ),
    OverlayState.OPEN_NO_RESULTS: "[dim]No results found[/dim]",
}


class JumpScreen(ModalScreen):
    """Modal overlay. Opened and closed by the app in response to presenter state."""

    CSS = """
    JumpScreen {
        align: center top;
        padding-top: 3;
    }

    #jump-container {
        width: 100;
        max-width: 100%;
        height: auto;
        background: $surface;
        border: solid $primary;
    }

    #jump-input {
        width: 100%;
        border: none;
        border-bottom: solid $primary-darken-1;
        background: $surface-darken-1;
    }

    #jump-hint {
        height: 1;
        padding: 0 1;
    }

    #jump-panes {
        height: 24;
    }
    """

    BINDINGS = [
        Binding("up", "cursor_up", "Up", show=False),
        Binding("down", "cursor_down", "Down", show=False),
        Binding("ctrl+p", "cursor_up", "Up", show=False),
        Binding("ctrl+n", "cursor_down", "Down", show=False),
        Binding("ctrl+u", "clear_query", "Clear", show=False),
    ]

    def __init__(self, presenter: JumpPresenter, **kwargs):
        super().__init__(**kwargs)
        self.presenter = presenter

    def compose(self) -> ComposeResult:
        with Vertical(id="jump-container"):
            yield Input(placeholder="Search blocks and patterns...", id="jump-input")
            yield Static(id="jump-hint")
            with Horizontal(id="jump-panes"):
                yield JumpResultsView(id="jump-results")
                yield JumpPreviewView(id="jump-preview")

    async def on_mount(self) -> None:
        self.query_one("#jump-input", Input).focus()
        await self.refresh_state()

    def request_render(self) -> None:
        """Schedule a render of the presenter's latest state."""
        if self.is_mounted:
            self.call_later(self.refresh_state)

    async def refresh_state(self) -> None:
        await self.render_state(self.presenter.snapshot())

    async def render_state(self, vm: JumpStateVM) -> None:
        """Render a state snapshot."""
        if not vm.is_open:
            return

        hint = self.query_one("#jump-hint", Static)
        panes = self.query_one("#jump-panes", Horizontal)
        has_results = vm.overlay_state is OverlayState.OPEN_RESULTS

        hint.update(HINTS.get(vm.overlay_state, ""))
        hint.display = not has_results
        panes.display = has_results

        await self.query_one("#jump-results", JumpResultsView).show_results(
            vm.query, vm.results, vm.selected_id
        )
        self.query_one("#jump-preview", JumpPreviewView).show_preview(vm.selected_id, vm.preview)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "jump-input":
            self.presenter.type_query(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in the search box selects the first result if nothing is selected yet."""
        if event.input.id == "jump-input" and self.presenter.selected_entry is None:
            self.presenter.move_selection(0)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, JumpResultItem):
            self.presenter.select(event.item.entry_id)

    def action_cursor_up(self) -> None:
        self.presenter.move_selection(-1)

    def action_cursor_down(self) -> None:
        self.presenter.move_selection(1)

    def action_clear_query(self) -> None:
        self.presenter.clear_query()
        self.query_one("#jump-input", Input).value = ""
