"""
Result list and preview pane widgets for the jump overlay.

Both panes keep track of what they last rendered so scroll position only
resets when the input that drives them changes: the query for the list,
the selected id for the preview.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.syntax import Syntax
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import ListItem, ListView, Static

from blockjump.search import SearchResult
from blockjump.utils.output import initials

from .jump_presenter import PreviewVM

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 40


class JumpResultItem(ListItem):
    """One row: avatar initials + title."""

    DEFAULT_CSS = """
    JumpResultItem {
        height: 1;
        padding: 0 1;
    }

    JumpResultItem.-selected {
        background: $accent;
        text-style: bold;
    }
    """

    def __init__(self, result: SearchResult, **kwargs):
        super().__init__(**kwargs)
        self.result = result
        self.entry_id = result.entry.id

    def compose(self) -> ComposeResult:
        title = self.result.entry.display_title
        if len(title) > MAX_TITLE_LENGTH:
            title = title[: MAX_TITLE_LENGTH - 3] + "..."
        yield Static(
            Text.assemble((f" {initials(title)} ", "reverse"), "  ", (title, "bold"))
        )


class JumpResultsView(ListView):
    """Ranked result list. Enter or click selects the row's entry."""

    DEFAULT_CSS = """
    JumpResultsView {
        width: 40%;
        max-width: 36;
        height: 100%;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.rendered_query: str | None = None

    @property
    def rows(self) -> list[JumpResultItem]:
        return list(self.query(JumpResultItem))

    async def show_results(
        self, query: str, results: Sequence[SearchResult], selected_id: str
    ) -> None:
        """Render results for a query; rows are only rebuilt when the query changed."""
        if query != self.rendered_query:
            self.rendered_query = query
            await self.clear()
            await self.extend([JumpResultItem(r) for r in results])
            self.scroll_home(animate=False)
        self.mark_selected(selected_id)

    def mark_selected(self, selected_id: str) -> None:
        for position, row in enumerate(self.rows):
            is_selected = row.entry_id == selected_id
            row.set_class(is_selected, "-selected")
            if is_selected and self.index != position:
                self.index = position


class JumpPreviewView(VerticalScroll):
    """Detail pane for the selected entry."""

    DEFAULT_CSS = """
    JumpPreviewView {
        width: 1fr;
        height: 100%;
        border-left: solid $primary-darken-1;
        padding: 0 2;
    }

    #preview-badge {
        width: auto;
        background: $primary;
        padding: 0 1;
    }

    #preview-title {
        text-style: bold;
        margin-top: 1;
    }

    #preview-description {
        color: $text-muted;
    }

    #preview-body {
        margin-top: 1;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.preview: PreviewVM | None = None
        self.rendered_id: str | None = None

    def compose(self) -> ComposeResult:
        yield Static(id="preview-badge")
        yield Static(id="preview-title")
        yield Static(id="preview-description")
        yield Static(id="preview-body")

    def show_preview(self, selected_id: str, preview: PreviewVM | None) -> None:
        """Render the preview; scroll resets whenever the selected id changes."""
        self.preview = preview
        badge = self.query_one("#preview-badge", Static)
        title = self.query_one("#preview-title", Static)
        description = self.query_one("#preview-description", Static)
        body = self.query_one("#preview-body", Static)

        if preview is None:
            for widget in (badge, title, description, body):
                widget.update("")
                widget.display = False
        else:
            badge.update(Text(preview.label))
            title.update(Text(preview.title))
            description.update(Text(preview.description))
            for widget in (badge, title, description):
                widget.display = True
            if preview.body:
                body.update(Syntax(preview.body, "html", word_wrap=True))
                body.display = True
            else:
                body.update("")
                body.display = False

        if selected_id != self.rendered_id:
            self.rendered_id = selected_id
            self.scroll_home(animate=False)
