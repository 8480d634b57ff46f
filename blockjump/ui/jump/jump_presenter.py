"""
Presenter for the jump overlay.

Owns the session's selection state (query, selected entry id, overlay
visibility) and derives everything the views render from it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from blockjump.catalog import Catalog
from blockjump.models.entries import Entry
from blockjump.search import SearchIndex, SearchResult

logger = logging.getLogger(__name__)


class OverlayState(Enum):
    """Where the overlay currently is."""

    CLOSED = "closed"
    OPEN_EMPTY = "open_empty"  # Open, no query typed
    OPEN_RESULTS = "open_results"  # Query matched at least one entry
    OPEN_NO_RESULTS = "open_no_results"  # Query matched nothing


@dataclass
class SelectionState:
    """Mutable session state. Only the presenter writes to it."""

    query: str = ""
    selected_id: str = ""
    overlay_open: bool = False


@dataclass(frozen=True)
class PreviewVM:
    """What the preview pane shows for one entry."""

    entry_id: str
    label: str  # "Block" or "Pattern"
    title: str
    description: str
    body: str | None = None


@dataclass(frozen=True)
class JumpStateVM:
    """Snapshot of everything the overlay renders."""

    overlay_state: OverlayState
    query: str = ""
    results: tuple[SearchResult, ...] = ()
    selected_id: str = ""
    preview: PreviewVM | None = None

    @property
    def is_open(self) -> bool:
        return self.overlay_state is not OverlayState.CLOSED


def build_preview(entry: Entry | None) -> PreviewVM | None:
    """Preview model for an entry; None renders as an empty pane."""
    if entry is None:
        return None
    return PreviewVM(
        entry_id=entry.id,
        label=entry.category_label,
        title=entry.display_title,
        description=entry.display_description,
        body=entry.body,
    )


class JumpPresenter:
    """
    Handles jump overlay business logic.

    Transitions:
    - toggle_overlay: CLOSED <-> OPEN_*
    - type_query: moves between OPEN_EMPTY / OPEN_RESULTS / OPEN_NO_RESULTS
    - close: forces CLOSED and clears the query, keeps the selection
    - select: changes the selected entry, nothing else
    """

    def __init__(
        self,
        catalog: Catalog,
        index: SearchIndex,
        on_state_update: Callable[[JumpStateVM], None] | None = None,
    ):
        self.catalog = catalog
        self.index = index
        self.on_state_update = on_state_update
        self._state = SelectionState()
        self._results: list[SearchResult] = []

    @property
    def state(self) -> SelectionState:
        """Get current state."""
        return self._state

    @property
    def results(self) -> list[SearchResult]:
        """Ranked results for the current query."""
        return list(self._results)

    @property
    def overlay_state(self) -> OverlayState:
        if not self._state.overlay_open:
            return OverlayState.CLOSED
        if not self._state.query.strip():
            return OverlayState.OPEN_EMPTY
        if self._results:
            return OverlayState.OPEN_RESULTS
        return OverlayState.OPEN_NO_RESULTS

    @property
    def is_open(self) -> bool:
        return self._state.overlay_open

    @property
    def selected_entry(self) -> Entry | None:
        """The selected entry, or None if nothing (or an unknown id) is selected."""
        return self.catalog.get(self._state.selected_id)

    @property
    def preview(self) -> PreviewVM | None:
        return build_preview(self.selected_entry)

    def snapshot(self) -> JumpStateVM:
        """Immutable view of the current state."""
        results = tuple(self._results)
        return JumpStateVM(
            overlay_state=self.overlay_state,
            query=self._state.query,
            results=results,
            selected_id=self._state.selected_id,
            preview=self.preview,
        )

    def _notify_update(self) -> None:
        """Notify listeners of state change."""
        if self.on_state_update:
            self.on_state_update(self.snapshot())

    def _set_query(self, text: str) -> None:
        self._state.query = text
        self._results = self.index.query(text)

    def toggle_overlay(self) -> None:
        """Open a closed overlay, or close an open one."""
        if self._state.overlay_open:
            self.close()
            return
        self._state.overlay_open = True
        logger.debug("Overlay opened")
        self._notify_update()

    def close(self) -> None:
        """Force the overlay closed. The query resets; the selection survives."""
        self._state.overlay_open = False
        self._set_query("")
        logger.debug(f"Overlay closed (selected_id={self._state.selected_id!r})")
        self._notify_update()

    def type_query(self, text: str) -> None:
        """Replace the query and re-rank."""
        if not self._state.overlay_open:
            logger.debug(f"Ignoring query {text!r} while overlay is closed")
            return
        if text == self._state.query:
            return
        self._set_query(text)
        logger.debug(f"Query {text!r} -> {len(self._results)} results")
        self._notify_update()

    def clear_query(self) -> None:
        """Reset the search input."""
        self.type_query("")

    def select(self, entry_id: str) -> None:
        """Select an entry by id. Unknown ids are kept and simply preview nothing."""
        if not self._state.overlay_open:
            logger.debug(f"Ignoring selection {entry_id!r} while overlay is closed")
            return
        self._state.selected_id = entry_id
        if entry_id not in self.catalog:
            logger.debug(f"Selected id {entry_id!r} is not in the catalog")
        self._notify_update()

    def move_selection(self, delta: int) -> None:
        """Select the result `delta` rows away from the current one."""
        if not self._results:
            return

        ids = [r.entry.id for r in self._results]
        if self._state.selected_id in ids:
            new_index = ids.index(self._state.selected_id) + delta
            new_index = max(0, min(new_index, len(ids) - 1))
        else:
            new_index = 0
        self.select(ids[new_index])
