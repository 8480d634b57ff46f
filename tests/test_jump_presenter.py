"""Tests for the jump overlay selection state machine."""

from unittest.mock import MagicMock

from blockjump.ui.jump import JumpPresenter, JumpStateVM, OverlayState, build_preview


class TestInitialState:
    """A fresh session."""

    def test_starts_closed_and_empty(self, presenter) -> None:
        """A new presenter is closed with nothing typed or selected."""
        assert presenter.overlay_state is OverlayState.CLOSED
        assert presenter.state.query == ""
        assert presenter.state.selected_id == ""
        assert presenter.results == []
        assert presenter.selected_entry is None
        assert presenter.preview is None


class TestToggle:
    """toggle_overlay transitions."""

    def test_toggle_opens_empty(self, presenter) -> None:
        """Toggling a closed overlay opens it empty."""
        presenter.toggle_overlay()
        assert presenter.overlay_state is OverlayState.OPEN_EMPTY

    def test_toggle_twice_closes(self, presenter) -> None:
        """Toggling twice closes again."""
        presenter.toggle_overlay()
        presenter.toggle_overlay()
        assert presenter.overlay_state is OverlayState.CLOSED

    def test_toggle_close_clears_query(self, open_presenter) -> None:
        """Closing through toggle clears the query."""
        open_presenter.type_query("Hero")
        open_presenter.toggle_overlay()
        assert open_presenter.state.query == ""
        assert open_presenter.results == []


class TestTypeQuery:
    """type_query moves between the open states."""

    def test_results_state(self, open_presenter) -> None:
        """A matching query moves to OPEN_RESULTS."""
        open_presenter.type_query("Hero")
        assert open_presenter.overlay_state is OverlayState.OPEN_RESULTS
        assert {r.entry.id for r in open_presenter.results} == {"a", "b"}

    def test_no_results_state(self, open_presenter) -> None:
        """A query with no matches moves to OPEN_NO_RESULTS."""
        open_presenter.type_query("zzqx")
        assert open_presenter.overlay_state is OverlayState.OPEN_NO_RESULTS

    def test_back_to_empty(self, open_presenter) -> None:
        """A blank query returns to OPEN_EMPTY."""
        open_presenter.type_query("Hero")
        open_presenter.type_query("   ")
        assert open_presenter.overlay_state is OverlayState.OPEN_EMPTY
        assert open_presenter.results == []

    def test_ignored_while_closed(self, presenter) -> None:
        """Typing while closed changes nothing."""
        presenter.type_query("Hero")
        assert presenter.state.query == ""
        assert presenter.overlay_state is OverlayState.CLOSED

    def test_clear_query(self, open_presenter) -> None:
        """clear_query returns to OPEN_EMPTY."""
        open_presenter.type_query("Hero")
        open_presenter.clear_query()
        assert open_presenter.overlay_state is OverlayState.OPEN_EMPTY


class TestSelection:
    """select / close interplay."""

    def test_selection_survives_query_change(self, open_presenter) -> None:
        """Changing the query keeps the selection."""
        open_presenter.select("b")
        open_presenter.type_query("anything")
        assert open_presenter.state.selected_id == "b"

    def test_close_resets_query_only(self, open_presenter) -> None:
        """close clears the query and keeps the selection."""
        open_presenter.type_query("Hero")
        open_presenter.select("b")
        open_presenter.close()
        assert open_presenter.overlay_state is OverlayState.CLOSED
        assert open_presenter.state.query == ""
        assert open_presenter.state.selected_id == "b"

    def test_selection_kept_across_reopen(self, open_presenter) -> None:
        """The selection is still there after re-opening."""
        open_presenter.select("a")
        open_presenter.close()
        open_presenter.toggle_overlay()
        assert open_presenter.selected_entry.id == "a"

    def test_select_does_not_change_query_or_visibility(self, open_presenter) -> None:
        """select leaves the query and overlay alone."""
        open_presenter.type_query("Hero")
        open_presenter.select("a")
        assert open_presenter.state.query == "Hero"
        assert open_presenter.overlay_state is OverlayState.OPEN_RESULTS

    def test_unknown_id_previews_nothing(self, open_presenter) -> None:
        """An unknown selected id previews nothing."""
        open_presenter.select("does-not-exist")
        assert open_presenter.state.selected_id == "does-not-exist"
        assert open_presenter.selected_entry is None
        assert open_presenter.preview is None

    def test_select_ignored_while_closed(self, presenter) -> None:
        """Selecting while closed changes nothing."""
        presenter.select("a")
        assert presenter.state.selected_id == ""


class TestMoveSelection:
    """Keyboard navigation through the result list."""

    def test_first_move_selects_top_result(self, open_presenter) -> None:
        """The first move selects the top result."""
        open_presenter.type_query("Hero")
        open_presenter.move_selection(1)
        assert open_presenter.state.selected_id == open_presenter.results[0].entry.id

    def test_moves_and_clamps(self, open_presenter) -> None:
        """Moves step through results and clamp at both ends."""
        open_presenter.type_query("Hero")
        top, second = (r.entry.id for r in open_presenter.results)
        open_presenter.select(top)
        open_presenter.move_selection(1)
        assert open_presenter.state.selected_id == second
        open_presenter.move_selection(5)
        assert open_presenter.state.selected_id == second
        open_presenter.move_selection(-5)
        assert open_presenter.state.selected_id == top

    def test_no_results_is_noop(self, open_presenter) -> None:
        """Moving with no results keeps the selection."""
        open_presenter.select("a")
        open_presenter.move_selection(1)
        assert open_presenter.state.selected_id == "a"


class TestNotifications:
    """Listeners receive a snapshot after every change."""

    def test_callback_gets_snapshots(self, hero_catalog, hero_index) -> None:
        """Each mutation sends one state snapshot."""
        callback = MagicMock()
        presenter = JumpPresenter(hero_catalog, hero_index, on_state_update=callback)

        presenter.toggle_overlay()
        presenter.type_query("Hero")
        presenter.select("b")
        presenter.close()

        assert callback.call_count == 4
        states = [c.args[0] for c in callback.call_args_list]
        assert all(isinstance(s, JumpStateVM) for s in states)
        assert [s.overlay_state for s in states] == [
            OverlayState.OPEN_EMPTY,
            OverlayState.OPEN_RESULTS,
            OverlayState.OPEN_RESULTS,
            OverlayState.CLOSED,
        ]
        assert states[2].preview.label == "Pattern"
        assert states[3].selected_id == "b"

    def test_unchanged_query_does_not_notify(self, hero_catalog, hero_index) -> None:
        """Typing the same query again sends nothing."""
        callback = MagicMock()
        presenter = JumpPresenter(hero_catalog, hero_index, on_state_update=callback)
        presenter.toggle_overlay()
        presenter.type_query("Hero")
        presenter.type_query("Hero")
        assert callback.call_count == 2


class TestEndToEnd:
    """Search, select and preview a block and a pattern."""

    def test_hero_scenario(self, open_presenter) -> None:
        """Search, then preview a pattern and a block."""
        open_presenter.type_query("Hero")
        results = open_presenter.results
        assert {r.entry.id for r in results} == {"a", "b"}
        assert [r.score for r in results] == sorted(r.score for r in results)

        open_presenter.select("b")
        preview = open_presenter.preview
        assert preview.label == "Pattern"
        assert preview.title == "Hero Pattern"
        assert preview.body == "<p>x</p>"

        open_presenter.select("a")
        preview = open_presenter.preview
        assert preview.label == "Block"
        assert preview.body is None

    def test_build_preview_placeholders(self, hero_catalog) -> None:
        """Previews use placeholders and None previews nothing."""
        preview = build_preview(hero_catalog.get("a"))
        assert preview.description == "Description"
        assert build_preview(None) is None
