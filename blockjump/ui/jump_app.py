"""
JumpApp - the Textual application hosting the jump overlay.

The app owns the session's global key subscription and shows or hides the
JumpScreen whenever the presenter's overlay visibility changes.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from blockjump.catalog import Catalog
from blockjump.config import JumpConfig
from blockjump.search import SearchIndex

from .jump import JumpPresenter, JumpScreen, JumpStateVM, KeyboardTrigger, KeyListenerSet

logger = logging.getLogger(__name__)


def describe_key(key: str) -> str:
    """Human form of a Textual key name: "ctrl+j" -> "CTRL + J"."""
    return " + ".join(part.upper() for part in key.split("+"))


class JumpApp(App[None]):
    """Backdrop screen plus the keyboard-triggered jump overlay."""

    TITLE = "blockjump"
    # ctrl+p / ctrl+n belong to the overlay's cursor bindings
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        align: center middle;
    }

    #backdrop {
        width: auto;
        text-style: bold;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        catalog: Catalog,
        index: SearchIndex,
        config: JumpConfig | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.jump_config = config or JumpConfig()
        self.presenter = JumpPresenter(catalog, index, on_state_update=self._on_state_update)
        self.key_listeners = KeyListenerSet()
        self.trigger = KeyboardTrigger(
            toggle=self.presenter.toggle_overlay,
            close=self.presenter.close,
            is_open=lambda: self.presenter.is_open,
            toggle_keys=self.jump_config.toggle_keys,
            close_keys=self.jump_config.close_keys,
        )
        self._trigger_scope = ExitStack()
        self._jump_screen: JumpScreen | None = None

    def compose(self) -> ComposeResult:
        yield Static(f"Press {describe_key(self.jump_config.toggle_keys[0])}", id="backdrop")

    def on_mount(self) -> None:
        self._trigger_scope.enter_context(self.trigger.installed(self.key_listeners))
        logger.info(f"JumpApp mounted with {len(self.presenter.catalog)} entries")

    def on_unmount(self) -> None:
        self._trigger_scope.close()

    async def on_event(self, event: events.Event) -> None:
        # Global listeners see every key before bindings and the focused widget
        if (
            isinstance(event, events.Key)
            and not event.is_forwarded
            and self.key_listeners.dispatch(event)
        ):
            return
        await super().on_event(event)

    def _on_state_update(self, vm: JumpStateVM) -> None:
        """Keep the overlay screen in step with the presenter."""
        if vm.is_open and self._jump_screen is None:
            self._jump_screen = JumpScreen(self.presenter)
            self.push_screen(self._jump_screen)
        elif not vm.is_open and self._jump_screen is not None:
            screen, self._jump_screen = self._jump_screen, None
            self._dismiss_jump_screen(screen)
        elif self._jump_screen is not None:
            self._jump_screen.request_render()

    def _dismiss_jump_screen(self, screen: JumpScreen) -> None:
        """Pop the overlay together with any screen stacked above it."""
        while screen in self.screen_stack and len(self.screen_stack) > 1:
            popped = self.screen
            self.pop_screen()
            if popped is not screen:
                logger.debug(f"Popped {type(popped).__name__} above the jump overlay")
