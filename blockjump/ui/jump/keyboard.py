"""
Global keyboard trigger for the jump overlay.

The app owns one KeyListenerSet and offers it every key event before normal
Textual routing. A KeyboardTrigger subscribes to that set for as long as the
`installed()` context is held, so a remount never leaves a stale handler
behind.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from textual import events

from blockjump.config.constants import DEFAULT_CLOSE_KEYS, DEFAULT_TOGGLE_KEYS
from blockjump.utils.logging_utils import KEY_EVENTS_LOGGER

logger = logging.getLogger(__name__)
key_logger = logging.getLogger(KEY_EVENTS_LOGGER)

KeyListener = Callable[[events.Key], bool]


class KeyListenerSet:
    """Subscribers to global key events. A listener returns True when it handled the key."""

    def __init__(self) -> None:
        self._listeners: list[KeyListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners

    def add(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            raise ValueError("Key listener is already installed")
        self._listeners.append(listener)

    def remove(self, listener: KeyListener) -> None:
        self._listeners.remove(listener)

    def dispatch(self, event: events.Key) -> bool:
        """Offer an event to each listener in turn; stop at the first that handles it."""
        for listener in list(self._listeners):
            if listener(event):
                return True
        return False


class KeyboardTrigger:
    """Maps key combinations to overlay toggle / close."""

    def __init__(
        self,
        toggle: Callable[[], None],
        close: Callable[[], None],
        is_open: Callable[[], bool],
        toggle_keys: Iterable[str] = DEFAULT_TOGGLE_KEYS,
        close_keys: Iterable[str] = DEFAULT_CLOSE_KEYS,
    ):
        self._toggle = toggle
        self._close = close
        self._is_open = is_open
        self.toggle_keys = frozenset(toggle_keys)
        self.close_keys = frozenset(close_keys)

    def __call__(self, event: events.Key) -> bool:
        key = event.key
        if key in self.toggle_keys:
            key_logger.debug(f"{key}: toggle overlay")
            self._toggle()
        elif key in self.close_keys and self._is_open():
            key_logger.debug(f"{key}: close overlay")
            self._close()
        else:
            return False

        # Handled here, so nothing else (bindings, focused input) sees it
        event.prevent_default()
        event.stop()
        return True

    @contextmanager
    def installed(self, listeners: KeyListenerSet) -> Iterator[KeyboardTrigger]:
        """Subscribe to `listeners` for the duration of the block."""
        listeners.add(self)
        logger.debug(f"Keyboard trigger installed (toggle={sorted(self.toggle_keys)})")
        try:
            yield self
        finally:
            listeners.remove(self)
            logger.debug("Keyboard trigger removed")
