"""
Jump overlay - keyboard-triggered fuzzy search over blocks and patterns.

Provides:
- JumpPresenter: selection state machine (query, selected entry, visibility)
- JumpScreen: modal overlay with result list and preview pane
- KeyboardTrigger: global toggle/close key handling
"""

from .jump_presenter import (
    JumpPresenter,
    JumpStateVM,
    OverlayState,
    PreviewVM,
    SelectionState,
    build_preview,
)
from .jump_screen import JumpScreen
from .keyboard import KeyboardTrigger, KeyListenerSet

__all__ = [
    "JumpPresenter",
    "JumpScreen",
    "JumpStateVM",
    "KeyListenerSet",
    "KeyboardTrigger",
    "OverlayState",
    "PreviewVM",
    "SelectionState",
    "build_preview",
]
