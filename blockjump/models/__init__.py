"""Data models for blockjump."""

from .entries import Block, Entry, EntryKind, Pattern, entry_from_record

__all__ = ["Block", "Entry", "EntryKind", "Pattern", "entry_from_record"]
