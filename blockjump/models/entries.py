"""
Catalog entry model.

An entry is either a Block or a Pattern. The original data tells them apart
by the presence of an HTML ``content`` body; here the category is an explicit
type decided once when the raw record is converted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from ..config.constants import PLACEHOLDER_DESCRIPTION, PLACEHOLDER_TITLE
from ..exceptions import CatalogError

TEXT_FIELDS = ("title", "description", "name")


class EntryKind(Enum):
    """Categories of catalog entries."""

    BLOCK = "block"
    PATTERN = "pattern"


@dataclass(frozen=True)
class Entry:
    """A searchable catalog item. Use Block or Pattern, not this base."""

    id: str
    title: str | None = None
    description: str | None = None
    name: str | None = None

    kind: ClassVar[EntryKind] = EntryKind.BLOCK

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise CatalogError("Entry id must be a non-empty string", entry_id=repr(self.id))
        for field_name in TEXT_FIELDS:
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                raise CatalogError(
                    f"Entry field '{field_name}' must be a string",
                    entry_id=self.id,
                    got=type(value).__name__,
                )

    @property
    def category_label(self) -> str:
        return self.kind.value.title()

    @property
    def display_title(self) -> str:
        return self.title or PLACEHOLDER_TITLE

    @property
    def display_description(self) -> str:
        return self.description or PLACEHOLDER_DESCRIPTION

    @property
    def body(self) -> str | None:
        """HTML body to preview, if the entry has one."""
        return None


@dataclass(frozen=True)
class Block(Entry):
    """A single editor block (no rendered body)."""

    kind: ClassVar[EntryKind] = EntryKind.BLOCK


@dataclass(frozen=True)
class Pattern(Entry):
    """A block pattern carrying a rendered HTML body."""

    content: str = ""

    kind: ClassVar[EntryKind] = EntryKind.PATTERN

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.content, str) or not self.content:
            raise CatalogError("Pattern content must be a non-empty string", entry_id=self.id)

    @property
    def body(self) -> str | None:
        return self.content


def _coerce_id(raw_id: Any) -> str | None:
    if raw_id is None or raw_id == "":
        return None
    if isinstance(raw_id, bool):
        raise CatalogError("Entry id must be a string", entry_id=repr(raw_id))
    if isinstance(raw_id, int):
        return str(raw_id)
    if isinstance(raw_id, str):
        return raw_id
    raise CatalogError("Entry id must be a string", entry_id=repr(raw_id))


def record_id(record: Mapping[str, Any]) -> str | None:
    """Return the usable id of a raw record, or None when it needs one assigned."""
    return _coerce_id(record.get("id"))


def entry_from_record(record: Mapping[str, Any], entry_id: str | None = None) -> Entry:
    """
    Build a Block or Pattern from a raw catalog record.

    Args:
        record: Raw mapping with optional id/title/description/name/content
        entry_id: Id to use instead of the record's own

    Returns:
        Pattern if the record has non-empty content, otherwise Block

    Raises:
        CatalogError: If the record is not a mapping or a field has the wrong type
    """
    if not isinstance(record, Mapping):
        raise CatalogError("Entry record must be a mapping", got=type(record).__name__)

    resolved_id = entry_id if entry_id is not None else record_id(record)
    if resolved_id is None:
        raise CatalogError("Entry record has no id")

    fields = {name: record.get(name) for name in TEXT_FIELDS}
    content = record.get("content")
    if content is not None and not isinstance(content, str):
        raise CatalogError(
            "Entry field 'content' must be a string",
            entry_id=resolved_id,
            got=type(content).__name__,
        )

    if content:
        return Pattern(id=resolved_id, content=content, **fields)
    return Block(id=resolved_id, **fields)
