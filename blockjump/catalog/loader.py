"""
Catalog loading.

Merges the block list and the pattern list into one ordered, id-addressable
Catalog. Records without an id get a freshly generated one.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

from ..config.constants import DEFAULT_BLOCKS_PATH, DEFAULT_PATTERNS_PATH
from ..exceptions import CatalogError
from ..models.entries import Entry, EntryKind, entry_from_record, record_id

logger = logging.getLogger(__name__)


def new_entry_id() -> str:
    """Generate a fresh entry id."""
    return str(uuid.uuid4())


class Catalog:
    """Immutable, ordered collection of entries with unique ids."""

    def __init__(self, entries: Iterable[Entry]):
        self._entries: tuple[Entry, ...] = tuple(entries)
        self._by_id: dict[str, Entry] = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise CatalogError("Duplicate entry id", entry_id=entry.id)
            self._by_id[entry.id] = entry

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._by_id

    def __repr__(self) -> str:
        return f"Catalog(blocks={len(self.blocks)}, patterns={len(self.patterns)})"

    @property
    def ids(self) -> list[str]:
        return [entry.id for entry in self._entries]

    @property
    def blocks(self) -> list[Entry]:
        return [e for e in self._entries if e.kind is EntryKind.BLOCK]

    @property
    def patterns(self) -> list[Entry]:
        return [e for e in self._entries if e.kind is EntryKind.PATTERN]

    def get(self, entry_id: str | None) -> Entry | None:
        """Look up an entry; unknown or empty ids resolve to None."""
        if not entry_id:
            return None
        return self._by_id.get(entry_id)


def load_catalog(
    blocks: Sequence[Mapping[str, Any]],
    patterns: Sequence[Mapping[str, Any]],
    *,
    id_factory: Callable[[], str] = new_entry_id,
) -> Catalog:
    """
    Merge raw block and pattern records into a Catalog.

    Blocks come first, then patterns, each in source order. Records are
    copied before an id is assigned so the caller's data is left untouched.

    Args:
        blocks: Raw block records
        patterns: Raw pattern records
        id_factory: Produces ids for records that lack one

    Returns:
        Catalog with a unique, non-empty id on every entry

    Raises:
        CatalogError: If a record is malformed or two records share an explicit id
    """
    records = [dict(_as_mapping(r, i)) for i, r in enumerate([*blocks, *patterns])]

    # Reserve explicit ids first so generated ones can never shadow them
    taken: set[str] = set()
    explicit: list[str | None] = []
    for record in records:
        rid = record_id(record)
        if rid is not None:
            if rid in taken:
                raise CatalogError("Duplicate entry id in source data", entry_id=rid)
            taken.add(rid)
        explicit.append(rid)

    entries: list[Entry] = []
    generated = 0
    for record, rid in zip(records, explicit):
        if rid is None:
            rid = id_factory()
            while not rid or rid in taken:
                logger.debug(f"Generated id {rid!r} collides, drawing another")
                rid = id_factory()
            taken.add(rid)
            record["id"] = rid
            generated += 1
        entries.append(entry_from_record(record, rid))

    catalog = Catalog(entries)
    logger.info(
        f"Loaded catalog: {len(blocks)} blocks, {len(patterns)} patterns, "
        f"{generated} generated ids"
    )
    return catalog


def _as_mapping(record: Any, index: int) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise CatalogError(
            "Entry record must be a mapping", index=index, got=type(record).__name__
        )
    return record


def read_entry_records(path: Path) -> list[dict[str, Any]]:
    """
    Read a JSON array of raw entry records.

    Raises:
        CatalogError: If the file is missing, unreadable or not a JSON array
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogError("Catalog file not found", path=str(path)) from e
    except json.JSONDecodeError as e:
        raise CatalogError("Catalog file is not valid JSON", path=str(path), line=e.lineno) from e
    except OSError as e:
        raise CatalogError("Catalog file could not be read", path=str(path)) from e

    if not isinstance(data, list):
        raise CatalogError("Catalog file must contain a JSON array", path=str(path))
    return data


def load_catalog_files(
    blocks_path: Path | None = None,
    patterns_path: Path | None = None,
) -> Catalog:
    """Load a Catalog from JSON files, falling back to the bundled sample data."""
    blocks_path = blocks_path or DEFAULT_BLOCKS_PATH
    patterns_path = patterns_path or DEFAULT_PATTERNS_PATH
    logger.debug(f"Reading catalog from {blocks_path} and {patterns_path}")
    return load_catalog(read_entry_records(blocks_path), read_entry_records(patterns_path))
