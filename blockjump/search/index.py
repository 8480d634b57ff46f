"""
Fuzzy search index over the catalog.

Only a reduced projection of each entry (title, id, description, name) is
indexed; pattern bodies never take part in matching.

Scoring follows the command registry's approach: an exact substring hit
scores 0.9 plus a bonus for how much of the field it covers, anything else
falls back to a fuzzy ratio capped below substring hits. Each field score is
multiplied by the field weight and the best weighted field wins. Results
expose ``score = 1 - relevance`` so lower means better.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from rapidfuzz import fuzz

from ..config.constants import (
    DEFAULT_SCORE_THRESHOLD,
    FIELD_WEIGHTS,
    FUZZY_SCORE_CAP,
    SUBSTRING_BASE_SCORE,
    SUBSTRING_LENGTH_BONUS,
)
from ..exceptions import SearchIndexError
from ..models.entries import Entry

logger = logging.getLogger(__name__)

INDEXED_FIELDS = ("title", "description", "name")


@dataclass(frozen=True)
class IndexRecord:
    """The searchable projection of an entry."""

    title: str | None
    id: str
    description: str | None
    name: str | None

    @classmethod
    def from_entry(cls, entry: Entry) -> IndexRecord:
        return cls(
            title=entry.title,
            id=entry.id,
            description=entry.description,
            name=entry.name,
        )


@dataclass(frozen=True)
class SearchResult:
    """A ranked match."""

    entry: Entry
    score: float  # 0 = perfect match, 1 = no match
    rank: int  # Position in the result list, best first


def field_relevance(query: str, value: str) -> float:
    """
    Similarity of a lowercased query to one field value, 0-1.

    Args:
        query: Lowercased, stripped query
        value: Raw field value

    Returns:
        Relevance where substring hits always beat fuzzy hits
    """
    value_lower = value.lower()
    if not value_lower:
        return 0.0
    if query in value_lower:
        return SUBSTRING_BASE_SCORE + SUBSTRING_LENGTH_BONUS * (len(query) / len(value_lower))
    similarity = fuzz.partial_ratio(query, value_lower) / 100
    # partial_ratio aligns the shorter string, so a short field scores 100
    # inside any longer query; scale by how much of the query it covers
    if len(query) > len(value_lower):
        similarity *= len(value_lower) / len(query)
    return FUZZY_SCORE_CAP * similarity


class SearchIndex:
    """Read-only fuzzy index. Build once with SearchIndex.build()."""

    def __init__(
        self,
        entries: tuple[Entry, ...],
        records: tuple[IndexRecord, ...],
        threshold: float = DEFAULT_SCORE_THRESHOLD,
    ):
        self._entries = entries
        self._records = records
        self.threshold = threshold

    @classmethod
    def build(
        cls,
        entries: Iterable[Entry],
        threshold: float = DEFAULT_SCORE_THRESHOLD,
    ) -> SearchIndex:
        """
        Build an index over catalog entries.

        Raises:
            SearchIndexError: If an element is not an Entry or ids repeat
        """
        if not 0 <= threshold <= 1:
            raise SearchIndexError("Score threshold must be between 0 and 1", threshold=threshold)

        kept: list[Entry] = []
        seen: set[str] = set()
        for position, entry in enumerate(entries):
            if not isinstance(entry, Entry):
                raise SearchIndexError(
                    "Cannot index a non-entry", position=position, got=type(entry).__name__
                )
            if entry.id in seen:
                raise SearchIndexError("Duplicate entry id", entry_id=entry.id)
            seen.add(entry.id)
            kept.append(entry)

        records = tuple(IndexRecord.from_entry(e) for e in kept)
        logger.debug(f"Built search index over {len(records)} entries")
        return cls(tuple(kept), records, threshold)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[IndexRecord, ...]:
        return self._records

    def _relevance(self, query: str, record: IndexRecord) -> float:
        best = 0.0
        for field_name in INDEXED_FIELDS:
            value = getattr(record, field_name)
            if not value:
                continue
            best = max(best, FIELD_WEIGHTS[field_name] * field_relevance(query, value))
        return best

    def query(self, text: str, limit: int | None = None) -> list[SearchResult]:
        """
        Rank entries against a query.

        Args:
            text: Raw query; empty or whitespace-only yields no results
            limit: Max results to return (None for all)

        Returns:
            Results ordered best first, ties kept in catalog order
        """
        needle = text.strip().lower() if text else ""
        if not needle:
            return []

        scored: list[tuple[float, int]] = []
        for position, record in enumerate(self._records):
            score = 1.0 - self._relevance(needle, record)
            if score <= self.threshold:
                scored.append((max(score, 0.0), position))

        # Stable: equal scores keep catalog order
        scored.sort(key=lambda s: s[0])
        if limit is not None:
            scored = scored[:limit]

        return [
            SearchResult(entry=self._entries[position], score=score, rank=rank)
            for rank, (score, position) in enumerate(scored)
        ]


def query(index: SearchIndex, text: str, limit: int | None = None) -> list[SearchResult]:
    """Run a query against an index. See SearchIndex.query."""
    return index.query(text, limit=limit)
