"""Fuzzy search over the entry catalog."""

from .index import IndexRecord, SearchIndex, SearchResult, query

__all__ = ["IndexRecord", "SearchIndex", "SearchResult", "query"]
