"""Catalog loading: raw block/pattern records to an immutable Catalog."""

from .loader import Catalog, load_catalog, load_catalog_files, new_entry_id, read_entry_records

__all__ = [
    "Catalog",
    "load_catalog",
    "load_catalog_files",
    "new_entry_id",
    "read_entry_records",
]
