"""Directory catalog primitives.

This package contains the non-UI listing layer:
- entry and listing datatypes
- canonicalization and enumeration of immediate directory children
- name filtering used by search boxes
"""

from __future__ import annotations

from .types import CatalogEntry, DirectoryListing
from .fs import canonicalize, entry_for, filter_entries, is_representable_name, load_directory

__all__ = [
    "CatalogEntry",
    "DirectoryListing",
    "canonicalize",
    "entry_for",
    "filter_entries",
    "is_representable_name",
    "load_directory",
]
