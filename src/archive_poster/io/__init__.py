"""I/O layer - Read-only archive access and cursor persistence."""

from .archive_navigator import ArchiveNavigator
from .catalog_loader import load_series_catalog
from .cursor_store import CursorStore
from .path_scanner import EntryKind, list_sorted

__all__ = ["ArchiveNavigator", "CursorStore", "EntryKind", "list_sorted", "load_series_catalog"]
