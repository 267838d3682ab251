"""
Archive Poster - posts an image archive one page at a time.

This package walks a series/volume/page image archive with a persistent
cursor:
- Deterministic, sorted archive traversal with wraparound
- Re-encoding pages to fit an upload size budget
- Alt text derived from series, volume and page
- Posting to Bluesky
"""

__version__ = "0.1.0"

# Make key components available at package level
from archive_poster.core import ArchiveIndex, SequenceFlags, PostMetadata, advance
from archive_poster.io import ArchiveNavigator, CursorStore

__all__ = [
    "ArchiveIndex",
    "SequenceFlags",
    "PostMetadata",
    "advance",
    "ArchiveNavigator",
    "CursorStore",
]
