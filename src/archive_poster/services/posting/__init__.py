"""Posting services - abstract interface, Bluesky and dry-run implementations."""

from archive_poster.services.posting.posting_service import (
    DryRunPostingService,
    PostingService,
    PostRequest,
    PostResult,
)
from archive_poster.services.posting.bluesky_posting_service import BlueskyPostingService

__all__ = [
    "PostingService",
    "PostRequest",
    "PostResult",
    "DryRunPostingService",
    "BlueskyPostingService",
]
