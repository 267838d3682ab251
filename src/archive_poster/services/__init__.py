"""Services layer - image encoding, settings and external integrations."""

from archive_poster.services.image_encoder import EncodeResult, ImageEncoder
from archive_poster.services.settings_manager import SettingsManager

# Posting services
from archive_poster.services.posting import (
    BlueskyPostingService,
    DryRunPostingService,
    PostingService,
    PostRequest,
    PostResult,
)

__all__ = [
    "ImageEncoder",
    "EncodeResult",
    "SettingsManager",
    "PostingService",
    "PostRequest",
    "PostResult",
    "DryRunPostingService",
    "BlueskyPostingService",
]
