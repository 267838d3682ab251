"""Domain layer - Pure entities and the cursor state machine."""

from .archive_index import ArchiveIndex, PostMetadata, SequenceFlags
from .cursor_state_machine import advance
from .encoder_config import EncoderConfig
from .errors import (
    ArchivePosterError,
    CatalogMismatchError,
    ConfigurationError,
    CursorAdvanceError,
    CursorStoreError,
    DirectoryReadError,
    ImageDecodeError,
    IndexOutOfBounds,
    PostingError,
    SizeBudgetUnmet,
)
from .loaded_image import AspectRatio, LabeledPage, LoadedImage
from .series_catalog import SeriesCatalog

__all__ = [
    "ArchiveIndex",
    "SequenceFlags",
    "PostMetadata",
    "advance",
    "EncoderConfig",
    "AspectRatio",
    "LoadedImage",
    "LabeledPage",
    "SeriesCatalog",
    "ArchivePosterError",
    "ConfigurationError",
    "DirectoryReadError",
    "IndexOutOfBounds",
    "CatalogMismatchError",
    "ImageDecodeError",
    "CursorStoreError",
    "CursorAdvanceError",
    "PostingError",
    "SizeBudgetUnmet",
]
