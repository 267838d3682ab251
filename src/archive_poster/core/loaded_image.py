"""Loaded image entities - encoded bytes ready to hand to the poster."""

from dataclasses import dataclass
from pathlib import Path

from .archive_index import PostMetadata, SequenceFlags


@dataclass(frozen=True)
class AspectRatio:
    width: int
    height: int


@dataclass(frozen=True)
class LoadedImage:
    """Encoded image bytes plus the source aspect ratio."""

    encoded_bytes: bytes
    aspect_ratio: AspectRatio
    mime_type: str = "image/jpeg"

    @property
    def size(self) -> int:
        return len(self.encoded_bytes)


@dataclass(frozen=True)
class LabeledPage:
    """A loaded page together with its display labels and carry flags."""

    file_path: Path
    image: LoadedImage
    metadata: PostMetadata
    flags: SequenceFlags
