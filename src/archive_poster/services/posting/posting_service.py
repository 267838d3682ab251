"""Posting Service - hands one encoded page to a remote service."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Tuple

from archive_poster.core import AspectRatio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostRequest:
    """Everything the remote service needs to publish one page."""

    encoded_bytes: bytes
    mime_type: str
    alt_text: str
    aspect_ratio: AspectRatio
    text: str = ""
    labels: Tuple[str, ...] = field(default_factory=tuple)


@dataclass
class PostResult:
    """Result of a post request."""

    uri: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if posting failed."""
        return self.error is not None


class PostingService(ABC):
    """
    Abstract service for publishing an image post.

    Implementations must not retry and must report failures through
    PostResult.error instead of raising.
    """

    @abstractmethod
    def post(self, request: PostRequest) -> PostResult:
        """
        Publish one image.

        Args:
            request: Encoded image, alt text and aspect ratio.

        Returns:
            PostResult with the post URI or an error message.
        """
        pass


class DryRunPostingService(PostingService):
    """Logs the request instead of publishing it."""

    def post(self, request: PostRequest) -> PostResult:
        logger.info(
            "[dry run] would post %d bytes (%s, %dx%d) alt=%r labels=%s",
            len(request.encoded_bytes),
            request.mime_type,
            request.aspect_ratio.width,
            request.aspect_ratio.height,
            request.alt_text,
            list(request.labels),
        )
        return PostResult(uri="dry-run")
