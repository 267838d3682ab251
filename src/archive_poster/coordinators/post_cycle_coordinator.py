"""Post Cycle Coordinator - runs one load/post/advance/save cycle."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from archive_poster.core import (
    ArchiveIndex,
    CursorAdvanceError,
    CursorStoreError,
    LabeledPage,
    PostingError,
    advance,
)
from archive_poster.io import ArchiveNavigator, CursorStore
from archive_poster.services import ImageEncoder, PostingService, PostRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CycleResult:
    """What one run posted and where the cursor moved."""

    posted_index: ArchiveIndex
    next_index: ArchiveIndex
    page: LabeledPage
    post_uri: Optional[str]
    saved: bool


class PostCycleCoordinator:
    """
    Owns the single cycle a process performs before exiting.
    Every failure propagates; the cursor moves only after a successful post.
    """

    def __init__(
        self,
        cursor_store: CursorStore,
        navigator: ArchiveNavigator,
        encoder: ImageEncoder,
        posting_service: PostingService,
        labels: Tuple[str, ...] = (),
        dry_run: bool = False,
    ):
        self.cursor_store = cursor_store
        self.navigator = navigator
        self.encoder = encoder
        self.posting_service = posting_service
        self.labels = tuple(labels)
        self.dry_run = dry_run

    def run_once(self) -> CycleResult:
        """
        Post the page at the stored cursor and persist the next cursor.

        Raises:
            CursorStoreError: If the cursor cannot be loaded.
            DirectoryReadError, IndexOutOfBounds, CatalogMismatchError,
            ImageDecodeError: If the page cannot be resolved or loaded.
            PostingError: If the posting service reports a failure.
            CursorAdvanceError: If the post succeeded but the save failed.
        """
        current = self.cursor_store.load()
        page = self.navigator.load_page(current, self.encoder)

        request = PostRequest(
            encoded_bytes=page.image.encoded_bytes,
            mime_type=page.image.mime_type,
            alt_text=page.metadata.alt_text,
            aspect_ratio=page.image.aspect_ratio,
            labels=self.labels,
        )
        result = self.posting_service.post(request)
        if result.is_error:
            raise PostingError(f"Failed to post {page.file_path} ({current}): {result.error}")

        next_index = advance(current, page.flags)

        if self.dry_run:
            logger.info("[dry run] next archive index would be %s", next_index)
            return CycleResult(current, next_index, page, result.uri, saved=False)

        try:
            self.cursor_store.save(next_index)
        except CursorStoreError as e:
            raise CursorAdvanceError(
                f"Posted {page.file_path} as {result.uri} but failed to save the next cursor: {e}. "
                f"Set {self.cursor_store.cursor_path} to {next_index.to_dict()} before the next run.",
                next_index=next_index,
                post_uri=result.uri,
            ) from e

        logger.info("Posted %s; next archive index %s", page.metadata.alt_text, next_index)
        return CycleResult(current, next_index, page, result.uri, saved=True)
