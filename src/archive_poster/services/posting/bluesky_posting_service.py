"""Bluesky Posting Service - publishes a page through the AT Protocol."""

import logging
from typing import Callable, Optional

from atproto import Client, models

from archive_poster.services.posting.posting_service import PostingService, PostRequest, PostResult

logger = logging.getLogger(__name__)


class BlueskyPostingService(PostingService):
    """
    Posting service backed by the ``atproto`` client.

    Logs in lazily on the first post, uploads the image blob and creates a
    feed post with an image embed (alt text and aspect ratio) and optional
    self-labels.
    """

    def __init__(
        self,
        username: str,
        password: str,
        client_factory: Callable[[], Client] = Client,
    ) -> None:
        self._username = username
        self._password = password
        self._client_factory = client_factory
        self._client: Optional[Client] = None

    def post(self, request: PostRequest) -> PostResult:
        """
        Publish ``request`` as a single-image post.

        Returns:
            PostResult with the record URI, or the error message on failure.
        """
        try:
            client = self._get_client()

            upload = client.upload_blob(request.encoded_bytes)
            embed = models.AppBskyEmbedImages.Main(
                images=[
                    models.AppBskyEmbedImages.Image(
                        alt=request.alt_text,
                        image=upload.blob,
                        aspect_ratio=models.AppBskyEmbedDefs.AspectRatio(
                            width=request.aspect_ratio.width,
                            height=request.aspect_ratio.height,
                        ),
                    )
                ]
            )

            labels = None
            if request.labels:
                labels = models.ComAtprotoLabelDefs.SelfLabels(
                    values=[models.ComAtprotoLabelDefs.SelfLabel(val=label) for label in request.labels]
                )

            record = models.AppBskyFeedPost.Record(
                text=request.text,
                created_at=client.get_current_time_iso(),
                embed=embed,
                labels=labels,
            )
            logger.info("Sending post to Bluesky (%d bytes, alt=%r)", len(request.encoded_bytes), request.alt_text)
            response = client.app.bsky.feed.post.create(client.me.did, record)
        except Exception as e:
            logger.error("Failed to post to Bluesky: %s", e)
            return PostResult(error=f"{type(e).__name__}: {e}")

        logger.info("new post URI: %s", response.uri)
        return PostResult(uri=response.uri)

    def _get_client(self) -> Client:
        if self._client is None:
            client = self._client_factory()
            logger.info("Logging into Bluesky as %s", self._username)
            client.login(self._username, self._password)
            self._client = client
        return self._client
