"""Unit tests for the posting services."""

from unittest.mock import MagicMock, patch

import pytest

from archive_poster.core import AspectRatio
from archive_poster.services import BlueskyPostingService, DryRunPostingService, PostRequest

MODULE = "archive_poster.services.posting.bluesky_posting_service"


@pytest.fixture
def request_():
    return PostRequest(
        encoded_bytes=b"\xff\xd8jpeg",
        mime_type="image/jpeg",
        alt_text="volume 1, page 3 of Night Garden",
        aspect_ratio=AspectRatio(width=800, height=1200),
        labels=("porn",),
    )


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.me.did = "did:plc:bot"
    client.get_current_time_iso.return_value = "2026-01-01T00:00:00Z"
    client.app.bsky.feed.post.create.return_value = MagicMock(uri="at://did:plc:bot/app.bsky.feed.post/1")
    return client


@pytest.fixture
def mock_models():
    with patch(f"{MODULE}.models") as models:
        yield models


@pytest.fixture
def service(mock_client):
    return BlueskyPostingService("bot.example.com", "app-pass", client_factory=lambda: mock_client)


class TestBlueskyPostingService:
    def test_post_success_returns_uri(self, service, mock_client, mock_models, request_):
        result = service.post(request_)

        assert result.is_error is False
        assert result.uri == "at://did:plc:bot/app.bsky.feed.post/1"
        mock_client.login.assert_called_once_with("bot.example.com", "app-pass")
        mock_client.upload_blob.assert_called_once_with(b"\xff\xd8jpeg")

    def test_embed_carries_alt_text_and_aspect_ratio(self, service, mock_client, mock_models, request_):
        service.post(request_)

        mock_models.AppBskyEmbedDefs.AspectRatio.assert_called_once_with(width=800, height=1200)
        image_kwargs = mock_models.AppBskyEmbedImages.Image.call_args.kwargs
        assert image_kwargs["alt"] == "volume 1, page 3 of Night Garden"
        assert image_kwargs["image"] is mock_client.upload_blob.return_value.blob

    def test_record_created_in_own_repo_with_labels(self, service, mock_client, mock_models, request_):
        service.post(request_)

        mock_models.ComAtprotoLabelDefs.SelfLabel.assert_called_once_with(val="porn")
        record_kwargs = mock_models.AppBskyFeedPost.Record.call_args.kwargs
        assert record_kwargs["text"] == ""
        assert record_kwargs["labels"] is mock_models.ComAtprotoLabelDefs.SelfLabels.return_value
        mock_client.app.bsky.feed.post.create.assert_called_once_with(
            "did:plc:bot", mock_models.AppBskyFeedPost.Record.return_value
        )

    def test_no_labels(self, service, mock_models, request_):
        unlabeled = PostRequest(
            encoded_bytes=request_.encoded_bytes,
            mime_type=request_.mime_type,
            alt_text=request_.alt_text,
            aspect_ratio=request_.aspect_ratio,
        )
        service.post(unlabeled)

        assert mock_models.AppBskyFeedPost.Record.call_args.kwargs["labels"] is None
        mock_models.ComAtprotoLabelDefs.SelfLabels.assert_not_called()

    def test_logs_in_once_across_posts(self, service, mock_client, mock_models, request_):
        service.post(request_)
        service.post(request_)
        assert mock_client.login.call_count == 1

    def test_login_failure_is_reported_not_raised(self, mock_client, mock_models, request_):
        mock_client.login.side_effect = RuntimeError("bad password")
        service = BlueskyPostingService("bot", "wrong", client_factory=lambda: mock_client)

        result = service.post(request_)

        assert result.is_error is True
        assert "bad password" in result.error
        mock_client.upload_blob.assert_not_called()

    def test_upload_failure_is_reported_without_retry(self, service, mock_client, mock_models, request_):
        mock_client.upload_blob.side_effect = ConnectionError("network down")

        result = service.post(request_)

        assert result.is_error is True
        assert result.uri is None
        assert mock_client.upload_blob.call_count == 1
        mock_client.app.bsky.feed.post.create.assert_not_called()


def test_dry_run_posting_service_succeeds(request_):
    result = DryRunPostingService().post(request_)
    assert result.is_error is False
    assert result.uri == "dry-run"
