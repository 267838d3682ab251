"""Main entry point for the archive poster."""

import argparse
import logging
import sys
from pathlib import Path

from archive_poster.coordinators import PostCycleCoordinator
from archive_poster.core import ArchivePosterError, CursorAdvanceError
from archive_poster.io import ArchiveNavigator, CursorStore, load_series_catalog
from archive_poster.services import (
    BlueskyPostingService,
    DryRunPostingService,
    ImageEncoder,
    SettingsManager,
)

logger = logging.getLogger("archive_poster")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_POSTED_NOT_SAVED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archive-poster",
        description="Post the next page of the image archive and advance the cursor.",
    )
    parser.add_argument("--env-file", type=Path, help="Path to a .env file (default: ./.env)")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and encode the next page without posting or saving the cursor",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_coordinator(settings: SettingsManager, dry_run: bool = False) -> PostCycleCoordinator:
    """
    Wire all components together (Composition Root).
    This is the only place that knows how to instantiate them.
    """
    encoder = ImageEncoder(settings.build_encoder_config())
    navigator = ArchiveNavigator(
        archive_root=settings.get_archive_root(),
        catalog=load_series_catalog(settings.get_catalog_path()),
    )
    cursor_store = CursorStore(settings.get_cursor_path())

    if dry_run:
        posting_service = DryRunPostingService()
    else:
        username, password = settings.get_bluesky_credentials()
        posting_service = BlueskyPostingService(username, password)

    return PostCycleCoordinator(
        cursor_store=cursor_store,
        navigator=navigator,
        encoder=encoder,
        posting_service=posting_service,
        labels=settings.get_post_labels(),
        dry_run=dry_run,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)s  %(message)s",
    )
    logging.captureWarnings(True)

    try:
        settings = SettingsManager(env_file=args.env_file)
        coordinator = build_coordinator(settings, dry_run=args.dry_run)
        coordinator.run_once()
    except CursorAdvanceError as e:
        logger.critical("POSTED BUT CURSOR NOT ADVANCED: %s", e)
        return EXIT_POSTED_NOT_SAVED
    except ArchivePosterError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
