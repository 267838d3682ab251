"""Archive Navigator - resolves a cursor into a concrete page file."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from archive_poster.core import (
    ArchiveIndex,
    IndexOutOfBounds,
    LabeledPage,
    PostMetadata,
    SequenceFlags,
    SeriesCatalog,
)

from .path_scanner import EntryKind, list_sorted

logger = logging.getLogger(__name__)


class ArchiveNavigator:
    """Read-only view over ``archive_root/<series>/<volume>/<page>``.

    Counts are re-read from disk on every call, so an archive that has
    grown since the cursor was saved is picked up automatically.
    """

    def __init__(self, archive_root: Path, catalog: SeriesCatalog) -> None:
        self.archive_root = Path(archive_root)
        self.catalog = catalog

    def list_series(self) -> List[str]:
        return list_sorted(self.archive_root, EntryKind.DIRECTORY)

    def list_volumes(self, series_dir: str) -> List[str]:
        return list_sorted(self.archive_root / series_dir, EntryKind.DIRECTORY)

    def list_pages(self, series_dir: str, volume_dir: str) -> List[str]:
        return list_sorted(self.archive_root / series_dir / volume_dir, EntryKind.FILE)

    def resolve(self, index: ArchiveIndex) -> Tuple[Path, PostMetadata, SequenceFlags]:
        """Resolve an index into the page file, its labels and carry flags.

        Args:
            index: Cursor to resolve.

        Returns:
            Tuple of (page file path, PostMetadata, SequenceFlags).

        Raises:
            DirectoryReadError: If any level cannot be listed.
            IndexOutOfBounds: If the cursor points past the live archive.
            CatalogMismatchError: If the catalog disagrees with the series count.
        """
        series_dirs = self.list_series()
        self._check_bounds("series", index.series, len(series_dirs), index)
        self.catalog.check_consistent(len(series_dirs))
        series_dir = series_dirs[index.series]

        volume_dirs = self.list_volumes(series_dir)
        self._check_bounds("volume", index.volume, len(volume_dirs), index)
        volume_dir = volume_dirs[index.volume]

        page_files = self.list_pages(series_dir, volume_dir)
        self._check_bounds("page", index.page, len(page_files), index)

        flags = SequenceFlags(
            is_last_page_in_volume=index.page == len(page_files) - 1,
            is_last_volume_in_series=index.volume == len(volume_dirs) - 1,
            is_last_series=index.series == len(series_dirs) - 1,
        )
        metadata = PostMetadata(
            series_name=self.catalog.name_for(index.series),
            volume_number=index.volume + 1,
            page_number=index.page + 1,
        )
        file_path = self.archive_root / series_dir / volume_dir / page_files[index.page]

        logger.info("Resolved %s -> %s", index, file_path)
        return file_path, metadata, flags

    def load_page(self, index: ArchiveIndex, encoder) -> LabeledPage:
        """Resolve ``index`` and load its image through ``encoder``.

        Args:
            index: Cursor to resolve.
            encoder: Object exposing ``load_image(path) -> LoadedImage``.
        """
        file_path, metadata, flags = self.resolve(index)
        image = encoder.load_image(file_path)
        return LabeledPage(file_path=file_path, image=image, metadata=metadata, flags=flags)

    @staticmethod
    def _check_bounds(level: str, value: int, count: int, index: Optional[ArchiveIndex]) -> None:
        if value >= count:
            raise IndexOutOfBounds(level, value, count, index)
