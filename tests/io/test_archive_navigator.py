"""Tests for ArchiveNavigator - resolving cursors against live directories."""

from unittest.mock import MagicMock

import pytest

from archive_poster.core import (
    ArchiveIndex,
    AspectRatio,
    CatalogMismatchError,
    DirectoryReadError,
    IndexOutOfBounds,
    LoadedImage,
    SeriesCatalog,
)
from archive_poster.io import ArchiveNavigator


def catalog(count):
    return SeriesCatalog(names=tuple(f"Series {i + 1}" for i in range(count)))


@pytest.fixture
def navigator(make_archive):
    """1 series with two volumes of 3 and 2 pages."""
    return ArchiveNavigator(make_archive([[3, 2]]), catalog(1))


class TestResolve:
    def test_resolves_file_path(self, navigator):
        file_path, _, _ = navigator.resolve(ArchiveIndex(0, 1, 1))
        assert file_path == navigator.archive_root / "series00" / "vol01" / "page001.jpg"
        assert file_path.exists()

    def test_metadata_is_one_based(self, navigator):
        _, meta, _ = navigator.resolve(ArchiveIndex(0, 1, 0))
        assert meta.series_name == "Series 1"
        assert meta.volume_number == 2
        assert meta.page_number == 1

    def test_last_page_of_first_volume(self, navigator):
        _, _, flags = navigator.resolve(ArchiveIndex(0, 0, 2))
        assert flags.is_last_page_in_volume is True
        assert flags.is_last_volume_in_series is False
        assert flags.is_last_series is True

    def test_last_page_of_last_volume(self, navigator):
        _, _, flags = navigator.resolve(ArchiveIndex(0, 1, 1))
        assert flags.is_last_page_in_volume is True
        assert flags.is_last_volume_in_series is True
        assert flags.is_last_series is True

    def test_flags_match_directory_counts_everywhere(self, make_archive):
        layout = [[2, 3], [1], [4, 1, 2]]
        nav = ArchiveNavigator(make_archive(layout), catalog(len(layout)))

        for s, volumes in enumerate(layout):
            for v, page_count in enumerate(volumes):
                for p in range(page_count):
                    _, _, flags = nav.resolve(ArchiveIndex(s, v, p))
                    assert flags.is_last_page_in_volume == (p == page_count - 1)
                    assert flags.is_last_volume_in_series == (v == len(volumes) - 1)
                    assert flags.is_last_series == (s == len(layout) - 1)

    def test_picks_up_archive_growth(self, navigator):
        _, _, before = navigator.resolve(ArchiveIndex(0, 1, 1))
        (navigator.archive_root / "series00" / "vol01" / "page002.jpg").write_bytes(b"x")

        _, _, after = navigator.resolve(ArchiveIndex(0, 1, 1))
        assert before.is_last_page_in_volume is True
        assert after.is_last_page_in_volume is False

    def test_ignores_stray_files_at_directory_levels(self, navigator):
        (navigator.archive_root / "README.txt").write_text("notes")
        (navigator.archive_root / "series00" / "cover.jpg").write_bytes(b"x")

        _, _, flags = navigator.resolve(ArchiveIndex(0, 1, 0))
        assert flags.is_last_series is True
        assert flags.is_last_volume_in_series is True


class TestResolveErrors:
    def test_series_out_of_bounds(self, make_archive):
        nav = ArchiveNavigator(make_archive([[1], [1], [1], [1]]), catalog(4))
        with pytest.raises(IndexOutOfBounds) as excinfo:
            nav.resolve(ArchiveIndex(99, 0, 0))
        assert excinfo.value.level == "series"
        assert excinfo.value.index == 99
        assert excinfo.value.count == 4

    def test_volume_out_of_bounds(self, navigator):
        with pytest.raises(IndexOutOfBounds) as excinfo:
            navigator.resolve(ArchiveIndex(0, 2, 0))
        assert excinfo.value.level == "volume"

    def test_page_out_of_bounds(self, navigator):
        with pytest.raises(IndexOutOfBounds) as excinfo:
            navigator.resolve(ArchiveIndex(0, 1, 2))
        assert excinfo.value.level == "page"
        assert "only 2" in str(excinfo.value)

    def test_empty_volume_is_out_of_bounds(self, make_archive):
        nav = ArchiveNavigator(make_archive([[0]]), catalog(1))
        with pytest.raises(IndexOutOfBounds) as excinfo:
            nav.resolve(ArchiveIndex(0, 0, 0))
        assert excinfo.value.level == "page"

    def test_missing_archive_root(self, tmp_path):
        nav = ArchiveNavigator(tmp_path / "missing", catalog(1))
        with pytest.raises(DirectoryReadError):
            nav.resolve(ArchiveIndex(0, 0, 0))

    def test_catalog_shorter_than_archive(self, make_archive):
        nav = ArchiveNavigator(make_archive([[1], [1]]), catalog(1))
        with pytest.raises(CatalogMismatchError):
            nav.resolve(ArchiveIndex(0, 0, 0))

    def test_catalog_longer_than_archive(self, make_archive):
        nav = ArchiveNavigator(make_archive([[1]]), catalog(3))
        with pytest.raises(CatalogMismatchError):
            nav.resolve(ArchiveIndex(0, 0, 0))


class TestLoadPage:
    def test_load_page_uses_encoder(self, navigator):
        image = LoadedImage(encoded_bytes=b"jpeg", aspect_ratio=AspectRatio(3, 4))
        encoder = MagicMock()
        encoder.load_image.return_value = image

        page = navigator.load_page(ArchiveIndex(0, 0, 1), encoder)

        encoder.load_image.assert_called_once_with(page.file_path)
        assert page.image is image
        assert page.metadata.alt_text == "volume 1, page 2 of Series 1"
        assert page.flags.is_last_page_in_volume is False

    def test_load_page_does_not_load_image_when_out_of_bounds(self, navigator):
        encoder = MagicMock()
        with pytest.raises(IndexOutOfBounds):
            navigator.load_page(ArchiveIndex(0, 5, 0), encoder)
        encoder.load_image.assert_not_called()
