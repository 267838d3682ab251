"""Shared fixtures for building throwaway archives on disk."""

from pathlib import Path

import pytest


def build_archive(root: Path, layout):
    """Create ``root/<series>/<volume>/<page>`` files.

    Args:
        root: Archive root to create.
        layout: List of series; each series is a list of per-volume page counts.
            ``[[3, 2]]`` is one series with volumes of 3 and 2 pages.
    """
    root.mkdir(parents=True, exist_ok=True)
    for s, volumes in enumerate(layout):
        for v, page_count in enumerate(volumes):
            volume_dir = root / f"series{s:02d}" / f"vol{v:02d}"
            volume_dir.mkdir(parents=True)
            for p in range(page_count):
                (volume_dir / f"page{p:03d}.jpg").write_bytes(b"not really a jpeg")
    return root


@pytest.fixture
def make_archive(tmp_path):
    """Factory fixture: ``make_archive([[3, 2]])`` returns the archive root."""
    def _make(layout, name="images"):
        return build_archive(tmp_path / name, layout)
    return _make
