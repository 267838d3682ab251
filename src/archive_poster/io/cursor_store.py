"""Cursor Store - durable JSON record of the next archive position."""

import json
import logging
import os
import tempfile
from pathlib import Path

from archive_poster.core import ArchiveIndex, CursorStoreError

logger = logging.getLogger(__name__)


class CursorStore:
    """Loads and saves the ArchiveIndex as a small JSON file.

    Format:
    {
        "series": 0,
        "volume": 0,
        "page": 0
    }

    There is no default index: a missing or malformed file is an error so a
    broken deployment never silently restarts from the beginning. The store
    is not locked; concurrent runs are last-write-wins.
    """

    def __init__(self, cursor_path: Path) -> None:
        self.cursor_path = Path(cursor_path)

    def load(self) -> ArchiveIndex:
        """Read the cursor record.

        Raises:
            CursorStoreError: If the file is missing, unreadable or malformed.
        """
        try:
            data = json.loads(self.cursor_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CursorStoreError(f"Failed to load archive index from {self.cursor_path}: {e}") from e

        if not isinstance(data, dict):
            raise CursorStoreError(
                f"Failed to load archive index from {self.cursor_path}: expected an object, got {type(data).__name__}"
            )

        try:
            index = ArchiveIndex(series=data["series"], volume=data["volume"], page=data["page"])
        except (KeyError, ValueError) as e:
            raise CursorStoreError(f"Failed to load archive index from {self.cursor_path}: {e}") from e

        logger.info("Loaded archive index: %s", index)
        return index

    def save(self, index: ArchiveIndex) -> None:
        """Overwrite the cursor record with ``index``.

        The record is written to a sibling temp file and renamed into place,
        so a crash mid-write leaves the previous cursor intact.

        Raises:
            CursorStoreError: If the record cannot be written.
        """
        payload = json.dumps(index.to_dict(), indent=2)
        tmp_name = None
        try:
            directory = self.cursor_path.parent
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, prefix=".cursor-", suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                f.write(payload)
            os.replace(tmp_name, self.cursor_path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CursorStoreError(f"Failed to save archive index to {self.cursor_path}: {e}") from e

        logger.info("Saved archive index: %s", index)
