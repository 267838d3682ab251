"""Path Scanner - lists archive directory entries in a deterministic order."""

import logging
from enum import Enum
from pathlib import Path
from typing import List

from archive_poster.core import DirectoryReadError

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"


def list_sorted(directory: Path, kind: EntryKind) -> List[str]:
    """List entry names of one kind under ``directory``, sorted ascending.

    Ordering is plain string comparison, so "page10" sorts before "page2".
    Archive names are expected to be zero-padded.

    Args:
        directory: Directory to list.
        kind: Keep only directories or only files.

    Returns:
        Sorted entry names (not full paths).

    Raises:
        DirectoryReadError: If the directory cannot be listed.
    """
    directory = Path(directory)
    try:
        if kind is EntryKind.DIRECTORY:
            names = [entry.name for entry in directory.iterdir() if entry.is_dir()]
        else:
            names = [entry.name for entry in directory.iterdir() if entry.is_file()]
    except OSError as e:
        raise DirectoryReadError(directory, e) from e

    names.sort()
    logger.debug("Listed %d %s entries in %s", len(names), kind.value, directory)
    return names
