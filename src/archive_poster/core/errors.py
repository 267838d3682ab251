"""Error taxonomy for the archive poster.

Everything fatal derives from ArchivePosterError (a RuntimeError) so the
entry point can map failures to exit codes in one place.
"""

from pathlib import Path
from typing import Optional

from .archive_index import ArchiveIndex


class ArchivePosterError(RuntimeError):
    """Base class for all fatal archive poster errors."""


class ConfigurationError(ArchivePosterError):
    """A setting is missing or cannot be parsed."""


class DirectoryReadError(ArchivePosterError):
    """A directory in the archive tree could not be listed."""

    def __init__(self, path: Path, reason: object = None) -> None:
        self.path = Path(path)
        message = f"Failed to read directory {self.path}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)


class IndexOutOfBounds(ArchivePosterError):
    """The cursor points past the end of the live archive at some level."""

    def __init__(self, level: str, index: int, count: int, index_path: Optional[ArchiveIndex] = None) -> None:
        self.level = level
        self.index = index
        self.count = count
        self.index_path = index_path
        message = f"{level} index {index} out of bounds: only {count} {level} entries"
        if index_path is not None:
            message += f" (cursor at {index_path})"
        super().__init__(message)


class CatalogMismatchError(ArchivePosterError):
    """The series catalog does not line up with the series directories on disk."""


class ImageDecodeError(ArchivePosterError):
    """Source image dimensions could not be determined."""


class CursorStoreError(ArchivePosterError):
    """The cursor record could not be loaded or saved."""


class CursorAdvanceError(CursorStoreError):
    """The post went out but the advanced cursor could not be saved.

    The operator must set the cursor to ``next_index`` by hand, otherwise
    the same page will be posted again on the next run.
    """

    def __init__(self, message: str, next_index: ArchiveIndex, post_uri: Optional[str]) -> None:
        self.next_index = next_index
        self.post_uri = post_uri
        super().__init__(message)


class PostingError(ArchivePosterError):
    """The posting collaborator reported a failure."""


class SizeBudgetUnmet(UserWarning):
    """The encoder exhausted its floors without meeting the byte budget.

    Emitted through ``warnings.warn``; the oversized buffer is still used.
    """
