"""Cursor state machine - computes the next archive position."""

from .archive_index import ArchiveIndex, SequenceFlags


def advance(current: ArchiveIndex, flags: SequenceFlags) -> ArchiveIndex:
    """Return the index that follows ``current``.

    Behaves like a three-digit mixed-radix counter. The radices are never
    needed here: the navigator supplies the carry signals from the live
    directory counts.

    Args:
        current: The index that was just posted.
        flags: Sequence flags resolved for ``current``.

    Returns:
        The next ArchiveIndex, wrapping to the start after the last series.
    """
    if not flags.is_last_page_in_volume:
        return ArchiveIndex(current.series, current.volume, current.page + 1)

    if not flags.is_last_volume_in_series:
        return ArchiveIndex(current.series, current.volume + 1, 0)

    if not flags.is_last_series:
        return ArchiveIndex(current.series + 1, 0, 0)

    return ArchiveIndex(0, 0, 0)
