"""SeriesCatalog entity - display names indexed by series position."""

from dataclasses import dataclass
from typing import Tuple

from .errors import CatalogMismatchError


@dataclass(frozen=True)
class SeriesCatalog:
    """Hand-maintained display names, in the same order as the series directories.

    On-disk directories decide ordering and count; the catalog only supplies
    the human-readable label for each position.
    """

    names: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.names)

    def name_for(self, series_index: int) -> str:
        """Return the display name for a series position.

        Raises:
            CatalogMismatchError: if the position has no catalog entry.
        """
        if 0 <= series_index < len(self.names):
            return self.names[series_index]
        raise CatalogMismatchError(
            f"No catalog entry for series {series_index}: catalog has {len(self.names)} names"
        )

    def check_consistent(self, series_count: int) -> None:
        """Fail fast when the catalog length disagrees with the live series count."""
        if len(self.names) != series_count:
            raise CatalogMismatchError(
                f"Series catalog lists {len(self.names)} names but the archive has "
                f"{series_count} series directories"
            )
