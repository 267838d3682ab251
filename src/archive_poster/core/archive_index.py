"""ArchiveIndex entity - a zero-based position in the series/volume/page archive."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArchiveIndex:
    """Represents the cursor position as three nested zero-based counters.

    Attributes:
        series: Position of the series directory under the archive root.
        volume: Position of the volume directory under the series.
        page: Position of the image file under the volume.
    """

    series: int = 0
    volume: int = 0
    page: int = 0

    def __post_init__(self) -> None:
        for name in ("series", "volume", "page"):
            value = getattr(self, name)
            # bool is an int subclass; a cursor of True/False is corrupt
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def to_dict(self) -> dict:
        """Returns the persisted record form of this index."""
        return {"series": self.series, "volume": self.volume, "page": self.page}

    def __str__(self) -> str:
        return f"series {self.series}, volume {self.volume}, page {self.page}"


@dataclass(frozen=True)
class SequenceFlags:
    """Carry signals derived from live directory counts at load time."""

    is_last_page_in_volume: bool
    is_last_volume_in_series: bool
    is_last_series: bool


@dataclass(frozen=True)
class PostMetadata:
    """Human-readable labels for a page (1-based numbers)."""

    series_name: str
    volume_number: int
    page_number: int

    @property
    def alt_text(self) -> str:
        """Returns the alt text attached to the posted image."""
        return f"volume {self.volume_number}, page {self.page_number} of {self.series_name}"
