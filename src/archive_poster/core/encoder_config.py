"""Immutable settings for the size-constrained encoder."""

from dataclasses import dataclass
from typing import Optional

DEFAULT_BYTE_BUDGET = 976 * 1024
DEFAULT_START_QUALITY = 89
DEFAULT_RESIZE_STEP = 0.04
MIN_RESIZE_STEP = 0.001


@dataclass(frozen=True)
class EncoderConfig:
    """Built once at startup and passed into the encoder.

    Attributes:
        byte_budget: Maximum encoded size in bytes.
        start_quality: JPEG quality for the first re-encode (1-100).
        resize_step: Scale decrement applied per iteration while scale > min_scale.
        start_scale: Scale used for the first re-encode.
        min_scale: Scale floor; quality degrades once this is reached.
        min_quality: Quality floor.
        quality_step: Quality decrement once scale is pinned at its floor.
        max_iterations: Hard ceiling on re-encode attempts. None derives it
            from the scale/quality schedule, so the floors are always reached.
    """

    byte_budget: int = DEFAULT_BYTE_BUDGET
    start_quality: int = DEFAULT_START_QUALITY
    resize_step: float = DEFAULT_RESIZE_STEP
    start_scale: float = 0.9
    min_scale: float = 0.2
    min_quality: int = 50
    quality_step: int = 4
    max_iterations: Optional[int] = None

    def __post_init__(self) -> None:
        if self.byte_budget <= 0:
            raise ValueError(f"byte_budget must be positive, got {self.byte_budget}")
        if not 1 <= self.start_quality <= 100:
            raise ValueError(f"start_quality must be within 1-100, got {self.start_quality}")
        # scale is rounded to 6 places per step; smaller steps would stall
        if not MIN_RESIZE_STEP <= self.resize_step < 1:
            raise ValueError(f"resize_step must be between {MIN_RESIZE_STEP} and 1, got {self.resize_step}")
        if self.quality_step <= 0:
            raise ValueError(f"quality_step must be positive, got {self.quality_step}")
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")

    def schedule_length(self) -> int:
        """Number of attempts from the start settings down to both floors."""
        attempts = 1
        scale = self.start_scale
        while scale > self.min_scale:
            scale = round(scale - self.resize_step, 6)
            attempts += 1
        quality = self.start_quality
        while quality > self.min_quality:
            quality -= self.quality_step
            attempts += 1
        return attempts

    @property
    def iteration_limit(self) -> int:
        if self.max_iterations is not None:
            return self.max_iterations
        return self.schedule_length()
