"""Size-constrained image encoder for upload-limited posting.

Uses Qt QImage for decoding, scaling and JPEG encoding. Resolution is
degraded first, then quality, until the encoded buffer fits the budget.

Fail-fast philosophy: undecodable images raise ImageDecodeError. An image
that cannot be squeezed under the budget is NOT an error; the smallest
attempt is returned and SizeBudgetUnmet is emitted as a warning.
"""

import logging
import math
import mimetypes
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QBuffer, QByteArray, QCoreApplication, QIODevice, Qt
from PySide6.QtGui import QImage

from archive_poster.core import AspectRatio, EncoderConfig, ImageDecodeError, LoadedImage, SizeBudgetUnmet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodeResult:
    """Outcome of encode_to_fit.

    ``quality`` and ``scale`` are None when the source was passed through.
    """

    data: bytes
    within_budget: bool
    attempts: int = 0
    quality: Optional[int] = None
    scale: Optional[float] = None

    @property
    def reencoded(self) -> bool:
        return self.attempts > 0


class ImageEncoder:
    """Re-encodes page images so they fit the configured byte budget."""

    def __init__(self, config: Optional[EncoderConfig] = None) -> None:
        self.config = config or EncoderConfig()

        # Image format plugins are located through the application instance
        if QCoreApplication.instance() is None:
            self._app = QCoreApplication([])
        else:
            self._app = QCoreApplication.instance()

    def load_image(self, image_path: Path) -> LoadedImage:
        """Read a page from disk and encode it to fit the budget.

        Args:
            image_path: Path to the page image.

        Returns:
            LoadedImage with the (possibly re-encoded) bytes and source aspect ratio.

        Raises:
            ImageDecodeError: If the file cannot be read or decoded.
        """
        image_path = Path(image_path)
        try:
            raw = image_path.read_bytes()
        except OSError as e:
            raise ImageDecodeError(f"Failed to read image {image_path}: {e}") from e

        image = self._decode(raw, image_path)
        result = self.encode_to_fit(raw, image.width(), image.height(), image=image)

        if result.reencoded:
            mime_type = "image/jpeg"
        else:
            mime_type = mimetypes.guess_type(image_path.name)[0] or "image/jpeg"

        return LoadedImage(
            encoded_bytes=result.data,
            aspect_ratio=AspectRatio(width=image.width(), height=image.height()),
            mime_type=mime_type,
        )

    def encode_to_fit(
        self,
        raw: bytes,
        width: int,
        height: int,
        byte_budget: Optional[int] = None,
        image: Optional[QImage] = None,
    ) -> EncodeResult:
        """Encode ``raw`` so that it fits ``byte_budget``.

        Args:
            raw: Source image bytes.
            width: Source width in pixels.
            height: Source height in pixels.
            byte_budget: Size limit; defaults to the configured budget.
            image: Already-decoded source, to skip a second decode.

        Returns:
            EncodeResult; ``data is raw`` when the source already fits.
        """
        budget = self.config.byte_budget if byte_budget is None else byte_budget
        if len(raw) <= budget:
            logger.info("image size - original: %d bytes", len(raw))
            return EncodeResult(data=raw, within_budget=True)

        if image is None:
            image = self._decode(raw)

        cfg = self.config
        scale = cfg.start_scale
        quality = cfg.start_quality
        output = b""
        attempts = 0
        last_scale, last_quality = scale, quality

        limit = cfg.iteration_limit
        while attempts < limit:
            attempts += 1
            target_w = max(1, math.floor(width * scale))
            target_h = max(1, math.floor(height * scale))
            output = self._encode_once(image, target_w, target_h, quality)
            last_scale, last_quality = scale, quality
            logger.debug(
                "attempt %d: %dx%d q=%d -> %d bytes", attempts, target_w, target_h, quality, len(output)
            )

            if len(output) <= budget:
                logger.info("image size - original: %d, scaled: %d bytes", len(raw), len(output))
                return EncodeResult(output, True, attempts, quality, scale)

            if scale > cfg.min_scale:
                scale = round(scale - cfg.resize_step, 6)
            elif quality > cfg.min_quality:
                quality -= cfg.quality_step
            else:
                break

        message = (
            f"image too large: {len(output)} bytes after {attempts} attempts "
            f"(budget {budget}, scale {last_scale}, quality {last_quality})"
        )
        warnings.warn(message, SizeBudgetUnmet, stacklevel=2)
        return EncodeResult(output, False, attempts, last_quality, last_scale)

    def _encode_once(self, image: QImage, width: int, height: int, quality: int) -> bytes:
        """Scale ``image`` to exactly width x height and encode it as JPEG."""
        scaled = image.scaled(
            width,
            height,
            Qt.AspectRatioMode.IgnoreAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        if scaled.isNull():
            raise ImageDecodeError(f"Failed to scale image to {width}x{height}")

        # JPEG has no alpha channel
        scaled = scaled.convertToFormat(QImage.Format.Format_RGB32)

        data = QByteArray()
        buffer = QBuffer(data)
        buffer.open(QIODevice.OpenModeFlag.WriteOnly)
        try:
            if not scaled.save(buffer, "JPG", quality):
                raise ImageDecodeError(f"Failed to encode image as JPEG at quality {quality}")
        finally:
            buffer.close()
        return bytes(data.data())

    @staticmethod
    def _decode(raw: bytes, source: Optional[Path] = None) -> QImage:
        image = QImage()
        if not image.loadFromData(QByteArray(raw)) or image.isNull() or image.width() <= 0 or image.height() <= 0:
            where = f" {source}" if source is not None else ""
            raise ImageDecodeError(f"Failed to retrieve image dimensions{where}")
        return image
