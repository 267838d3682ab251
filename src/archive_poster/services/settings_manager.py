"""Settings Manager - Handles archive, encoder and posting configuration."""

import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from archive_poster.core import ConfigurationError, EncoderConfig
from archive_poster.core.encoder_config import (
    DEFAULT_BYTE_BUDGET,
    DEFAULT_RESIZE_STEP,
    DEFAULT_START_QUALITY,
)


class SettingsManager:
    """
    Manages settings read from the environment.

    Values from a .env file in the project root are loaded first; variables
    already set in the process environment take precedence.
    """

    DEFAULT_ARCHIVE_ROOT = "images"
    DEFAULT_CURSOR_PATH = "archiveCursor.json"
    DEFAULT_CATALOG_PATH = "seriesCatalog.json"

    def __init__(self, project_root: Optional[Path] = None, env_file: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Directory relative paths are resolved against and
                         where .env is looked up. Defaults to the working directory.
            env_file: Explicit .env path, overriding ``project_root / ".env"``.

        Raises:
            ConfigurationError: If ``env_file`` is given but does not exist.
        """
        if project_root is None:
            project_root = Path.cwd()

        self._project_root = Path(project_root)
        self._env_path = Path(env_file) if env_file else self._project_root / ".env"
        if env_file and not self._env_path.is_file():
            raise ConfigurationError(f".env file not found: {self._env_path}")
        load_dotenv(dotenv_path=self._env_path)

    def get_archive_root(self) -> Path:
        """Directory holding ``<series>/<volume>/<page>``."""
        return self._get_path("ARCHIVE_ROOT", self.DEFAULT_ARCHIVE_ROOT)

    def get_cursor_path(self) -> Path:
        """Location of the persisted cursor record."""
        return self._get_path("ARCHIVE_CURSOR_PATH", self.DEFAULT_CURSOR_PATH)

    def get_catalog_path(self) -> Path:
        """Location of the series display-name catalog."""
        return self._get_path("SERIES_CATALOG_PATH", self.DEFAULT_CATALOG_PATH)

    def get_bluesky_credentials(self) -> Tuple[str, str]:
        """Return (username, password).

        Raises:
            ConfigurationError: If either value is unset or blank.
        """
        username = self._get_str("BLUESKY_USERNAME")
        if not username:
            raise ConfigurationError("BLUESKY_USERNAME is not set")
        password = self._get_str("BLUESKY_PASSWORD")
        if not password:
            raise ConfigurationError("BLUESKY_PASSWORD is not set")
        return username, password

    def get_post_labels(self) -> Tuple[str, ...]:
        """Self-labels attached to every post, from comma-separated POST_LABELS."""
        raw = self._get_str("POST_LABELS") or ""
        return tuple(label.strip() for label in raw.split(",") if label.strip())

    def build_encoder_config(self) -> EncoderConfig:
        """Parse encoder settings once into an immutable EncoderConfig.

        Raises:
            ConfigurationError: If a value cannot be parsed or is out of range.
        """
        try:
            start_quality = self._parse("JPG_QUALITY", int, DEFAULT_START_QUALITY)
            resize_step = self._parse("RESIZE_STEP", float, DEFAULT_RESIZE_STEP)
            byte_budget = self._parse("MAX_IMAGE_BYTES", int, DEFAULT_BYTE_BUDGET)
            return EncoderConfig(
                byte_budget=byte_budget,
                start_quality=start_quality,
                resize_step=resize_step,
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid encoder setting: {e}") from e

    def _get_str(self, name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    def _get_path(self, name: str, default: str) -> Path:
        path = Path(self._get_str(name) or default)
        return path if path.is_absolute() else self._project_root / path

    def _parse(self, name: str, convert, default):
        value = self._get_str(name)
        if value is None:
            return default
        try:
            return convert(value)
        except ValueError:
            raise ValueError(f"{name}={value!r} is not a valid {convert.__name__}") from None
