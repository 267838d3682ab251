"""Series catalog loader - reads display names from a JSON list."""

import json
from pathlib import Path

from archive_poster.core import ConfigurationError, SeriesCatalog


def load_series_catalog(catalog_path: Path) -> SeriesCatalog:
    """Load the series catalog.

    The file holds a JSON array of display names in series directory order,
    e.g. ``["First Series", "Second Series"]``.

    Raises:
        ConfigurationError: If the file is missing or not a list of non-empty strings.
    """
    catalog_path = Path(catalog_path)
    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to load series catalog from {catalog_path}: {e}") from e

    if not isinstance(data, list) or not all(isinstance(name, str) and name.strip() for name in data):
        raise ConfigurationError(f"Series catalog {catalog_path} must be a JSON list of non-empty names")

    return SeriesCatalog(names=tuple(name.strip() for name in data))
