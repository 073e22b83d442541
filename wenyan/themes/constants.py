"""Theme framework constants."""

from __future__ import annotations

CUSTOM_ID_PREFIX = "custom/"
CUSTOM_THEME_SCHEMA_VERSION = "1"

MANIFEST_FILENAME = "manifest.json"
STYLESHEET_FILENAME = "theme.css"

MANIFEST_KEYS: tuple[str, ...] = (
    "schema_version",
    "theme_id",
    "name",
)

MAX_STYLESHEET_BYTES = 512 * 1024
