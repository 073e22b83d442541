"""Custom theme discovery, parsing and persistence."""

from __future__ import annotations

import json
import logging
import re
import shutil
import uuid
from pathlib import Path
from typing import Mapping

from wenyan.errors import ErrorCode, ThemeValidationError, WenYanError
from wenyan.themes.constants import (
    CUSTOM_THEME_SCHEMA_VERSION,
    MANIFEST_FILENAME,
    MANIFEST_KEYS,
    MAX_STYLESHEET_BYTES,
    STYLESHEET_FILENAME,
)
from wenyan.themes.loader import read_text_limited
from wenyan.themes.models import CustomTheme

logger = logging.getLogger(__name__)

_THEME_ID_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")
_BLOCKED_CSS_RE = re.compile(r"(?:@import|url\s*\()", re.IGNORECASE)

_MAX_MANIFEST_BYTES = 16 * 1024
_MAX_THEME_ID_LEN = 64
_MAX_NAME_LEN = 120
_MAX_THEME_DIR_CANDIDATES = 512


def load_custom_theme(theme_dir: Path) -> CustomTheme:
    """Load and validate a single custom theme directory."""
    if not theme_dir.exists() or not theme_dir.is_dir():
        raise ThemeValidationError(f"Theme path is not a directory: {theme_dir}")
    if theme_dir.is_symlink():
        raise ThemeValidationError(f"Theme directory cannot be a symlink: {theme_dir}")

    manifest = _load_manifest(theme_dir / MANIFEST_FILENAME)
    _reject_unknown_keys(manifest, context=f"{theme_dir}/{MANIFEST_FILENAME}")

    schema_version = manifest.get("schema_version")
    if schema_version != CUSTOM_THEME_SCHEMA_VERSION:
        raise ThemeValidationError(
            f"{theme_dir}: unsupported schema_version {schema_version!r}; "
            f"expected {CUSTOM_THEME_SCHEMA_VERSION!r}"
        )

    theme_id = validate_theme_id(manifest.get("theme_id"), context=str(theme_dir))
    if theme_id != theme_dir.name:
        raise ThemeValidationError(
            f"{theme_dir}: theme_id {theme_id!r} does not match its directory name"
        )

    name = _optional_name(manifest.get("name"), context=str(theme_dir))
    content = _load_stylesheet(theme_dir / STYLESHEET_FILENAME)
    return CustomTheme(theme_id=theme_id, name=name, content=content)


def validate_theme_id(value: object, *, context: str) -> str:
    if not isinstance(value, str) or not value:
        raise ThemeValidationError(f"{context}: theme_id must be a non-empty string")
    if len(value) > _MAX_THEME_ID_LEN:
        raise ThemeValidationError(f"{context}: theme_id exceeds max length {_MAX_THEME_ID_LEN}")
    if not _THEME_ID_RE.match(value):
        raise ThemeValidationError(
            f"{context}: theme_id must match pattern [a-z0-9-], got {value!r}"
        )
    return value


def validate_stylesheet(content: str, *, context: str) -> str:
    if len(content.encode("utf-8")) > MAX_STYLESHEET_BYTES:
        raise ThemeValidationError(f"{context}: stylesheet exceeds max size ({MAX_STYLESHEET_BYTES} bytes)")
    if _BLOCKED_CSS_RE.search(content):
        raise ThemeValidationError(
            f"{context}: stylesheet may not contain @import or url(...) directives"
        )
    return content


def _optional_name(value: object, *, context: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ThemeValidationError(f"{context}: field 'name' must be a string")
    cleaned = value.strip()
    if not cleaned:
        return None
    if len(cleaned) > _MAX_NAME_LEN:
        raise ThemeValidationError(f"{context}: field 'name' exceeds max length {_MAX_NAME_LEN}")
    if any(ch in cleaned for ch in ("\n", "\r", "\t")):
        raise ThemeValidationError(f"{context}: field 'name' must be a single line string")
    return cleaned


def _load_manifest(path: Path) -> Mapping[str, object]:
    content = _read_theme_file(path, max_bytes=_MAX_MANIFEST_BYTES)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ThemeValidationError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ThemeValidationError(f"Expected JSON object in {path}")
    return data


def _load_stylesheet(path: Path) -> str:
    content = _read_theme_file(path, max_bytes=MAX_STYLESHEET_BYTES)
    return validate_stylesheet(content, context=str(path))


def _read_theme_file(path: Path, *, max_bytes: int) -> str:
    if not path.is_file():
        raise ThemeValidationError(f"Missing theme file: {path}")
    try:
        return read_text_limited(path, max_bytes=max_bytes)
    except WenYanError as exc:
        raise ThemeValidationError(f"Unable to read {path}: {exc.message}") from exc


def _reject_unknown_keys(data: Mapping[str, object], *, context: str) -> None:
    unknown = sorted(key for key in data.keys() if key not in MANIFEST_KEYS)
    if unknown:
        joined = ", ".join(unknown)
        raise ThemeValidationError(f"{context}: unsupported keys found: {joined}")


class CustomThemeStore:
    """Keeps user-authored themes as packages under a single directory."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._themes: dict[str, CustomTheme] = {}
        self._load_errors: list[str] = []

    @property
    def root(self) -> Path:
        return self._root

    def reload(self) -> None:
        self._themes = {}
        self._load_errors = []
        if not self._root.exists():
            return
        try:
            candidates = sorted(path for path in self._root.iterdir() if path.is_dir())
        except OSError as exc:
            self._load_errors.append(f"Failed to list themes in {self._root}: {exc}")
            return

        if len(candidates) > _MAX_THEME_DIR_CANDIDATES:
            self._load_errors.append(
                f"Theme directory limit exceeded in {self._root}; "
                f"only first {_MAX_THEME_DIR_CANDIDATES} folders were scanned."
            )
            candidates = candidates[:_MAX_THEME_DIR_CANDIDATES]

        for theme_dir in candidates:
            try:
                theme = load_custom_theme(theme_dir)
            except ThemeValidationError as exc:
                self._load_errors.append(str(exc))
                continue
            self._themes[theme.theme_id] = theme
        logger.debug("loaded %d custom themes from %s", len(self._themes), self._root)

    def list_themes(self) -> list[CustomTheme]:
        return sorted(
            self._themes.values(),
            key=lambda theme: (theme.name is None, (theme.name or "").lower(), theme.theme_id),
        )

    def get_theme(self, theme_id: str) -> CustomTheme | None:
        return self._themes.get(theme_id)

    def load_errors(self) -> list[str]:
        return list(self._load_errors)

    def create_theme(self, name: str | None, content: str) -> CustomTheme:
        theme = CustomTheme(
            theme_id=str(uuid.uuid4()),
            name=_optional_name(name, context="new theme"),
            content=validate_stylesheet(content, context="new theme"),
        )
        self._write(theme)
        logger.info("created custom theme %s", theme.theme_id)
        return theme

    def update_theme(
        self,
        theme_id: str,
        *,
        name: str | None = None,
        content: str | None = None,
    ) -> CustomTheme:
        existing = self._require(theme_id)
        theme = CustomTheme(
            theme_id=existing.theme_id,
            name=existing.name if name is None else _optional_name(name, context=theme_id),
            content=existing.content if content is None else validate_stylesheet(content, context=theme_id),
        )
        self._write(theme)
        return theme

    def delete_theme(self, theme_id: str) -> None:
        self._require(theme_id)
        shutil.rmtree(self._root / theme_id)
        del self._themes[theme_id]
        logger.info("deleted custom theme %s", theme_id)

    def _require(self, theme_id: str) -> CustomTheme:
        theme = self._themes.get(theme_id)
        if theme is None:
            raise WenYanError(ErrorCode.THEME_NOT_FOUND, message=f"Custom theme not found: {theme_id}")
        return theme

    def _write(self, theme: CustomTheme) -> None:
        theme_dir = self._root / theme.theme_id
        theme_dir.mkdir(parents=True, exist_ok=True)
        manifest: dict[str, object] = {
            "schema_version": CUSTOM_THEME_SCHEMA_VERSION,
            "theme_id": theme.theme_id,
        }
        if theme.name is not None:
            manifest["name"] = theme.name
        (theme_dir / MANIFEST_FILENAME).write_text(
            json.dumps(manifest, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        (theme_dir / STYLESHEET_FILENAME).write_text(theme.content, encoding="utf-8")
        self._themes[theme.theme_id] = theme
