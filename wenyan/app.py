"""Theme service bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from wenyan.config.settings import AppSettings
from wenyan.runtime_paths import is_frozen, package_root, resources_root
from wenyan.themes.loader import ResourceStylesheetLoader
from wenyan.themes.service import ThemeService
from wenyan.themes.store import CustomThemeStore


def _configure_startup_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("wenyan.startup")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "startup.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def build_theme_service(settings: AppSettings | None = None) -> ThemeService:
    """Wire settings, custom theme storage and bundled stylesheets together."""
    settings = settings or AppSettings()
    logger = _configure_startup_logger(settings)
    logger.info("startup mode frozen=%s package_root=%s", is_frozen(), package_root())

    resources = resources_root()
    if not resources.exists():
        logger.warning("resource bundle missing at %s", resources)

    store = CustomThemeStore(settings.custom_themes_dir)
    service = ThemeService(settings, store, ResourceStylesheetLoader(resources))
    errors = service.reload_custom_themes()
    if errors:
        logger.warning("theme load warnings: %s", " | ".join(errors[:6]))

    ok, message = service.apply_startup_selection()
    if not ok:
        logger.warning(message)
    return service
