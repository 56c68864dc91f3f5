# SPDX-License-Identifier: MIT

import logging
from typing import Any

from keepsake import configuration
from keepsake.exceptions import InvalidSettingsError
from keepsake.model.theme import FONT_FAMILIES, FONT_SIZES, THEMES, Theme, ThemeSettings
from keepsake.repository.document import load_document, save_document
from keepsake.storage import Storage
from keepsake.template.theme import get_theme_settings_template

logger = logging.getLogger(__name__)

# The browser journal called the default font family "geist"
_LEGACY_FONT_FAMILIES = {"geist": "default"}


def validate_theme_settings(settings: ThemeSettings) -> None:
    if settings.get("theme") not in THEMES:
        raise InvalidSettingsError(
            f"Unknown theme '{settings.get('theme')}'",
            detail=f"expected one of {', '.join(THEMES)}",
        )
    if settings.get("font_family") not in FONT_FAMILIES:
        raise InvalidSettingsError(
            f"Unknown font family '{settings.get('font_family')}'",
            detail=f"expected one of {', '.join(FONT_FAMILIES)}",
        )
    if settings.get("font_size") not in FONT_SIZES:
        raise InvalidSettingsError(
            f"Unknown font size '{settings.get('font_size')}'",
            detail=f"expected one of {', '.join(FONT_SIZES)}",
        )
    custom_color = settings.get("custom_color")
    if custom_color is not None and (
        not isinstance(custom_color, str) or custom_color.strip() == ""
    ):
        raise InvalidSettingsError("Custom color must be a non-empty string")


class ThemeRepository:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def get_settings(self) -> ThemeSettings:
        raw_settings = load_document(self._storage, configuration.THEME_KEY)
        if raw_settings is None:
            return get_theme_settings_template()

        font_family = raw_settings.get("fontFamily", "default")
        settings: ThemeSettings = {
            "theme": raw_settings.get("theme", "cherry-pink"),
            "font_family": _LEGACY_FONT_FAMILIES.get(font_family, font_family),
            "font_size": raw_settings.get("fontSize", "medium"),
        }
        if raw_settings.get("customColor"):
            settings["custom_color"] = raw_settings["customColor"]
        return settings

    def save_settings(self, settings: ThemeSettings) -> None:
        validate_theme_settings(settings)
        raw_settings: dict[str, Any] = {
            "theme": settings["theme"],
            "fontFamily": settings["font_family"],
            "fontSize": settings["font_size"],
        }
        if settings.get("custom_color"):
            raw_settings["customColor"] = settings["custom_color"]
        save_document(self._storage, configuration.THEME_KEY, raw_settings)
        logger.info(f"Saved theme settings ({settings['theme']})")

    def presets(self) -> list[Theme]:
        return list(THEMES)  # type: ignore[arg-type]
