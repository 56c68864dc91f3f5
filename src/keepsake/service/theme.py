# SPDX-License-Identifier: MIT

from keepsake.model.theme import Palette, Theme, ThemeSettings

THEME_COLORS: dict[Theme, Palette] = {
    "cherry-pink": {
        "primary": "oklch(0.65 0.2 350)",
        "secondary": "oklch(0.85 0.1 350)",
        "accent": "oklch(0.92 0.08 350)",
    },
    "ocean-blue": {
        "primary": "oklch(0.55 0.2 250)",
        "secondary": "oklch(0.75 0.15 260)",
        "accent": "oklch(0.85 0.1 270)",
    },
    "forest-green": {
        "primary": "oklch(0.45 0.2 150)",
        "secondary": "oklch(0.65 0.15 160)",
        "accent": "oklch(0.80 0.1 170)",
    },
    "sunset-orange": {
        "primary": "oklch(0.60 0.2 50)",
        "secondary": "oklch(0.75 0.15 40)",
        "accent": "oklch(0.88 0.1 30)",
    },
    "lavender": {
        "primary": "oklch(0.60 0.15 310)",
        "secondary": "oklch(0.75 0.12 320)",
        "accent": "oklch(0.88 0.08 330)",
    },
}

FONT_SIZE_PX = {
    "small": 14,
    "medium": 16,
    "large": 18,
}


def palette_for(settings: ThemeSettings) -> Palette:
    custom_color = settings.get("custom_color")
    if custom_color:
        return {
            "primary": custom_color,
            "secondary": custom_color,
            "accent": custom_color,
        }
    return dict(THEME_COLORS[settings["theme"]])  # type: ignore[return-value]
