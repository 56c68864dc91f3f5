# SPDX-License-Identifier: MIT

from keepsake.model.theme import ThemeSettings


def get_theme_settings_template() -> ThemeSettings:
    return {
        "theme": "cherry-pink",
        "font_family": "default",
        "font_size": "medium",
    }
