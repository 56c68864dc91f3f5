# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, Optional, TypedDict, get_args

Theme = Literal[
    "cherry-pink", "ocean-blue", "forest-green", "sunset-orange", "lavender"
]
FontFamily = Literal["default", "serif", "mono"]
FontSize = Literal["small", "medium", "large"]

THEMES: tuple[str, ...] = get_args(Theme)
FONT_FAMILIES: tuple[str, ...] = get_args(FontFamily)
FONT_SIZES: tuple[str, ...] = get_args(FontSize)


class ThemeSettings(TypedDict):
    theme: Theme
    font_family: FontFamily
    font_size: FontSize
    custom_color: NotRequired[Optional[str]]  # Overrides the palette when set


class Palette(TypedDict):
    primary: str
    secondary: str
    accent: str
