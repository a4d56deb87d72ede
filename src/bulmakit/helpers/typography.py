"""Typography vocabularies."""
from __future__ import annotations

from enum import StrEnum


class TextSize(StrEnum):
    """Text sizes, from ``1`` (largest) to ``7`` (smallest)."""

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"


class TextAlignment(StrEnum):
    CENTERED = "centered"
    JUSTIFIED = "justified"
    LEFT = "left"
    RIGHT = "right"


class TextDecoration(StrEnum):
    """Independent text transformations; several may apply at once."""

    CAPITALIZED = "capitalized"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    ITALIC = "italic"
    UNDERLINED = "underlined"


class TextWeight(StrEnum):
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMI_BOLD = "semibold"
    BOLD = "bold"


class FontFamily(StrEnum):
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    CODE = "code"
