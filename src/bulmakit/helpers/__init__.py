"""Value vocabularies for the Bulma helper classes."""
from bulmakit.helpers.color import BackgroundColor, Color, TextColor
from bulmakit.helpers.flexbox import (
    AlignContent,
    AlignItems,
    AlignSelf,
    FlexDirection,
    FlexShrinkGrowFactor,
    FlexWrap,
    JustifyContent,
)
from bulmakit.helpers.lookup import parse_variant
from bulmakit.helpers.spacing import Direction, Spacing
from bulmakit.helpers.typography import (
    FontFamily,
    TextAlignment,
    TextDecoration,
    TextSize,
    TextWeight,
)
from bulmakit.helpers.visibility import Display, Viewport

__all__ = [
    "AlignContent",
    "AlignItems",
    "AlignSelf",
    "BackgroundColor",
    "Color",
    "Direction",
    "Display",
    "FlexDirection",
    "FlexShrinkGrowFactor",
    "FlexWrap",
    "FontFamily",
    "JustifyContent",
    "Spacing",
    "TextAlignment",
    "TextColor",
    "TextDecoration",
    "TextSize",
    "TextWeight",
    "Viewport",
    "parse_variant",
]
