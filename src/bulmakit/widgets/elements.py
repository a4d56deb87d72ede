"""Bulma elements: buttons, tags, titles, icons, images, tables and friends."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from bulmakit.config import ComposeConfig
from bulmakit.helpers.color import Color, TextColor
from bulmakit.utils.classes import ClassBuilder
from bulmakit.utils.constants import IS_NARROW, IS_PREFIX
from bulmakit.utils.size import Size
from bulmakit.widgets.base import BaseProperties, apply_colors
from bulmakit.widgets.policy import Align, align_class, flag_class, size_class


@dataclass(frozen=True, kw_only=True)
class Block(BaseProperties):
    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("block")


@dataclass(frozen=True, kw_only=True)
class Box(BaseProperties):
    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("box")


# ---------------------------------------------------------------------------
# Buttons
# ---------------------------------------------------------------------------


class ButtonState(StrEnum):
    NORMAL = "normal"
    HOVER = "hover"
    FOCUS = "focus"
    ACTIVE = "active"
    LOADING = "loading"
    STATIC = "static"


class ButtonStyle(StrEnum):
    OUTLINED = "outlined"
    INVERTED = "inverted"
    INVERTED_OUTLINED = "inverted-outlined"
    ROUNDED = "rounded"


# Inverted-outlined needs both classes; they are kept in one token.
_BUTTON_STYLE_CLASSES: dict[ButtonStyle, str] = {
    ButtonStyle.OUTLINED: "is-outlined",
    ButtonStyle.INVERTED: "is-inverted",
    ButtonStyle.INVERTED_OUTLINED: "is-inverted is-outlined",
    ButtonStyle.ROUNDED: "is-rounded",
}


@dataclass(frozen=True, kw_only=True)
class Button(BaseProperties):
    color: Color | None = None
    light: bool | None = None
    size: Size | None = None
    responsive: bool = False
    fullwidth: bool = False
    style: ButtonStyle | None = None
    state: ButtonState | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        style = _BUTTON_STYLE_CLASSES[self.style] if self.style else ""
        # Every state, including normal, has its own class.
        state = f"{IS_PREFIX}-{self.state}" if self.state else ""
        return (
            apply_colors(builder, self.color, self.light)
            .with_custom_class("button")
            .with_custom_class(size_class("button", self.size))
            .with_custom_class(flag_class(self.responsive, "is-responsive"))
            .with_custom_class(flag_class(self.fullwidth, "is-fullwidth"))
            .with_custom_class(style)
            .with_custom_class(state)
        )


@dataclass(frozen=True, kw_only=True)
class Buttons(BaseProperties):
    """A group of buttons; its size applies to every button (``are-*``)."""

    size: Size | None = None
    addons: bool = False
    align: Align = Align.LEFT

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            builder.with_custom_class("buttons")
            .with_custom_class(size_class("buttons", self.size))
            .with_custom_class(flag_class(self.addons, "has-addons"))
            .with_custom_class(align_class(self.align))
        )


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Tag(BaseProperties):
    size: Size | None = None
    color: Color | None = None
    light: bool | None = None
    rounded: bool = False
    delete: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            apply_colors(builder, self.color, self.light)
            .with_custom_class("tag")
            .with_custom_class(size_class("tag", self.size))
            .with_custom_class(flag_class(self.rounded, "is-rounded"))
            .with_custom_class(flag_class(self.delete, "is-delete"))
        )

    @property
    def tag_name(self) -> str:
        """Delete tags are links; everything else is a span."""
        return "a" if self.delete else "span"


@dataclass(frozen=True, kw_only=True)
class Tags(BaseProperties):
    size: Size | None = None
    addons: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            builder.with_custom_class("tags")
            .with_custom_class(size_class("tags", self.size))
            .with_custom_class(flag_class(self.addons, "has-addons"))
        )


# ---------------------------------------------------------------------------
# Simple sized and colored elements
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Content(BaseProperties):
    size: Size | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("content").with_custom_class(
            size_class("content", self.size)
        )


@dataclass(frozen=True, kw_only=True)
class Delete(BaseProperties):
    size: Size | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("delete").with_custom_class(
            size_class("delete", self.size)
        )


@dataclass(frozen=True, kw_only=True)
class Notification(BaseProperties):
    color: Color | None = None
    light: bool | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            apply_colors(builder, self.color, self.light)
            .with_custom_class("notification")
        )


@dataclass(frozen=True, kw_only=True)
class ProgressBar(BaseProperties):
    color: Color | None = None
    size: Size | None = None
    value: float | None = None
    max: float = 100.0

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            apply_colors(builder, self.color)
            .with_custom_class("progress")
            .with_custom_class(size_class("progress", self.size))
        )

    def attributes(self, config: ComposeConfig | None = None) -> dict[str, str]:
        attrs = super().attributes(config)
        # No value renders an indeterminate bar.
        if self.value is not None:
            attrs["value"] = f"{self.value:g}"
        attrs["max"] = f"{self.max:g}"
        return attrs


# ---------------------------------------------------------------------------
# Titles
# ---------------------------------------------------------------------------


class HeadingSize(StrEnum):
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"


@dataclass(frozen=True, kw_only=True)
class Title(BaseProperties):
    """A ``title``; its size also picks the heading tag (``h1``..``h6``)."""

    size: HeadingSize = HeadingSize.THREE
    spaced: bool = False

    base_class = "title"

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            builder.with_custom_class(self.base_class)
            .with_custom_class(f"{IS_PREFIX}-{self.size}")
            .with_custom_class(flag_class(self.spaced, "is-spaced"))
        )

    @property
    def tag_name(self) -> str:
        return f"h{self.size}"


@dataclass(frozen=True, kw_only=True)
class Subtitle(Title):
    size: HeadingSize = HeadingSize.FIVE

    base_class = "subtitle"


# ---------------------------------------------------------------------------
# Icons
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Icon(BaseProperties):
    color: TextColor | None = None
    size: Size | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            apply_colors(builder, text_color=self.color)
            .with_custom_class("icon")
            .with_custom_class(size_class("icon", self.size))
        )


@dataclass(frozen=True, kw_only=True)
class IconText(BaseProperties):
    color: TextColor | None = None
    flex: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return apply_colors(builder, text_color=self.color).with_custom_class("icon-text")

    @property
    def tag_name(self) -> str:
        """Flex icon texts are block-level divs; inline ones are spans."""
        return "div" if self.flex else "span"


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------


class ImageSize(StrEnum):
    """Fixed square sizes and responsive ratios for ``figure.image``."""

    PIXELS_16X16 = "16x16"
    PIXELS_24X24 = "24x24"
    PIXELS_32X32 = "32x32"
    PIXELS_48X48 = "48x48"
    PIXELS_64X64 = "64x64"
    PIXELS_96X96 = "96x96"
    PIXELS_128X128 = "128x128"
    RATIO_SQUARE = "square"
    RATIO_1X1 = "1by1"
    RATIO_5X4 = "5by4"
    RATIO_4X3 = "4by3"
    RATIO_3X2 = "3by2"
    RATIO_5X3 = "5by3"
    RATIO_16X9 = "16by9"
    RATIO_2X1 = "2by1"
    RATIO_3X1 = "3by1"
    RATIO_4X5 = "4by5"
    RATIO_3X4 = "3by4"
    RATIO_2X3 = "2by3"
    RATIO_3X5 = "3by5"
    RATIO_9X16 = "9by16"
    RATIO_1X2 = "1by2"
    RATIO_1X3 = "1by3"


@dataclass(frozen=True, kw_only=True)
class Figure(BaseProperties):
    size: ImageSize | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        size = f"{IS_PREFIX}-{self.size}" if self.size else ""
        return builder.with_custom_class("image").with_custom_class(size)


@dataclass(frozen=True, kw_only=True)
class Image(BaseProperties):
    """The ``img`` inside a figure; has no base class of its own."""

    fullwidth: bool = False
    rounded: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class(
            flag_class(self.fullwidth, "is-fullwidth")
        ).with_custom_class(flag_class(self.rounded, "is-rounded"))


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Table(BaseProperties):
    scrollable: bool = False
    bordered: bool = False
    striped: bool = False
    narrow: bool = False
    hoverable: bool = False
    fullwidth: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            builder.with_custom_class("table")
            .with_custom_class(flag_class(self.bordered, "is-bordered"))
            .with_custom_class(flag_class(self.striped, "is-striped"))
            .with_custom_class(flag_class(self.narrow, IS_NARROW))
            .with_custom_class(flag_class(self.hoverable, "is-hoverable"))
            .with_custom_class(flag_class(self.fullwidth, "is-fullwidth"))
        )

    def wrapper_classes(self) -> list[str]:
        """Classes of the scroll wrapper, empty when not scrollable."""
        return ["table-container"] if self.scrollable else []


@dataclass(frozen=True, kw_only=True)
class TableRow(BaseProperties):
    selected: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class(flag_class(self.selected, "is-selected"))
